# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Component descriptor linter.

Runs every enabled rule over each top-level expression statement of a
JavaScript source and hands the resulting diagnostics to a LintResult.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ..models.parsing.js_parser import JavaScriptParser, ParsedSource
from ..models.syntax_nodes import ExpressionStatement, SyntaxNode
from .lint_config import LintConfig
from .report import Diagnostic, LintResult
from .rules import RULES, Rule

logger = logging.getLogger(__name__)


class ComponentLinter:
    """Linter for exported component descriptors."""

    def __init__(self, config: Optional[LintConfig] = None):
        """Initialize the component linter.

        Args:
            config: Rule severities; every rule runs as an error when omitted
        """
        self.config = config if config is not None else LintConfig.from_env()
        self._parser = JavaScriptParser()

    def lint(self, file_path: Path, result: LintResult):
        """Lint one component source file.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors/warnings to

        Raises:
            SourceReadError: If the file cannot be read
        """
        parsed = self._parser.parse_file(file_path)
        self._lint_parsed(parsed, result)

    def lint_source(self, source: Union[str, bytes], result: LintResult):
        """Lint in-memory JavaScript source."""
        self._lint_parsed(self._parser.parse(source), result)

    def lint_statements(self, statements: Iterable[SyntaxNode], result: LintResult):
        """Run the enabled rules over already-built top-level statements."""
        rules = [RULES[name] for name in self.config.enabled_rules()]
        for statement in statements:
            if not isinstance(statement, ExpressionStatement):
                continue
            for rule in rules:
                rule.check(statement, self._reporter(rule, result))

    def _lint_parsed(self, parsed: ParsedSource, result: LintResult):
        if parsed.has_syntax_errors:
            logger.warning(f"Syntax errors in {result.file_path or '<source>'}; linting the recoverable part")
            result.add_warning("File contains syntax errors; only the recoverable part was linted")
        self.lint_statements(parsed.statements, result)

    def _reporter(self, rule: Rule, result: LintResult):
        severity = self.config.severity_for(rule.name)

        def report(node: SyntaxNode, message: str) -> None:
            logger.debug(f"{rule.name}: {message}")
            result.add_diagnostic(
                Diagnostic(
                    rule=rule.name,
                    message=message,
                    node=node,
                    severity=severity,
                    docs_url=rule.docs_url,
                )
            )

        return report
