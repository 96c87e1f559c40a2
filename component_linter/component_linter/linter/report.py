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

"""Error reporting for the linter."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.syntax_nodes import SyntaxNode

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single rule violation reported against a syntax node."""

    rule: str
    message: str
    node: SyntaxNode
    severity: str = SEVERITY_ERROR
    docs_url: Optional[str] = None

    @property
    def line(self) -> Optional[int]:
        position = getattr(self.node, "position", None)
        return position.line if position is not None else None

    @property
    def column(self) -> Optional[int]:
        position = getattr(self.node, "position", None)
        return position.column if position is not None else None


class LintResult:
    """Container for linting results for a single file."""

    def __init__(self, file_path: Optional[Path] = None):
        """Initialize lint result.

        Args:
            file_path: Path to the file being linted, None for in-memory sources
        """
        self.file_path = file_path
        self.diagnostics: List[Diagnostic] = []
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    def add_diagnostic(self, diagnostic: Diagnostic):
        """Record a rule diagnostic under its severity."""
        self.diagnostics.append(diagnostic)
        if diagnostic.severity == SEVERITY_WARNING:
            add = self.add_warning
        else:
            add = self.add_error
        add(
            diagnostic.message,
            line=diagnostic.line,
            column=diagnostic.column,
            rule=diagnostic.rule,
            docs_url=diagnostic.docs_url,
        )

    def add_error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        rule: Optional[str] = None,
        docs_url: Optional[str] = None,
    ):
        """Add an error message.

        Args:
            message: Error message
            line: Optional line number where error occurred
            column: Optional column number where error occurred
            rule: Name of the rule that reported it, if any
            docs_url: Guideline link for the rule, if any
        """
        self.errors.append(self._entry(message, line, column, rule, docs_url))

    def add_warning(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        rule: Optional[str] = None,
        docs_url: Optional[str] = None,
    ):
        """Add a warning message."""
        self.warnings.append(self._entry(message, line, column, rule, docs_url))

    @staticmethod
    def _entry(message, line, column, rule, docs_url) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if line is not None:
            entry['line'] = line
        if column is not None:
            entry['column'] = column
        if rule is not None:
            entry['rule'] = rule
        if docs_url is not None:
            entry['docs_url'] = docs_url
        return entry
