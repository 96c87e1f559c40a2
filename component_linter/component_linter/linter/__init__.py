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

"""Linter package for exported component descriptors."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..exceptions import ComponentLinterError
from .component_linter import ComponentLinter
from .lint_config import LintConfig
from .report import Diagnostic, LintResult
from .rules import RULES, Rule

__all__ = [
    'lint_files',
    'lint_source',
    'ComponentLinter',
    'Diagnostic',
    'LintConfig',
    'LintResult',
    'Rule',
    'RULES',
]

logger = logging.getLogger(__name__)


def lint_files(file_paths: List[Path], config: Optional[LintConfig] = None) -> List[LintResult]:
    """Lint a list of component source files.

    Args:
        file_paths: List of file paths to lint
        config: Rule severities to apply (defaults when omitted)

    Returns:
        List of LintResult objects, one per file
    """
    results = []

    linter = ComponentLinter(config)

    for file_path in file_paths:
        result = LintResult(file_path)

        try:
            linter.lint(file_path, result)
        except ComponentLinterError as e:
            result.add_error(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error while linting {file_path}")
            result.add_error(f"Unexpected error during linting: {str(e)}")

        results.append(result)

    return results


def lint_source(
    source: Union[str, bytes],
    config: Optional[LintConfig] = None,
    file_path: Optional[Path] = None,
) -> LintResult:
    """Lint JavaScript source text and return its LintResult."""
    result = LintResult(file_path)
    ComponentLinter(config).lint_source(source, result)
    return result
