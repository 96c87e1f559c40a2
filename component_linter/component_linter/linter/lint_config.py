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

"""Configuration for the component linter.

A configuration file is YAML::

    rules:
      source-name: warning
      props-description: off
    extensions: [".js", ".cjs"]
    exclude: ["**/test/**"]

Rules not listed run with ``error`` severity.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..exceptions import ConfigurationError
from ..models.json_schema_loader import validate_against_schema
from ..models.parsing.yaml_parser import yaml_parser
from ..utils.logging_utils import configure_split_stream_logging
from .report import SEVERITY_ERROR, SEVERITY_WARNING
from .rules import RULES

logger = logging.getLogger(__name__)

SEVERITY_OFF = "off"
SEVERITIES = (SEVERITY_ERROR, SEVERITY_WARNING, SEVERITY_OFF)

DEFAULT_CONFIG_FILE = ".component-lint.yaml"
DEFAULT_EXTENSIONS = (".js", ".cjs", ".mjs")
ALWAYS_EXCLUDED_DIRS = ("node_modules", ".git")

# YAML reads a bare `off` as False and `on` as True
_SEVERITY_ALIASES = {
    False: SEVERITY_OFF,
    True: SEVERITY_ERROR,
    "warn": SEVERITY_WARNING,
}


def normalize_severity(value: Any) -> str:
    """Map a configured severity onto error / warning / off.

    Raises:
        ConfigurationError: If the value is not a known severity
    """
    if isinstance(value, bool):
        return _SEVERITY_ALIASES[value]
    if isinstance(value, str):
        severity = _SEVERITY_ALIASES.get(value, value)
        if severity in SEVERITIES:
            return severity
    raise ConfigurationError(
        f"Invalid severity {value!r}. Expected one of: {', '.join(SEVERITIES)}"
    )


@dataclass
class LintConfig:
    """Rule severities and file selection for a lint run."""

    rules: Dict[str, str] = field(default_factory=dict)
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude: List[str] = field(default_factory=list)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'LintConfig':
        """Create a default configuration, taking the log level from the environment."""
        return cls(log_level=os.getenv('COMPONENT_LINTER_LOG_LEVEL', 'WARNING'))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: Optional['LintConfig'] = None) -> 'LintConfig':
        """Build a configuration from parsed YAML data.

        Raises:
            ConfigurationError: If the data does not match the configuration schema
                or names an unknown rule
        """
        issues = validate_against_schema(dict(data), "lint_config")
        if issues:
            details = "; ".join(
                f"{issue.message} (at {issue.path})" if issue.path else issue.message
                for issue in issues
            )
            raise ConfigurationError(f"Invalid linter configuration: {details}")

        config = base if base is not None else cls.from_env()
        rules = dict(config.rules)
        for name, severity in (data.get('rules') or {}).items():
            rules[_known_rule(name)] = normalize_severity(severity)

        return cls(
            rules=rules,
            extensions=tuple(data.get('extensions') or config.extensions),
            exclude=list(config.exclude) + list(data.get('exclude') or []),
            log_level=config.log_level,
        )

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'LintConfig':
        """Load a configuration file.

        Raises:
            ConfigurationError: If the file cannot be read, parsed or validated
        """
        logger.debug(f"Loading linter configuration: {file_path}")
        return cls.from_mapping(yaml_parser.load_config(file_path))

    @classmethod
    def discover(cls, start: Union[str, Path]) -> 'LintConfig':
        """Load the nearest configuration file at or above ``start``, or the defaults."""
        directory = Path(start).resolve()
        if directory.is_file():
            directory = directory.parent
        for candidate in [directory, *directory.parents]:
            config_path = candidate / DEFAULT_CONFIG_FILE
            if config_path.is_file():
                return cls.from_file(config_path)
        return cls.from_env()

    def with_rule_overrides(self, overrides: Mapping[str, Any]) -> 'LintConfig':
        """Return a copy with the given rule severities applied on top."""
        rules = dict(self.rules)
        for name, severity in overrides.items():
            rules[_known_rule(name)] = normalize_severity(severity)
        return LintConfig(
            rules=rules,
            extensions=self.extensions,
            exclude=list(self.exclude),
            log_level=self.log_level,
        )

    def severity_for(self, rule_name: str) -> str:
        return self.rules.get(rule_name, SEVERITY_ERROR)

    def enabled_rules(self) -> List[str]:
        return [name for name in RULES if self.severity_for(name) != SEVERITY_OFF]

    def set_logging(self, verbose: bool = False, stderr_only: bool = False) -> logging.Logger:
        """Setup logging based on configuration.

        ``stderr_only`` keeps log records off stdout, for machine-readable reports.
        """
        level = logging.DEBUG if verbose else getattr(logging, self.log_level.upper(), logging.WARNING)
        configure_split_stream_logging(level=level, stderr_only=stderr_only)
        return logging.getLogger('component_linter')


def _known_rule(name: str) -> str:
    if name not in RULES:
        raise ConfigurationError(
            f"Unknown rule '{name}'. Known rules: {', '.join(RULES)}"
        )
    return name
