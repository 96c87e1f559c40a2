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

"""YAML loader for linter configuration files."""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ...exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class YamlParser:
    """Load YAML mappings, reporting failures as ConfigurationError."""

    def load_config(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Load a YAML configuration file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML content as dictionary (empty for an empty file)

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigurationError(f"Path is not a file: {path}")

        try:
            logger.debug(f"Loading configuration file: {path}")
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

        try:
            config_data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Failed to parse YAML {path}: {exc}") from exc

        if config_data is None:
            config_data = {}

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping in {path}")

        return config_data


# Global parser instance
yaml_parser = YamlParser()
