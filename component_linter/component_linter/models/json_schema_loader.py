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

"""JSON Schema loading and validation for linter configuration."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import jsonschema


# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    path: str = ""


def get_schema_path(schema_name: str) -> Path:
    """Get the path to a bundled JSON Schema file.

    Args:
        schema_name: Schema name without suffix (e.g., "lint_config")
    """
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / f"{schema_name}.schema.json"


def load_schema(schema_name: str) -> dict:
    """Load a bundled JSON Schema file.

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    if schema_name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[schema_name]

    schema_path = get_schema_path(schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found for {schema_name}: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    _SCHEMA_CACHE[schema_name] = schema
    return schema


def validate_against_schema(data: Any, schema_name: str) -> List[SchemaIssue]:
    """Validate data against a bundled schema, returning every violation found."""
    schema = load_schema(schema_name)
    validator = jsonschema.validators.validator_for(schema)(schema)

    issues = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]):
        path = "/" + "/".join(str(p) for p in error.absolute_path) if error.absolute_path else ""
        issues.append(SchemaIssue(message=error.message, path=path))
    return issues
