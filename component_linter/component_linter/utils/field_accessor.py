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

"""Field access for object literals.

Object keys can be written bare (``label: ...``) or quoted (``"label": ...``).
Both spellings collapse to one canonical key string, and every lookup goes
through :func:`key_matches` so quoted and unquoted keys are interchangeable.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from ..models.syntax_nodes import (
    BooleanLiteral,
    Identifier,
    NumberLiteral,
    ObjectLiteral,
    Property,
    StringLiteral,
    SyntaxNode,
)


@dataclass(frozen=True)
class Field:
    """One keyed member of an object literal."""

    key: str
    value: SyntaxNode
    node: Property


def canonical_key(key_node: Any) -> Optional[str]:
    """Return the canonical key string of a property key node.

    Identifiers give their name, string literals their unquoted value and
    numeric literals their source text. Computed keys other than a bare
    string or number literal have no canonical key.
    """
    if isinstance(key_node, Identifier):
        return key_node.name
    if isinstance(key_node, StringLiteral):
        return key_node.value
    if isinstance(key_node, NumberLiteral):
        return key_node.raw
    return None


def key_matches(key: Optional[str], name: str) -> bool:
    # A key whose text still carries quote marks ('"label"': ...) also matches
    return key is not None and (key == name or key == f'"{name}"')


def fields(node: Any) -> List[Field]:
    """Return every keyed member of an object literal, in source order.

    Duplicate keys are all returned. Spread members and computed keys are
    left out. Anything that is not an object literal has no fields.
    """
    if not isinstance(node, ObjectLiteral):
        return []

    result = []
    for member in node.properties:
        if not isinstance(member, Property):
            continue
        key = canonical_key(member.key)
        if key is None:
            continue
        result.append(Field(key=key, value=member.value, node=member))
    return result


def contains(name: str, field_list: Sequence[Field]) -> bool:
    """True if any field is named ``name`` (quoted or not)."""
    return any(key_matches(f.key, name) for f in field_list)


def find_first(name: str, field_list: Sequence[Field]) -> Optional[Field]:
    """Return the first field named ``name`` (quoted or not), or None."""
    for f in field_list:
        if key_matches(f.key, name):
            return f
    return None


def literal_value(node: Any) -> Any:
    """Python value of a literal node; None for anything that is not a literal."""
    if isinstance(node, (StringLiteral, NumberLiteral, BooleanLiteral)):
        return node.value
    return None


def string_value(node: Any) -> Optional[str]:
    """Value of a string literal node, None for any other node."""
    if isinstance(node, StringLiteral):
        return node.value
    return None
