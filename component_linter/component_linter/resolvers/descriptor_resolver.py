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

"""Resolve component descriptors and their prop definitions from statements.

A descriptor is the object literal assigned to ``module.exports``::

    module.exports = {
      key: "app-new-row",
      type: "source",
      props: {
        sheet: { type: "string", label: "Sheet" },
        app,                                    // not an object, skipped
        db: { propDefinition: [app, "db"] },    // delegating, skipped
      },
    };

Statements of any other shape resolve to None; callers skip them silently.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..models.syntax_nodes import Assignment, ExpressionStatement, ObjectLiteral, Property
from ..utils.field_accessor import Field, contains, fields, key_matches
from ..utils.node_predicates import is_export_target, is_non_empty_object_literal

PROPS_FIELD_NAMES = ("props", "propDefinitions")
DELEGATION_FIELD_NAME = "propDefinition"


@dataclass(frozen=True)
class Descriptor:
    """The exported component object and its fields."""

    statement: ExpressionStatement
    literal: ObjectLiteral
    fields: Tuple[Field, ...]


@dataclass(frozen=True)
class PropEntry:
    """One prop definition inside the descriptor's props map."""

    name: str
    fields: Tuple[Field, ...]
    node: Property

    @property
    def is_delegating(self) -> bool:
        return contains(DELEGATION_FIELD_NAME, self.fields)


def resolve_descriptor(statement: Any) -> Optional[Descriptor]:
    """Return the descriptor exported by ``statement``, or None."""
    if not isinstance(statement, ExpressionStatement):
        return None

    expression = statement.expression
    if not isinstance(expression, Assignment):
        return None
    if not is_export_target(expression.left):
        return None
    if not is_non_empty_object_literal(expression.right):
        return None

    return Descriptor(
        statement=statement,
        literal=expression.right,
        fields=tuple(fields(expression.right)),
    )


def find_props_field(descriptor: Descriptor) -> Optional[Field]:
    """Return the ``props`` or ``propDefinitions`` field, whichever comes first in source order."""
    if not any(contains(name, descriptor.fields) for name in PROPS_FIELD_NAMES):
        return None

    for f in descriptor.fields:
        if any(key_matches(f.key, name) for name in PROPS_FIELD_NAMES):
            return f
    return None


def resolve_prop_entries(descriptor: Descriptor, skip_delegating: bool = True) -> List[PropEntry]:
    """Return the prop definitions to check, in source order.

    Only props whose value is a non-empty object literal are returned. Props
    holding a ``propDefinition`` field are dropped unless ``skip_delegating``
    is False.
    """
    props_field = find_props_field(descriptor)
    if props_field is None or not is_non_empty_object_literal(props_field.value):
        return []

    entries = []
    for prop in fields(props_field.value):
        if not is_non_empty_object_literal(prop.value):
            continue
        entry = PropEntry(name=prop.key, fields=tuple(fields(prop.value)), node=prop.node)
        if skip_delegating and entry.is_delegating:
            continue
        entries.append(entry)
    return entries
