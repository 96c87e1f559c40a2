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

"""Component metadata rules.

Each rule is a stateless check over one top-level statement. It reports
through the ``report(node, message)`` callback handed in by the linter and
returns nothing. Statements that are not component exports are skipped.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .. import GUIDELINES_URL
from ..resolvers.descriptor_resolver import (
    DELEGATION_FIELD_NAME,
    resolve_descriptor,
    resolve_prop_entries,
)
from ..utils.field_accessor import Field, contains, find_first, literal_value, string_value
from ..models.syntax_nodes import SyntaxNode

ReportFn = Callable[[SyntaxNode, str], None]
CheckFn = Callable[[Any, ReportFn], None]

REQUIRED_PROPERTY_MESSAGE = "Components must export a {property_name} property."
PROP_PROPERTY_MESSAGE = "Component prop {prop_name} must have a {property_name}."
OPTIONAL_PROP_MESSAGE = 'Component prop {prop_name} is marked "optional", so it may need a "default" property.'
TYPE_PROPERTY_MESSAGE = 'Components must export a type property ("source" or "action").'
SOURCE_NAME_MESSAGE = 'Source names should start with "New".'
SOURCE_DESCRIPTION_MESSAGE = 'Source descriptions should start with "Emit new".'

SOURCE_TYPE = "source"
SOURCE_NAME_PREFIX = "New "
SOURCE_DESCRIPTION_PREFIX = "Emit new "


@dataclass(frozen=True)
class Rule:
    """A named component check."""

    name: str
    description: str
    check: CheckFn
    docs_url: Optional[str] = None


def required_property_check(property_name: str, message: Optional[str] = None) -> CheckFn:
    """Build a check that the descriptor declares ``property_name``."""
    message = message or REQUIRED_PROPERTY_MESSAGE.format(property_name=property_name)

    def check(statement: Any, report: ReportFn) -> None:
        descriptor = resolve_descriptor(statement)
        if descriptor is None:
            return
        if not contains(property_name, descriptor.fields):
            report(statement, message)

    return check


def prop_property_check(property_name: str) -> CheckFn:
    """Build a check that every locally defined prop declares ``property_name``."""

    def check(statement: Any, report: ReportFn) -> None:
        descriptor = resolve_descriptor(statement)
        if descriptor is None:
            return
        for entry in resolve_prop_entries(descriptor):
            if not contains(property_name, entry.fields):
                report(
                    entry.node,
                    PROP_PROPERTY_MESSAGE.format(prop_name=entry.name, property_name=property_name),
                )

    return check


def check_optional_props_have_default(statement: Any, report: ReportFn) -> None:
    descriptor = resolve_descriptor(statement)
    if descriptor is None:
        return
    # Delegating props are only skipped through a top-level propDefinition field here
    if contains(DELEGATION_FIELD_NAME, descriptor.fields):
        return

    for entry in resolve_prop_entries(descriptor, skip_delegating=False):
        optional = find_first("optional", entry.fields)
        if optional is None or not literal_value(optional.value):
            continue
        if not contains("default", entry.fields):
            report(entry.node, OPTIONAL_PROP_MESSAGE.format(prop_name=entry.name))


def _source_field(statement: Any, property_name: str) -> Optional[Field]:
    """Return ``property_name`` of a source component descriptor, None otherwise."""
    descriptor = resolve_descriptor(statement)
    if descriptor is None:
        return None

    # Absence of "type" is reported by required-properties-type
    type_field = find_first("type", descriptor.fields)
    if type_field is None or string_value(type_field.value) != SOURCE_TYPE:
        return None

    return find_first(property_name, descriptor.fields)


def prefix_check(property_name: str, prefix: str, message: str) -> CheckFn:
    """Build a check that a source component's string ``property_name`` starts with ``prefix``."""

    def check(statement: Any, report: ReportFn) -> None:
        target = _source_field(statement, property_name)
        if target is None:
            return
        value = string_value(target.value)
        if value is None:
            return
        if not value.startswith(prefix):
            report(target.node, message)

    return check


def _register(*rules: Rule) -> Dict[str, Rule]:
    return {rule.name: rule for rule in rules}


RULES: Dict[str, Rule] = _register(
    Rule(
        name="required-properties-key",
        description="Components must export a key",
        check=required_property_check("key"),
        docs_url=f"{GUIDELINES_URL}#required-metadata",
    ),
    Rule(
        name="required-properties-name",
        description="Components must export a name",
        check=required_property_check("name"),
        docs_url=f"{GUIDELINES_URL}#required-metadata",
    ),
    Rule(
        name="required-properties-version",
        description="Components must export a version",
        check=required_property_check("version"),
        docs_url=f"{GUIDELINES_URL}#required-metadata",
    ),
    Rule(
        name="required-properties-description",
        description="Components must export a description",
        check=required_property_check("description"),
        docs_url=f"{GUIDELINES_URL}#required-metadata",
    ),
    Rule(
        name="required-properties-type",
        description="Components must export a type (source or action)",
        check=required_property_check("type", TYPE_PROPERTY_MESSAGE),
        docs_url=f"{GUIDELINES_URL}#required-metadata",
    ),
    Rule(
        name="props-label",
        description="Component props must have a label",
        check=prop_property_check("label"),
        docs_url=f"{GUIDELINES_URL}#props",
    ),
    Rule(
        name="props-description",
        description="Component props must have a description",
        check=prop_property_check("description"),
        docs_url=f"{GUIDELINES_URL}#props",
    ),
    Rule(
        name="default-value-required-for-optional-props",
        description="Optional component props should declare a default",
        check=check_optional_props_have_default,
        docs_url=f"{GUIDELINES_URL}#default-values",
    ),
    Rule(
        name="source-name",
        description='Source names start with "New"',
        check=prefix_check("name", SOURCE_NAME_PREFIX, SOURCE_NAME_MESSAGE),
        docs_url=f"{GUIDELINES_URL}#source-name",
    ),
    Rule(
        name="source-description",
        description='Source descriptions start with "Emit new"',
        check=prefix_check("description", SOURCE_DESCRIPTION_PREFIX, SOURCE_DESCRIPTION_MESSAGE),
        docs_url=f"{GUIDELINES_URL}#source-description",
    ),
)
