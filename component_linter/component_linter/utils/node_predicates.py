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

"""Shape predicates over syntax nodes."""

from typing import Any

from ..models.syntax_nodes import Identifier, MemberAccess, ObjectLiteral

EXPORT_OBJECT_NAME = "module"
EXPORT_MEMBER_NAME = "exports"


def is_export_target(node: Any) -> bool:
    """True for the ``module.exports`` member access."""
    if not isinstance(node, MemberAccess):
        return False
    if not isinstance(node.object, Identifier):
        return False
    return node.object.name == EXPORT_OBJECT_NAME and node.property.name == EXPORT_MEMBER_NAME


def is_non_empty_object_literal(node: Any) -> bool:
    """True for an object literal with at least one member (spreads count)."""
    return isinstance(node, ObjectLiteral) and len(node.properties) > 0
