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

"""Syntax node variants consumed by the component rules.

The parser adapter maps a JavaScript syntax tree onto this closed set of
immutable node types. Anything the rules never inspect becomes ``Other``,
so callers dispatch with ``isinstance`` instead of probing optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Position:
    line: int  # 1-based
    column: int  # 1-based


@dataclass(frozen=True)
class Identifier:
    name: str
    position: Optional[Position] = None


@dataclass(frozen=True)
class StringLiteral:
    value: str
    position: Optional[Position] = None


@dataclass(frozen=True)
class NumberLiteral:
    # None when the source text is not a number Python can read
    value: Optional[Union[int, float]]
    raw: str
    position: Optional[Position] = None


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool
    position: Optional[Position] = None


@dataclass(frozen=True)
class NullLiteral:
    position: Optional[Position] = None


@dataclass(frozen=True)
class Other:
    """Any node shape the rules do not look into (calls, functions, spreads...)."""

    kind: str
    position: Optional[Position] = None


@dataclass(frozen=True)
class MemberAccess:
    object: "SyntaxNode"
    property: Identifier
    position: Optional[Position] = None


@dataclass(frozen=True)
class Property:
    key: "SyntaxNode"
    value: "SyntaxNode"
    position: Optional[Position] = None


@dataclass(frozen=True)
class ObjectLiteral:
    # Property members plus Other("spread_element") members, in source order
    properties: Tuple["SyntaxNode", ...]
    position: Optional[Position] = None


@dataclass(frozen=True)
class Assignment:
    left: "SyntaxNode"
    right: "SyntaxNode"
    position: Optional[Position] = None


@dataclass(frozen=True)
class ExpressionStatement:
    expression: "SyntaxNode"
    position: Optional[Position] = None


SyntaxNode = Union[
    ExpressionStatement,
    Assignment,
    MemberAccess,
    ObjectLiteral,
    Property,
    Identifier,
    StringLiteral,
    NumberLiteral,
    BooleanLiteral,
    NullLiteral,
    Other,
]
