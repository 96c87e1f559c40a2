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

"""JavaScript source parser producing component syntax nodes."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

import tree_sitter_javascript as tsjavascript
from tree_sitter import Language, Node, Parser

from ...exceptions import SourceReadError
from ..syntax_nodes import (
    Assignment,
    BooleanLiteral,
    ExpressionStatement,
    Identifier,
    MemberAccess,
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    Other,
    Position,
    Property,
    StringLiteral,
    SyntaxNode,
)

logger = logging.getLogger(__name__)

JAVASCRIPT_LANGUAGE = Language(tsjavascript.language())

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


@dataclass(frozen=True)
class ParsedSource:
    """Top-level statements of one source text."""

    statements: Tuple[SyntaxNode, ...]
    has_syntax_errors: bool = False


def _decode_escape(sequence: str) -> str:
    """Decode one JavaScript string escape sequence (including the backslash)."""
    body = sequence[1:]
    if not body or body[0] in "\r\n\u2028\u2029":
        # Line continuation
        return ""
    head = body[0]
    if head in _SIMPLE_ESCAPES and len(body) == 1:
        return _SIMPLE_ESCAPES[head]
    try:
        if head == "x":
            return chr(int(body[1:3], 16))
        if head == "u":
            digits = body[2:-1] if body.startswith("u{") else body[1:5]
            return chr(int(digits, 16))
    except ValueError:
        return body
    return body


def _parse_number(text: str) -> Optional[Union[int, float]]:
    cleaned = text.replace("_", "").rstrip("n")
    try:
        return int(cleaned, 0)
    except ValueError:
        pass
    try:
        return float(cleaned)
    except ValueError:
        return None


class JavaScriptParser:
    """Parse JavaScript sources with tree-sitter and map them onto syntax nodes."""

    def __init__(self):
        self._parser = Parser(JAVASCRIPT_LANGUAGE)

    def parse(self, source: Union[str, bytes]) -> ParsedSource:
        """Parse source text.

        Args:
            source: JavaScript source, as text or UTF-8 bytes

        Returns:
            ParsedSource with the converted top-level statements
        """
        content = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(content)
        root = tree.root_node

        statements = [
            self._convert(child)
            for child in root.named_children
            if child.type not in ("comment", "hash_bang_line")
        ]
        if root.has_error:
            logger.debug("Source contains syntax errors; continuing with partial tree")
        return ParsedSource(statements=tuple(statements), has_syntax_errors=root.has_error)

    def parse_file(self, file_path: Union[str, Path]) -> ParsedSource:
        """Read and parse a source file.

        Raises:
            SourceReadError: If the file cannot be read
        """
        path = Path(file_path)

        if not path.is_file():
            raise SourceReadError(f"Source file not found: {path}")

        try:
            logger.debug(f"Parsing source file: {path}")
            content = path.read_bytes()
        except OSError as exc:
            raise SourceReadError(f"Failed to read source file {path}: {exc}") from exc

        return self.parse(content)

    @staticmethod
    def _text(node: Node) -> str:
        raw = node.text
        return raw.decode("utf-8", errors="replace") if raw is not None else ""

    @staticmethod
    def _position(node: Node) -> Position:
        row, column = node.start_point[0], node.start_point[1]
        return Position(line=row + 1, column=column + 1)

    @staticmethod
    def _named_children(node: Node) -> List[Node]:
        return [child for child in node.named_children if child.type != "comment"]

    def _string_value(self, node: Node) -> str:
        parts = []
        for child in node.named_children:
            if child.type == "string_fragment":
                parts.append(self._text(child))
            elif child.type == "escape_sequence":
                parts.append(_decode_escape(self._text(child)))
        return "".join(parts)

    def _convert(self, node: Optional[Node]) -> SyntaxNode:
        if node is None:
            return Other(kind="missing")

        kind = node.type
        position = self._position(node)

        if kind == "parenthesized_expression":
            children = self._named_children(node)
            if len(children) == 1:
                return self._convert(children[0])
            return Other(kind=kind, position=position)

        if kind == "expression_statement":
            children = self._named_children(node)
            expression = self._convert(children[0]) if children else Other(kind="missing")
            return ExpressionStatement(expression=expression, position=position)

        if kind == "assignment_expression":
            return Assignment(
                left=self._convert(node.child_by_field_name("left")),
                right=self._convert(node.child_by_field_name("right")),
                position=position,
            )

        if kind == "member_expression":
            member = node.child_by_field_name("property")
            if member is None or member.type not in ("property_identifier", "private_property_identifier"):
                return Other(kind=kind, position=position)
            return MemberAccess(
                object=self._convert(node.child_by_field_name("object")),
                property=Identifier(name=self._text(member), position=self._position(member)),
                position=position,
            )

        if kind == "object":
            members = tuple(self._convert_member(child) for child in self._named_children(node))
            return ObjectLiteral(properties=members, position=position)

        if kind in ("identifier", "undefined"):
            return Identifier(name=self._text(node), position=position)

        if kind == "string":
            return StringLiteral(value=self._string_value(node), position=position)

        if kind == "number":
            text = self._text(node)
            return NumberLiteral(value=_parse_number(text), raw=text, position=position)

        if kind in ("true", "false"):
            return BooleanLiteral(value=kind == "true", position=position)

        if kind == "null":
            return NullLiteral(position=position)

        return Other(kind=kind, position=position)

    def _convert_key(self, node: Optional[Node]) -> SyntaxNode:
        if node is None:
            return Other(kind="missing")
        position = self._position(node)
        if node.type in ("property_identifier", "private_property_identifier"):
            return Identifier(name=self._text(node), position=position)
        if node.type in ("string", "number"):
            return self._convert(node)
        if node.type == "computed_property_name":
            # ["label"]: ... names the same property as "label": ...
            children = self._named_children(node)
            if len(children) == 1 and children[0].type in ("string", "number"):
                return self._convert(children[0])
        return Other(kind=node.type, position=position)

    def _convert_member(self, node: Node) -> SyntaxNode:
        kind = node.type
        position = self._position(node)

        if kind == "pair":
            return Property(
                key=self._convert_key(node.child_by_field_name("key")),
                value=self._convert(node.child_by_field_name("value")),
                position=position,
            )

        if kind == "shorthand_property_identifier":
            name = self._text(node)
            return Property(
                key=Identifier(name=name, position=position),
                value=Identifier(name=name, position=position),
                position=position,
            )

        if kind == "method_definition":
            return Property(
                key=self._convert_key(node.child_by_field_name("name")),
                value=Other(kind=kind, position=position),
                position=position,
            )

        return Other(kind=kind, position=position)
