"""Shared fixtures for component linter tests."""

import textwrap
from typing import List, Tuple

import pytest

from component_linter.linter.rules import RULES
from component_linter.models.parsing.js_parser import JavaScriptParser
from component_linter.models.syntax_nodes import SyntaxNode


@pytest.fixture
def parser() -> JavaScriptParser:
    return JavaScriptParser()


@pytest.fixture
def parse_statements(parser):
    """Parse dedented JavaScript source into top-level statements."""

    def _parse(source: str) -> Tuple[SyntaxNode, ...]:
        return parser.parse(textwrap.dedent(source)).statements

    return _parse


@pytest.fixture
def parse_statement(parse_statements):
    """Parse source holding a single top-level statement."""

    def _parse(source: str) -> SyntaxNode:
        statements = parse_statements(source)
        assert len(statements) == 1
        return statements[0]

    return _parse


@pytest.fixture
def run_rule(parse_statements):
    """Run one registered rule over every statement, returning (node, message) reports."""

    def _run(rule_name: str, source: str) -> List[Tuple[SyntaxNode, str]]:
        reports: List[Tuple[SyntaxNode, str]] = []
        rule = RULES[rule_name]
        for statement in parse_statements(source):
            rule.check(statement, lambda node, message: reports.append((node, message)))
        return reports

    return _run
