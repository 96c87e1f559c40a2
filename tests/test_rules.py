"""Tests for the component metadata rules."""

import pytest

from component_linter.linter.rules import (
    OPTIONAL_PROP_MESSAGE,
    PROP_PROPERTY_MESSAGE,
    REQUIRED_PROPERTY_MESSAGE,
    RULES,
    SOURCE_DESCRIPTION_MESSAGE,
    SOURCE_NAME_MESSAGE,
    TYPE_PROPERTY_MESSAGE,
)
from component_linter.models.syntax_nodes import ExpressionStatement, Property

REQUIRED_FIELDS = ["key", "name", "version", "description", "type"]

COMPLETE_ACTION = """\
module.exports = {
  key: "sheets-add-row",
  name: "Add Row",
  version: "0.0.1",
  description: "Add a row to a sheet",
  type: "action",
  props: {
    app,
    sheet: { type: "string", label: "Sheet", description: "The sheet" },
  },
  async run() {},
};
"""


def descriptor_without(missing):
    lines = [f'  {name}: "value",' for name in REQUIRED_FIELDS if name != missing]
    return "module.exports = {\n" + "\n".join(lines) + "\n};\n"


class TestRegistry:
    """Rule registration."""

    def test_rule_names(self):
        assert list(RULES) == [
            "required-properties-key",
            "required-properties-name",
            "required-properties-version",
            "required-properties-description",
            "required-properties-type",
            "props-label",
            "props-description",
            "default-value-required-for-optional-props",
            "source-name",
            "source-description",
        ]

    def test_rules_carry_guideline_links(self):
        for rule in RULES.values():
            assert rule.docs_url.startswith("https://pipedream.com/docs/components/guidelines/#")

    def test_complete_component_passes_every_rule(self, run_rule):
        for name in RULES:
            assert run_rule(name, COMPLETE_ACTION) == []


class TestRequiredProperties:
    """required-properties-* rules."""

    @pytest.mark.parametrize("missing", REQUIRED_FIELDS)
    def test_only_the_matching_rule_reports(self, run_rule, missing):
        source = descriptor_without(missing)

        for field in REQUIRED_FIELDS:
            reports = run_rule(f"required-properties-{field}", source)
            if field == missing:
                assert len(reports) == 1
                node, _ = reports[0]
                assert isinstance(node, ExpressionStatement)
            else:
                assert reports == []

    @pytest.mark.parametrize("field", ["key", "name", "version", "description"])
    def test_message(self, run_rule, field):
        [(_, message)] = run_rule(f"required-properties-{field}", descriptor_without(field))

        assert message == REQUIRED_PROPERTY_MESSAGE.format(property_name=field)
        assert message == f"Components must export a {field} property."

    def test_type_message_override(self, run_rule):
        [(_, message)] = run_rule("required-properties-type", descriptor_without("type"))

        assert message == TYPE_PROPERTY_MESSAGE

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    @pytest.mark.parametrize("quote", ['"', "'"])
    def test_quoted_keys_satisfy_rule(self, run_rule, field, quote):
        source = f'module.exports = {{ {quote}{field}{quote}: "value" }};'

        assert run_rule(f"required-properties-{field}", source) == []

    def test_key_written_with_embedded_quotes(self, run_rule):
        source = """module.exports = { '"key"': "value" };"""

        assert run_rule("required-properties-key", source) == []

    def test_computed_string_key_satisfies_rule(self, run_rule):
        source = 'module.exports = { ["key"]: "x", name: "n" };'

        assert run_rule("required-properties-key", source) == []

    def test_computed_identifier_key_does_not_satisfy_rule(self, run_rule):
        source = 'module.exports = { [key]: "x", name: "n" };'

        assert len(run_rule("required-properties-key", source)) == 1

    def test_one_report_per_statement(self, run_rule):
        source = 'module.exports = { name: "a" };\nmodule.exports = { name: "b" };\n'

        assert len(run_rule("required-properties-key", source)) == 2


class TestPropProperties:
    """props-label and props-description rules."""

    SOURCE = """\
    module.exports = {
      key: "x",
      props: {
        app,
        first: { type: "string" },
        second: { type: "string", "label": "Second", description: "Two" },
        third: { type: "string", label: "Third" },
        shared: { propDefinition: [app, "shared"] },
        scalar: "value",
      },
    };
    """

    def test_label_reported_per_prop(self, run_rule):
        reports = run_rule("props-label", self.SOURCE)

        assert [message for _, message in reports] == [
            PROP_PROPERTY_MESSAGE.format(prop_name="first", property_name="label"),
        ]
        node, message = reports[0]
        assert isinstance(node, Property)
        assert node.position.line == 5
        assert message == "Component prop first must have a label."

    def test_description_reported_per_prop(self, run_rule):
        reports = run_rule("props-description", self.SOURCE)

        assert [message for _, message in reports] == [
            "Component prop first must have a description.",
            "Component prop third must have a description.",
        ]

    def test_prop_definitions_block(self, run_rule):
        source = 'module.exports = { propDefinitions: { channel: { type: "string" } } };'

        assert [m for _, m in run_rule("props-label", source)] == [
            "Component prop channel must have a label.",
        ]

    def test_quoted_prop_name_in_message(self, run_rule):
        source = 'module.exports = { props: { "my-prop": { type: "string", label: "x" } } };'

        assert [m for _, m in run_rule("props-description", source)] == [
            "Component prop my-prop must have a description.",
        ]

    def test_computed_string_keys_in_prop(self, run_rule):
        source = 'module.exports = { props: { a: { ["label"]: "A", ["description"]: "d" } } };'

        assert run_rule("props-label", source) == []
        assert run_rule("props-description", source) == []

    def test_no_props(self, run_rule):
        assert run_rule("props-label", 'module.exports = { key: "x" };') == []


class TestOptionalPropsHaveDefault:
    """default-value-required-for-optional-props rule."""

    RULE = "default-value-required-for-optional-props"

    def _source(self, prop_body):
        return f"module.exports = {{ props: {{ limit: {{ {prop_body} }} }} }};"

    def test_optional_without_default(self, run_rule):
        reports = run_rule(self.RULE, self._source('type: "integer", optional: true'))

        assert [m for _, m in reports] == [OPTIONAL_PROP_MESSAGE.format(prop_name="limit")]
        assert reports[0][1] == (
            'Component prop limit is marked "optional", so it may need a "default" property.'
        )

    @pytest.mark.parametrize(
        "prop_body",
        [
            'type: "integer", optional: true, default: 10',
            'type: "integer", optional: true, "default": 10',
            'type: "integer", optional: false',
            'type: "integer"',
            'type: "integer", optional: isOptional',
            'type: "integer", optional: 0',
        ],
    )
    def test_no_report(self, run_rule, prop_body):
        assert run_rule(self.RULE, self._source(prop_body)) == []

    def test_truthy_string_counts_as_optional(self, run_rule):
        assert len(run_rule(self.RULE, self._source('optional: "yes"'))) == 1

    def test_prop_with_prop_definition_is_still_checked(self, run_rule):
        source = self._source('propDefinition: [app, "limit"], optional: true')

        assert len(run_rule(self.RULE, source)) == 1

    def test_top_level_prop_definition_skips_rule(self, run_rule):
        source = """\
        module.exports = {
          propDefinition: [app, "x"],
          props: { limit: { optional: true } },
        };
        """

        assert run_rule(self.RULE, source) == []

    def test_reports_every_offending_prop(self, run_rule):
        source = """\
        module.exports = {
          props: {
            a: { optional: true },
            b: { optional: true, default: "b" },
            c: { optional: true },
          },
        };
        """

        assert [m for _, m in run_rule(self.RULE, source)] == [
            OPTIONAL_PROP_MESSAGE.format(prop_name="a"),
            OPTIONAL_PROP_MESSAGE.format(prop_name="c"),
        ]


class TestSourceNaming:
    """source-name and source-description rules."""

    def _source(self, component_type, name='"New Row"', description='"Emit new row"'):
        return (
            f'module.exports = {{ type: "{component_type}", name: {name}, description: {description} }};'
        )

    def test_source_name_without_prefix(self, run_rule):
        reports = run_rule("source-name", self._source("source", name='"Fetches widgets"'))

        assert len(reports) == 1
        node, message = reports[0]
        assert message == SOURCE_NAME_MESSAGE
        assert isinstance(node, Property)
        assert node.key.name == "name"

    def test_source_name_with_prefix(self, run_rule):
        assert run_rule("source-name", self._source("source", name='"New Widget Created"')) == []

    def test_prefix_requires_trailing_space(self, run_rule):
        assert len(run_rule("source-name", self._source("source", name='"Newest Widget"'))) == 1

    def test_actions_are_not_checked(self, run_rule):
        assert run_rule("source-name", self._source("action", name='"Fetches widgets"')) == []
        assert run_rule("source-description", self._source("action", description='"Gets rows"')) == []

    def test_source_description_without_prefix(self, run_rule):
        reports = run_rule("source-description", self._source("source", description='"Emits rows"'))

        assert [m for _, m in reports] == [SOURCE_DESCRIPTION_MESSAGE]

    def test_source_description_with_prefix(self, run_rule):
        assert run_rule("source-description", self._source("source", description='"Emit new row"')) == []

    def test_missing_name_is_left_to_required_rule(self, run_rule):
        source = 'module.exports = { type: "source", description: "Emit new row" };'

        assert run_rule("source-name", source) == []

    def test_missing_type_is_left_to_required_rule(self, run_rule):
        assert run_rule("source-name", 'module.exports = { name: "Fetches widgets" };') == []

    @pytest.mark.parametrize("name", ["`Fetches ${x}`", "getName()", "42", "null"])
    def test_non_string_name_is_skipped(self, run_rule, name):
        assert run_rule("source-name", self._source("source", name=name)) == []

    def test_quoted_keys(self, run_rule):
        source = 'module.exports = { "type": "source", "name": "Fetches widgets" };'

        assert len(run_rule("source-name", source)) == 1


class TestNonComponents:
    """Every rule ignores statements that do not export a component object."""

    @pytest.mark.parametrize(
        "source",
        [
            "module.exports = {};",
            "module.exports = common;",
            "module.exports = [1, 2];",
            'exports.default = { type: "source", name: "Fetches widgets", props: { a: { optional: true } } };',
            'component.exports = { type: "source", name: "Fetches widgets" };',
            'const x = { type: "source" };',
        ],
    )
    def test_no_diagnostics(self, run_rule, source):
        for name in RULES:
            assert run_rule(name, source) == []
