"""Test datalist option generation and the datalist tag helper."""

import html
import re

import pytest
from markupsafe import Markup

from hyper_taghelpers import (
    DEFAULT_ORDER,
    DatalistTagHelper,
    InvalidArgumentError,
    TagHelperContext,
    TagHelperOutput,
    build_datalist_options,
    default_registry,
    render_element,
)

OPTION_PATTERN = re.compile(r'<option value="([^"]*)" />')


def option_values(fragment: str) -> list[str]:
    return [html.unescape(v) for v in OPTION_PATTERN.findall(fragment)]


class TestBuildDatalistOptions:
    """Test the pure options builder."""

    def test_none_returns_none(self):
        assert build_datalist_options(None) is None

    def test_empty_returns_none(self):
        assert build_datalist_options([]) is None
        assert build_datalist_options(()) is None

    def test_one_option_per_value(self):
        values = ["red", "green", "blue"]
        fragment = build_datalist_options(values)

        assert fragment == (
            '<option value="red" />\n'
            '<option value="green" />\n'
            '<option value="blue" />'
        )
        assert isinstance(fragment, Markup)

    def test_order_and_duplicates_preserved(self):
        """Values are neither sorted nor deduplicated."""
        fragment = build_datalist_options(["b", "a", "a"])
        assert option_values(fragment) == ["b", "a", "a"]

    def test_empty_string_value_kept(self):
        fragment = build_datalist_options(["", "x"])
        assert option_values(fragment) == ["", "x"]

    def test_none_value_renders_empty_attribute(self):
        assert build_datalist_options([None]) == '<option value="" />'

    def test_values_are_escaped(self):
        fragment = build_datalist_options(['a&b<c>"d"'])

        assert "&amp;" in fragment
        assert "&lt;" in fragment
        assert "&gt;" in fragment
        assert '"d"' not in fragment
        assert option_values(fragment) == ['a&b<c>"d"']

    def test_markup_values_escaped_literally(self):
        """Markup values are plain strings here and get escaped like any other."""
        fragment = build_datalist_options([Markup("a &amp; b")])

        assert fragment == '<option value="a &amp;amp; b" />'
        assert option_values(fragment) == ["a &amp; b"]

    def test_markup_value_cannot_break_out_of_attribute(self):
        value = Markup('x" onmouseover="alert(1)')
        fragment = build_datalist_options([value])

        assert "onmouseover=\"" not in fragment
        assert option_values(fragment) == [str(value)]

    def test_boolean_values_rendered_as_text(self):
        fragment = build_datalist_options([True, False])

        assert fragment == '<option value="True" />\n<option value="False" />'
        assert option_values(fragment) == ["True", "False"]

    def test_generator_consumed_once(self):
        fragment = build_datalist_options(c for c in "xyz")
        assert option_values(fragment) == ["x", "y", "z"]

    def test_empty_generator_returns_none(self):
        assert build_datalist_options(v for v in []) is None

    def test_bare_string_is_single_value(self):
        assert build_datalist_options("red") == '<option value="red" />'

    def test_deterministic(self):
        values = ["one", "two & three", "<four>"]
        assert build_datalist_options(values) == build_datalist_options(values)

    def test_custom_separator(self):
        fragment = build_datalist_options(["a", "b"], separator="")
        assert fragment == '<option value="a" /><option value="b" />'

    @pytest.mark.parametrize("count", [1, 2, 50])
    def test_count_matches_input(self, count):
        values = [f"v{i}" for i in range(count)]
        assert option_values(build_datalist_options(values)) == values


class TestDatalistTagHelper:
    """Test DatalistTagHelper against a hand-built context and output."""

    def make(self, existing=None):
        context = TagHelperContext("datalist", {"asp-list": None})
        output = TagHelperOutput("datalist")
        if existing:
            output.post_content.append_html(existing)
        return context, output

    def test_runs_early(self):
        assert DatalistTagHelper.order == -1000
        assert DatalistTagHelper.order < DEFAULT_ORDER

    def test_appends_to_post_content(self):
        context, output = self.make()
        DatalistTagHelper(["red", "green", "blue"]).process(context, output)

        assert option_values(str(output.post_content)) == ["red", "green", "blue"]
        assert output.content.is_empty
        assert output.pre_content.is_empty

    def test_appends_after_existing_content(self):
        context, output = self.make(existing='<option value="static" />')
        DatalistTagHelper(["red"]).process(context, output)

        assert str(output.post_content) == '<option value="static" /><option value="red" />'

    @pytest.mark.parametrize("values", [None, [], ()])
    def test_absent_or_empty_leaves_output_untouched(self, values):
        context, output = self.make()
        DatalistTagHelper(values).process(context, output)

        assert not output.post_content.is_modified
        assert output.render() == "<datalist></datalist>"

    def test_missing_context_raises(self):
        _, output = self.make()
        with pytest.raises(InvalidArgumentError) as exc_info:
            DatalistTagHelper(["red"]).process(None, output)

        assert exc_info.value.argument == "context"
        assert output.post_content.is_empty

    def test_missing_output_raises(self):
        context, _ = self.make()
        with pytest.raises(InvalidArgumentError) as exc_info:
            DatalistTagHelper(["red"]).process(context, None)

        assert exc_info.value.argument == "output"

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            DatalistTagHelper([]).process(None, None)

    def test_registered_in_default_registry(self):
        assert DatalistTagHelper in default_registry.helpers_for("datalist", {"asp-list": []})
        assert DatalistTagHelper not in default_registry.helpers_for("datalist", {})
        assert DatalistTagHelper not in default_registry.helpers_for("select", {"asp-list": []})


class TestRenderDatalist:
    """Test datalist rendering through the default registry."""

    def test_colors(self):
        result = render_element(
            "datalist",
            {"id": "colors", "asp-list": ["red", "green", "blue"]},
        )

        assert result == (
            '<datalist id="colors">'
            '<option value="red" />\n'
            '<option value="green" />\n'
            '<option value="blue" />'
            '</datalist>'
        )

    def test_list_attribute_not_rendered(self):
        result = render_element("datalist", {"asp-list": ["a"]})
        assert "asp-list" not in result

    def test_static_options_come_first(self):
        result = render_element(
            "datalist",
            {"asp-list": ["generated"]},
            '<option value="static" />',
        )

        assert option_values(result) == ["static", "generated"]

    def test_empty_list_renders_plain_element(self):
        assert render_element("datalist", {"id": "x", "asp-list": []}) == '<datalist id="x"></datalist>'

    def test_attribute_name_case_insensitive(self):
        result = render_element("DataList", {"ASP-LIST": ["a"]})
        assert option_values(result) == ["a"]
