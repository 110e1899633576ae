"""Tests for src/mui_mcp/query.py."""

from mui_mcp.catalog import COMPONENT_MAP, COMPONENTS
from mui_mcp.query import (
    SearchResult,
    format_component_list,
    format_search,
    list_all,
    resolve_key,
    search,
)


class TestListAll:
    def test_covers_catalog_in_order(self):
        entries = list_all()
        assert len(entries) == len(COMPONENTS)
        assert [name for name, _key in entries] == list(COMPONENTS)

    def test_stable_across_calls(self):
        assert list_all() == list_all()

    def test_pairs_name_with_key(self):
        assert ("Text Field", "text-field") in list_all()


class TestSearch:
    def test_form_category(self):
        result = search("form")
        assert set(COMPONENT_MAP["form"]) <= set(result.matches)
        # No component name contains "form", so the category is the whole result
        assert result.matches == COMPONENT_MAP["form"]

    def test_button_category_plus_name_matches(self):
        result = search("button")
        assert result.matches == (
            "Button",
            "Floating Action Button",
            "Button Group",
            "Toggle Button",
            "Radio Button",
        )

    def test_case_insensitive(self):
        assert search("BUTTON").matches == search("button").matches

    def test_label_must_appear_in_query(self):
        """Category matching is label-in-query, not query-in-label."""
        assert search("I need a form").matches == COMPONENT_MAP["form"]
        assert search("forms").matches == COMPONENT_MAP["form"]
        assert search("for").empty

    def test_multiple_categories_deduplicated(self):
        result = search("form input")
        assert len(result.matches) == len(set(result.matches))
        assert "Textarea Autosize" in result.matches
        # form first, then input additions
        assert result.matches[0] == "Text Field"
        assert result.matches[-1] == "Textarea Autosize"

    def test_category_matches_precede_name_matches(self):
        result = search("data table")
        assert result.matches[: len(COMPONENT_MAP["data"])] == COMPONENT_MAP["data"]

    def test_name_substring(self):
        assert search("progress").matches == ("Circular Progress", "Linear Progress")

    def test_category_may_return_names_outside_catalog(self):
        assert "No SSR" in search("utility").matches

    def test_no_matches(self):
        result = search("zzz-nonexistent")
        assert isinstance(result, SearchResult)
        assert result.empty
        assert result.matches == ()


def test_resolve_key_does_not_check_catalog():
    assert resolve_key("text-field") == "Text Field"
    assert resolve_key("no-such-widget") == "No Such Widget"


class TestFormatting:
    def test_component_list(self):
        text = format_component_list()
        assert text.startswith(f"# Material UI Components ({len(COMPONENTS)} total)")
        assert "- Text Field (text-field)" in text
        assert "get_component_info" in text
        assert "get_mui_guide" in text

    def test_search_results(self):
        text = format_search(search("surface"))
        assert text.startswith('# Components matching "surface" (3 found)')
        assert "- Card (card)\n  https://mui.com/material-ui/react-card/" in text
        assert text.endswith("Use get_component_info with the kebab-case name for details.")

    def test_empty_search_hint(self):
        text = format_search(search("zzz-nonexistent"))
        assert text.startswith("No components found matching 'zzz-nonexistent'.")
        assert (
            "Try broader terms like: form, navigation, overlay, feedback, data, "
            "layout, input, button"
        ) in text
