"""Tests for the CSS formatter and property allow-list."""

import pytest

from tw2css.pipeline.formatter import (
    NO_STYLES_SENTINEL,
    format_css,
    is_meaningful,
    select_declarations,
)
from tw2css.pipeline.properties import (
    DEFAULT_VALUES,
    PROPERTY_GROUPS,
    RELEVANT_PROPERTIES,
    is_default_value,
)
from tw2css.resolvers.base import ComputedStyle


class TestProperties:
    def test_allow_list_size(self):
        assert len(RELEVANT_PROPERTIES) == 70
        assert len(set(RELEVANT_PROPERTIES)) == 70

    def test_groups_cover_allow_list(self):
        grouped = [p for props in PROPERTY_GROUPS.values() for p in props]
        assert tuple(grouped) == RELEVANT_PROPERTIES

    def test_defaults_only_for_allowed_properties(self):
        assert set(DEFAULT_VALUES) <= set(RELEVANT_PROPERTIES)

    @pytest.mark.parametrize(
        "prop,value",
        [
            ("margin", "0px"),
            ("padding-left", "0"),
            ("opacity", "1"),
            ("font-weight", "400"),
            ("background-color", "rgba(0, 0, 0, 0)"),
            ("color", "rgb(0, 0, 0)"),
            ("display", "inline"),
            ("text-align", "start"),
        ],
    )
    def test_default_values(self, prop, value):
        assert is_default_value(prop, value)

    def test_default_is_per_property(self):
        assert not is_default_value("width", "0px")
        assert not is_default_value("color", "rgb(255, 255, 255)")


class TestIsMeaningful:
    @pytest.mark.parametrize("value", ["", "initial", "inherit", "unset"])
    def test_neutral_values_dropped(self, value):
        assert not is_meaningful("width", value)

    def test_default_dropped(self):
        assert not is_meaningful("position", "static")

    def test_non_default_kept(self):
        assert is_meaningful("position", "relative")


class TestSelectDeclarations:
    def test_ignores_properties_outside_allow_list(self):
        styles = ComputedStyle({"padding": "16px", "cursor": "pointer", "outline": "none"})
        assert select_declarations(styles) == [("padding", "16px")]

    def test_allow_list_order(self):
        styles = ComputedStyle({"color": "red", "display": "flex"})
        assert select_declarations(styles) == [("display", "flex"), ("color", "red")]

    def test_accepts_plain_mapping(self):
        assert select_declarations({"opacity": "0.5"}) == [("opacity", "0.5")]


class TestFormatCss:
    def test_readme_example(self):
        styles = ComputedStyle({
            "display": "block",
            "margin": "0px",
            "padding": "16px",
            "color": "rgb(255, 255, 255)",
            "background-color": "rgb(59, 130, 246)",
            "opacity": "1",
        })
        assert format_css(styles) == (
            ".element {\n"
            "  background-color: rgb(59, 130, 246);\n"
            "  color: rgb(255, 255, 255);\n"
            "  padding: 16px;\n"
            "}"
        )

    def test_lines_sorted(self):
        css = format_css(ComputedStyle({"z-index": "10", "align-items": "center", "width": "50%"}))
        body = css.splitlines()[1:-1]
        assert body == sorted(body)
        assert body[0] == "  align-items: center;"

    def test_sentinel_when_nothing_survives(self):
        styles = ComputedStyle({"display": "block", "margin": "0px", "cursor": "pointer"})
        assert format_css(styles) == NO_STYLES_SENTINEL

    def test_sentinel_for_empty_styles(self):
        assert format_css(ComputedStyle()) == NO_STYLES_SENTINEL

    def test_custom_selector(self):
        css = format_css(ComputedStyle({"opacity": "0.5"}), selector=".card")
        assert css == ".card {\n  opacity: 0.5;\n}"

    def test_all_defaults_suppressed(self):
        styles = ComputedStyle({
            prop: sorted(values)[0] for prop, values in DEFAULT_VALUES.items()
        })
        assert format_css(styles) == NO_STYLES_SENTINEL
