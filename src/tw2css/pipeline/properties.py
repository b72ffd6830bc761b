"""Curated property allow-list and per-property default values."""

from __future__ import annotations

# Grouped for display (`tw2css properties`); order within a group is
# the order properties are read from the computed style.
PROPERTY_GROUPS: dict[str, tuple[str, ...]] = {
    "Layout": (
        "display", "position", "top", "right", "bottom", "left", "z-index",
        "float", "clear", "overflow", "overflow-x", "overflow-y",
    ),
    "Box Model": (
        "width", "height", "min-width", "min-height", "max-width", "max-height",
        "margin", "margin-top", "margin-right", "margin-bottom", "margin-left",
        "padding", "padding-top", "padding-right", "padding-bottom", "padding-left",
        "border", "border-width", "border-style", "border-color",
        "border-radius", "box-sizing",
    ),
    "Typography": (
        "font-family", "font-size", "font-weight", "font-style", "line-height",
        "text-align", "text-decoration", "text-transform", "letter-spacing",
        "word-spacing", "white-space",
    ),
    "Colors": (
        "color", "background-color", "background-image", "background-size",
        "background-position", "background-repeat", "opacity",
    ),
    "Flexbox": (
        "flex", "flex-direction", "flex-wrap", "justify-content", "align-items",
        "align-content", "flex-grow", "flex-shrink", "flex-basis",
    ),
    "Grid": (
        "grid-template-columns", "grid-template-rows", "grid-gap", "grid-column",
        "grid-row", "grid-area",
    ),
    "Transform & Animation": (
        "transform", "transition", "animation",
    ),
}

RELEVANT_PROPERTIES: tuple[str, ...] = tuple(
    prop for group in PROPERTY_GROUPS.values() for prop in group
)

# Values that never carry information regardless of property
NEUTRAL_VALUES = frozenset({"initial", "inherit", "unset"})

DEFAULT_VALUES: dict[str, frozenset[str]] = {
    "margin": frozenset({"0px", "0"}),
    "margin-top": frozenset({"0px", "0"}),
    "margin-right": frozenset({"0px", "0"}),
    "margin-bottom": frozenset({"0px", "0"}),
    "margin-left": frozenset({"0px", "0"}),
    "padding": frozenset({"0px", "0"}),
    "padding-top": frozenset({"0px", "0"}),
    "padding-right": frozenset({"0px", "0"}),
    "padding-bottom": frozenset({"0px", "0"}),
    "padding-left": frozenset({"0px", "0"}),
    "border-width": frozenset({"0px", "0"}),
    "opacity": frozenset({"1"}),
    "font-weight": frozenset({"400", "normal"}),
    "line-height": frozenset({"normal"}),
    "text-decoration": frozenset({"none"}),
    "background-color": frozenset({"rgba(0, 0, 0, 0)", "transparent"}),
    "color": frozenset({"rgb(0, 0, 0)", "rgba(0, 0, 0, 1)"}),
    "display": frozenset({"block", "inline"}),
    "position": frozenset({"static"}),
    "z-index": frozenset({"auto"}),
    "overflow": frozenset({"visible"}),
    "text-align": frozenset({"start", "left"}),
    "font-style": frozenset({"normal"}),
    "text-transform": frozenset({"none"}),
    "white-space": frozenset({"normal"}),
}


def is_default_value(prop: str, value: str) -> bool:
    return value in DEFAULT_VALUES.get(prop, frozenset())
