"""CSS formatting: computed style → readable declaration block."""

from __future__ import annotations

from collections.abc import Mapping

from tw2css.pipeline.properties import NEUTRAL_VALUES, RELEVANT_PROPERTIES, is_default_value

SELECTOR = ".element"
NO_STYLES_SENTINEL = "/* No styles generated - try adding some Tailwind classes */"
INDENT = "  "


def _lookup(styles: Mapping[str, str], prop: str) -> str:
    getter = getattr(styles, "get_property_value", None)
    if getter is not None:
        return getter(prop)
    return styles.get(prop, "")


def is_meaningful(prop: str, value: str) -> bool:
    """True when ``value`` is set and differs from the property's default."""
    if not value or value in NEUTRAL_VALUES:
        return False
    return not is_default_value(prop, value)


def select_declarations(styles: Mapping[str, str]) -> list[tuple[str, str]]:
    """Allow-listed, non-default (property, value) pairs in allow-list order."""
    declarations: list[tuple[str, str]] = []
    for prop in RELEVANT_PROPERTIES:
        value = _lookup(styles, prop)
        if is_meaningful(prop, value):
            declarations.append((prop, value))
    return declarations


def format_css(styles: Mapping[str, str], selector: str = SELECTOR) -> str:
    """Render the surviving declarations as a single sorted block.

    Lines are sorted as rendered strings, so ties on property name fall
    back to the value.
    """
    lines = [f"{INDENT}{prop}: {value};" for prop, value in select_declarations(styles)]
    if not lines:
        return NO_STYLES_SENTINEL
    body = "\n".join(sorted(lines))
    return f"{selector} {{\n{body}\n}}"
