"""Advisory diagnostics for a converted class string.

The shape checks are deliberately loose: a token that fails them is only
*reported*, never rejected.
"""

from __future__ import annotations

import logging
import re

from tw2css.pipeline.formatter import NO_STYLES_SENTINEL

logger = logging.getLogger(__name__)

MAX_LISTED_TOKENS = 3
LONG_TOKEN_LENGTH = 30

_SIZE_SUFFIX = r"(\d+(\.\d+)?|px|xs|sm|md|lg|xl|[2-9]xl)"

_SCALE_PATTERN = re.compile(
    rf"^-?[a-z][a-z-]*-{_SIZE_SUFFIX}(/\d+)?$",
    re.IGNORECASE,
)

_VARIANT_PATTERN = re.compile(
    r"^(hover|focus|active|disabled|first|last|odd|even|group-hover|group-focus"
    r"|sm|md|lg|xl|2xl):",
    re.IGNORECASE,
)

# `bg-[#1da1f2]`; sanitization strips the brackets, leaving `bg-#1da1f2`
_ARBITRARY_PATTERN = re.compile(r"^-?[a-z][a-z-]*-?\[.+\]$", re.IGNORECASE)
_ARBITRARY_REMNANT_PATTERN = re.compile(
    r"^-?[a-z][a-z-]*-(#[0-9a-f]{3,8}"
    r"|\d+(\.\d+)?(px|rem|em|%|vh|vw|vmin|vmax|ch|ex|deg|ms|s|fr))$",
    re.IGNORECASE,
)

_KEYWORD_UTILITIES = frozenset({
    "flex", "inline-flex", "block", "inline-block", "inline", "grid", "inline-grid",
    "hidden", "contents", "table", "static", "fixed", "absolute", "relative",
    "sticky", "visible", "invisible", "italic", "not-italic", "underline",
    "overline", "line-through", "no-underline", "uppercase", "lowercase",
    "capitalize", "normal-case", "truncate", "container", "border", "rounded",
    "shadow", "grow", "shrink", "transition", "transform", "antialiased", "sr-only",
})

_KEYWORD_SUFFIX_PATTERN = re.compile(
    r"^-?[a-z][a-z-]*-("
    r"white|black|transparent|current|inherit|none|auto|full|screen|min|max|fit"
    r"|base|start|end|center|between|around|evenly|stretch|baseline|col|row"
    r"|wrap|nowrap|reverse|solid|dashed|dotted|double|left|right|top|bottom"
    r"|thin|extralight|light|normal|medium|semibold|bold|extrabold"
    r"|tight|snug|relaxed|loose|wide|wider|widest|sans|serif|mono"
    r"|pointer|visible|scroll|clip|contain|cover|fixed|repeat|ellipsis"
    r")(/\d+)?$",
    re.IGNORECASE,
)


def tokenize(class_string: str) -> list[str]:
    return class_string.split()


def is_recognized_shape(token: str) -> bool:
    """Loose check that a token looks like a utility class."""
    if token.lower() in _KEYWORD_UTILITIES:
        return True
    return any(
        pattern.match(token)
        for pattern in (
            _SCALE_PATTERN,
            _VARIANT_PATTERN,
            _ARBITRARY_PATTERN,
            _ARBITRARY_REMNANT_PATTERN,
            _KEYWORD_SUFFIX_PATTERN,
        )
    )


def generate_warnings(class_string: str, css: str) -> list[str]:
    """Return advisory warnings for a sanitized class string and its CSS."""
    warnings: list[str] = []
    tokens = tokenize(class_string)

    unrecognized = [t for t in tokens if not is_recognized_shape(t)]
    if 0 < len(unrecognized) <= MAX_LISTED_TOKENS:
        warnings.append(f"Potentially invalid classes: {', '.join(unrecognized)}")
    elif len(unrecognized) > MAX_LISTED_TOKENS:
        warnings.append(f"{len(unrecognized)} potentially invalid classes detected")

    if css == NO_STYLES_SENTINEL and tokens:
        warnings.append(
            "No CSS styles were generated. Check if the classes are valid Tailwind utilities."
        )

    if any(len(t) > LONG_TOKEN_LENGTH for t in tokens):
        warnings.append("Some class names are unusually long. Please verify they are correct.")

    if warnings:
        logger.debug("Diagnostics for %r: %s", class_string, warnings)
    return warnings
