"""Input guard: cheap checks that run before any style resolution."""

from __future__ import annotations

import logging
import re

from tw2css.errors.exceptions import (
    ExcessSpecialCharactersError,
    InputTooLongError,
    UnsafeContentError,
)

logger = logging.getLogger(__name__)

_UNSAFE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),
    re.compile(r"<iframe", re.IGNORECASE),
    re.compile(r"<object", re.IGNORECASE),
    re.compile(r"<embed", re.IGNORECASE),
)

_SPECIAL_CHARS = re.compile(r"[<>{}()\[\]]")
_WHITESPACE_RUN = re.compile(r"\s+")

MAX_SPECIAL_CHARACTERS = 10


def is_blank(text: str) -> bool:
    """True when there is nothing to convert."""
    return not text.strip()


def check_input(text: str, max_length: int) -> None:
    """Run the length, content-safety and density checks in order.

    Raises an ``InputRejectedError`` subclass on the first failing check.
    """
    if len(text) > max_length:
        logger.debug("Rejected input of %d chars (limit %d)", len(text), max_length)
        raise InputTooLongError(max_length)

    for pattern in _UNSAFE_PATTERNS:
        if pattern.search(text):
            logger.debug("Rejected input matching %r", pattern.pattern)
            raise UnsafeContentError(pattern.pattern)

    count = count_special_characters(text)
    if count > MAX_SPECIAL_CHARACTERS:
        logger.debug("Rejected input with %d special characters", count)
        raise ExcessSpecialCharactersError(count, MAX_SPECIAL_CHARACTERS)


def count_special_characters(text: str) -> int:
    return len(_SPECIAL_CHARS.findall(text))


def sanitize(text: str) -> str:
    """Strip bracket characters and collapse whitespace."""
    stripped = _SPECIAL_CHARS.sub("", text)
    return _WHITESPACE_RUN.sub(" ", stripped).strip()


def cache_key(text: str) -> str:
    """Outer trim only; internal whitespace is significant."""
    return text.strip()
