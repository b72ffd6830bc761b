"""Custom exception hierarchy for tw2css."""

from __future__ import annotations

from typing import Any

from tw2css.types import ErrorKind


class Tw2CssError(Exception):
    """Base exception for all tw2css errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


# ── Input guard ──


class InputRejectedError(Tw2CssError):
    """Input failed a guard check. Terminal and never cached."""


class InputTooLongError(InputRejectedError):
    kind = ErrorKind.INPUT_TOO_LONG

    def __init__(self, limit: int) -> None:
        super().__init__(f"Input too long. Maximum {limit} characters allowed.")
        self.limit = limit


class UnsafeContentError(InputRejectedError):
    kind = ErrorKind.UNSAFE_CONTENT

    def __init__(self, pattern: str = "") -> None:
        super().__init__(
            "Input contains potentially unsafe content. Please use only Tailwind CSS classes."
        )
        self.pattern = pattern


class ExcessSpecialCharactersError(InputRejectedError):
    kind = ErrorKind.EXCESS_SPECIAL_CHARACTERS

    def __init__(self, count: int, threshold: int) -> None:
        super().__init__(
            "Input contains too many special characters. Please use valid Tailwind CSS classes."
        )
        self.count = count
        self.threshold = threshold


# ── Style resolution ──


class ResolverError(Tw2CssError):
    """The style-computation collaborator failed.

    Never cached, so a transient environment fault can be retried.
    """

    def __init__(self, message: str = "", original: BaseException | None = None) -> None:
        super().__init__(message)
        self.original = original


class ContextSecurityError(ResolverError):
    """The environment refused access to computed styles."""

    kind = ErrorKind.CONTEXT_SECURITY


class ContextConstructionError(ResolverError):
    """The ephemeral styling context could not be created or attached."""

    kind = ErrorKind.CONTEXT_CONSTRUCTION


class StyleComputationError(ResolverError):
    """The collaborator raised while resolving styles."""

    kind = ErrorKind.STYLE_COMPUTATION
