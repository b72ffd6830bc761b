"""Error handling: exception hierarchy and failure classification."""

from tw2css.errors.classify import classify_error
from tw2css.errors.exceptions import (
    ContextConstructionError,
    ContextSecurityError,
    ExcessSpecialCharactersError,
    InputRejectedError,
    InputTooLongError,
    ResolverError,
    StyleComputationError,
    Tw2CssError,
    UnsafeContentError,
)

__all__ = [
    "Tw2CssError",
    "InputRejectedError",
    "InputTooLongError",
    "UnsafeContentError",
    "ExcessSpecialCharactersError",
    "ResolverError",
    "ContextSecurityError",
    "ContextConstructionError",
    "StyleComputationError",
    "classify_error",
]
