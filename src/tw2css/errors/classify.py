"""Map failures raised during conversion onto user-facing error strings."""

from __future__ import annotations

from tw2css.errors.exceptions import (
    ContextConstructionError,
    ContextSecurityError,
    InputRejectedError,
    StyleComputationError,
)
from tw2css.types import ErrorKind

_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.CONTEXT_SECURITY: (
        "Security error: Unable to access computed styles. "
        "This might be due to browser security restrictions."
    ),
    ErrorKind.CONTEXT_CONSTRUCTION: (
        "DOM error: Unable to create virtual element for style computation."
    ),
    ErrorKind.STYLE_COMPUTATION: (
        "Style computation error: Unable to extract CSS styles from the element."
    ),
    ErrorKind.UNKNOWN: "An unexpected error occurred during CSS conversion.",
}


def error_message(kind: ErrorKind) -> str:
    """Return the canned message for a collaborator-stage error kind."""
    return _MESSAGES[kind]


def classify_error(error: object) -> tuple[ErrorKind, str]:
    """Classify a failure into (kind, message).

    Our own exceptions are classified by type. Foreign exceptions are
    classified by shape: a ``SecurityError`` class name, or a message
    mentioning the DOM or ``getComputedStyle``.
    Anything else, including values that are not exceptions at all,
    becomes UNKNOWN with a generic message.
    """
    if isinstance(error, InputRejectedError):
        return error.kind, error.message
    if isinstance(error, ContextSecurityError):
        return ErrorKind.CONTEXT_SECURITY, _MESSAGES[ErrorKind.CONTEXT_SECURITY]
    if isinstance(error, ContextConstructionError):
        return ErrorKind.CONTEXT_CONSTRUCTION, _MESSAGES[ErrorKind.CONTEXT_CONSTRUCTION]
    if isinstance(error, StyleComputationError):
        return ErrorKind.STYLE_COMPUTATION, _MESSAGES[ErrorKind.STYLE_COMPUTATION]

    if not isinstance(error, BaseException):
        return ErrorKind.UNKNOWN, _MESSAGES[ErrorKind.UNKNOWN]

    kind = _classify_by_shape(error)
    return kind, _MESSAGES[kind]


def _classify_by_shape(error: BaseException) -> ErrorKind:
    if type(error).__name__ == "SecurityError":
        return ErrorKind.CONTEXT_SECURITY

    text = str(error)
    if "SecurityError" in text:
        return ErrorKind.CONTEXT_SECURITY
    if "DOM" in text:
        return ErrorKind.CONTEXT_CONSTRUCTION
    if "getComputedStyle" in text:
        return ErrorKind.STYLE_COMPUTATION
    return ErrorKind.UNKNOWN
