"""Shared Pydantic models for tw2css."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from tw2css.config.defaults import (
    DEFAULT_CACHE_CAPACITY,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_MAX_INPUT_LENGTH,
    DEFAULT_SYNTAX_HIGHLIGHTING,
)

# ── Enums ──


class ErrorKind(StrEnum):
    INPUT_TOO_LONG = "input_too_long"
    UNSAFE_CONTENT = "unsafe_content"
    EXCESS_SPECIAL_CHARACTERS = "excess_special_characters"
    CONTEXT_SECURITY = "context_security"
    CONTEXT_CONSTRUCTION = "context_construction"
    STYLE_COMPUTATION = "style_computation"
    UNKNOWN = "unknown"


class ConversionState(StrEnum):
    IDLE = "idle"
    VALIDATING = "validating"
    CACHE_HIT = "cache_hit"
    EXTRACTING = "extracting"
    FORMATTING = "formatting"
    DIAGNOSING = "diagnosing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# ── Config models ──


class ProcessorConfig(BaseModel):
    """Construction-time settings for a CSSProcessor.

    ``debounce_ms`` is informational: debouncing belongs to the caller
    (see ``LatestWins``). ``enable_syntax_highlighting`` is only read by
    the CLI when rendering output.
    """

    debounce_ms: int = Field(default=DEFAULT_DEBOUNCE_MS, ge=0)
    max_input_length: int = Field(default=DEFAULT_MAX_INPUT_LENGTH, gt=0)
    enable_syntax_highlighting: bool = DEFAULT_SYNTAX_HIGHLIGHTING
    cache_capacity: int = Field(default=DEFAULT_CACHE_CAPACITY, gt=0)


class StyleTable(BaseModel):
    """Class name → declared properties, in stylesheet order."""

    base: dict[str, str] = Field(default_factory=dict)
    styles: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("base", mode="before")
    @classmethod
    def _stringify_base(cls, value: Any) -> Any:
        # YAML reads bare numbers such as `opacity: 1` as int/float
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        return value

    @field_validator("styles", mode="before")
    @classmethod
    def _stringify_styles(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                str(name): (
                    {str(k): str(v) for k, v in decls.items()} if isinstance(decls, dict) else decls
                )
                for name, decls in value.items()
            }
        return value


# ── Runtime models ──


class ConversionRequest(BaseModel):
    text: str


class ConversionResult(BaseModel):
    """Outcome of one conversion.

    ``warnings`` is ``None`` when diagnostics were not run (blank input,
    failures) and ``[]`` when they ran and found nothing.
    """

    css: str = ""
    error: str | None = None
    error_kind: ErrorKind | None = None
    warnings: list[str] | None = None
