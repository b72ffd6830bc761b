"""Top-level entry points: CSSProcessor, build_resolver(), convert()."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from tw2css.cache.memory import LRUCache
from tw2css.cache.stats import CacheStatus
from tw2css.errors.classify import classify_error
from tw2css.errors.exceptions import InputRejectedError
from tw2css.pipeline.diagnostics import generate_warnings
from tw2css.pipeline.extractor import StyleExtractor
from tw2css.pipeline.formatter import format_css
from tw2css.pipeline.guard import cache_key, check_input, is_blank, sanitize
from tw2css.resolvers.base import StyleResolver
from tw2css.types import ConversionResult, ConversionState, ProcessorConfig

if TYPE_CHECKING:
    from tw2css.concurrency.latest import ConversionToken

logger = logging.getLogger(__name__)


class CSSProcessor:
    """Converts utility class strings to CSS, with validation and caching.

    Owns its cache; nothing is shared between processors. Conversions are
    meant to be awaited one logical sequence at a time.
    """

    def __init__(
        self,
        resolver: StyleResolver,
        config: ProcessorConfig | None = None,
    ) -> None:
        self._config = config or ProcessorConfig()
        self._extractor = StyleExtractor(resolver)
        self._cache: LRUCache[str, ConversionResult] = LRUCache(self._config.cache_capacity)
        self._state = ConversionState.IDLE
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> ProcessorConfig:
        return self._config

    @property
    def resolver(self) -> StyleResolver:
        return self._extractor.resolver

    @property
    def state(self) -> ConversionState:
        return self._state

    async def convert(
        self,
        text: str,
        token: ConversionToken | None = None,
    ) -> ConversionResult | None:
        """Convert a class string to CSS.

        Never raises for conversion failures; they come back as results
        with ``error`` set. Returns ``None`` only when ``token`` has been
        superseded by the time the result would be committed.
        """
        self._transition(ConversionState.VALIDATING)

        if is_blank(text):
            self._transition(ConversionState.SUCCEEDED)
            return self._commit(ConversionResult(css=""), token)

        try:
            check_input(text, self._config.max_input_length)
        except InputRejectedError as e:
            return self._commit(self._failure(e), token)

        key = cache_key(text)
        cached = self._cache.get(key)
        if cached is not None:
            self._hits += 1
            self._transition(ConversionState.CACHE_HIT)
            logger.debug("Cache hit for %r", key)
            self._transition(ConversionState.SUCCEEDED)
            return self._commit(cached.model_copy(deep=True), token)
        self._misses += 1

        sanitized = sanitize(text)
        try:
            self._transition(ConversionState.EXTRACTING)
            styles = await self._extractor.extract(sanitized)
            self._transition(ConversionState.FORMATTING)
            css = format_css(styles)
        except Exception as e:
            logger.warning("Conversion of %r failed: %s", sanitized, e)
            return self._commit(self._failure(e), token)

        self._transition(ConversionState.DIAGNOSING)
        result = ConversionResult(css=css, warnings=generate_warnings(sanitized, css))
        self._transition(ConversionState.SUCCEEDED)
        return self._commit(result, token, key=key)

    def reset_cache(self) -> None:
        """Drop every cached conversion."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0
        logger.debug("Conversion cache cleared")

    def cache_status(self) -> CacheStatus:
        return CacheStatus(
            size=self._cache.size(),
            capacity=self._cache.capacity,
            hits=self._hits,
            misses=self._misses,
        )

    async def close(self) -> None:
        await self._extractor.resolver.close()

    async def __aenter__(self) -> CSSProcessor:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _failure(self, error: BaseException) -> ConversionResult:
        kind, message = classify_error(error)
        self._transition(ConversionState.FAILED)
        return ConversionResult(css="", error=message, error_kind=kind)

    def _commit(
        self,
        result: ConversionResult,
        token: ConversionToken | None,
        key: str | None = None,
    ) -> ConversionResult | None:
        if token is not None and not token.is_current:
            logger.debug("Discarding superseded conversion (generation %d)", token.generation)
            return None
        if key is not None and result.error is None:
            self._cache.set(key, result.model_copy(deep=True))
        return result

    def _transition(self, state: ConversionState) -> None:
        logger.debug("%s -> %s", self._state.value, state.value)
        self._state = state


def build_resolver(config: dict[str, Any]) -> StyleResolver:
    """Pick a resolver from merged configuration.

    ``resolver: auto`` uses the browser when a stylesheet is configured and
    the static table (``styles_file`` or the built-in one) otherwise.
    """
    from tw2css.resolvers.browser import BrowserStyleResolver
    from tw2css.resolvers.static import StaticStyleResolver

    choice = config.get("resolver") or "auto"
    stylesheet = config.get("stylesheet")
    if choice == "auto":
        choice = "browser" if stylesheet else "static"

    if choice == "static":
        styles_file = config.get("styles_file")
        if styles_file:
            return StaticStyleResolver.from_file(styles_file)
        return StaticStyleResolver()

    if choice == "browser":
        kwargs: dict[str, Any] = {
            "browser": config.get("browser", "chromium"),
            "launch_timeout_ms": config.get("launch_timeout_ms", 30_000),
        }
        if stylesheet:
            return BrowserStyleResolver.from_stylesheet_file(stylesheet, **kwargs)
        return BrowserStyleResolver(**kwargs)

    raise ValueError(f"Unknown resolver '{choice}'. Choose one of: auto, static, browser")


def build_processor_config(config: dict[str, Any]) -> ProcessorConfig:
    fields = ProcessorConfig.model_fields
    return ProcessorConfig(**{k: v for k, v in config.items() if k in fields and v is not None})


# ── Module-level convenience functions ──


def convert(
    text: str,
    resolver: StyleResolver | None = None,
    config: ProcessorConfig | None = None,
) -> ConversionResult:
    """Convert a class string to CSS (sync wrapper).

    Uses the built-in static style table when no resolver is given.
    """
    if resolver is None:
        from tw2css.resolvers.static import StaticStyleResolver

        resolver = StaticStyleResolver()

    async def _run() -> ConversionResult:
        async with CSSProcessor(resolver, config=config) as processor:
            result = await processor.convert(text)
        if result is None:
            raise RuntimeError("Conversion produced no result")
        return result

    return asyncio.run(_run())
