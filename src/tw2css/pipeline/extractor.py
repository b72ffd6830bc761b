"""Style extraction: one ephemeral styling context per call."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from tw2css.resolvers.base import ComputedStyle, StyleResolver, StylingContext

logger = logging.getLogger(__name__)


class StyleExtractor:
    """Applies a class string to a hidden element and reads its computed style."""

    def __init__(self, resolver: StyleResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> StyleResolver:
        return self._resolver

    @asynccontextmanager
    async def styling_context(self, class_string: str) -> AsyncIterator[StylingContext]:
        """Yield a live context; it is destroyed on every exit path."""
        context = await self._resolver.create_context(class_string)
        try:
            yield context
        finally:
            try:
                await self._resolver.destroy_context(context)
            except Exception as e:
                logger.warning("Failed to tear down styling context: %s", e)

    async def extract(self, class_string: str) -> ComputedStyle:
        async with self.styling_context(class_string) as context:
            styles = await self._resolver.compute_styles(context)
        logger.debug("Resolved %d properties for %r", len(styles), class_string)
        return styles
