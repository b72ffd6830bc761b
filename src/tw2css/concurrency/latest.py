"""Latest-wins dispatch: generation tokens for superseding stale conversions."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tw2css.core import CSSProcessor
    from tw2css.types import ConversionResult

logger = logging.getLogger(__name__)


class ConversionToken:
    """Marks one conversion; stale once a newer token has been issued."""

    def __init__(self, generation: int, source: LatestWins) -> None:
        self._generation = generation
        self._source = source

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_current(self) -> bool:
        return self._source.generation == self._generation

    def __repr__(self) -> str:
        return f"ConversionToken(generation={self._generation}, current={self.is_current})"


class LatestWins:
    """Caller-side dispatcher: only the most recent submission commits.

    Every ``submit`` issues a new token, which makes all earlier in-flight
    conversions stale; those resolve to ``None`` instead of a result.
    An optional debounce delays the conversion and abandons it if a newer
    submission arrives during the wait.
    """

    def __init__(self, processor: CSSProcessor, debounce_ms: int = 0) -> None:
        self._processor = processor
        self._debounce_s = max(debounce_ms, 0) / 1000
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def issue(self) -> ConversionToken:
        self._generation += 1
        return ConversionToken(self._generation, self)

    def cancel(self) -> None:
        """Invalidate every outstanding token."""
        self._generation += 1

    async def submit(self, text: str) -> ConversionResult | None:
        token = self.issue()
        if self._debounce_s:
            await asyncio.sleep(self._debounce_s)
            if not token.is_current:
                logger.debug("Dropped debounced input (generation %d)", token.generation)
                return None
        return await self._processor.convert(text, token=token)
