"""Tests for latest-wins dispatch."""

import asyncio

from tw2css.concurrency.latest import LatestWins
from tw2css.core import CSSProcessor
from tw2css.resolvers.base import ComputedStyle, StylingContext


class TestConversionToken:
    def test_new_token_supersedes_old(self, processor):
        dispatcher = LatestWins(processor)
        first = dispatcher.issue()
        assert first.is_current
        second = dispatcher.issue()
        assert not first.is_current
        assert second.is_current
        assert second.generation == first.generation + 1

    def test_cancel_invalidates_all(self, processor):
        dispatcher = LatestWins(processor)
        token = dispatcher.issue()
        dispatcher.cancel()
        assert not token.is_current

    def test_repr(self, processor):
        token = LatestWins(processor).issue()
        assert repr(token) == "ConversionToken(generation=1, current=True)"


class TestLatestWins:
    async def test_single_submission(self, make_resolver):
        processor = CSSProcessor(make_resolver({"padding": "16px"}))
        result = await LatestWins(processor).submit("p-4")
        assert result is not None
        assert "padding: 16px;" in result.css

    async def test_stale_conversion_is_discarded(self, make_resolver):
        resolver = make_resolver({"padding": "16px"})
        gate = asyncio.Event()
        original = resolver.compute_styles

        async def slow_compute(context: StylingContext) -> ComputedStyle:
            if context.class_string == "p-4":
                await gate.wait()
            return await original(context)

        resolver.compute_styles = slow_compute
        processor = CSSProcessor(resolver)
        dispatcher = LatestWins(processor)

        first = asyncio.create_task(dispatcher.submit("p-4"))
        await asyncio.sleep(0)
        second = await dispatcher.submit("m-2")
        gate.set()

        assert await first is None
        assert second is not None
        # Only the committed conversion is cached
        assert processor.cache_status().size == 1

    async def test_debounce_drops_superseded_input(self, make_resolver):
        resolver = make_resolver({"padding": "16px"})
        dispatcher = LatestWins(CSSProcessor(resolver), debounce_ms=20)

        first = asyncio.create_task(dispatcher.submit("p-1"))
        await asyncio.sleep(0)
        second = await dispatcher.submit("p-4")

        assert await first is None
        assert second is not None
        assert resolver.created == ["p-4"]

    async def test_superseded_cache_hit_returns_none(self, processor):
        dispatcher = LatestWins(processor)
        await dispatcher.submit("p-4")
        token = dispatcher.issue()
        dispatcher.issue()
        assert await processor.convert("p-4", token=token) is None
