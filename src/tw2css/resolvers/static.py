"""Table-driven style resolver: deterministic, no browser required."""

from __future__ import annotations

import logging
from pathlib import Path

from tw2css.config.loader import load_builtin_style_table, load_style_table
from tw2css.errors.exceptions import ContextConstructionError, StyleComputationError
from tw2css.resolvers.base import ComputedStyle, StyleResolver, StylingContext
from tw2css.types import StyleTable

logger = logging.getLogger(__name__)


class StaticStyleResolver(StyleResolver):
    """Resolves classes from a StyleTable.

    Matching classes are applied in table (stylesheet) order, not in the
    order they appear in the class string, on top of the table's ``base``
    style for an unstyled block element. Variant-prefixed tokens such as
    ``hover:bg-blue-600`` do not apply to an idle element and are ignored.
    """

    name = "static"

    def __init__(self, table: StyleTable | None = None) -> None:
        self._table = table if table is not None else load_builtin_style_table()
        self._live: set[int] = set()

    @classmethod
    def from_file(cls, path: str | Path) -> StaticStyleResolver:
        return cls(load_style_table(path))

    @property
    def table(self) -> StyleTable:
        return self._table

    @property
    def live_contexts(self) -> int:
        return len(self._live)

    async def create_context(self, class_string: str) -> StylingContext:
        context = StylingContext(class_string=class_string, handle=set(class_string.split()))
        self._live.add(id(context))
        return context

    async def compute_styles(self, context: StylingContext) -> ComputedStyle:
        if id(context) not in self._live:
            raise ContextConstructionError("Styling context is not attached")
        classes = context.handle
        if not isinstance(classes, set):
            raise StyleComputationError("Styling context carries no class set")

        values = dict(self._table.base)
        applied = 0
        for name, declarations in self._table.styles.items():
            if name in classes:
                values.update(declarations)
                applied += 1
        logger.debug("Applied %d of %d classes from table", applied, len(classes))
        return ComputedStyle(values)

    async def destroy_context(self, context: StylingContext) -> None:
        self._live.discard(id(context))
        context.handle = None
