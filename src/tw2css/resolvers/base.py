"""Style-computation collaborator interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class ComputedStyle(Mapping[str, str]):
    """Resolved style values for one styling context, looked up by name.

    Unknown properties resolve to the empty string, like
    ``CSSStyleDeclaration.getPropertyValue``.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get_property_value(self, name: str) -> str:
        return self._values.get(name, "")

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ComputedStyle({self._values!r})"


@dataclass
class StylingContext:
    """An ephemeral, invisible element carrying a class string."""

    class_string: str
    handle: Any = None


class StyleResolver(ABC):
    """Resolves a class string to computed style values.

    Implementations must be deterministic for a given class string and
    environment. The extractor owns the context lifecycle: every context
    returned by ``create_context`` is passed to ``destroy_context``.
    """

    name: str = "base"

    @abstractmethod
    async def create_context(self, class_string: str) -> StylingContext:
        """Build and attach a hidden element carrying ``class_string``."""

    @abstractmethod
    async def compute_styles(self, context: StylingContext) -> ComputedStyle:
        """Return every resolved property for the context's element."""

    @abstractmethod
    async def destroy_context(self, context: StylingContext) -> None:
        """Detach and release the element."""

    async def close(self) -> None:
        """Release long-lived resources; default is a no-op."""
        logger.debug("Closing resolver %s", self.name)
