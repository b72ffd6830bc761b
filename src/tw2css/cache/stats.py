"""Cache status and statistics models."""

from __future__ import annotations

from pydantic import BaseModel


class CacheStatus(BaseModel):
    """Point-in-time view of the conversion cache."""

    size: int = 0
    capacity: int = 0
    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0
