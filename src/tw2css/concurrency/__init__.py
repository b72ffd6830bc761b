"""Concurrency: latest-wins dispatch for overlapping conversions."""

from tw2css.concurrency.latest import ConversionToken, LatestWins

__all__ = ["ConversionToken", "LatestWins"]
