"""Style resolvers: collaborators that turn class strings into computed styles."""

from tw2css.resolvers.base import ComputedStyle, StyleResolver, StylingContext
from tw2css.resolvers.browser import BrowserStyleResolver
from tw2css.resolvers.static import StaticStyleResolver

__all__ = [
    "BrowserStyleResolver",
    "ComputedStyle",
    "StaticStyleResolver",
    "StyleResolver",
    "StylingContext",
]
