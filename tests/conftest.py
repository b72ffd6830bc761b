import pytest

from tw2css.core import CSSProcessor
from tw2css.resolvers.base import ComputedStyle, StyleResolver, StylingContext


class FakeResolver(StyleResolver):
    """In-memory resolver that records every lifecycle call."""

    name = "fake"

    def __init__(self, styles: dict[str, str] | None = None) -> None:
        self.styles = dict(styles or {})
        self.created: list[str] = []
        self.computed = 0
        self.destroyed = 0
        self.closed = False
        self.create_error: BaseException | None = None
        self.compute_error: BaseException | None = None

    async def create_context(self, class_string: str) -> StylingContext:
        if self.create_error is not None:
            raise self.create_error
        self.created.append(class_string)
        return StylingContext(class_string=class_string)

    async def compute_styles(self, context: StylingContext) -> ComputedStyle:
        self.computed += 1
        if self.compute_error is not None:
            raise self.compute_error
        return ComputedStyle(self.styles)

    async def destroy_context(self, context: StylingContext) -> None:
        self.destroyed += 1

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_resolver():
    """Factory for FakeResolver instances with the given computed styles."""
    return FakeResolver


@pytest.fixture
def fake_resolver():
    return FakeResolver()


@pytest.fixture
def processor(fake_resolver):
    return CSSProcessor(fake_resolver)


@pytest.fixture
def sample_style_table(tmp_path):
    """Write a minimal style-table YAML and return its path."""
    content = """
base:
  display: block
  margin: 0px
  opacity: 1
styles:
  p-4:
    padding: 16px
  text-white:
    color: "rgb(255, 255, 255)"
  bg-blue-500:
    background-color: "rgb(59, 130, 246)"
  block:
    display: block
  flex:
    display: flex
"""
    path = tmp_path / "styles.yaml"
    path.write_text(content)
    return path
