"""Headless-browser style resolver driven by Playwright."""

from __future__ import annotations

import asyncio
import html
import logging
from pathlib import Path

from playwright.async_api import (
    Browser,
    ElementHandle,
    Page,
    Playwright,
    async_playwright,
)
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from tw2css.config.defaults import DEFAULT_BROWSER, DEFAULT_LAUNCH_TIMEOUT_MS
from tw2css.errors.exceptions import (
    ContextConstructionError,
    ContextSecurityError,
    ResolverError,
    StyleComputationError,
)
from tw2css.pipeline.properties import RELEVANT_PROPERTIES
from tw2css.resolvers.base import ComputedStyle, StyleResolver, StylingContext

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

_HOST_ID = "tw2css-host"

# The host is off-screen, hidden and inert; the styled element inside it
# stays an ordinary block-level <div> with no inline styles of its own.
_CREATE_ELEMENT_JS = """
(args) => {
    let host = document.getElementById(args.hostId);
    if (!host) {
        host = document.createElement('div');
        host.id = args.hostId;
        host.style.position = 'absolute';
        host.style.visibility = 'hidden';
        host.style.pointerEvents = 'none';
        host.style.top = '-9999px';
        host.style.left = '-9999px';
        document.body.appendChild(host);
    }
    const el = document.createElement('div');
    el.className = args.classes;
    host.appendChild(el);
    return el;
}
"""

_COMPUTE_STYLE_JS = """
(el, props) => {
    const computed = window.getComputedStyle(el);
    const result = {};
    for (let i = 0; i < computed.length; i++) {
        const name = computed[i];
        result[name] = computed.getPropertyValue(name);
    }
    props.forEach(p => { result[p] = computed.getPropertyValue(p); });
    return result;
}
"""

_REMOVE_ELEMENT_JS = "(el) => { if (el.parentNode) { el.parentNode.removeChild(el); } }"


class BrowserStyleResolver(StyleResolver):
    """Resolves classes against a real rendering engine.

    One browser and page are launched lazily and reused; each context is a
    fresh element inside a hidden host. ``stylesheet`` is CSS text (for
    example a compiled Tailwind build) and ``stylesheet_url`` is linked
    into the page head.
    """

    name = "browser"

    def __init__(
        self,
        stylesheet: str | None = None,
        stylesheet_url: str | None = None,
        browser: str = DEFAULT_BROWSER,
        headless: bool = True,
        launch_timeout_ms: int = DEFAULT_LAUNCH_TIMEOUT_MS,
    ) -> None:
        if browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{browser}'. Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        self._stylesheet = stylesheet or ""
        self._stylesheet_url = stylesheet_url
        self._browser_name = browser
        self._headless = headless
        self._launch_timeout_ms = launch_timeout_ms
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._page: Page | None = None
        self._start_lock = asyncio.Lock()

    @classmethod
    def from_stylesheet_file(cls, path: str | Path, **kwargs: object) -> BrowserStyleResolver:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Stylesheet not found: {path}")
        return cls(stylesheet=path.read_text(encoding="utf-8"), **kwargs)  # type: ignore[arg-type]

    @property
    def started(self) -> bool:
        return self._page is not None

    async def create_context(self, class_string: str) -> StylingContext:
        page = await self._ensure_page()
        try:
            handle = await page.evaluate_handle(
                _CREATE_ELEMENT_JS, {"hostId": _HOST_ID, "classes": class_string}
            )
        except PlaywrightError as e:
            raise _wrap(e, ContextConstructionError, "Could not attach styling element") from e

        element = handle.as_element()
        if element is None:
            await handle.dispose()
            raise ContextConstructionError("DOM element creation returned a non-element handle")
        return StylingContext(class_string=class_string, handle=element)

    async def compute_styles(self, context: StylingContext) -> ComputedStyle:
        element: ElementHandle = context.handle
        try:
            values = await element.evaluate(_COMPUTE_STYLE_JS, list(RELEVANT_PROPERTIES))
        except PlaywrightError as e:
            raise _wrap(e, StyleComputationError, "getComputedStyle failed") from e
        return ComputedStyle({str(k): str(v) for k, v in values.items()})

    async def destroy_context(self, context: StylingContext) -> None:
        element: ElementHandle | None = context.handle
        if element is None:
            return
        try:
            await element.evaluate(_REMOVE_ELEMENT_JS)
        finally:
            await element.dispose()
            context.handle = None

    async def close(self) -> None:
        if self._browser is not None:
            try:
                await self._browser.close()
            except PlaywrightError as e:
                logger.warning("Browser did not close cleanly: %s", e)
        if self._playwright is not None:
            await self._playwright.stop()
        self._browser = None
        self._page = None
        self._playwright = None

    async def _ensure_page(self) -> Page:
        if self._page is not None:
            return self._page
        # Overlapping first conversions must share one browser
        async with self._start_lock:
            if self._page is not None:
                return self._page
            try:
                self._playwright = await async_playwright().start()
                self._browser = await self._launch(self._playwright)
                page = await self._browser.new_page()
                await page.set_content(self._document())
            except PlaywrightError as e:
                await self.close()
                raise _wrap(e, ContextConstructionError, "Could not start browser") from e
            logger.info("Launched %s for style resolution", self._browser_name)
            self._page = page
            return page

    @retry(
        retry=retry_if_exception_type(PlaywrightTimeoutError),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        stop=stop_after_attempt(3),
        reraise=True,
    )
    async def _launch(self, playwright: Playwright) -> Browser:
        launcher = getattr(playwright, self._browser_name)
        return await launcher.launch(headless=self._headless, timeout=self._launch_timeout_ms)

    def _document(self) -> str:
        head = ['<meta charset="utf-8">']
        if self._stylesheet_url:
            head.append(f'<link rel="stylesheet" href="{html.escape(self._stylesheet_url)}">')
        if self._stylesheet:
            head.append(f"<style>{self._stylesheet}</style>")
        return f"<!DOCTYPE html><html><head>{''.join(head)}</head><body></body></html>"


def _wrap(
    error: PlaywrightError,
    fallback: type[ResolverError],
    message: str,
) -> ResolverError:
    """Convert a Playwright error, preferring SecurityError when the page reports one."""
    text = str(error)
    if "SecurityError" in text:
        return ContextSecurityError(f"{message}: {text}", original=error)
    return fallback(f"{message}: {text}", original=error)
