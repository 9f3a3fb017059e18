from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator

from playwright.async_api import Error as PWError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PWTimeoutError
from playwright.async_api import async_playwright

# Async Playwright rendering of client-side pages (navigate, settle, wait for marker, capture)

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Heading above each team's shot map; visible only once the match data has loaded
SHOT_MAP_MARKER = "xpath=//h3[contains(@class, 'text-card-title') and contains(text(), 'xG Shot Map')]"

LAUNCH_ARGS = [
    "--no-first-run",
    "--no-default-browser-check",
    "--disable-gpu",
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-setuid-sandbox",
    "--disable-blink-features=AutomationControlled",
]

HIDE_WEBDRIVER_JS = "Object.defineProperty(navigator, 'webdriver', {get: () => undefined})"

# share of the overall budget kept free for title/content capture
CAPTURE_SLACK = 0.05


class RenderError(RuntimeError):
    """Base class for every rendering failure; fatal for the scrape."""


class NavigationError(RenderError):
    """The page could not be loaded (DNS, refused connection, browser launch, ...)."""


class MarkerNotVisibleError(RenderError):
    """The page loaded but the expected content marker never became visible."""


class EmptyPageError(RenderError):
    """The captured markup was empty."""


class RenderTimeoutError(RenderError):
    """The whole rendering sequence exceeded its time budget."""


@dataclass(frozen=True)
class RenderOptions:
    headless: bool = True
    executable_path: str | None = None
    debug: bool = False
    timeout_s: float = 60.0
    settle_s: float = 5.0
    user_agent: str = DEFAULT_USER_AGENT
    viewport: dict[str, int] = field(default_factory=lambda: {"width": 1920, "height": 1080})
    marker: str = SHOT_MAP_MARKER


@dataclass
class RenderResult:
    url: str
    html: str
    title: str = ""


@asynccontextmanager
async def browser_page(opts: RenderOptions) -> AsyncIterator[Page]:
    """Async context manager yielding a stealth-configured Page with standard teardown."""
    async with async_playwright() as p:
        launch_args: dict[str, Any] = {
            "headless": opts.headless,
            "args": list(LAUNCH_ARGS),
            "ignore_default_args": ["--enable-automation"],
        }
        if opts.executable_path:
            launch_args["executable_path"] = opts.executable_path
        browser = await p.chromium.launch(**launch_args)
        try:
            context = await browser.new_context(user_agent=opts.user_agent, viewport=opts.viewport)
            await context.add_init_script(HIDE_WEBDRIVER_JS)
            page = await context.new_page()
            try:
                yield page
            finally:
                with contextlib.suppress(PWError):
                    await context.close()
        finally:
            with contextlib.suppress(PWError):
                await browser.close()


class PageRenderer:
    """
    Renders one URL per call in a fresh browser session.

    The options are fixed at construction; nothing is shared between calls.

    Usage:
        renderer = PageRenderer(RenderOptions(headless=True))
        html = await renderer.render("https://xgstat.com/...")
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        if not self.options.headless:
            logger.info("Renderer running in VISIBLE mode - browser will be shown")

    def _trace(self, msg: str, *args: Any) -> None:
        if self.options.debug:
            logger.info(msg, *args)

    async def render(self, url: str) -> str:
        result = await self.render_result(url)
        return result.html

    async def render_result(self, url: str) -> RenderResult:
        """Navigate, settle, wait for the marker, settle again, capture.

        Raises a RenderError subclass on any failure; never retries.
        """
        try:
            return await asyncio.wait_for(self._render(url), timeout=self.options.timeout_s)
        except asyncio.TimeoutError as e:
            raise RenderTimeoutError(
                f"rendering {url} exceeded {self.options.timeout_s:g}s"
            ) from e

    def _remaining_ms(self, deadline: float, reserve_s: float) -> int:
        """Milliseconds left before ``deadline`` after holding back ``reserve_s``.

        Playwright's own timeouts get this budget so that they fire before the
        overall wait_for and surface as their specific RenderError.
        """
        loop = asyncio.get_running_loop()
        left = deadline - loop.time() - reserve_s - self.options.timeout_s * CAPTURE_SLACK
        return max(int(left * 1000), 1)

    async def _render(self, url: str) -> RenderResult:
        opts = self.options
        deadline = asyncio.get_running_loop().time() + opts.timeout_s
        timeout_ms = int(opts.timeout_s * 1000)
        settle_ms = int(opts.settle_s * 1000)

        self._trace("Starting render for: %s", url)
        try:
            async with browser_page(opts) as page:
                page.set_default_timeout(timeout_ms)
                if opts.debug:
                    page.on("console", lambda msg: logger.info("[console:%s] %s", msg.type, msg.text))

                try:
                    await page.goto(
                        url,
                        wait_until="domcontentloaded",
                        timeout=self._remaining_ms(deadline, 2 * opts.settle_s),
                    )
                except PWError as e:
                    raise NavigationError(f"failed to load {url}: {e}") from e
                self._trace("Navigated, settling for %sms", settle_ms)
                await page.wait_for_timeout(settle_ms)

                try:
                    await page.wait_for_selector(
                        opts.marker,
                        state="visible",
                        timeout=self._remaining_ms(deadline, opts.settle_s),
                    )
                except PWTimeoutError as e:
                    raise MarkerNotVisibleError(
                        f"content marker never became visible on {url}: {e}"
                    ) from e
                self._trace("Marker visible, settling for %sms", settle_ms)
                await page.wait_for_timeout(settle_ms)

                title = await page.title()
                html = await page.content()
                self._trace("Captured %d characters (title=%r)", len(html or ""), title)
        except RenderError:
            raise
        except PWError as e:
            # launch / context errors surface before or around navigation
            raise NavigationError(f"browser session failed for {url}: {e}") from e

        if not html:
            raise EmptyPageError(f"no data found on page {url}")
        return RenderResult(url=url, html=html, title=title or "")


__all__ = [
    "DEFAULT_USER_AGENT",
    "SHOT_MAP_MARKER",
    "RenderOptions",
    "RenderResult",
    "PageRenderer",
    "browser_page",
    "RenderError",
    "NavigationError",
    "MarkerNotVisibleError",
    "EmptyPageError",
    "RenderTimeoutError",
]
