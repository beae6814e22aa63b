"""Browser backend implementation on the Playwright async API."""

import logging
from dataclasses import dataclass, field

from playwright.async_api import Browser, Page, Playwright, async_playwright

from resource_harness.backends.base import ResourceBackend
from resource_harness.backends.browser.config import BrowserConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class BrowserSession:
    """A running Playwright driver with one browser and one open page."""

    playwright: Playwright = field(repr=False)
    browser: Browser = field(repr=False)
    page: Page = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class PlaywrightBackend(ResourceBackend[BrowserSession]):
    """Browser backend launching a fresh browser per session."""

    config: BrowserConfig

    @classmethod
    def from_config(cls, config: BrowserConfig) -> "PlaywrightBackend":
        """Create backend from its configuration."""
        return cls(config=config)

    async def open(self) -> BrowserSession:
        """Start the driver, launch the browser and open a blank page."""
        playwright = await async_playwright().start()
        browser: Browser | None = None
        try:
            browser_type = getattr(playwright, self.config.browser)
            log.info(
                "Launching browser: browser=%s, headless=%s",
                self.config.browser,
                self.config.headless,
            )
            browser = await browser_type.launch(headless=self.config.headless)
            page = await browser.new_page()
        except BaseException:
            # Also reached on cancellation, so nothing outlives a timed out open.
            try:
                if browser is not None:
                    await browser.close()
            finally:
                await playwright.stop()
            raise

        return BrowserSession(playwright=playwright, browser=browser, page=page)

    async def navigate(self, session: BrowserSession, url: str) -> None:
        """Navigate the session's page to url and wait for it to load."""
        log.debug("Navigating to: %s", url)
        await session.page.goto(url)

    async def get_title(self, session: BrowserSession) -> str:
        """Return the title of the session's current page."""
        return await session.page.title()

    async def close(self, session: BrowserSession) -> None:
        """Close the browser and stop the driver."""
        try:
            await session.browser.close()
        finally:
            await session.playwright.stop()
