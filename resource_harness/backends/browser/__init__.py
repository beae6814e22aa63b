"""Browser backend module."""

from resource_harness.backends.browser.backend import BrowserSession, PlaywrightBackend
from resource_harness.backends.browser.config import BrowserConfig
from resource_harness.backends.browser.manifest import browser_manifest

__all__ = ["BrowserConfig", "BrowserSession", "PlaywrightBackend", "browser_manifest"]
