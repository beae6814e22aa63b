"""Browser backend manifest."""

from resource_harness.backends.browser.backend import PlaywrightBackend
from resource_harness.backends.browser.config import BrowserConfig
from resource_harness.backends.manifest import BackendManifest

browser_manifest = BackendManifest(
    config_cls=BrowserConfig,
    backend_factory=PlaywrightBackend.from_config,
)
