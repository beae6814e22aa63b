"""Configuration for the browser backend."""

from typing import Literal

from pydantic import BaseModel


class BrowserConfig(BaseModel):
    """Configuration for the browser backend."""

    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
