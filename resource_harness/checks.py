"""Test bodies for the checks a suite can declare."""

import logging
from typing import Any

from resource_harness.backends.browser import BrowserSession
from resource_harness.handle import ResourceHandle
from resource_harness.harness import Body
from resource_harness.models.definition import Check, PageTitleCheck, QueryCheck

log = logging.getLogger(__name__)


def build_body(check: Check) -> Body:
    """Return the test body implementing a check."""
    match check:
        case PageTitleCheck():
            return _page_title_body(check)
        case QueryCheck():
            return _query_body(check)
    raise TypeError(f"Unsupported check type: {type(check).__name__}")


def _page_title_body(check: PageTitleCheck) -> Body:
    async def page_title(handle: ResourceHandle[BrowserSession]) -> None:
        await handle.backend.navigate(handle.resource, check.url)
        title = await handle.backend.get_title(handle.resource)
        log.debug("Page %s has title %r", check.url, title)
        if check.title_contains not in title:
            raise AssertionError(
                f"Expected title of {check.url} to contain "
                f"{check.title_contains!r}, got {title!r}"
            )

    return page_title


def _query_body(check: QueryCheck) -> Body:
    async def query(handle: ResourceHandle[Any]) -> None:
        rows = await handle.backend.execute(
            handle.resource, check.query, check.params or None
        )
        log.debug("Query returned %d row(s)", len(rows))
        if check.expected_rows is not None and len(rows) != check.expected_rows:
            raise AssertionError(
                f"Expected {check.expected_rows} row(s), got {len(rows)}"
            )

    return query
