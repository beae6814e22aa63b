"""Models for check suites loaded from JSON files."""

from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal

from pydantic import Field

from resource_harness.models.base import Model
from resource_harness.models.config import ResourceKind


class PageTitleCheck(Model):
    """Navigate to a page and check that its title contains a substring."""

    type: Literal["page-title"] = "page-title"
    name: str = Field(..., description="Human-readable check name")
    url: str = Field(..., description="Page to open")
    title_contains: str = Field(..., description="Expected title substring")

    @property
    def resource_kind(self) -> ResourceKind:
        """Resource kind the check runs against."""
        return "browser"


class QueryCheck(Model):
    """Run a parameterized query and optionally check the row count."""

    type: Literal["query"] = "query"
    name: str = Field(..., description="Human-readable check name")
    query: str = Field(..., description="SQL to execute")
    params: Sequence[Any] | Mapping[str, Any] = Field(
        default_factory=list, description="Query parameters"
    )
    expected_rows: int | None = Field(
        default=None, ge=0, description="Expected number of rows (None: any)"
    )

    @property
    def resource_kind(self) -> ResourceKind:
        """Resource kind the check runs against."""
        return "database"


Check = Annotated[PageTitleCheck | QueryCheck, Field(discriminator="type")]


class CheckSuite(Model):
    """Complete check suite loaded from a checks file."""

    version: str = Field(..., description="Check suite schema version")
    checks: Sequence[Check] = Field(default_factory=list, description="Checks")

    def resource_kinds(self) -> Sequence[ResourceKind]:
        """Resource kinds used by the suite, in first-use order."""
        kinds: list[ResourceKind] = []
        for check in self.checks:
            if check.resource_kind not in kinds:
                kinds.append(check.resource_kind)
        return kinds
