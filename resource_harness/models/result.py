"""Models for test execution outcomes."""

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class TestOutcome:
    """Result of a single test case run against an external resource.

    ``error`` holds the harness error that decided the outcome, with the
    original exception reachable through its ``cause`` attribute.
    """

    __test__ = False

    name: str
    status: Literal["passed", "failed", "timed_out"]
    duration: float
    message: str | None = None
    error: BaseException | None = field(default=None, compare=False)

    @property
    def passed(self) -> bool:
        """Whether the test case passed."""
        return self.status == "passed"
