"""Check runner coordinating test execution for a whole suite."""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from resource_harness.checks import build_body
from resource_harness.exceptions import ConfigurationError
from resource_harness.harness import resolve_backend, with_resource
from resource_harness.models.config import HarnessConfig, ResourceKind
from resource_harness.models.definition import Check, CheckSuite
from resource_harness.models.result import TestOutcome

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CheckRunner:
    """Runs every check of a suite, each against its own resource."""

    configs: Mapping[ResourceKind, HarnessConfig]

    async def run_checks(self, suite: CheckSuite) -> Sequence[TestOutcome]:
        """Run all checks of the suite concurrently.

        Configuration for every kind the suite uses is validated before any
        check starts.

        Args:
            suite: Check suite to run

        Returns:
            One outcome per check, in suite order

        Raises:
            ConfigurationError: If a kind has no or an invalid configuration

        """
        if not suite.checks:
            log.info("No checks provided")
            return []

        for kind in suite.resource_kinds():
            if kind not in self.configs:
                raise ConfigurationError(f"No configuration for {kind} resources")
            resolve_backend(kind, self.configs[kind])

        log.info("Running %d check(s)...", len(suite.checks))
        tasks = [self._run_check(check) for check in suite.checks]

        results = await asyncio.gather(*tasks, return_exceptions=True)
        log.info("Check execution completed")

        return self._process_results(suite.checks, results)

    def _process_results(
        self,
        checks: Sequence[Check],
        results: Sequence[TestOutcome | BaseException],
    ) -> Sequence[TestOutcome]:
        """Process results from check execution, handling exceptions."""
        final_results: list[TestOutcome] = []

        for check, result in zip(checks, results, strict=True):
            if isinstance(result, TestOutcome):
                final_results.append(result)
            elif isinstance(result, Exception):
                log.error("Check %s crashed: %s", check.name, result, exc_info=result)
                final_results.append(
                    TestOutcome(
                        name=check.name,
                        status="failed",
                        duration=0.0,
                        message=str(result),
                        error=result,
                    )
                )
            else:
                raise result

        return final_results

    async def _run_check(self, check: Check) -> TestOutcome:
        """Run one check against a freshly acquired resource."""
        log.info("Running check %s (%s)", check.name, check.type)
        return await with_resource(
            check.resource_kind,
            self.configs[check.resource_kind],
            build_body(check),
            name=check.name,
        )
