"""CLI entry point for the resource test harness."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from resource_harness.definition_loader import load_check_suite
from resource_harness.exceptions import ConfigurationError
from resource_harness.models.config import HarnessConfig, ResourceKind
from resource_harness.models.result import TestOutcome
from resource_harness.runner import CheckRunner
from resource_harness.settings import build_config, load_settings

STATUS_SYMBOLS = {
    "passed": "✅",
    "failed": "❌",
    "timed_out": "⏱️",
}

EXIT_CONFIGURATION_ERROR = 2


def log_results_summary(log: logging.Logger, outcomes: Sequence[TestOutcome]) -> None:
    """Log a formatted summary of check outcomes."""
    log.info("=" * 80)
    log.info("Check Results Summary:")
    log.info("=" * 80)

    for outcome in outcomes:
        symbol = STATUS_SYMBOLS.get(outcome.status, "?")
        log.info(
            "%s %s: %s (%.2fs)",
            symbol,
            outcome.name,
            outcome.status,
            outcome.duration,
        )
        if outcome.message:
            log.info("  Message: %s", outcome.message)


async def run(
    checks_path: Path,
    env_file: Path | None = None,
    timeout_ms: int | None = None,
) -> int:
    """Run a check suite and return exit code."""
    log = logging.getLogger("resource_harness")

    try:
        settings = load_settings(env_file)

        log.info("Loading checks from %s", checks_path)
        suite = await load_check_suite(checks_path)

        configs: Mapping[ResourceKind, HarnessConfig] = {
            kind: build_config(kind, settings, timeout_ms=timeout_ms)
            for kind in suite.resource_kinds()
        }
        outcomes = await CheckRunner(configs=configs).run_checks(suite)
    except ConfigurationError as exc:
        log.error("Configuration error: %s", exc)
        return EXIT_CONFIGURATION_ERROR

    log_results_summary(log, outcomes)

    output = format_output(outcomes)
    print(json.dumps(output, indent=2))

    return 0 if all(outcome.passed for outcome in outcomes) else 1


def format_output(outcomes: Sequence[TestOutcome]) -> dict[str, Any]:
    """Format check outcomes for JSON output."""
    all_results = [
        {
            "name": outcome.name,
            "status": outcome.status,
            "duration": outcome.duration,
            "message": outcome.message,
            "error": type(outcome.error).__name__ if outcome.error else None,
        }
        for outcome in outcomes
    ]

    return {
        "total": len(all_results),
        "passed": sum(1 for r in all_results if r["status"] == "passed"),
        "failed": sum(1 for r in all_results if r["status"] == "failed"),
        "timed_out": sum(1 for r in all_results if r["status"] == "timed_out"),
        "results": all_results,
    }


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run checks against browser and database resources"
    )
    parser.add_argument(
        "--checks",
        type=Path,
        required=True,
        help="Path to the check suite JSON file",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file (default: nearest .env from the working dir)",
    )
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Per-check deadline in milliseconds (overrides HARNESS_TIMEOUT_MS)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            checks_path=args.checks,
            env_file=args.env_file,
            timeout_ms=args.timeout_ms,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
