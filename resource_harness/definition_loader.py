"""Load check suites from JSON files."""

import asyncio
from pathlib import Path

from pydantic import ValidationError

from resource_harness.exceptions import ConfigurationError
from resource_harness.models.definition import CheckSuite


async def load_check_suite(path: Path) -> CheckSuite:
    """Load and validate a check suite file.

    Args:
        path: Path to the checks JSON file

    Returns:
        Validated check suite

    Raises:
        ConfigurationError: If the file cannot be read or is not a valid
            check suite

    """
    try:
        content = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read check suite {path}: {exc}") from exc

    try:
        return CheckSuite.model_validate_json(content)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid check suite {path}: {exc}") from exc
