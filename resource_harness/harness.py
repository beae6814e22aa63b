"""Scoped acquisition, execution and release of external test resources."""

import asyncio
import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import Any

from pydantic import ValidationError

from resource_harness.backends.base import ResourceBackend
from resource_harness.backends.loading import (
    BackendNotFoundError,
    load_backend_manifest,
)
from resource_harness.exceptions import (
    AcquisitionFailure,
    AcquisitionTimeout,
    ConfigurationError,
    HarnessError,
    ReleaseFailure,
    TestFailure,
    TestTimeout,
)
from resource_harness.handle import ResourceHandle
from resource_harness.models.config import HarnessConfig, ResourceKind
from resource_harness.models.result import TestOutcome

log = logging.getLogger(__name__)

type Body = Callable[[ResourceHandle[Any]], Awaitable[TestOutcome | None]]


def resolve_backend(kind: ResourceKind, config: HarnessConfig) -> ResourceBackend[Any]:
    """Validate the configuration for a resource kind and build its backend.

    Args:
        kind: Resource kind requested by the caller
        config: Harness configuration

    Returns:
        Backend ready to open resources

    Raises:
        ConfigurationError: If the kind does not match the configuration, no
            backend is registered for it, or the connection params are invalid

    """
    if kind != config.resource_kind:
        raise ConfigurationError(
            f"Requested a {kind} resource with a {config.resource_kind} config"
        )

    try:
        manifest = load_backend_manifest(kind)
    except BackendNotFoundError as exc:
        raise ConfigurationError(str(exc)) from exc

    try:
        backend_config = manifest.config_cls.model_validate(
            dict(config.connection_params)
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])} ({error['msg']})"
            for error in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid {kind} connection params: {problems}"
        ) from exc

    return manifest.backend_factory(backend_config)


async def with_resource(
    kind: ResourceKind,
    config: HarnessConfig,
    body: Body,
    *,
    name: str | None = None,
) -> TestOutcome:
    """Acquire a resource, run a test body against it and release it.

    One deadline of ``config.timeout_ms`` covers acquisition and the body.
    The resource is released exactly once on every path, before this
    coroutine returns or propagates a cancellation. Release failures are
    logged and never change the outcome.

    Args:
        kind: Resource kind to acquire
        config: Harness configuration for that kind
        body: Coroutine function receiving the live handle. Returning None
            means the test passed; returning a TestOutcome reports it as is.
        name: Test case name (default: the body's function name)

    Returns:
        Exactly one outcome for the test case

    Raises:
        ConfigurationError: Before anything is acquired, if config is invalid

    """
    name = name or getattr(body, "__name__", kind)
    backend = resolve_backend(kind, config)

    loop = asyncio.get_running_loop()
    started = loop.time()
    deadline = asyncio.timeout(config.timeout)
    handle: ResourceHandle[Any] | None = None

    try:
        try:
            async with deadline:
                handle = await _open_handle(kind, backend, config)
                returned = await body(handle)
        except Exception as exc:
            error = _to_harness_error(
                exc,
                name=name,
                kind=kind,
                timeout=config.timeout,
                acquired=handle is not None,
                expired=deadline.expired(),
            )
            outcome = TestOutcome(
                name=name,
                status=(
                    "timed_out"
                    if isinstance(error, AcquisitionTimeout | TestTimeout)
                    else "failed"
                ),
                duration=loop.time() - started,
                message=str(error),
                error=error,
            )
        else:
            duration = loop.time() - started
            if isinstance(returned, TestOutcome):
                outcome = replace(returned, name=name, duration=duration)
            else:
                outcome = TestOutcome(name=name, status="passed", duration=duration)
    finally:
        if handle is not None:
            await _release(handle)

    log.info(
        "Test completed: name=%s kind=%s status=%s duration=%.2fs",
        outcome.name,
        kind,
        outcome.status,
        outcome.duration,
    )
    if outcome.message:
        log.info("  Message: %s", outcome.message)
    return outcome


@asynccontextmanager
async def acquire(
    kind: ResourceKind, config: HarnessConfig
) -> AsyncGenerator[ResourceHandle[Any], None]:
    """Hold one resource for a group of test cases.

    Acquisition is bounded by ``config.timeout_ms``; the resource is released
    when the block exits, whatever the reason.

    Raises:
        ConfigurationError: If config is invalid
        AcquisitionTimeout: If the resource is not ready in time
        AcquisitionFailure: If the backend refuses to open the resource

    """
    backend = resolve_backend(kind, config)
    deadline = asyncio.timeout(config.timeout)

    try:
        async with deadline:
            handle = await _open_handle(kind, backend, config)
    except Exception as exc:
        if deadline.expired():
            raise AcquisitionTimeout(kind, config.timeout) from exc
        raise AcquisitionFailure(kind, exc) from exc

    try:
        yield handle
    finally:
        await _release(handle)


async def _open_handle(
    kind: ResourceKind, backend: ResourceBackend[Any], config: HarnessConfig
) -> ResourceHandle[Any]:
    log.info("Acquiring %s resource (timeout=%.2fs)", kind, config.timeout)
    resource = await backend.open()
    handle = ResourceHandle(
        kind, backend, resource, release_timeout=config.release_timeout
    )
    log.info("Acquired %s resource", kind)
    return handle


async def _release(handle: ResourceHandle[Any]) -> None:
    try:
        await handle.release()
    except ReleaseFailure:
        log.warning("Release of %s resource failed", handle.kind, exc_info=True)


def _to_harness_error(
    exc: Exception,
    *,
    name: str,
    kind: ResourceKind,
    timeout: float,
    acquired: bool,
    expired: bool,
) -> HarnessError:
    """Map an exception to the error taxonomy based on where it happened."""
    error: HarnessError
    if expired:
        if acquired:
            error = TestTimeout(name, timeout)
        else:
            error = AcquisitionTimeout(kind, timeout)
    elif acquired:
        error = TestFailure(name, exc)
    else:
        error = AcquisitionFailure(kind, exc)
    error.__cause__ = exc
    return error
