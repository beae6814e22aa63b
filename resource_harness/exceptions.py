"""Error taxonomy for resource acquisition, test execution and release."""


class HarnessError(Exception):
    """Base class for all harness errors."""


class ConfigurationError(HarnessError):
    """Raised when settings are missing or invalid, before any resource is used."""


class AcquisitionFailure(HarnessError):
    """Raised when a backend rejects credentials or cannot be reached."""

    def __init__(self, kind: str, cause: BaseException) -> None:
        super().__init__(f"Failed to acquire {kind} resource: {cause}")
        self.kind = kind
        self.cause = cause


class AcquisitionTimeout(HarnessError):
    """Raised when a resource is not ready within the test deadline."""

    def __init__(self, kind: str, timeout: float) -> None:
        super().__init__(f"{kind} resource not acquired within {timeout:g} seconds")
        self.kind = kind
        self.timeout = timeout


class TestFailure(HarnessError):
    """Raised when a test body's assertions or backend calls fail."""

    __test__ = False

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"{name} failed: {cause}")
        self.name = name
        self.cause = cause


class TestTimeout(HarnessError):
    """Raised when a test body does not finish within the test deadline."""

    __test__ = False

    def __init__(self, name: str, timeout: float) -> None:
        super().__init__(f"{name} did not complete within {timeout:g} seconds")
        self.name = name
        self.timeout = timeout


class ResourceAlreadyReleased(HarnessError):
    """Raised when a handle is used after it has been released."""


class ReleaseFailure(HarnessError):
    """Raised when closing a resource fails or exceeds the grace timeout."""
