"""
Custom exceptions for the ff-clog package.
"""


class ClogError(Exception):
    """Base exception for all registry and backend errors."""

    pass


class LoggerNotFoundError(ClogError):
    """Raised when a registry operation names an unknown logger."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"not found logger: {name}")


class DuplicateLoggerError(ClogError):
    """Raised when a logger name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"duplicate logger: {name}")


class InvalidConfigError(ClogError):
    """Raised when a backend is initialized without a usable config."""

    pass


class HostResolutionError(ClogError):
    """Raised when a backend cannot resolve the local host name during init."""

    pass


class ReopenError(ClogError):
    """
    Raised by ``ReopenResult.raise_for_failures`` when one or more
    backends failed to reopen.
    """

    def __init__(self, failures: list):
        self.failures = list(failures)
        names = ", ".join(name for name, _ in self.failures)
        super().__init__(f"reopen failed for: {names}")
