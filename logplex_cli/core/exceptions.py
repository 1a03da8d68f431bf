"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error is fatal for the single command invocation; the CLI boundary
prints the message and exits non-zero.
"""


class LogplexError(Exception):
    """Base exception for all CLI errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(LogplexError):
    """Raised when required environment settings are missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class TransportError(LogplexError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")


class UnexpectedStatusError(LogplexError):
    """Raised when Logplex answers with a status other than the expected one."""

    def __init__(self, status_code: int, reason: str, expected: int) -> None:
        self.status_code = status_code
        self.expected = expected
        self.status = f"{status_code} {reason}".strip()
        super().__init__(
            f"Unsuccessful response ({self.status}) from logplex",
            code="API_UNEXPECTED_STATUS",
        )


class DecodeError(LogplexError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    def __init__(self, message: str = "Could not decode response") -> None:
        super().__init__(message, code="API_DECODE_ERROR")
