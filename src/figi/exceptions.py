"""figi exceptions."""


class FigiError(Exception):
    """Base exception for figi."""


# ---------------------------------------------------------------------------
# Validation (raised before any I/O)
# ---------------------------------------------------------------------------

class RequestValidationError(FigiError):
    """Raised when a mapping request is rejected client-side."""


class NilRequestError(RequestValidationError):
    """Raised when a request slot holds None."""

    def __init__(self, message: str = "nil request"):
        super().__init__(message)


class MissingIDError(RequestValidationError):
    """Raised when idValue is empty."""

    def __init__(self, message: str = "missing ID"):
        super().__init__(message)


class MissingIDTypeError(RequestValidationError):
    """Raised when idType is unspecified or not a known identifier type."""

    def __init__(self, message: str = "missing ID type"):
        super().__init__(message)


class MissingSecurityType2Error(RequestValidationError):
    """Raised when BASE_TICKER / ID_EXCH_SYMBOL is used without securityType2."""

    def __init__(self, message: str = "missing securityType2"):
        super().__init__(message)


# ---------------------------------------------------------------------------
# Wire
# ---------------------------------------------------------------------------

class SerializationError(FigiError):
    """Raised when a request batch cannot be encoded as JSON."""


class TransportError(FigiError):
    """Raised when the HTTP exchange itself fails."""


class RequestBuildError(TransportError):
    """Raised when the HTTP request cannot be constructed."""


class RequestTimeoutError(TransportError):
    """Raised when the call exceeds its deadline."""


class BadStatusError(TransportError):
    """Raised on a non-2xx response. Carries the raw status and body."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"failed reading response {status_code}:\n{body}")


class DecodeError(FigiError):
    """Raised when a 2xx body is not a valid mapping envelope."""


# ---------------------------------------------------------------------------
# API-level
# ---------------------------------------------------------------------------

class MappingAPIError(FigiError):
    """Raised when the service reports an error for an item in the batch."""

    def __init__(self, message: str, index: int | None = None):
        self.message = message
        self.index = index
        super().__init__(message)


class MappingWarningError(MappingAPIError):
    """Raised when the service reports a warning for an item in the batch."""
