"""
Error taxonomy for the request/response helpers.

Every helper failure is raised as one of the HyperError subclasses
defined here. The set is closed: each subclass carries exactly one
ErrorKind, and the HTTP mapping for every kind lives in
hyperactive.shared.errors.handlers.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag identifying which failure a HyperError represents."""

    MISSING_PARAMETER = "missing_parameter"
    INVALID_PARAMETER_FORMAT = "invalid_parameter_format"
    INVALID_PAYLOAD = "invalid_payload"
    SERIALIZATION_FAILURE = "serialization_failure"
    UPSTREAM_IO_FAILURE = "upstream_io_failure"


class HyperError(Exception):
    """Base error for all helper failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MissingParameterError(HyperError):
    """Raised when a required query parameter is absent."""

    kind = ErrorKind.MISSING_PARAMETER

    def __init__(self, name: str) -> None:
        super().__init__(f"Required argument '{name}' not found")
        self.name = name


class InvalidParameterFormatError(HyperError):
    """Raised when a query parameter cannot be converted to the target type."""

    kind = ErrorKind.INVALID_PARAMETER_FORMAT

    def __init__(self, name: str, raw_value: str, target_type: str) -> None:
        super().__init__(
            f"Could not convert value '{raw_value}' for key '{name}' "
            f"to {target_type} type"
        )
        self.name = name
        self.raw_value = raw_value
        self.target_type = target_type


class InvalidPayloadError(HyperError):
    """Raised when a request body cannot be decoded into the expected model."""

    kind = ErrorKind.INVALID_PAYLOAD

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Request body could not be decoded: {cause}")
        self.cause = cause


class SerializationFailureError(HyperError):
    """Raised when a value cannot be encoded as JSON."""

    kind = ErrorKind.SERIALIZATION_FAILURE

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"JSON serialization failed: {cause}")
        self.cause = cause


class UpstreamIoFailureError(HyperError):
    """Raised when a call to another service fails at the I/O level."""

    kind = ErrorKind.UPSTREAM_IO_FAILURE

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Upstream I/O failed: {cause}")
        self.cause = cause
