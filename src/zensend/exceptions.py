from typing import Any

from zensend.models.error import ApiError


class ZenSendException(Exception):
    """Base class for every error a ZenSend call can produce."""

    def to_dict(self) -> dict[str, Any]:
        return {"kind": type(self).__name__, "message": str(self)}


class TransportError(ZenSendException):
    """The HTTP transport failed before a response was received."""

    def __init__(self, original: Exception) -> None:
        super().__init__(f"Error in network request: {original}")
        self.original = original


class DecodeError(ZenSendException):
    """The response claimed to be JSON but did not decode into the expected shape."""

    def __init__(self, diagnostic: str) -> None:
        super().__init__(f"Unable to decode response: {diagnostic}")
        self.diagnostic = diagnostic


class UnexpectedResponseError(ZenSendException):
    """Non-JSON response, or a JSON envelope with neither success nor failure."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected response from server (HTTP {status_code})")
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "status_code": self.status_code}


class ApiResponseError(ZenSendException):
    """The server answered with a failure envelope."""

    def __init__(self, failure: ApiError) -> None:
        message = failure.failcode
        if failure.parameter is not None:
            message = f"{message} ({failure.parameter})"
        super().__init__(message)
        self.failure = failure

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "failure": self.failure.model_dump()}


__all__ = [
    "ZenSendException",
    "TransportError",
    "DecodeError",
    "UnexpectedResponseError",
    "ApiResponseError",
]
