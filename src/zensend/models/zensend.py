from typing import Any, Generic, TypeVar

from zensend.exceptions import ZenSendException

T = TypeVar("T")


class ZenSendResponse(Generic[T]):
    def __init__(
        self,
        status: str,
        data: T | None = None,
        error: ZenSendException | None = None,
    ) -> None:
        self.status = status
        self.data = data
        self.error = error

    @classmethod
    def success(cls, data: T) -> "ZenSendResponse[T]":
        return cls(status="success", data=data)

    @classmethod
    def failed(cls, error: ZenSendException) -> "ZenSendResponse[T]":
        return cls(status="error", error=error)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def unwrap(self) -> T:
        """Return the payload, or raise the error this response carries."""
        if self.error is not None:
            raise self.error
        return self.data  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "data": self.data,
            "error": None if self.error is None else self.error.to_dict(),
        }

    def __repr__(self) -> str:
        if self.error is not None:
            return f"<ZenSendResponse status={self.status} error={self.error!r}>"
        return f"<ZenSendResponse status={self.status} data={self.data!r}>"
