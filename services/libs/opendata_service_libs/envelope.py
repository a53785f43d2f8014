"""
Uniform response envelope for every gateway response.

Every body leaving a gateway service has the shape
``{"data": ..., "message": ..., "status": "success" | "error"}``. ``data`` and
``message`` are omitted from the JSON when absent, so an error body reads
``{"message": "...", "status": "error"}``.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

T = TypeVar("T")


class ResponseStatus(str, Enum):
    """Outcome tag carried by every envelope."""

    SUCCESS = "success"
    ERROR = "error"


class ApiResponse(BaseModel, Generic[T]):
    """Immutable success/error wrapper around a payload of type T.

    An error envelope never carries data.
    """

    model_config = ConfigDict(frozen=True)

    data: T | None = None
    message: str | None = None
    status: ResponseStatus

    @model_validator(mode="after")
    def _error_carries_no_data(self) -> ApiResponse[T]:
        if self.status is ResponseStatus.ERROR and self.data is not None:
            raise ValueError("error responses must not carry data")
        return self

    @model_serializer(mode="wrap")
    def _omit_absent_fields(self, handler):
        # Only the envelope's own keys are dropped; None inside the payload stays.
        payload = handler(self)
        for key in ("data", "message"):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload


def success(data: T, message: str | None = None) -> ApiResponse[T]:
    """Wrap a payload in a success envelope, with an optional description."""
    return ApiResponse(data=data, message=message, status=ResponseStatus.SUCCESS)


def error(message: str) -> ApiResponse[None]:
    """Build an error envelope. No payload is attached."""
    return ApiResponse(message=message, status=ResponseStatus.ERROR)
