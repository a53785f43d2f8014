"""Exception type carrying a structured ErrorDetail."""

from __future__ import annotations

from typing import Any

from services.libs.opendata_service_libs.error_handling.error_detail import ErrorDetail


class GatewayError(Exception):
    """Base exception for all structured gateway errors.

    The ErrorDetail is the single source of truth; the properties below are
    convenience accessors for logging and handler code.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail

    def __str__(self) -> str:
        return f"[{self.error_detail.error_code.value}] {self.error_detail.message}"

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    def to_log_context(self) -> dict[str, Any]:
        """Flatten the error into structlog key/value pairs."""
        return {
            "error_code": self.error_code,
            "error_message": self.error_detail.message,
            "correlation_id": self.correlation_id,
            "service": self.service,
            "operation": self.operation,
            **{f"detail_{key}": value for key, value in self.error_detail.details.items()},
        }
