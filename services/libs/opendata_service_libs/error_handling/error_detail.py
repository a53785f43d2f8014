"""
Standardized error data model shared by the gateway services.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(str, Enum):
    """Error codes raised by gateway services."""

    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"


class ErrorDetail(BaseModel):
    """
    Pure data model for an error. Carries no behavior.
    """

    error_code: ErrorCode
    message: str
    correlation_id: UUID
    timestamp: datetime
    service: str
    operation: str
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
