"""Frontend configuration DTOs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MapsApiKeyV1(BaseModel):
    """Map-provider API key handed to the frontend."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_key: str = Field(alias="apiKey")
