"""Cultural hotspot DTOs.

Value objects deserialized verbatim from the core service
(GET /api/cultural-hotspots). The gateway never creates or mutates them.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class GeoPointV1(BaseModel):
    """GeoJSON Point geometry: [longitude, latitude]."""

    type: Literal["Point"] = "Point"
    coordinates: list[float]


class MultiPointV1(BaseModel):
    """GeoJSON MultiPoint geometry: a list of [longitude, latitude] pairs."""

    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: list[list[float]] = Field(default_factory=list)


HotSpotLocationV1 = Annotated[GeoPointV1 | MultiPointV1, Field(discriminator="type")]


class CulturalHotSpotV1(BaseModel):
    """Cultural hotspot point of interest from Toronto Open Data."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None = None
    address: str | None = None
    type: str | None = Field(default=None, description="Hotspot category")
    description: str | None = None
    picture_url: str | None = Field(default=None, alias="pictureURL")
    location: HotSpotLocationV1 | None = None
