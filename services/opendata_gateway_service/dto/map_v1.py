"""Map DTOs returned by the map service (GET /api/map/...)."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class MapPointV1(BaseModel):
    """Simplified map marker derived from a cultural hotspot."""

    id: str
    name: str | None = None
    latitude: float
    longitude: float
    type: str | None = None
    address: str | None = None


class GeoJsonFeatureV1(BaseModel):
    """Single GeoJSON Feature.

    Geometry and properties are kept as plain mappings; extra members such as
    ``id`` or ``bbox`` pass through untouched.
    """

    model_config = ConfigDict(extra="allow")

    type: Literal["Feature"] = "Feature"
    geometry: dict[str, Any] | None = None
    properties: dict[str, Any] | None = Field(default_factory=dict)


class GeoJsonFeatureCollectionV1(BaseModel):
    """GeoJSON FeatureCollection, features kept in upstream order."""

    model_config = ConfigDict(extra="allow")

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[GeoJsonFeatureV1] = Field(default_factory=list)
