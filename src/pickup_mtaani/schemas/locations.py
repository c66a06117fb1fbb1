"""Location hierarchy schemas: zone, area, agent location and doorstep destination."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import ApiModel, AreaId, DoorstepDestinationId, LocationId, RequestModel, ZoneId


class Zone(ApiModel):
    id: ZoneId
    name: str


class Area(ApiModel):
    id: AreaId
    name: str


class Location(ApiModel):
    """Agent site; ``zone_id`` points back to its zone."""

    id: LocationId
    name: str
    zone_id: Optional[ZoneId] = None


class DoorstepDestination(ApiModel):
    id: DoorstepDestinationId
    name: str


class LocationsQuery(RequestModel):
    area_id: Optional[AreaId] = Field(None, alias="areaId")
    zone_id: Optional[ZoneId] = Field(None, alias="zoneId")
    search_key: Optional[str] = Field(None, alias="searchKey", description="Filter by location name.")


class DoorstepDestinationsQuery(RequestModel):
    area_id: Optional[AreaId] = Field(None, alias="areaId")
    search_key: Optional[str] = Field(None, alias="searchKey")
