"""Zone, area, agent location and doorstep destination lookups."""

from __future__ import annotations

from ..schemas.locations import (
    Area,
    DoorstepDestination,
    DoorstepDestinationsQuery,
    Location,
    LocationsQuery,
    Zone,
)
from .base import BaseService


class LocationsService(BaseService):
    def get_zones(self) -> list[Zone]:
        return self._items(self._http.get("/locations/zones"), Zone)

    def get_areas(self) -> list[Area]:
        return self._items(self._http.get("/locations/areas"), Area)

    def get_locations(self, params: LocationsQuery | None = None) -> list[Location]:
        """Agent locations, optionally filtered by area, zone or a name search key."""
        return self._items(self._http.get("/locations", params), Location)

    def get_doorstep_destinations(
        self, params: DoorstepDestinationsQuery | None = None
    ) -> list[DoorstepDestination]:
        response = self._http.get("/locations/doorstep-destinations", params)
        return self._items(response, DoorstepDestination)
