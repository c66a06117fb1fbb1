"""Express (GPS point-to-point) deliveries with rider matching."""

from __future__ import annotations

from ..schemas.common import BusinessId, PackageId
from ..schemas.packages import (
    CreateExpressPackageRequest,
    DeliveryMode,
    ExpressDirections,
    ExpressDirectionsRequest,
    ExpressPackage,
    NearbyRider,
    UpdateExpressPackageRequest,
)
from .base import BaseService


class ExpressDeliveriesService(BaseService):
    def get_directions(self, business_id: BusinessId, data: ExpressDirectionsRequest) -> ExpressDirections:
        """Quote distance, duration and price for a coordinate pair and rider type.

        Example:
            >>> client.express_deliveries.get_directions(
            ...     750,
            ...     ExpressDirectionsRequest(
            ...         coordinates=[(36.81443, -1.27365), (36.84224, -1.29124)],
            ...         rider_type_id=2,
            ...     ),
            ... ).price
            560.0
        """
        response = self._http.post("/packages/express/directions", data, params={"b_id": business_id})
        return self._unwrap(response, ExpressDirections, "directions")

    def create(self, business_id: BusinessId, data: CreateExpressPackageRequest) -> ExpressPackage:
        response = self._http.post("/packages/express", data, params={"b_id": business_id})
        return self._unwrap(response, ExpressPackage, "package")

    def get(self, id: PackageId) -> ExpressPackage:
        response = self._http.get("/packages/express", {"id": id})
        return self._unwrap(response, ExpressPackage, "package")

    def update(self, id: PackageId, business_id: BusinessId, data: UpdateExpressPackageRequest) -> ExpressPackage:
        response = self._http.put("/packages/express", data, params={"id": id, "b_id": business_id})
        return self._unwrap(response, ExpressPackage, "package")

    def find_rider(self, id: PackageId) -> list[NearbyRider]:
        """Ask the API to match nearby riders to a package.

        Issued as a PUT because it may assign a rider server-side. It is not
        idempotent; do not retry it blindly.
        """
        response = self._http.put("/packages/express/find-rider", params={"id": id})
        return self._items(response, NearbyRider)

    def get_delivery_modes(self) -> list[DeliveryMode]:
        return self._items(self._http.get("/packages/express/delivery-modes"), DeliveryMode)
