"""Doorstep (address-level) delivery package management."""

from __future__ import annotations

from ..schemas.common import BusinessId, PackageId, PaginatedResponse
from ..schemas.packages import (
    CreateDoorstepPackageRequest,
    DoorstepPackage,
    PackageQuery,
    UpdateDoorstepPackageRequest,
)
from ..schemas.payments import PaymentPackage
from .base import BaseService


class DoorstepPackagesService(BaseService):
    def create(self, business_id: BusinessId, data: CreateDoorstepPackageRequest) -> DoorstepPackage:
        response = self._http.post("/packages/doorstep", data, params={"b_id": business_id})
        return self._unwrap(response, DoorstepPackage, "package")

    def get(self, id: PackageId, business_id: BusinessId) -> DoorstepPackage:
        response = self._http.get("/packages/doorstep", {"id": id, "b_id": business_id})
        return self._unwrap(response, DoorstepPackage, "package")

    def update(self, id: PackageId, data: UpdateDoorstepPackageRequest) -> DoorstepPackage:
        response = self._http.put("/packages/doorstep-update", data, params={"id": id})
        return self._unwrap(response, DoorstepPackage, "package")

    def list(
        self, business_id: BusinessId, filters: PackageQuery | None = None
    ) -> PaginatedResponse[DoorstepPackage]:
        params = {"b_id": business_id}
        if filters is not None:
            params.update(filters.model_dump(mode="json", by_alias=True, exclude_none=True))
        response = self._http.get("/packages/doorstep/mine", params)
        return self._page(response, DoorstepPackage)

    def delete(self, id: PackageId) -> str:
        response = self._http.delete("/packages/doorstep-package", {"id": id})
        return self._message(response, "Package deleted successfully")

    def get_unpaid(self, business_id: BusinessId) -> list[PaymentPackage]:
        response = self._http.get("/packages/my-unpaid-packages", {"b_id": business_id})
        return self._items(response, PaymentPackage)
