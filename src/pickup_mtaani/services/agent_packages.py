"""Agent-to-agent package management."""

from __future__ import annotations

from ..schemas.common import BusinessId, PackageId, PaginatedResponse
from ..schemas.packages import (
    AgentPackage,
    CreateAgentPackageRequest,
    PackageQuery,
    UpdateAgentPackageRequest,
)
from ..schemas.payments import PaymentPackage
from .base import BaseService


class AgentPackagesService(BaseService):
    def create(self, business_id: BusinessId, data: CreateAgentPackageRequest) -> AgentPackage:
        response = self._http.post("/packages/agent-agent", data, params={"b_id": business_id})
        return self._unwrap(response, AgentPackage, "package")

    def get(self, id: PackageId, business_id: BusinessId) -> AgentPackage:
        response = self._http.get("/packages/agent-agent", {"id": id, "b_id": business_id})
        return self._unwrap(response, AgentPackage, "package")

    def update(self, id: PackageId, data: UpdateAgentPackageRequest) -> AgentPackage:
        response = self._http.put("/packages/agent-update", data, params={"id": id})
        return self._unwrap(response, AgentPackage, "package")

    def list(
        self, business_id: BusinessId, filters: PackageQuery | None = None
    ) -> PaginatedResponse[AgentPackage]:
        """Packages of a business filtered by state, receipt, phone, customer name or page."""
        params = {"b_id": business_id}
        if filters is not None:
            params.update(filters.model_dump(mode="json", by_alias=True, exclude_none=True))
        response = self._http.get("/packages/agent-agent/mine", params)
        return self._page(response, AgentPackage)

    def delete(self, id: PackageId) -> str:
        response = self._http.delete("/packages/agent-package", {"id": id})
        return self._message(response, "Package deleted successfully")

    def get_unpaid(self, business_id: BusinessId) -> list[PaymentPackage]:
        """Unpaid packages as id/type pairs, ready for a payment batch."""
        response = self._http.get("/packages/my-unpaid-packages", {"b_id": business_id})
        return self._items(response, PaymentPackage)
