"""Business tied to the current API key."""

from __future__ import annotations

from ..schemas.business import Business, BusinessCategory, UpdateBusinessRequest
from ..schemas.common import PaginatedResponse, PaginationParams
from .base import BaseService


class BusinessService(BaseService):
    def get(self) -> Business:
        response = self._http.get("/business")
        return self._unwrap(response, Business, "business")

    def update(self, data: UpdateBusinessRequest) -> Business:
        response = self._http.put("/business/update", data)
        return self._unwrap(response, Business, "business")

    def delete(self) -> str:
        response = self._http.delete("/business/remove")
        return self._message(response, "Business deleted successfully")

    def get_categories(self, params: PaginationParams | None = None) -> PaginatedResponse[BusinessCategory]:
        """List business categories; the pagination envelope is returned as-is."""
        response = self._http.get("/business/categories", params)
        return self._page(response, BusinessCategory)
