"""Delivery fee quotes. Pricing is computed by the API; nothing is calculated locally."""

from __future__ import annotations

from ..schemas.delivery_charge import (
    AgentDeliveryChargeQuery,
    DeliveryCharge,
    DoorstepDeliveryChargeQuery,
)
from .base import BaseService


class DeliveryChargeService(BaseService):
    def get_agent_package_fee(self, params: AgentDeliveryChargeQuery) -> DeliveryCharge:
        response = self._http.get("/delivery-charge/agent-package", params)
        return self._unwrap(response, DeliveryCharge, "delivery charge")

    def get_doorstep_package_fee(self, params: DoorstepDeliveryChargeQuery) -> DeliveryCharge:
        response = self._http.get("/delivery-charge/doorstep-package", params)
        return self._unwrap(response, DeliveryCharge, "delivery charge")
