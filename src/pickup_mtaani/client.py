"""Entry point for the Pickup Mtaani API client."""

from __future__ import annotations

import logging

import httpx

from .config import ClientSettings, build_settings
from .http_client import HttpClient
from .services import (
    AgentPackagesService,
    AgentsService,
    BusinessService,
    DeliveryChargeService,
    DoorstepPackagesService,
    ExpressDeliveriesService,
    LocationsService,
    PaymentsService,
    WebhooksService,
)

logger = logging.getLogger(__name__)


class PickupMtaaniClient:
    """Typed access to every Pickup Mtaani resource group.

    Settings come from the keyword arguments, then ``PICKUP_MTAANI_*``
    environment variables (or a ``.env`` file), then defaults. A missing API
    key fails here, before any request is made.

    Example:
        >>> client = PickupMtaaniClient(api_key="your-api-key", timeout=30)
        >>> business = client.business.get()
        >>> zones = client.locations.get_zones()

    Raises:
        ConfigurationError: if no API key is configured.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        debug: bool | None = None,
        settings: ClientSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or build_settings(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            retries=retries,
            debug=debug,
        )
        self._http = HttpClient(self.settings, transport=transport)

        self.business = BusinessService(self._http)
        self.locations = LocationsService(self._http)
        self.agents = AgentsService(self._http)
        self.delivery_charge = DeliveryChargeService(self._http)
        self.agent_packages = AgentPackagesService(self._http)
        self.doorstep_packages = DoorstepPackagesService(self._http)
        self.express_deliveries = ExpressDeliveriesService(self._http)
        self.payments = PaymentsService(self._http)
        self.webhooks = WebhooksService(self._http)

        logger.debug(f"Pickup Mtaani client configured for {self.settings.base_url}")

    @property
    def http(self) -> HttpClient:
        return self._http

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "PickupMtaaniClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
