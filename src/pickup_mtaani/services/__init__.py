"""Resource services, one per API resource group."""

from .agent_packages import AgentPackagesService
from .agents import AgentsService
from .business import BusinessService
from .delivery_charge import DeliveryChargeService
from .doorstep_packages import DoorstepPackagesService
from .express_deliveries import ExpressDeliveriesService
from .locations import LocationsService
from .payments import PaymentsService
from .webhooks import WebhooksService

__all__ = [
    "AgentPackagesService",
    "AgentsService",
    "BusinessService",
    "DeliveryChargeService",
    "DoorstepPackagesService",
    "ExpressDeliveriesService",
    "LocationsService",
    "PaymentsService",
    "WebhooksService",
]
