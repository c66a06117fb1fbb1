"""Request and response schemas for the Pickup Mtaani API."""

from .agents import Agent, AgentQuery
from .business import Business, BusinessCategory, UpdateBusinessRequest
from .common import ApiResponse, Coordinate, PaginatedResponse, PaginationParams
from .delivery_charge import AgentDeliveryChargeQuery, DeliveryCharge, DoorstepDeliveryChargeQuery
from .locations import (
    Area,
    DoorstepDestination,
    DoorstepDestinationsQuery,
    Location,
    LocationsQuery,
    Zone,
)
from .packages import (
    AgentPackage,
    CreateAgentPackageRequest,
    CreateDoorstepPackageRequest,
    CreateExpressPackageRequest,
    DeliveryMode,
    DoorstepPackage,
    ExpressDirections,
    ExpressDirectionsRequest,
    ExpressPackage,
    NearbyRider,
    Package,
    PackageQuery,
    PackageState,
    PackageTrackEvent,
    PaymentOption,
    UpdateAgentPackageRequest,
    UpdateDoorstepPackageRequest,
    UpdateExpressPackageRequest,
)
from .payments import PaymentPackage, PaymentResponse, PaymentSTKRequest, VerifyPaymentRequest
from .webhooks import RegisterWebhookRequest, WebhookEvent, WebhookEventType, WebhookPackage

__all__ = [
    "Agent",
    "AgentDeliveryChargeQuery",
    "AgentPackage",
    "AgentQuery",
    "ApiResponse",
    "Area",
    "Business",
    "BusinessCategory",
    "Coordinate",
    "CreateAgentPackageRequest",
    "CreateDoorstepPackageRequest",
    "CreateExpressPackageRequest",
    "DeliveryCharge",
    "DeliveryMode",
    "DoorstepDeliveryChargeQuery",
    "DoorstepDestination",
    "DoorstepDestinationsQuery",
    "DoorstepPackage",
    "ExpressDirections",
    "ExpressDirectionsRequest",
    "ExpressPackage",
    "Location",
    "LocationsQuery",
    "NearbyRider",
    "Package",
    "PackageQuery",
    "PackageState",
    "PackageTrackEvent",
    "PaginatedResponse",
    "PaginationParams",
    "PaymentOption",
    "PaymentPackage",
    "PaymentResponse",
    "PaymentSTKRequest",
    "RegisterWebhookRequest",
    "UpdateAgentPackageRequest",
    "UpdateBusinessRequest",
    "UpdateDoorstepPackageRequest",
    "UpdateExpressPackageRequest",
    "VerifyPaymentRequest",
    "WebhookEvent",
    "WebhookEventType",
    "WebhookPackage",
    "Zone",
]
