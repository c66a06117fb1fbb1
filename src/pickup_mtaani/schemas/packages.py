"""Package schemas for the three delivery kinds: agent-to-agent, doorstep and express."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import Field

from .common import (
    AgentId,
    ApiModel,
    BusinessId,
    Coordinate,
    DoorstepDestinationId,
    KenyanPhoneNumber,
    PackageId,
    PaginationParams,
    RequestModel,
    RiderTypeId,
)

PackageState = Literal["request", "in_transit", "delivered", "cancelled", "pending"]
PaymentOption = Literal["vendor", "collection", "customer"]
PackageType = Literal["agent", "doorstep", "express"]


class PackageTrackEvent(ApiModel):
    time: Optional[float] = None
    state: Optional[str] = None
    descriptions: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")


class PackageTracks(ApiModel):
    descriptions: List[PackageTrackEvent] = Field(default_factory=list)


class BasePackage(ApiModel):
    """Fields shared by every package kind.

    ``state`` is kept as a plain string: besides the ``PackageState`` values the
    API reports rider and delivery sub-states.
    """

    id: PackageId
    created_at: Optional[str] = Field(None, alias="createdAt")
    customer_name: Optional[str] = Field(None, alias="customerName")
    customer_phone_number: Optional[KenyanPhoneNumber] = Field(None, alias="customerPhoneNumber")
    package_name: Optional[str] = Field(None, alias="packageName")
    package_value: Optional[float] = Field(None, alias="packageValue")
    receipt_no: Optional[str] = None
    state: Optional[str] = None
    delivery_fee: Optional[float] = None
    payment_option: Optional[str] = None
    on_delivery_balance: Optional[float] = None
    track_id: Optional[str] = Field(None, alias="trackId")
    business_id: Optional[BusinessId] = Field(None, alias="businessId_id")


class AgentPackage(BasePackage):
    type: Literal["agent"] = "agent"
    sender_agent_id: Optional[AgentId] = Field(None, alias="senderAgentID_id")
    # The API spells this field "receiever".
    receiver_agent_id: Optional[AgentId] = Field(None, alias="receieverAgentID_id")
    tracks: Optional[PackageTracks] = Field(None, alias="agent_package_tracks")


class DoorstepPackage(BasePackage):
    type: Literal["doorstep"] = "doorstep"
    agent_id: Optional[AgentId] = None
    doorstep_destination_id: Optional[DoorstepDestinationId] = Field(None, alias="doorstepDestinationId")
    location_description: Optional[str] = Field(None, alias="locationDescription")
    lat: Optional[float] = None
    lng: Optional[float] = None
    tracks: Optional[PackageTracks] = Field(None, alias="door_step_package_tracks")


class BusinessSummary(ApiModel):
    id: BusinessId
    name: Optional[str] = None


class ExpressPackage(BasePackage):
    type: Literal["express"] = "express"
    depart_point: Optional[Coordinate] = None
    destination: Optional[Coordinate] = None
    exact_location: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    payment_status: Optional[str] = None
    business: Optional[BusinessSummary] = None


Package = Union[AgentPackage, DoorstepPackage, ExpressPackage]


class CreateAgentPackageRequest(RequestModel):
    sender_agent_id: AgentId = Field(..., alias="senderAgentId")
    receiver_agent_id: AgentId = Field(..., alias="receiverAgentId")
    package_value: float = Field(..., alias="packageValue")
    customer_name: str = Field(..., alias="customerName")
    package_name: str = Field(..., alias="packageName")
    customer_phone_number: KenyanPhoneNumber = Field(..., alias="customerPhoneNumber")
    payment_option: Literal["vendor"] = Field("vendor", alias="paymentOption")
    on_delivery_balance: Optional[float] = None


class UpdateAgentPackageRequest(RequestModel):
    sender_agent_id: Optional[AgentId] = Field(None, alias="senderAgentId")
    receiver_agent_id: Optional[AgentId] = Field(None, alias="receiverAgentId")
    package_value: Optional[float] = Field(None, alias="packageValue")
    customer_name: Optional[str] = Field(None, alias="customerName")
    package_name: Optional[str] = Field(None, alias="packageName")
    customer_phone_number: Optional[KenyanPhoneNumber] = Field(None, alias="customerPhoneNumber")
    payment_option: Optional[Literal["vendor"]] = Field(None, alias="paymentOption")
    on_delivery_balance: Optional[float] = None


class CreateDoorstepPackageRequest(RequestModel):
    sender_agent_id: AgentId = Field(..., alias="senderAgentID_id")
    package_value: float = Field(..., alias="packageValue")
    customer_name: str = Field(..., alias="customerName")
    package_name: str = Field(..., alias="packageName")
    customer_phone_number: KenyanPhoneNumber = Field(..., alias="customerPhoneNumber")
    payment_option: Literal["vendor"] = Field("vendor", alias="paymentOption")
    on_delivery_balance: Optional[float] = None
    doorstep_destination_id: DoorstepDestinationId = Field(..., alias="doorstepDestinationId")
    location_description: Optional[str] = Field(None, alias="locationDescription")
    lat: Optional[float] = None
    lng: Optional[float] = None


class UpdateDoorstepPackageRequest(RequestModel):
    sender_agent_id: Optional[AgentId] = Field(None, alias="senderAgentId")
    package_value: Optional[float] = Field(None, alias="packageValue")
    customer_name: Optional[str] = Field(None, alias="customerName")
    package_name: Optional[str] = Field(None, alias="packageName")
    customer_phone_number: Optional[KenyanPhoneNumber] = Field(None, alias="customerPhoneNumber")
    payment_option: Optional[Literal["vendor"]] = Field(None, alias="paymentOption")
    on_delivery_balance: Optional[float] = None
    doorstep_destination_id: Optional[DoorstepDestinationId] = Field(None, alias="doorstepDestinationId")
    location_description: Optional[str] = Field(None, alias="locationDescription")
    lat: Optional[float] = None
    lng: Optional[float] = None


class CreateExpressPackageRequest(RequestModel):
    customer_name: str
    customer_phone_number: KenyanPhoneNumber
    package_value: float
    package_name: str
    departure: Coordinate
    destination: Coordinate
    exact_location: str
    payment_option: PaymentOption
    on_delivery_balance: Optional[float] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None


class UpdateExpressPackageRequest(RequestModel):
    departure: Optional[Coordinate] = None
    destination: Optional[Coordinate] = None
    customer_name: Optional[str] = None
    package_name: Optional[str] = None
    exact_location: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    customer_phone_number: Optional[KenyanPhoneNumber] = None
    package_value: Optional[float] = None
    payment_option: Optional[PaymentOption] = None
    on_delivery_balance: Optional[float] = None
    rider_type_id: Optional[RiderTypeId] = None


class ExpressDirectionsRequest(RequestModel):
    coordinates: List[Coordinate] = Field(..., min_length=2, description="Departure then destination, as [lng, lat].")
    rider_type_id: RiderTypeId


class ExpressDirections(ApiModel):
    distance: float
    duration: float
    price: float
    gross_price: Optional[float] = None


class DeliveryMode(ApiModel):
    id: RiderTypeId
    name: str
    description: Optional[str] = None


class NearbyRider(ApiModel):
    rider_id: int
    loc: Optional[Coordinate] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None


class PackageQuery(PaginationParams):
    state: Optional[PackageState] = None
    receipt_no: Optional[str] = None
    phone_number: Optional[KenyanPhoneNumber] = Field(None, alias="phoneNumber")
    customer_name: Optional[str] = Field(None, alias="customerName")
    id: Optional[PackageId] = None
