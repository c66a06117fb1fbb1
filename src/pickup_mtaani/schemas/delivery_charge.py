"""Delivery charge quote schemas."""

from __future__ import annotations

from pydantic import Field

from .common import AgentId, ApiModel, DoorstepDestinationId, RequestModel


class DeliveryCharge(ApiModel):
    price: float


class AgentDeliveryChargeQuery(RequestModel):
    sender_agent_id: AgentId = Field(..., alias="senderAgentID")
    receiver_agent_id: AgentId = Field(..., alias="receiverAgentID")


class DoorstepDeliveryChargeQuery(RequestModel):
    sender_agent_id: AgentId = Field(..., alias="senderAgentID")
    doorstep_destination_id: DoorstepDestinationId = Field(..., alias="doorstepDestinationID")
