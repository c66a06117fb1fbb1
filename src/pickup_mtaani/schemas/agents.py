"""Agent schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import AgentId, ApiModel, LocationId, RequestModel


class Agent(ApiModel):
    id: AgentId
    business_name: str
    location_id: Optional[LocationId] = None


class AgentQuery(RequestModel):
    location_id: Optional[LocationId] = Field(None, alias="locationId")
    search_key: Optional[str] = Field(None, alias="searchKey", description="Filter by agent business name.")
