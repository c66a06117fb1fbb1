"""Business schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import ApiModel, BusinessId, CategoryId, KenyanPhoneNumber, RequestModel


class Business(ApiModel):
    id: BusinessId
    name: str
    phone_number: Optional[KenyanPhoneNumber] = None
    wallet_balance: Optional[float] = None
    created_at: Optional[str] = Field(None, alias="createdAt")


class BusinessCategory(ApiModel):
    id: CategoryId
    name: str


class UpdateBusinessRequest(RequestModel):
    name: Optional[str] = None
    phone_number: Optional[KenyanPhoneNumber] = None
    category_id: Optional[CategoryId] = None
