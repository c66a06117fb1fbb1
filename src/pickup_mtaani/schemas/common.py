"""Envelopes and shared types used across the API schemas."""

from __future__ import annotations

from typing import Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

BusinessId = int
AgentId = int
PackageId = int
LocationId = int
AreaId = int
ZoneId = int
DoorstepDestinationId = int
CategoryId = int
RiderTypeId = int

# Must match ^(\+254|0)(1|7)[0-9]{8}$; see validators.phone.
KenyanPhoneNumber = str

# GeoJSON order: (longitude, latitude).
Coordinate = Tuple[float, float]

T = TypeVar("T")


class ApiModel(BaseModel):
    """Record returned by the API. Unknown fields are kept as extras."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class RequestModel(BaseModel):
    """Body or query-string payload sent to the API."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ApiResponse(ApiModel, Generic[T]):
    success: Optional[bool] = None
    message: Optional[str] = None
    data: Optional[T] = None


class PaginatedResponse(ApiModel, Generic[T]):
    total_count: int = Field(..., alias="totalCount")
    page_number: Optional[int] = Field(None, alias="pageNumber")
    page_size: Optional[int] = Field(None, alias="pageSize")
    data: List[T] = Field(default_factory=list)


class PaginationParams(RequestModel):
    page_number: Optional[int] = Field(None, ge=0, alias="pageNumber", description="Page number, starting at 0.")
    page_size: Optional[int] = Field(None, ge=1, alias="pageSize")
