"""M-Pesa payment schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from .common import ApiModel, KenyanPhoneNumber, PackageId, RequestModel

PaymentPackageType = Literal["agent", "doorstep", "errand", "rent", "sale", "express"]


class PaymentPackage(ApiModel):
    """Package id and kind, the unit of a payment batch."""

    id: PackageId
    type: PaymentPackageType


class PaymentSTKRequest(RequestModel):
    packages: List[PaymentPackage] = Field(..., min_length=1)
    phone: KenyanPhoneNumber


class VerifyPaymentRequest(RequestModel):
    packages: List[PaymentPackage] = Field(..., min_length=1)
    transcode: str = Field(..., description="M-Pesa transaction code.")


class PaymentResponse(ApiModel):
    success: bool = False
    message: Optional[str] = None
