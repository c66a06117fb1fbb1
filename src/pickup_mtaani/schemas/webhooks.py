"""Webhook registration and delivery schemas.

The client only registers a callback URL. ``WebhookEvent`` describes what the
API later POSTs to that URL, for integrators parsing deliveries on their own
server. Deliveries are at-least-once; duplicates must be tolerated there.
"""

from __future__ import annotations

from typing import Literal, Optional

from .common import ApiModel, PackageId, RequestModel
from .packages import PackageType

WebhookEventType = Literal[
    "package.created",
    "package.updated",
    "package.state_changed",
    "package.delivered",
    "package.cancelled",
]


class RegisterWebhookRequest(RequestModel):
    webhook_url: str


class WebhookPackage(ApiModel):
    package_id: PackageId
    package_type: PackageType
    receipt_no: str
    state: str
    track_id: str
    created_at: Optional[str] = None


class WebhookEvent(ApiModel):
    event_type: WebhookEventType
    timestamp: float
    data: WebhookPackage
