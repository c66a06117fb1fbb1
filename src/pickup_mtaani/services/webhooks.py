"""Webhook URL registration."""

from __future__ import annotations

from ..schemas.webhooks import RegisterWebhookRequest
from .base import BaseService


class WebhooksService(BaseService):
    def register(self, data: RegisterWebhookRequest) -> str:
        """Register the URL the API will POST package events to.

        The endpoint must answer 200 promptly. Deliveries are at-least-once.
        """
        response = self._http.post("/webhooks/register", data)
        return self._message(response, "Webhook registered successfully")
