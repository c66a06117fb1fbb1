"""Example webhook receiver for Pickup Mtaani package events.

Run with ``uvicorn examples.webhook_receiver:app --port 8000``, then register
the public URL once:

    client.webhooks.register(RegisterWebhookRequest(webhook_url="https://example.com/webhooks/pickup-mtaani"))
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, status

from pickup_mtaani.schemas.webhooks import WebhookEvent

logger = logging.getLogger(__name__)

app = FastAPI(title="Pickup Mtaani webhook receiver")

# Deliveries are at-least-once; remember what was already handled.
_seen: set[tuple[int, str, float]] = set()


@app.post("/webhooks/pickup-mtaani", status_code=status.HTTP_200_OK)
def receive_event(event: WebhookEvent) -> dict:
    key = (event.data.package_id, event.event_type, event.timestamp)
    if key in _seen:
        return {"received": True, "duplicate": True}
    _seen.add(key)

    logger.info(
        f"{event.event_type}: package {event.data.package_id} ({event.data.package_type}) "
        f"receipt {event.data.receipt_no} is now {event.data.state}"
    )
    return {"received": True}
