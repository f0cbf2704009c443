from __future__ import annotations

import logging

import httpx

from site_assistant.application.exceptions import WebhookDeliveryError
from site_assistant.application.ports.contact_notifier import ContactNotifierPort
from site_assistant.domain.entities.contact import ContactPayload


class HttpContactNotifier(ContactNotifierPort):
    """Delivers contact requests as a GET with query parameters to the automation webhook."""

    def __init__(self, webhook_url: str, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        self._webhook_url = webhook_url
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def send(self, payload: ContactPayload) -> None:
        params = {
            "name": payload.name,
            "email": payload.email,
            "timeCreated": payload.time_created,
            "telegramChatId": payload.routing_id,
            "internalId": payload.internal_id,
        }
        try:
            resp = self._client.get(self._webhook_url, params=params, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            raise WebhookDeliveryError(f"Contact webhook unreachable: {e}") from e

        if not resp.is_success:
            self._logger.error(
                "Contact webhook rejected request",
                extra={"status": resp.status_code, "internal_id": payload.internal_id},
            )
            raise WebhookDeliveryError(f"Webhook failed with status: {resp.status_code}")


class UnconfiguredContactNotifier(ContactNotifierPort):
    """Used when CONTACT_WEBHOOK_URL is not set; every delivery fails."""

    def send(self, payload: ContactPayload) -> None:
        raise WebhookDeliveryError("CONTACT_WEBHOOK_URL is not configured.")
