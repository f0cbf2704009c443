from __future__ import annotations

import logging
import random
import re
import string
import time
from datetime import datetime, timezone
from typing import Callable

from site_assistant.application.exceptions import WebhookDeliveryError
from site_assistant.application.ports.contact_notifier import ContactNotifierPort
from site_assistant.domain.entities.contact import ContactPayload, ContactRequest, ContactResult

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_MESSAGES = {
    "sv": {
        "invalid_email": "Vänligen ange en giltig e-postadress",
        "success": "Tack! Vi kontaktar dig inom kort.",
        "failure": "Något gick fel. Försök igen eller kontakta oss direkt.",
    },
    "en": {
        "invalid_email": "Please enter a valid email address",
        "success": "Thank you! We will contact you shortly.",
        "failure": "Something went wrong. Please try again or contact us directly.",
    },
}


class SubmitContactUseCase:
    def __init__(
        self,
        notifier: ContactNotifierPort,
        routing_id: str,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._notifier = notifier
        self._routing_id = routing_id
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def execute(self, request: ContactRequest) -> ContactResult:
        messages = _MESSAGES.get(request.language, _MESSAGES["sv"])
        email = (request.email or "").strip()
        if not EMAIL_RE.match(email):
            raise ValueError(messages["invalid_email"])

        now_ts = self._clock()
        name = (request.name or "").strip() or name_from_email(email)
        payload = ContactPayload(
            name=name,
            email=email,
            time_created=datetime.fromtimestamp(now_ts, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            routing_id=self._routing_id,
            internal_id=build_internal_id(now_ts),
        )

        try:
            self._notifier.send(payload)
        except WebhookDeliveryError as e:
            self._logger.error(
                "Contact webhook failed",
                extra={"internal_id": payload.internal_id, "error": str(e)},
            )
            return ContactResult(success=False, message=messages["failure"], internal_id=payload.internal_id)

        self._logger.info("Contact request delivered", extra={"internal_id": payload.internal_id})
        return ContactResult(success=True, message=messages["success"], internal_id=payload.internal_id)


def name_from_email(email: str) -> str:
    """`anna.svensson@x.se` -> `Anna Svensson`"""
    local_part = email.split("@")[0]
    words = re.sub(r"[._-]", " ", local_part).split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def build_internal_id(now_ts: float) -> str:
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"contact_{int(now_ts * 1000)}_{suffix}"
