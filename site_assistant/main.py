import logging

from fastapi import FastAPI

from site_assistant.api.v1.chat import router as chat_router
from site_assistant.api.v1.contact import router as contact_router
from site_assistant.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "language", "stage", "reason", "service_type", "internal_id", "status", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Axie Studio Site Assistant", version="1.0.0")

app.include_router(chat_router, prefix="/api/v1", tags=["chat"])
app.include_router(contact_router, prefix="/api/v1", tags=["contact"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
