from __future__ import annotations

from site_assistant.application.ports.service_catalog import ServiceCatalogPort
from site_assistant.domain.entities.service_catalog import ServiceCatalogEntry
from site_assistant.infrastructure.knowledge.service_catalog_data import DEFAULT_SERVICE_KEY, SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, catalog: dict[str, ServiceCatalogEntry] | None = None) -> None:
        self._catalog = catalog or SERVICE_CATALOG

    def get_service(self, service_key: str) -> ServiceCatalogEntry | None:
        normalized_key = (service_key or "").lower().strip()
        return self._catalog.get(normalized_key)

    def list_services(self) -> list[ServiceCatalogEntry]:
        return list(self._catalog.values())

    def get_display_name(self, service_key: str, language: str) -> str:
        entry = self.get_service(service_key) or self._catalog.get(DEFAULT_SERVICE_KEY)
        if not entry:
            return service_key
        return entry.display_name(language)
