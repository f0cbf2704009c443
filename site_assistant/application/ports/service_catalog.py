from __future__ import annotations

from abc import ABC, abstractmethod

from site_assistant.domain.entities.service_catalog import ServiceCatalogEntry


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, service_key: str) -> ServiceCatalogEntry | None:
        """Get service catalog entry by service key."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[ServiceCatalogEntry]:
        """All entries in display order."""
        raise NotImplementedError

    @abstractmethod
    def get_display_name(self, service_key: str, language: str) -> str:
        """Display name for a service key. Falls back to the consultation entry."""
        raise NotImplementedError
