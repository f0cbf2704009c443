from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceCatalogEntry:
    service_key: str
    display_name_sv: str
    display_name_en: str
    description_sv: str
    description_en: str
    setup_price_sek: int | None = None
    monthly_price_sek: int | None = None

    def display_name(self, language: str) -> str:
        return self.display_name_en if language == "en" else self.display_name_sv

    def description(self, language: str) -> str:
        return self.description_en if language == "en" else self.description_sv

    @property
    def is_priced(self) -> bool:
        return self.setup_price_sek is not None
