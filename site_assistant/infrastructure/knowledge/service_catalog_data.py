from __future__ import annotations

from site_assistant.domain.entities.service_catalog import ServiceCatalogEntry

# Insertion order is display order. Entries without a setup price stay out of the price table.
SERVICE_CATALOG: dict[str, ServiceCatalogEntry] = {
    "onboarding": ServiceCatalogEntry(
        service_key="onboarding",
        display_name_sv="Kostnadsfri Konsultation",
        display_name_en="Free Consultation",
        description_sv="30-60 min kostnadsfri rådgivning",
        description_en="30-60 min free consultation",
    ),
    "website": ServiceCatalogEntry(
        service_key="website",
        display_name_sv="Hemsida",
        display_name_en="Website",
        description_sv="Professionell webbplats med responsiv design, SEO och SSL",
        description_en="Professional website with responsive design, SEO and SSL",
        setup_price_sek=8995,
        monthly_price_sek=495,
    ),
    "booking-system": ServiceCatalogEntry(
        service_key="booking-system",
        display_name_sv="Bokningssystem",
        display_name_en="Booking System",
        description_sv="Avancerat bokningssystem med kalender och påminnelser",
        description_en="Advanced booking system with calendar and reminders",
        setup_price_sek=10995,
        monthly_price_sek=995,
    ),
    "app-development": ServiceCatalogEntry(
        service_key="app-development",
        display_name_sv="App-utveckling",
        display_name_en="App Development",
        description_sv="Mobilappar för iOS & Android",
        description_en="Mobile apps for iOS & Android",
        setup_price_sek=49995,
        monthly_price_sek=1995,
    ),
    "ecommerce": ServiceCatalogEntry(
        service_key="ecommerce",
        display_name_sv="E-handel",
        display_name_en="E-commerce",
        description_sv="Webbutik anpassad efter ditt sortiment",
        description_en="Online store tailored to your products",
    ),
    "complete-service": ServiceCatalogEntry(
        service_key="complete-service",
        display_name_sv="Komplett Tjänst",
        display_name_en="Complete Service",
        description_sv="Hemsida, bokningssystem och löpande support i ett paket",
        description_en="Website, booking system and ongoing support in one package",
        setup_price_sek=14995,
        monthly_price_sek=1495,
    ),
}

DEFAULT_SERVICE_KEY = "onboarding"
