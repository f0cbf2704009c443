"""
Tests for system prompt assembly.
"""

from __future__ import annotations

from site_assistant.application.use_cases.prompt_composer import BOOKING_SERVICE_TYPES, build_system_prompt
from site_assistant.domain.entities.conversation import ConversationAnalysis, ConversationStage, InterestLevel
from site_assistant.domain.entities.knowledge import KnowledgeSnippet
from site_assistant.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore


def test_swedish_prompt_has_prices_and_markers():
    prompt = build_system_prompt("sv", None, [], ServiceCatalogStore())
    assert "svenska" in prompt
    assert "Hemsida: 8,995 kr + 495 kr/månad" in prompt
    assert "Bokningssystem: 10,995 kr + 995 kr/månad" in prompt
    for service_type in BOOKING_SERVICE_TYPES:
        assert f"BOOKING_INTENT:{service_type}:" in prompt


def test_unpriced_entries_stay_out_of_price_table():
    prompt = build_system_prompt("en", None, [], ServiceCatalogStore())
    price_section = prompt.split("Current prices:")[1].split("\n\n")[0]
    assert "Website: 8,995 kr + 495 kr/month" in price_section
    assert "Free Consultation" not in price_section
    assert len(price_section.strip().splitlines()) == 4


def test_signals_and_knowledge_rendered():
    analysis = ConversationAnalysis(
        stage=ConversationStage.interested,
        interest_level=InterestLevel.high,
        topics_discussed=("website", "pricing"),
        has_asked_prices=True,
        has_shown_buying_intent=True,
        conversation_length=2,
    )
    snippets = [KnowledgeSnippet(label="services", content="Website: 8,995 SEK")]
    prompt = build_system_prompt("en", analysis, snippets, ServiceCatalogStore(), business_name="Axie Studio")
    assert "Stage: interested" in prompt
    assert "Topics so far: website, pricing" in prompt
    assert "Suggest a free meeting" in prompt
    assert prompt.rstrip().endswith("=== SERVICES INFORMATION ===\nWebsite: 8,995 SEK")
    assert "RELEVANT COMPANY INFORMATION:" in prompt


def test_unknown_language_falls_back_to_swedish():
    prompt = build_system_prompt("de", None, [], ServiceCatalogStore())
    assert "RELEVANT" not in prompt
    assert "Aktuella priser:" in prompt
