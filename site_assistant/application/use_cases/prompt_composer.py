from __future__ import annotations

from dataclasses import dataclass

from site_assistant.application.ports.service_catalog import ServiceCatalogPort
from site_assistant.application.utils.booking_marker import format_booking_marker
from site_assistant.domain.entities.conversation import (
    ConversationAnalysis,
    ConversationStage,
    InterestLevel,
)
from site_assistant.domain.entities.knowledge import KnowledgeSnippet

BOOKING_SERVICE_TYPES = (
    "onboarding",
    "website",
    "booking-system",
    "app-development",
    "ecommerce",
    "complete-service",
)


@dataclass(frozen=True)
class PromptTemplate:
    role: str
    language_rule: str
    formatting_heading: str
    formatting_rules: tuple[str, ...]
    price_heading: str
    monthly_suffix: str
    booking_heading: str
    booking_rules: tuple[str, ...]
    booking_line: str  # "{marker}" and "{description}"
    signals_heading: str
    stage_label: str
    interest_label: str
    topics_label: str
    none_label: str
    push_booking_hint: str
    soft_hint: str
    knowledge_heading: str


PROMPT_TEMPLATES: dict[str, PromptTemplate] = {
    "sv": PromptTemplate(
        role="Du är en professionell AI-assistent för {business} som hjälper användare på svenska.",
        language_rule="Du är vänlig, hjälpsam och ger alltid svar på svenska.",
        formatting_heading="Använd markdown-formatering i dina svar för bättre läsbarhet:",
        formatting_rules=(
            "Använd **fetstil** för viktiga punkter och priser",
            "Använd *kursiv* för betoning",
            "Använd listor (- eller 1.) för att strukturera information",
            "Använd ### för rubriker när det behövs",
        ),
        price_heading="Aktuella priser:",
        monthly_suffix="/månad",
        booking_heading=(
            "När användaren vill boka något, identifiera vilken tjänst de är intresserade av och svara med:"
        ),
        booking_rules=(
            "När du pratar om tjänster, priser eller ger information om våra paket, lägg ALLTID till lämplig BOOKING_INTENT.",
            "Lägg till BOOKING_INTENT i slutet av ditt svar, inte i början.",
            "Använd högst en BOOKING_INTENT per svar.",
        ),
        booking_line='"{marker}" för {description}',
        signals_heading="Samtalsläge:",
        stage_label="Fas",
        interest_label="Intressenivå",
        topics_label="Ämnen hittills",
        none_label="inga",
        push_booking_hint="Användaren visar köpintresse. Föreslå gärna ett kostnadsfritt möte.",
        soft_hint="Fokusera på att förstå behovet innan du föreslår bokning.",
        knowledge_heading="RELEVANT FÖRETAGSINFORMATION:",
    ),
    "en": PromptTemplate(
        role="You are a professional AI assistant for {business} helping users in English.",
        language_rule="You are friendly, helpful and always respond in English.",
        formatting_heading="Use markdown formatting in your responses for better readability:",
        formatting_rules=(
            "Use **bold** for important points and prices",
            "Use *italic* for emphasis",
            "Use lists (- or 1.) to structure information",
            "Use ### for headings when needed",
        ),
        price_heading="Current prices:",
        monthly_suffix="/month",
        booking_heading=(
            "When the user wants to book something, identify which service they are interested in and respond with:"
        ),
        booking_rules=(
            "When discussing services, prices, or providing information about our packages, ALWAYS add appropriate BOOKING_INTENT.",
            "Add BOOKING_INTENT at the end of your response, not at the beginning.",
            "Use at most one BOOKING_INTENT per response.",
        ),
        booking_line='"{marker}" for {description}',
        signals_heading="Conversation state:",
        stage_label="Stage",
        interest_label="Interest level",
        topics_label="Topics so far",
        none_label="none",
        push_booking_hint="The user shows buying interest. Suggest a free meeting.",
        soft_hint="Focus on understanding the need before suggesting a booking.",
        knowledge_heading="RELEVANT COMPANY INFORMATION:",
    ),
}

_BOOKING_DESCRIPTIONS = {
    "sv": {
        "onboarding": "allmän konsultation eller onboarding",
        "website": "hemsidor eller webbdesign",
        "booking-system": "bokningssystem",
        "app-development": "apputveckling",
        "ecommerce": "e-handel och webbutiker",
        "complete-service": "kompletta lösningar",
    },
    "en": {
        "onboarding": "general consultation or onboarding",
        "website": "websites or web design",
        "booking-system": "booking systems",
        "app-development": "app development",
        "ecommerce": "e-commerce and online stores",
        "complete-service": "complete solutions",
    },
}


def build_system_prompt(
    language: str,
    analysis: ConversationAnalysis | None,
    snippets: list[KnowledgeSnippet],
    catalog: ServiceCatalogPort,
    business_name: str = "Axie Studio",
) -> str:
    lang = language if language in PROMPT_TEMPLATES else "sv"
    template = PROMPT_TEMPLATES[lang]

    sections: list[str] = [
        "\n".join(
            [
                template.role.format(business=business_name),
                template.language_rule,
            ]
        ),
        _bullets(template.formatting_heading, template.formatting_rules),
        _bullets(template.price_heading, _price_lines(catalog, lang, template)),
        _bullets(template.booking_heading, _marker_lines(catalog, lang, template)),
        "\n".join(template.booking_rules),
    ]

    if analysis is not None:
        sections.append(_signals(analysis, template))

    if snippets:
        blocks = [f"=== {s.label.upper()} INFORMATION ===\n{s.content.strip()}" for s in snippets]
        sections.append(template.knowledge_heading + "\n" + "\n\n".join(blocks))

    return "\n\n".join(sections)


def _bullets(heading: str, lines: tuple[str, ...] | list[str]) -> str:
    return heading + "\n" + "\n".join(f"- {line}" for line in lines)


def _price_lines(catalog: ServiceCatalogPort, language: str, template: PromptTemplate) -> list[str]:
    lines = []
    for entry in catalog.list_services():
        if not entry.is_priced:
            continue
        line = f"{entry.display_name(language)}: {_sek(entry.setup_price_sek)}"
        if entry.monthly_price_sek:
            line += f" + {_sek(entry.monthly_price_sek)}{template.monthly_suffix}"
        lines.append(f"{line} ({entry.description(language)})")
    return lines


def _marker_lines(catalog: ServiceCatalogPort, language: str, template: PromptTemplate) -> list[str]:
    descriptions = _BOOKING_DESCRIPTIONS[language]
    return [
        template.booking_line.format(
            marker=format_booking_marker(service_type, catalog.get_display_name(service_type, language)),
            description=descriptions[service_type],
        )
        for service_type in BOOKING_SERVICE_TYPES
    ]


def _signals(analysis: ConversationAnalysis, template: PromptTemplate) -> str:
    topics = ", ".join(analysis.topics_discussed) or template.none_label
    lines = [
        f"{template.stage_label}: {analysis.stage.value}",
        f"{template.interest_label}: {analysis.interest_level.value}",
        f"{template.topics_label}: {topics}",
    ]
    if analysis.interest_level == InterestLevel.high or analysis.stage == ConversationStage.ready_to_book:
        lines.append(template.push_booking_hint)
    elif analysis.interest_level in (InterestLevel.none, InterestLevel.low):
        lines.append(template.soft_hint)
    return _bullets(template.signals_heading, lines)


def _sek(amount: int | None) -> str:
    return f"{amount or 0:,} kr"
