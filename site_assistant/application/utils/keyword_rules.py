from __future__ import annotations

import re

SWEDISH_INDICATORS = (
    "hej", "tack", "och", "är", "för", "med", "på", "av", "till", "från",
    "vad", "hur", "när", "var", "varför", "kan", "vill", "ska", "skulle",
    "tjänst", "företag", "pris", "kostnad", "hemsida", "bokning",
)

ENGLISH_INDICATORS = (
    "hello", "hi", "thank", "thanks", "and", "the", "for", "with", "from", "to",
    "what", "how", "when", "where", "why", "can", "will", "would", "should",
    "service", "company", "price", "cost", "website", "booking",
)

# Ordered: the first rule with a hit decides the reason.
SECURITY_RULES: dict[str, tuple[tuple[tuple[str, ...], str], ...]] = {
    "sv": (
        (("hat", "hatar", "idiot", "dum", "korkad", "jävla", "fan", "skit"), "Inappropriate language detected"),
        (("spam", "reklam", "köp nu", "gratis pengar", "vinn pengar"), "Spam content detected"),
        (("personuppgifter", "personnummer", "lösenord", "bankuppgifter"), "Personal information sharing"),
        (("min ai", "my ai", "du är min", "you are mine", "äger dig", "own you"), "AI ownership attempt"),
        (("vem skapade", "who created", "din ägare", "your owner", "vem äger", "who owns"), "Asking about AI internals"),
        (("heta dig", "call you", "döpa dig", "name you", "vara tyst", "be quiet", "shut up"), "Attempting to control AI"),
        (("tjäna pengar", "make money", "bli rik", "get rich", "snabba pengar"), "Money-making schemes"),
        (("krypto", "bitcoin", "investering", "aktier", "trading"), "Financial advice requests"),
    ),
    "en": (
        (("hate", "stupid", "idiot", "dumb", "damn", "shit", "fuck"), "Inappropriate language detected"),
        (("spam", "buy now", "free money", "win money", "advertisement"), "Spam content detected"),
        (("personal data", "social security", "password", "bank details"), "Personal information sharing"),
        (("my ai", "you are mine", "i own you", "belong to me"), "AI ownership attempt"),
        (("who created you", "your owner", "who owns you", "who made you"), "Asking about AI internals"),
        (("call you", "name you", "be quiet", "shut up", "be still"), "Attempting to control AI"),
        (("make money", "get rich", "quick money", "easy money"), "Money-making schemes"),
        (("crypto", "bitcoin", "investment", "stocks", "trading"), "Financial advice requests"),
    ),
}

REPEATED_VIOLATIONS_REASON = "Repeated security violations detected"

OFF_TOPIC_KEYWORDS: dict[str, tuple[str, ...]] = {
    "sv": (
        # math
        "räkna", "matematik", "matte", "kalkyl", "plus", "minus", "gånger", "delat", "1+1", "beräkna",
        # geography
        "geografi", "sverige", "storlek", "area", "befolkning", "huvudstad", "land", "kontinent",
        # sport
        "backflip", "bakåtvolter", "sport", "träning", "gym", "löpning", "simning", "fotboll",
        # personal
        "personlig", "privat", "familj", "vänner", "kärlek", "dejting", "förhållande",
        # food
        "mat", "recept", "koka", "laga mat", "ingredienser", "restaurang tips",
        # weather, news
        "väder", "temperatur", "regn", "sol", "nyheter", "politik", "regering",
        # health
        "hälsa", "medicin", "sjukdom", "läkare", "behandling", "symtom",
        # education, jobs
        "skola", "utbildning", "universitet", "jobb", "karriär", "anställning",
        # entertainment
        "film", "musik", "spel", "tv-serie", "bok", "konsert", "teater",
    ),
    "en": (
        "calculate", "math", "mathematics", "plus", "minus", "times", "divided", "1+1", "compute",
        "geography", "sweden", "size", "area", "population", "capital", "country", "continent",
        "backflip", "sports", "exercise", "gym", "running", "swimming", "football", "basketball",
        "personal", "private", "family", "friends", "love", "dating", "relationship",
        "food", "recipe", "cook", "cooking", "ingredients", "restaurant recommendations",
        "weather", "temperature", "rain", "sun", "news", "politics", "government",
        "health", "medicine", "disease", "doctor", "treatment", "symptoms",
        "school", "education", "university", "job", "career", "employment",
        "movie", "music", "game", "tv show", "book", "concert", "theater",
    ),
}

BUSINESS_KEYWORDS: dict[str, tuple[str, ...]] = {
    "sv": (
        "axie", "studio", "hemsida", "website", "app", "bokning", "booking", "tjänst", "service",
        "pris", "kostnad", "utveckling", "design", "konsultation", "företag", "digitala", "lösningar",
    ),
    "en": (
        "axie", "studio", "website", "app", "booking", "service", "price", "cost",
        "development", "design", "consultation", "company", "digital", "solutions",
    ),
}

TOPIC_KEYWORDS: dict[str, tuple[str, ...]] = {
    "website": ("hemsida", "website", "webbplats", "web"),
    "app": ("app", "mobilapp", "application"),
    "booking": ("bokning", "booking", "bokningssystem"),
    "ecommerce": ("e-handel", "webshop", "shop", "commerce"),
    "pricing": ("pris", "kostnad", "kostar", "price", "cost", "how much", "hur mycket", "kr", "sek"),
}

BUYING_INTENT_KEYWORDS = (
    "vill ha", "behöver", "köpa", "beställa", "boka", "komma igång",
    "want", "need", "buy", "order", "book", "get started", "interested in",
)

# Priority order when no explicit marker names the service.
SERVICE_TYPE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("app-development", ("app", "mobilapp")),
    ("booking-system", ("bokning", "booking")),
    ("ecommerce", ("webshop", "e-handel")),
    ("website", ("hemsida", "website")),
)
DEFAULT_SERVICE_TYPE = "onboarding"

PRICE_QUESTION_RE = re.compile(
    r"\b(pris|kostnad|price|cost|hur mycket|how much|vad kostar|what does.*cost)\b",
    re.IGNORECASE,
)

GENERAL_QUESTION_RE = re.compile(
    r"\b(vad är|what is|berätta om|tell me about|hur fungerar|how does)\b",
    re.IGNORECASE,
)


def normalize_text(text: str | None) -> str:
    return (text or "").lower()


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    normalized = normalize_text(text)
    return any(keyword in normalized for keyword in keywords)


def count_hits(text: str, keywords: tuple[str, ...]) -> int:
    normalized = normalize_text(text)
    return sum(1 for keyword in keywords if keyword in normalized)


def extract_topics(text: str) -> tuple[str, ...]:
    normalized = normalize_text(text)
    return tuple(
        topic for topic, keywords in TOPIC_KEYWORDS.items()
        if any(keyword in normalized for keyword in keywords)
    )


def has_price_question(text: str) -> bool:
    return PRICE_QUESTION_RE.search(normalize_text(text)) is not None


def has_buying_intent(text: str) -> bool:
    return contains_any(text, BUYING_INTENT_KEYWORDS)


def is_general_question(text: str) -> bool:
    """
    "What is / tell me about / how does" style questions.
    These should not trigger the booking button unless prices came up.
    """
    return GENERAL_QUESTION_RE.search(normalize_text(text)) is not None


def derive_service_type(text: str) -> str:
    normalized = normalize_text(text)
    for service_type, keywords in SERVICE_TYPE_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return service_type
    return DEFAULT_SERVICE_TYPE
