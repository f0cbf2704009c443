from __future__ import annotations

WELCOME_MESSAGE = "Hej! Jag är Axie, din AI-assistent från Axie Studio. Hur kan jag hjälpa dig idag?"

# Canned replies are stored in history and scanned by the conversation analysis,
# so none of them may contain topic or buying-intent keywords.
_BLOCK_REPLIES = {
    "sv": (
        "Jag kan inte hjälpa med det. Låt oss hålla konversationen professionell och fokusera på "
        "hur Axie Studio kan hjälpa dig med digitala lösningar."
    ),
    "en": (
        "I cannot help with that. Let's keep the conversation professional and focus on how "
        "Axie Studio can help you with digital solutions."
    ),
}

_REDIRECT_REPLIES = {
    "sv": (
        "Jag är här för att hjälpa dig med digitala lösningar från Axie Studio. "
        "Hur kan jag assistera dig med våra tjänster?"
    ),
    "en": (
        "I'm here to help you with digital solutions from Axie Studio. "
        "How can I assist you with our services?"
    ),
}

# Used when a reply held nothing but a booking marker.
_MARKER_ONLY_REPLIES = {
    "sv": "Jag har förberett nästa steg åt dig nedan.",
    "en": "I have prepared the next step for you below.",
}

_APOLOGIES = {
    "sv": "Ursäkta, jag har problem med anslutningen just nu. Försök igen om ett ögonblick.",
    "en": "Sorry, I'm having trouble connecting right now. Please try again in a moment.",
}


def build_block_reply(language: str) -> str:
    return _BLOCK_REPLIES.get(language, _BLOCK_REPLIES["sv"])


def build_redirect_reply(language: str) -> str:
    return _REDIRECT_REPLIES.get(language, _REDIRECT_REPLIES["sv"])


def build_apology(language: str) -> str:
    return _APOLOGIES.get(language, _APOLOGIES["sv"])


def build_marker_only_reply(language: str) -> str:
    return _MARKER_ONLY_REPLIES.get(language, _MARKER_ONLY_REPLIES["sv"])
