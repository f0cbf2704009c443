from __future__ import annotations


def build_session_title(first_message: str) -> str:
    words = first_message.strip().split()
    title = " ".join(words[:6])
    return title[:47] + "..." if len(title) > 50 else title
