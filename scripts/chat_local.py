#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Opens one chat session and keeps it until /new
- Sends your typed messages through the same HandleChatMessageUseCase the API uses
- Prints decision details (language, stage, interest, booking button) and the reply text
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from site_assistant.application.use_cases.handle_chat_message import HandleChatMessageUseCase  # noqa: E402
from site_assistant.domain.entities.reply import ChatTurnResult  # noqa: E402
from site_assistant.wiring.dependencies import get_chat_use_case  # noqa: E402


def _print_header(session_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"session_id: {session_id}")
    print("Type your message and press Enter.")
    print("Commands: /new, /history, /status, /reset, /quit, /help")
    print("-" * 60)


def _print_result(result: ChatTurnResult) -> None:
    print("\n--- Decision ---")
    print(f"language: {result.language.value}")
    if result.blocked:
        print(f"blocked: {result.block_reason}")
    if result.off_topic:
        print("off_topic: True")
    if result.failed:
        print("failed: completion unavailable, nothing saved")
    if result.analysis:
        print(f"stage: {result.analysis.stage.value}")
        print(f"interest: {result.analysis.interest_level.value}")
        print(f"topics: {', '.join(result.analysis.topics_discussed) or '-'}")
    if result.booking:
        if result.booking.should_show:
            print(
                f"booking: show {result.booking.service_type} ({result.booking.service_name}) "
                f"confidence={result.booking.confidence}"
            )
        else:
            print(f"booking: hidden ({result.booking.reason})")

    print("\n--- Reply ---")
    print(result.text.strip() or "(empty reply)")
    print("-" * 60)


def _start(use_case: HandleChatMessageUseCase) -> str:
    session_id = use_case.start_session(os.getenv("CHAT_SESSION_ID") or None)
    _print_header(session_id)
    history = use_case.get_history(session_id)
    if history:
        print(f"(assistant) {history[-1].content}")
    return session_id


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    use_case = get_chat_use_case()
    session_id = _start(use_case)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new     -> start a new session")
            print("  /history -> show last 10 messages")
            print("  /status  -> show violation and off-topic counters")
            print("  /reset   -> zero the counters")
            print("  /quit    -> exit")
            continue
        if cmd == "/new":
            os.environ.pop("CHAT_SESSION_ID", None)
            session_id = _start(use_case)
            continue
        if cmd == "/history":
            print("\n--- History (last 10) ---")
            for item in use_case.get_history(session_id)[-10:]:
                print(f"{item.role}: {item.content}")
            continue
        if cmd == "/status":
            status = use_case.get_security_status(session_id)
            print(f"violations: {status['violations']}  off_topic_attempts: {status['off_topic_attempts']}")
            continue
        if cmd == "/reset":
            use_case.reset_counters(session_id)
            print("Counters reset.")
            continue

        _print_result(use_case.handle(session_id, user_text))


if __name__ == "__main__":
    main()
