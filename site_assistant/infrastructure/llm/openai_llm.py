from __future__ import annotations

from openai import OpenAI

from site_assistant.application.exceptions import LLMContractError, LLMUpstreamError
from site_assistant.application.ports.llm import CompletionPort
from site_assistant.core.config import settings
from site_assistant.domain.entities.message import ChatMessage


class OpenAICompletion(CompletionPort):
    """
    OpenAI-backed adapter implementing CompletionPort.

    Contract guarantees:
    - complete returns non-empty text, markers untouched
    - One attempt per turn: the SDK's own retries are disabled
    - Raises:
        LLMUpstreamError: networking/provider failures and timeouts
        LLMContractError: empty reply text
    """

    def __init__(self, client: OpenAI | None = None) -> None:
        self.client = client or OpenAI(
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.COMPLETION_TIMEOUT_SECONDS,
            max_retries=0,
        )

    def complete(self, system_prompt: str, messages: list[ChatMessage]) -> str:
        chat = [{"role": "system", "content": system_prompt}]
        chat += [{"role": m.role, "content": m.content} for m in messages if m.role in {"user", "assistant"}]
        return self._call_text(
            model=settings.OPENAI_MODEL_REPLY,
            messages=chat,
            temperature=settings.OPENAI_TEMPERATURE_REPLY,
        )

    def _call_text(self, model: str, messages: list[dict[str, str]], temperature: float) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=settings.OPENAI_MAX_TOKENS,
            )
        except Exception as e:
            raise LLMUpstreamError(f"OpenAI API error: {e}") from e

        content = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not content:
            raise LLMContractError("LLM returned empty response text.")

        return content
