from abc import ABC, abstractmethod

from site_assistant.domain.entities.message import ChatMessage


class CompletionPort(ABC):
    @abstractmethod
    def complete(self, system_prompt: str, messages: list[ChatMessage]) -> str:
        """
        Generate one assistant reply.

        Requirements:
        - Single request/response, no streaming
        - `messages` is the ordered user/assistant conversation, oldest first
        - Reply may contain at most one BOOKING_INTENT:<type>:<label>| marker

        Raises:
            LLMUpstreamError: provider, network or timeout failures
            LLMContractError: empty or unusable reply
        """
        raise NotImplementedError
