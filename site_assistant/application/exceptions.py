class LLMUpstreamError(RuntimeError):
    """Raised when LLM provider fails (timeouts, network errors, service unavailable)."""
    pass


class LLMContractError(RuntimeError):
    """Raised when LLM adapter violates contract (empty or unusable response)."""
    pass


class WebhookDeliveryError(RuntimeError):
    """Raised when the contact webhook cannot be reached or answers non-2xx."""
    pass


class SessionNotFoundError(LookupError):
    pass
