from functools import lru_cache
import logging

from site_assistant.core.config import settings
from site_assistant.application.ports.contact_notifier import ContactNotifierPort
from site_assistant.application.ports.knowledge_base import KnowledgeBasePort
from site_assistant.application.ports.llm import CompletionPort
from site_assistant.application.ports.service_catalog import ServiceCatalogPort
from site_assistant.application.ports.session_store import SessionStorePort
from site_assistant.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from site_assistant.application.use_cases.submit_contact import SubmitContactUseCase
from site_assistant.infrastructure.classifier.rule_based_classifier import RuleBasedMessageClassifier
from site_assistant.infrastructure.knowledge.file_kb import FileKnowledgeBase
from site_assistant.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from site_assistant.infrastructure.llm.mock_llm import MockCompletion
from site_assistant.infrastructure.llm.openai_llm import OpenAICompletion
from site_assistant.infrastructure.store.json_store import JsonSessionStore
from site_assistant.infrastructure.store.memory_store import MemorySessionStore
from site_assistant.infrastructure.webhook.contact_webhook import HttpContactNotifier, UnconfiguredContactNotifier

logger = logging.getLogger(__name__)


@lru_cache
def get_completion() -> CompletionPort:
    if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip():
        return OpenAICompletion()
    logger.info("Using MockCompletion (OPENAI_API_KEY missing)")
    return MockCompletion()


@lru_cache
def get_session_store() -> SessionStorePort:
    if settings.STORE_PROVIDER.lower() == "json":
        return JsonSessionStore(data_dir=settings.STORE_DATA_DIR, history_limit=settings.HISTORY_LIMIT)
    return MemorySessionStore(history_limit=settings.HISTORY_LIMIT)


@lru_cache
def get_knowledge_base() -> KnowledgeBasePort:
    return FileKnowledgeBase(data_dir=settings.KNOWLEDGE_DIR)


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_contact_notifier() -> ContactNotifierPort:
    if not settings.CONTACT_WEBHOOK_URL:
        logger.warning("CONTACT_WEBHOOK_URL not configured; contact requests will fail")
        return UnconfiguredContactNotifier()
    return HttpContactNotifier(
        webhook_url=settings.CONTACT_WEBHOOK_URL,
        timeout=settings.CONTACT_WEBHOOK_TIMEOUT_SECONDS,
    )


def get_chat_use_case() -> HandleChatMessageUseCase:
    return HandleChatMessageUseCase(
        store=get_session_store(),
        kb=get_knowledge_base(),
        classifier=RuleBasedMessageClassifier(),
        completion=get_completion(),
        catalog=get_service_catalog(),
        business_name=settings.BUSINESS_NAME,
    )


def get_contact_use_case() -> SubmitContactUseCase:
    return SubmitContactUseCase(
        notifier=get_contact_notifier(),
        routing_id=settings.CONTACT_ROUTING_ID,
    )
