from fastapi import APIRouter, Depends, HTTPException

from site_assistant.api.v1.schemas import (
    AnalysisSchema,
    BookingSchema,
    ChatReplySchema,
    CreateSessionRequestSchema,
    MessageSchema,
    SecurityStatusSchema,
    SendMessageRequestSchema,
    SessionSchema,
)
from site_assistant.application.exceptions import SessionNotFoundError
from site_assistant.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from site_assistant.domain.entities.message import ChatMessage
from site_assistant.domain.entities.reply import ChatTurnResult
from site_assistant.wiring.dependencies import get_chat_use_case

router = APIRouter(prefix="/chat")


@router.post("/sessions", response_model=SessionSchema)
def create_session(
    req: CreateSessionRequestSchema | None = None,
    uc: HandleChatMessageUseCase = Depends(get_chat_use_case),
):
    try:
        session_id = uc.start_session(req.session_id if req else None)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SessionSchema(session_id=session_id, messages=_messages(uc.get_history(session_id)))


@router.get("/sessions/{session_id}/messages", response_model=SessionSchema)
def get_messages(session_id: str, uc: HandleChatMessageUseCase = Depends(get_chat_use_case)):
    try:
        history = uc.get_history(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return SessionSchema(session_id=session_id, messages=_messages(history))


@router.post("/sessions/{session_id}/messages", response_model=ChatReplySchema)
def send_message(
    session_id: str,
    req: SendMessageRequestSchema,
    uc: HandleChatMessageUseCase = Depends(get_chat_use_case),
):
    try:
        result = uc.handle(session_id, req.message)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _reply(session_id, result)


@router.get("/sessions/{session_id}/security", response_model=SecurityStatusSchema)
def get_security_status(session_id: str, uc: HandleChatMessageUseCase = Depends(get_chat_use_case)):
    try:
        status = uc.get_security_status(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return SecurityStatusSchema(**status)


@router.post("/sessions/{session_id}/security/reset", response_model=SecurityStatusSchema)
def reset_security_counters(session_id: str, uc: HandleChatMessageUseCase = Depends(get_chat_use_case)):
    try:
        uc.reset_counters(session_id)
        status = uc.get_security_status(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return SecurityStatusSchema(**status)


def _messages(history: list[ChatMessage]) -> list[MessageSchema]:
    return [
        MessageSchema(role=m.role, content=m.content, timestamp=m.timestamp, actions=list(m.actions))
        for m in history
    ]


def _reply(session_id: str, result: ChatTurnResult) -> ChatReplySchema:
    analysis = result.analysis
    booking = result.booking
    return ChatReplySchema(
        session_id=session_id,
        reply=result.text,
        language=result.language.value,
        analysis=(
            AnalysisSchema(
                stage=analysis.stage.value,
                interest_level=analysis.interest_level.value,
                topics_discussed=list(analysis.topics_discussed),
                has_asked_prices=analysis.has_asked_prices,
                has_shown_buying_intent=analysis.has_shown_buying_intent,
                conversation_length=analysis.conversation_length,
            )
            if analysis else None
        ),
        booking=(
            BookingSchema(
                should_show=booking.should_show,
                confidence=booking.confidence,
                reason=booking.reason,
                service_type=booking.service_type,
                service_name=booking.service_name,
            )
            if booking else None
        ),
        blocked=result.blocked,
        block_reason=result.block_reason,
        off_topic=result.off_topic,
        failed=result.failed,
    )
