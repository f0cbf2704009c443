from pydantic import BaseModel, Field


class CreateSessionRequestSchema(BaseModel):
    session_id: str | None = None


class MessageSchema(BaseModel):
    role: str
    content: str
    timestamp: float
    actions: list[str] = Field(default_factory=list)


class SessionSchema(BaseModel):
    session_id: str
    messages: list[MessageSchema]


class SendMessageRequestSchema(BaseModel):
    message: str


class AnalysisSchema(BaseModel):
    stage: str
    interest_level: str
    topics_discussed: list[str] = Field(default_factory=list)
    has_asked_prices: bool = False
    has_shown_buying_intent: bool = False
    conversation_length: int = 0


class BookingSchema(BaseModel):
    should_show: bool
    confidence: float
    reason: str
    service_type: str | None = None
    service_name: str | None = None


class ChatReplySchema(BaseModel):
    session_id: str
    reply: str
    language: str
    analysis: AnalysisSchema | None = None
    booking: BookingSchema | None = None
    blocked: bool = False
    block_reason: str | None = None
    off_topic: bool = False
    failed: bool = False


class SecurityStatusSchema(BaseModel):
    violations: int
    off_topic_attempts: int


class ContactRequestSchema(BaseModel):
    email: str
    name: str | None = None
    language: str = "sv"


class ContactResponseSchema(BaseModel):
    success: bool
    message: str
    internal_id: str | None = None
