"""
API Request/Response Models
"""

from datetime import datetime
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextMessageRequest(_CamelModel):
    """Typed chat message"""

    message: str
    language: Optional[str] = Field(default="auto", pattern="^(auto|en|hi|te)$")
    conversation_context: Dict[str, Any] = Field(default_factory=dict)
    pending_category: Optional[str] = Field(default=None, pattern="^(blood_request|elder_support|complaint)$")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "message": "I need O positive blood urgently",
                "language": "en",
                "conversationContext": {},
                "pendingCategory": None
            }
        }
    )


class VoiceTextRequest(TextMessageRequest):
    """Chat message already transcribed by the speech-to-text collaborator"""

    confidence: float = Field(default=0.95, ge=0.0, le=1.0)
    voice_metadata: Dict[str, Any] = Field(default_factory=dict)


class DetectLanguageRequest(_CamelModel):
    text: str = Field(..., max_length=1000)


class TranslateRequest(_CamelModel):
    text: str = Field(..., max_length=1000)


class ChatResponse(_CamelModel):
    """Result of one conversation turn"""

    transcribed_text: str
    category: str
    priority: str
    extracted_info: Dict[str, Any] = Field(default_factory=dict)
    missing_info: List[str] = Field(default_factory=list)
    needs_more_info: bool = False
    response_message: str
    created_request_id: Optional[str] = None
    using_fallback: bool = False
    ai_extraction: bool = False
    detected_language: str = "en"
    input_method: str = "text"
    confidence: Optional[float] = None
    conversation_context: Dict[str, Any] = Field(default_factory=dict)
    pending_category: Optional[str] = None
    needs_voice_response: bool = False
    voice_response: Optional[str] = None
    next_expected: Optional[str] = None
    processed_at: datetime = Field(default_factory=datetime.utcnow)


class ChatEnvelope(_CamelModel):
    """Envelope returned by the chatbot routes"""

    success: bool = True
    message: str
    data: ChatResponse
