"""
Incoming Message Model
"""

from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IncomingMessage(BaseModel):
    """A citizen message as received, typed or voice-transcribed"""

    model_config = ConfigDict(frozen=True)

    text: str
    language: Optional[str] = None
    input_method: str = "text"
    confidence: Optional[float] = None
    conversation_context: Dict[str, Any] = Field(default_factory=dict)
    # Category of the previous turn's follow-up question, echoed back by the client
    pending_category: Optional[str] = None

    @field_validator('input_method')
    @classmethod
    def validate_input_method(cls, v):
        if v not in ("voice", "text"):
            raise ValueError("input_method must be 'voice' or 'text'")
        return v

    @field_validator('confidence')
    @classmethod
    def validate_confidence(cls, v):
        if v is None:
            return v
        if not 0.0 <= v <= 1.0:
            raise ValueError("confidence must be between 0 and 1")
        return v

    @field_validator('conversation_context', mode='before')
    @classmethod
    def drop_empty_slots(cls, v):
        if not v:
            return {}
        return {key: value for key, value in dict(v).items() if value not in (None, "", [])}

    @property
    def is_voice(self) -> bool:
        return self.input_method == "voice"

    @property
    def clean_text(self) -> str:
        return self.text.strip()
