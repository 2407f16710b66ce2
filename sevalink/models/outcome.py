"""
Conversation turn outcomes - exactly one is produced per turn
"""

from typing import Optional, Dict, Any, Union

from pydantic import BaseModel, ConfigDict, Field

from .request_entity import ServiceRequestEntity
from .state import ConversationState


class FollowUpNeeded(BaseModel):
    """A required slot is missing, ask for it and carry the slots forward"""

    model_config = ConfigDict(frozen=True)

    question: str
    missing_slot: str
    slots: Dict[str, Any] = Field(default_factory=dict)
    using_fallback: bool = False

    @property
    def state(self) -> ConversationState:
        return ConversationState.MISSING_SLOTS


class RequestFinalized(BaseModel):
    """A service request was assembled and persisted"""

    model_config = ConfigDict(frozen=True)

    entity: ServiceRequestEntity
    request_id: str
    confirmation_message: str
    using_fallback: bool = False

    @property
    def state(self) -> ConversationState:
        return ConversationState.FINALIZE


class GeneralReply(BaseModel):
    """Conversational answer; also used when finalizing had to be abandoned"""

    model_config = ConfigDict(frozen=True)

    message: str
    error: Optional[str] = None
    using_fallback: bool = False

    @property
    def state(self) -> ConversationState:
        return ConversationState.GENERAL_REPLY


ConversationTurnOutcome = Union[FollowUpNeeded, RequestFinalized, GeneralReply]
