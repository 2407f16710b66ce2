"""
Models Package - Exports all model classes
"""

from .classification import ClassificationResult
from .message import IncomingMessage
from .slots import SlotMap, merge_slot_maps, filter_slots, category_for_slots, enumerated_answer
from .state import ConversationState
from .request_entity import (
    RequestLocation,
    ServiceRequestEntity,
    BloodRequestEntity,
    ElderSupportEntity,
    ComplaintEntity
)
from .extraction import ExtractionResult
from .outcome import FollowUpNeeded, RequestFinalized, GeneralReply, ConversationTurnOutcome
from .turn import TurnResult
from .api_models import (
    TextMessageRequest,
    VoiceTextRequest,
    DetectLanguageRequest,
    TranslateRequest,
    ChatResponse,
    ChatEnvelope
)

__all__ = [
    "ClassificationResult",
    "IncomingMessage",
    "SlotMap",
    "merge_slot_maps",
    "filter_slots",
    "category_for_slots",
    "enumerated_answer",
    "ConversationState",
    "RequestLocation",
    "ServiceRequestEntity",
    "BloodRequestEntity",
    "ElderSupportEntity",
    "ComplaintEntity",
    "FollowUpNeeded",
    "RequestFinalized",
    "GeneralReply",
    "ExtractionResult",
    "ConversationTurnOutcome",
    "TurnResult",
    "TextMessageRequest",
    "VoiceTextRequest",
    "DetectLanguageRequest",
    "TranslateRequest",
    "ChatResponse",
    "ChatEnvelope"
]
