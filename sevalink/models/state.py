"""
Conversation States Enum
"""

from enum import Enum


class ConversationState(Enum):
    """Per-turn decision states of the conversation controller"""

    GENERAL_REPLY = "general_reply"
    MISSING_SLOTS = "missing_slots"
    FINALIZE = "finalize"
