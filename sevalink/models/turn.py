"""
Turn Result Model - everything one pipeline run decided
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .classification import ClassificationResult
from .extraction import ExtractionResult
from .outcome import ConversationTurnOutcome, FollowUpNeeded, RequestFinalized


class TurnResult(BaseModel):
    """Result of ``process_turn``, input to the HTTP response"""

    model_config = ConfigDict(frozen=True)

    language: str
    classification: ClassificationResult
    extraction: Optional[ExtractionResult] = None
    outcome: ConversationTurnOutcome

    @property
    def response_message(self) -> str:
        if isinstance(self.outcome, FollowUpNeeded):
            return self.outcome.question
        if isinstance(self.outcome, RequestFinalized):
            return self.outcome.confirmation_message
        return self.outcome.message

    @property
    def created_request_id(self) -> Optional[str]:
        if isinstance(self.outcome, RequestFinalized):
            return self.outcome.request_id
        return None

    @property
    def using_fallback(self) -> bool:
        """True when any stage of the turn fell back to heuristics"""
        return (
            self.classification.using_fallback
            or bool(self.extraction and self.extraction.using_fallback)
            or self.outcome.using_fallback
        )
