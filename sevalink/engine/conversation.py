"""
Conversation Controller - three-state turn machine

Each turn ends in exactly one outcome:
    GENERAL_REPLY  -> GeneralReply
    MISSING_SLOTS  -> FollowUpNeeded (slots become the next conversationContext)
    FINALIZE       -> RequestFinalized, or GeneralReply with ``error`` set when
                      validation or persistence fails
"""

import logging
from typing import Optional

from pydantic import ValidationError as EntityValidationError

from .completeness import CompletenessChecker
from .general_responder import GeneralResponder
from .request_assembler import RequestAssembler
from .resolvers import FollowUpResolver, ConfirmationResolver
from ..errors import ValidationError, PersistenceError
from ..models.classification import ClassificationResult
from ..models.extraction import ExtractionResult
from ..models.outcome import FollowUpNeeded, RequestFinalized, GeneralReply, ConversationTurnOutcome
from ..models.state import ConversationState
from ..prompts.templates import PromptTemplates
from ..utils.formatters import Formatters
from ..validators.request_validator import RequestValidator

logger = logging.getLogger(__name__)


class ConversationController:
    """Decides and carries out the outcome of one turn"""

    def __init__(self, request_service, augmentation=None,
                 templates: Optional[PromptTemplates] = None,
                 completeness: Optional[CompletenessChecker] = None,
                 assembler: Optional[RequestAssembler] = None,
                 validator: Optional[RequestValidator] = None,
                 responder: Optional[GeneralResponder] = None,
                 timeout: Optional[float] = None):
        self.request_service = request_service
        self.templates = templates or PromptTemplates()
        self.completeness = completeness or CompletenessChecker()
        self.assembler = assembler or RequestAssembler()
        self.validator = validator or RequestValidator()
        self.responder = responder or GeneralResponder(self.templates)
        self.follow_up_resolver = FollowUpResolver(augmentation, self.templates, timeout=timeout)
        self.confirmation_resolver = ConfirmationResolver(augmentation, self.templates, timeout=timeout)

    def decide_state(self, classification: ClassificationResult,
                     extraction: Optional[ExtractionResult]) -> ConversationState:
        if not classification.needs_request() or extraction is None:
            return ConversationState.GENERAL_REPLY
        if extraction.needs_more_info and extraction.missing:
            return ConversationState.MISSING_SLOTS
        return ConversationState.FINALIZE

    async def handle_turn(self, message: str, language: str, classification: ClassificationResult,
                          extraction: Optional[ExtractionResult], user_id: str,
                          input_method: str = "text") -> ConversationTurnOutcome:
        """Run the branch chosen by ``decide_state``"""
        state = self.decide_state(classification, extraction)
        logger.info(f"🔀 State: {state.value} (category={classification.category})")

        if state == ConversationState.GENERAL_REPLY:
            return self.general_reply(message, language, classification)

        if state == ConversationState.MISSING_SLOTS:
            return await self.ask_follow_up(classification.category, extraction, language)

        return await self.finalize(message, language, classification, extraction, user_id, input_method)

    def general_reply(self, message: str, language: str, classification: ClassificationResult) -> GeneralReply:
        if classification.response and not classification.using_fallback:
            return GeneralReply(message=classification.response, using_fallback=False)

        reply = self.responder.respond(message, classification.category, language)
        return GeneralReply(message=reply, using_fallback=True)

    async def ask_follow_up(self, category: str, extraction: ExtractionResult, language: str) -> FollowUpNeeded:
        slot = self.completeness.next_slot(category, extraction.missing)
        resolution = await self.follow_up_resolver.resolve(
            category=category, missing_field=slot, slots=extraction.slots, language=language
        )
        return FollowUpNeeded(
            question=resolution.value,
            missing_slot=slot,
            slots=extraction.slots,
            using_fallback=resolution.using_fallback
        )

    async def finalize(self, message: str, language: str, classification: ClassificationResult,
                       extraction: ExtractionResult, user_id: str, input_method: str) -> ConversationTurnOutcome:
        category = classification.category
        slots = extraction.slots

        try:
            self.validator.validate(category, slots)
        except ValidationError as e:
            logger.warning(f"⚠️ Finalize blocked for {category}: {e}")
            return GeneralReply(
                message=self.templates.get_validation_apology(Formatters.format_slot_name(e.field)),
                error=str(e)
            )

        try:
            user = self.request_service.find_user_by_id(user_id)
            entity = self.assembler.assemble(
                category, slots, message, user, classification.priority, input_method
            )
            request_id = self.request_service.create(entity)
        except EntityValidationError as e:
            logger.warning(f"⚠️ Request entity rejected for {category}: {e}")
            return GeneralReply(
                message=self.templates.get_persistence_failure(),
                error=f"Invalid request details: {e.error_count()} error(s)"
            )
        except PersistenceError as e:
            logger.error(f"❌ Could not persist {category} request: {e}")
            return GeneralReply(message=self.templates.get_persistence_failure(), error=str(e))

        resolution = await self.confirmation_resolver.resolve(
            category=category, slots=slots, request_id=request_id, language=language
        )
        return RequestFinalized(
            entity=entity,
            request_id=request_id,
            confirmation_message=resolution.value,
            using_fallback=resolution.using_fallback
        )
