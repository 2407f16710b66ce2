"""
Request Orchestrator - runs one citizen message through the pipeline

language -> classification -> extraction -> conversation outcome

The orchestrator holds no conversation state. The caller passes the
previous turn's slots as ``conversation_context`` and gets the next
context back in the response.
"""

import logging
from datetime import datetime
from typing import Optional

from .config.categories_config import REQUEST_CATEGORIES
from .config.settings import AGENT_SETTINGS, SUPPORTED_LANGUAGES
from .engine.completeness import CompletenessChecker
from .engine.conversation import ConversationController
from .engine.language_detector import LanguageDetector
from .engine.normalizer import Normalizer
from .engine.resolvers import ClassificationResolver, ExtractionResolver
from .errors import InputError
from .models.api_models import ChatResponse
from .models.message import IncomingMessage
from .models.outcome import FollowUpNeeded, RequestFinalized
from .models.slots import category_for_slots, enumerated_answer, merge_slot_maps
from .models.turn import TurnResult
from .prompts.templates import PromptTemplates
from .utils.formatters import Formatters
from .utils.helpers import Helpers

logger = logging.getLogger(__name__)


class RequestOrchestrator:
    """Main orchestrator for chatbot turns"""

    def __init__(self, request_service, augmentation=None, timeout: Optional[float] = None):
        """
        Args:
            request_service: user lookup and request persistence
            augmentation: AI collaborator, None to run on heuristics only
            timeout: per AI call bound in seconds
        """
        self.augmentation = augmentation
        self.detector = LanguageDetector()
        self.normalizer = Normalizer()
        self.completeness = CompletenessChecker()
        self.templates = PromptTemplates()

        self.classification_resolver = ClassificationResolver(augmentation, timeout=timeout)
        self.extraction_resolver = ExtractionResolver(
            augmentation, completeness=self.completeness, timeout=timeout
        )
        self.controller = ConversationController(
            request_service,
            augmentation,
            templates=self.templates,
            completeness=self.completeness,
            timeout=timeout
        )

        logger.info(f"✅ RequestOrchestrator initialized (AI: {augmentation is not None})")

    def validate_message(self, message: IncomingMessage) -> str:
        """Cleaned text, or InputError before any pipeline work"""
        text = message.clean_text
        if not text:
            raise InputError("Message text is required")

        max_length = AGENT_SETTINGS["max_message_length"]
        if len(text) > max_length:
            raise InputError(f"Message is too long (max {max_length} characters)")

        if message.language not in (None, "auto") and message.language not in SUPPORTED_LANGUAGES:
            raise InputError(f"Unsupported language: {message.language}")

        return text

    async def process_turn(self, message: IncomingMessage, user_id: str) -> TurnResult:
        """Run one turn and return everything it decided"""
        text = self.validate_message(message)
        Helpers.log_processing("turn", text, {"input_method": message.input_method})

        declared = None if message.language == "auto" else message.language
        language = self.detector.resolve(declared, text)
        context = message.conversation_context

        classification = (await self.classification_resolver.resolve(
            text=text, context={"language": language, "inputMethod": message.input_method}
        )).value

        # An answer to a follow-up ("Public Safety", "Household Help") keeps the pending category
        pending = message.pending_category or category_for_slots(context)
        if pending in REQUEST_CATEGORIES:
            choice = enumerated_answer(pending, text)
            if classification.category != pending and (
                    classification.category == "general_inquiry" or choice):
                logger.info(f"↪️ Continuing pending {pending} (classified {classification.category})")
                classification = classification.model_copy(update={"category": pending})
            if choice and classification.category == pending:
                slot, value = choice
                context = merge_slot_maps(context, {slot: value})

        extraction = None
        if classification.needs_request():
            extraction = (await self.extraction_resolver.resolve(
                text=text, category=classification.category, language=language, context=context
            )).value

        outcome = await self.controller.handle_turn(
            text, language, classification, extraction, user_id, message.input_method
        )

        logger.info(
            f"✅ Turn done: category={classification.category}, "
            f"state={outcome.state.value}, fallback={classification.using_fallback}"
        )
        return TurnResult(
            language=language,
            classification=classification,
            extraction=extraction,
            outcome=outcome
        )

    async def process_message(self, message: IncomingMessage, user_id: str) -> ChatResponse:
        """Run one turn and shape it as the chatbot response"""
        turn = await self.process_turn(message, user_id)
        return self.build_response(message, turn)

    def build_response(self, message: IncomingMessage, turn: TurnResult) -> ChatResponse:
        outcome = turn.outcome
        extraction = turn.extraction
        follow_up = isinstance(outcome, FollowUpNeeded)

        if follow_up:
            next_context = outcome.slots
            pending_category = turn.classification.category
        elif isinstance(outcome, RequestFinalized):
            next_context = {}
            pending_category = None
        elif extraction is not None:
            # Finalize failed, keep what we have so the user can correct it
            next_context = extraction.slots
            pending_category = turn.classification.category
        else:
            next_context = message.conversation_context
            pending_category = message.pending_category

        response_message = turn.response_message
        return ChatResponse(
            transcribed_text=message.clean_text,
            category=turn.classification.category,
            priority=turn.classification.priority,
            extracted_info=extraction.slots if extraction else {},
            missing_info=extraction.missing if (extraction and follow_up) else [],
            needs_more_info=follow_up,
            response_message=response_message,
            created_request_id=turn.created_request_id,
            using_fallback=turn.using_fallback,
            ai_extraction=bool(extraction and not extraction.using_fallback),
            detected_language=turn.language,
            input_method=message.input_method,
            confidence=message.confidence,
            conversation_context=next_context,
            pending_category=pending_category,
            needs_voice_response=message.is_voice,
            voice_response=Formatters.format_for_voice(response_message) if message.is_voice else None,
            next_expected=outcome.missing_slot if follow_up else None,
            processed_at=datetime.utcnow()
        )

    def detect_language(self, text: str) -> str:
        if not text or not text.strip():
            raise InputError("Text is required")
        return self.detector.detect(text)

    def translate(self, text: str) -> str:
        if not text or not text.strip():
            raise InputError("Text is required")
        return self.normalizer.translate_to_english(text)
