"""
Stage Resolvers - try the AI collaborator, fall back to the local heuristic

One resolver per call site. ``resolve`` never raises for AI problems:
timeouts, AugmentationUnavailable and unexpected errors all end in the
heuristic result with ``using_fallback`` set.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .classifier import RequestClassifier, PriorityResolver
from .completeness import CompletenessChecker
from ..config.categories_config import SLOT_NAMES
from ..config.settings import LLM_SETTINGS
from ..errors import AugmentationUnavailable
from ..extractors.request_info_extractor import RequestInfoExtractor
from ..models.classification import ClassificationResult
from ..models.extraction import ExtractionResult
from ..models.slots import merge_slot_maps
from ..prompts.builder import PromptBuilder
from ..prompts.templates import PromptTemplates

logger = logging.getLogger(__name__)


class Resolution(BaseModel):
    """A stage value tagged with where it came from"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any
    using_fallback: bool
    source: str


class StageResolver(ABC):
    """Template for one AI call site with a heuristic substitute"""

    operation = "augmentation"

    def __init__(self, augmentation=None, timeout: Optional[float] = None):
        self.augmentation = augmentation
        self.timeout = timeout if timeout is not None else LLM_SETTINGS["timeout"]

    @abstractmethod
    async def augment(self, **kwargs) -> Any:
        """Call the AI collaborator"""
        pass

    @abstractmethod
    def fallback(self, **kwargs) -> Any:
        """Local heuristic result"""
        pass

    def accept(self, raw: Any, **kwargs) -> Any:
        """
        Turn the raw AI answer into the stage value. Raise
        AugmentationUnavailable to reject it.
        """
        return raw

    async def resolve(self, **kwargs) -> Resolution:
        if self.augmentation is not None:
            try:
                raw = await asyncio.wait_for(self.augment(**kwargs), timeout=self.timeout)
                value = self.accept(raw, **kwargs)
                logger.info(f"🤖 {self.operation}: AI result accepted")
                return Resolution(value=value, using_fallback=False, source="ai")
            except asyncio.TimeoutError:
                logger.warning(f"⏱️ {self.operation}: AI timed out after {self.timeout}s, using heuristic")
            except AugmentationUnavailable as e:
                logger.warning(f"⚠️ {self.operation}: {e}, using heuristic")
            except Exception as e:
                logger.error(f"❌ {self.operation}: unexpected AI failure: {e}", exc_info=True)

        return Resolution(value=self.fallback(**kwargs), using_fallback=True, source="heuristic")


class ClassificationResolver(StageResolver):
    """
    AI category wins unless it is missing or general_inquiry; AI priority
    wins when present.
    """

    operation = "classify"

    def __init__(self, augmentation=None, classifier: Optional[RequestClassifier] = None,
                 priority_resolver: Optional[PriorityResolver] = None, timeout: Optional[float] = None):
        super().__init__(augmentation, timeout)
        self.classifier = classifier or RequestClassifier()
        self.priority_resolver = priority_resolver or PriorityResolver()

    async def augment(self, text: str, context: dict) -> dict:
        return await self.augmentation.classify(text, context)

    def accept(self, raw: dict, text: str, context: dict) -> ClassificationResult:
        ai_category = raw.get("category")
        category = (
            ai_category if ai_category and ai_category != "general_inquiry"
            else self.classifier.categorize(text)
        )
        return ClassificationResult(
            category=category,
            priority=raw.get("priority") or self.priority_resolver.determine(text),
            using_fallback=False,
            response=raw.get("response")
        )

    def fallback(self, text: str, context: dict) -> ClassificationResult:
        return ClassificationResult(
            category=self.classifier.categorize(text),
            priority=self.priority_resolver.determine(text),
            using_fallback=True
        )


class ExtractionResolver(StageResolver):
    """
    AI extraction is used only when it reports success and did not fall
    back itself; otherwise heuristic extraction is used in full.
    """

    operation = "extract"

    def __init__(self, augmentation=None, info_extractor: Optional[RequestInfoExtractor] = None,
                 completeness: Optional[CompletenessChecker] = None, timeout: Optional[float] = None):
        super().__init__(augmentation, timeout)
        self.info_extractor = info_extractor or RequestInfoExtractor()
        self.completeness = completeness or CompletenessChecker()

    async def augment(self, text: str, category: str, language: str, context: dict) -> dict:
        return await self.augmentation.extract(text, category, language, context)

    def accept(self, raw: dict, text: str, category: str, language: str, context: dict) -> ExtractionResult:
        if not raw.get("success") or raw.get("usingFallback"):
            raise AugmentationUnavailable(self.operation, "AI extraction reported a fallback")

        slots = merge_slot_maps(context, raw.get("extractedInfo") or {})
        allowed = SLOT_NAMES.get(category, [])
        missing = self.completeness.order_missing(
            category, [name for name in raw.get("missingRequired") or [] if name in allowed]
        )
        return ExtractionResult(
            slots=slots,
            missing=missing,
            needs_more_info=bool(raw.get("needsMoreInfo")) and bool(missing),
            using_fallback=False
        )

    def fallback(self, text: str, category: str, language: str, context: dict) -> ExtractionResult:
        slots = self.info_extractor.extract_request_info(text, category, context)
        missing = self.completeness.get_missing_required_info(category, slots)
        return ExtractionResult(
            slots=slots,
            missing=missing,
            needs_more_info=bool(missing),
            using_fallback=True
        )


class FollowUpResolver(StageResolver):
    """Question for the single highest-priority missing slot"""

    operation = "follow_up"

    def __init__(self, augmentation=None, templates: Optional[PromptTemplates] = None,
                 timeout: Optional[float] = None):
        super().__init__(augmentation, timeout)
        self.templates = templates or PromptTemplates()

    async def augment(self, category: str, missing_field: str, slots: dict, language: str) -> dict:
        return await self.augmentation.generate_follow_up(category, missing_field, slots, language)

    def accept(self, raw: dict, category: str, missing_field: str, slots: dict, language: str) -> str:
        question = (raw.get("question") or "").strip()
        if not raw.get("success") or raw.get("usingFallback") or not question:
            raise AugmentationUnavailable(self.operation, "AI question rejected")
        return question

    def fallback(self, category: str, missing_field: str, slots: dict, language: str) -> str:
        return self.templates.get_follow_up_question(category, missing_field, slots, language)


class ConfirmationResolver(StageResolver):
    """Message shown after a request was saved"""

    operation = "confirmation"

    def __init__(self, augmentation=None, templates: Optional[PromptTemplates] = None,
                 prompt_builder: Optional[PromptBuilder] = None, timeout: Optional[float] = None):
        super().__init__(augmentation, timeout)
        self.templates = templates or PromptTemplates()
        self.prompt_builder = prompt_builder or PromptBuilder()

    async def augment(self, category: str, slots: dict, request_id: str, language: str) -> dict:
        prompt = self.prompt_builder.build_confirmation_prompt(category, slots, request_id, language)
        return await self.augmentation.generate_confirmation(prompt, language)

    def accept(self, raw: dict, category: str, slots: dict, request_id: str, language: str) -> str:
        response = (raw.get("response") or "").strip()
        if not response:
            raise AugmentationUnavailable(self.operation, "empty confirmation")
        return response

    def fallback(self, category: str, slots: dict, request_id: str, language: str) -> str:
        return self.templates.get_success_message(category, slots, request_id)
