"""
Augmentation Service - optional AI collaborator (Groq chat completions)

Every public method either returns a well-formed result or raises
AugmentationUnavailable. Callers fall back to local heuristics.
"""

import re
import json
import asyncio
import logging
from typing import Dict, Any, Optional, List

import aiohttp
from cachetools import TTLCache

from ..config.categories_config import CATEGORIES, PRIORITIES
from ..config.settings import LLM_SETTINGS, AGENT_SETTINGS
from ..errors import AugmentationUnavailable
from ..extractors.blood_type_extractor import BloodTypeExtractor
from ..models.slots import filter_slots
from ..prompts.builder import PromptBuilder

logger = logging.getLogger(__name__)


class AugmentationService:
    """LLM-backed classification, extraction, follow-up and confirmation"""

    def __init__(self, api_key: Optional[str] = None, settings: Optional[Dict[str, Any]] = None):
        settings = {**LLM_SETTINGS, **(settings or {})}
        self.api_key = api_key
        self.api_url = settings["api_url"]
        self.model = settings["model"]
        self.temperature = settings["temperature"]
        self.max_tokens = settings["max_tokens"]
        self.timeout = settings["timeout"]

        self.prompt_builder = PromptBuilder()
        self.blood_type_extractor = BloodTypeExtractor()

        # Identical messages are classified once per TTL window
        self.classification_cache = TTLCache(
            maxsize=AGENT_SETTINGS["classification_cache_size"],
            ttl=AGENT_SETTINGS["classification_cache_ttl_seconds"]
        )

        logger.info(f"✅ AugmentationService initialized (LLM: {bool(self.api_key)})")

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    # ---------------- Operations ----------------

    async def classify(self, text: str, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """{category, priority, response}"""
        context = context or {}
        cache_key = (context.get('language', 'en'), text)
        if cache_key in self.classification_cache:
            logger.debug(f"Classification cache hit for: {text[:50]}")
            return self.classification_cache[cache_key]

        messages = self.prompt_builder.build_classification_messages(text, context)
        data = self._parse_json("classify", await self._call_llm("classify", messages))

        category = data.get("category")
        priority = str(data.get("priority") or "").lower()
        result = {
            "category": category if category in CATEGORIES else None,
            "priority": priority if priority in PRIORITIES else None,
            "response": data.get("response") or None
        }
        self.classification_cache[cache_key] = result
        return result

    async def extract(self, text: str, category: str, language: str,
                      context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """{extractedInfo, missingRequired, needsMoreInfo, success, usingFallback}"""
        messages = self.prompt_builder.build_extraction_messages(text, category, language, context or {})
        data = self._parse_json("extract", await self._call_llm("extract", messages))

        extracted = data.get("extractedInfo")
        if not isinstance(extracted, dict):
            raise AugmentationUnavailable("extract", "extractedInfo missing from reply")

        missing = data.get("missingRequired") or []
        if not isinstance(missing, list):
            missing = [missing]

        return {
            "extractedInfo": self.sanitize_slots(category, extracted),
            "missingRequired": [str(name) for name in missing],
            "needsMoreInfo": bool(data.get("needsMoreInfo", bool(missing))),
            "success": True,
            "usingFallback": False
        }

    async def generate_follow_up(self, category: str, missing_field: str,
                                 slots: Dict[str, Any], language: str) -> Dict[str, Any]:
        """{question, success, usingFallback}"""
        messages = self.prompt_builder.build_follow_up_messages(category, missing_field, slots, language)
        question = (await self._call_llm("follow_up", messages)).strip()
        if not question:
            raise AugmentationUnavailable("follow_up", "empty question")
        return {"question": question, "success": True, "usingFallback": False}

    async def generate_confirmation(self, prompt: str, language: str) -> Dict[str, Any]:
        """{response}"""
        messages = self.prompt_builder.build_confirmation_messages(prompt, language)
        response = (await self._call_llm("confirmation", messages)).strip()
        if not response:
            raise AugmentationUnavailable("confirmation", "empty response")
        return {"response": response}

    # ---------------- Helpers ----------------

    def sanitize_slots(self, category: str, slots: Dict[str, Any]) -> Dict[str, Any]:
        """Keep the category's slot names, normalize or drop the blood type"""
        cleaned = filter_slots(category, slots)

        if "bloodType" in cleaned:
            blood_type = self.blood_type_extractor.extract_blood_type(str(cleaned["bloodType"]))
            if blood_type:
                cleaned["bloodType"] = blood_type
            else:
                logger.warning(f"⚠️ Dropping unrecognized AI blood type: {cleaned['bloodType']}")
                del cleaned["bloodType"]

        if "urgencyLevel" in cleaned:
            cleaned["urgencyLevel"] = str(cleaned["urgencyLevel"]).lower()

        return cleaned

    async def _call_llm(self, operation: str, messages: List[Dict[str, str]]) -> str:
        """Call LLM API, returns the reply text"""
        if not self.enabled:
            raise AugmentationUnavailable(operation, "no API key configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }
        payload = {
            "model": self.model,
            "messages": messages,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": 0.9
        }

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.api_url, headers=headers, json=payload) as response:
                    if response.status != 200:
                        logger.error(f"LLM API error: {response.status}")
                        raise AugmentationUnavailable(operation, f"HTTP {response.status}")
                    data = await response.json()
        except asyncio.TimeoutError as e:
            raise AugmentationUnavailable(operation, "timed out") from e
        except aiohttp.ClientError as e:
            raise AugmentationUnavailable(operation, str(e)) from e

        try:
            return data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise AugmentationUnavailable(operation, "malformed completion") from e

    def _parse_json(self, operation: str, content: str) -> Dict[str, Any]:
        """JSON object from a reply that may be wrapped in prose or code fences"""
        match = re.search(r'\{.*\}', content or "", re.DOTALL)
        if not match:
            raise AugmentationUnavailable(operation, "no JSON object in reply")
        try:
            data = json.loads(match.group(0))
        except ValueError as e:
            raise AugmentationUnavailable(operation, "invalid JSON in reply") from e
        if not isinstance(data, dict):
            raise AugmentationUnavailable(operation, "reply is not a JSON object")
        return data
