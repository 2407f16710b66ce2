"""
Prompt Builder - builds the chat messages sent to the AI collaborator
"""

import json
from typing import Dict, List, Any

from ..config.categories_config import (
    CATEGORIES,
    PRIORITIES,
    SLOT_NAMES,
    REQUIRED_SLOTS,
    BLOOD_TYPES,
    ELDER_SERVICE_TYPES,
    COMPLAINT_CATEGORIES
)
from ..config.settings import LANGUAGE_NAMES

ChatMessages = List[Dict[str, str]]


class PromptBuilder:
    """Build prompts dynamically based on context"""

    SYSTEM_PERSONA = (
        "You are SevaLink's assistant for a community service platform in Andhra Pradesh, India. "
        "Citizens write in English, Hindi or Telugu, sometimes romanized. You help with blood "
        "donation requests, elder support and civic complaints."
    )

    def _language_instruction(self, language: str) -> str:
        return f"Respond in {LANGUAGE_NAMES.get(language, 'English')}."

    def build_classification_messages(self, text: str, context: Dict[str, Any]) -> ChatMessages:
        """Ask for category, priority and a direct answer as JSON"""
        system = (
            f"{self.SYSTEM_PERSONA}\n\n"
            "Classify the user's message. Reply with JSON only, no prose:\n"
            '{"category": one of ' + json.dumps(CATEGORIES) + ', '
            '"priority": one of ' + json.dumps(PRIORITIES) + ', '
            '"response": a short helpful reply to the user}\n'
            "Use blood_request for anything about blood or donors, even if urgent. "
            f"{self._language_instruction(context.get('language', 'en'))}"
        )
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": text}
        ]

    def build_extraction_messages(self, text: str, category: str, language: str,
                                  context: Dict[str, Any]) -> ChatMessages:
        """Ask for the category's slots as JSON"""
        enumerations = {
            "blood_request": f"bloodType must be one of {json.dumps(BLOOD_TYPES)}.",
            "elder_support": f"serviceType must be one of {json.dumps(ELDER_SERVICE_TYPES)}.",
            "complaint": f"complaintCategory must be one of {json.dumps(COMPLAINT_CATEGORIES)}."
        }
        system = (
            f"{self.SYSTEM_PERSONA}\n\n"
            f"Extract details for a {category.replace('_', ' ')} request. "
            f"Allowed fields: {', '.join(SLOT_NAMES.get(category, []))}. "
            f"Required fields: {', '.join(REQUIRED_SLOTS.get(category, []))}. "
            f"{enumerations.get(category, '')}\n"
            f"Details already known: {json.dumps(context, ensure_ascii=False, default=str)}\n"
            "Reply with JSON only:\n"
            '{"extractedInfo": {field: value}, "missingRequired": [field], "needsMoreInfo": true|false}\n'
            "Only include fields the user actually stated. Never guess a blood type."
        )
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": text}
        ]

    def build_follow_up_messages(self, category: str, missing_field: str,
                                 slots: Dict[str, Any], language: str) -> ChatMessages:
        """Ask for one short question about a missing field"""
        system = (
            f"{self.SYSTEM_PERSONA}\n\n"
            f"The user is making a {category.replace('_', ' ')} request. "
            f"Known details: {json.dumps(slots, ensure_ascii=False, default=str)}. "
            f"Ask ONE short, friendly question to get the missing field '{missing_field}'. "
            f"{self._language_instruction(language)} Reply with the question only."
        )
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": f"Ask for {missing_field}"}
        ]

    def build_confirmation_prompt(self, category: str, slots: Dict[str, Any],
                                  request_id: str, language: str) -> str:
        """Prompt for the message shown after a request is saved"""
        return (
            f"A user successfully created a {category.replace('_', ' ')} request.\n\n"
            f"Details:\n{json.dumps(slots, indent=2, ensure_ascii=False, default=str)}\n\n"
            f"Request ID: {request_id}\n\n"
            f"Generate a friendly, encouraging confirmation message in {LANGUAGE_NAMES.get(language, 'English')}.\n"
            "- Acknowledge what they requested\n"
            "- Mention the key details they provided\n"
            "- Tell them what happens next (volunteers will be notified)\n"
            "- Keep it warm and human\n"
            "- 2-3 sentences max"
        )

    def build_confirmation_messages(self, prompt: str, language: str) -> ChatMessages:
        return [
            {"role": "system", "content": f"{self.SYSTEM_PERSONA} {self._language_instruction(language)}"},
            {"role": "user", "content": prompt}
        ]
