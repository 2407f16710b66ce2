"""
Config Package - Exports all configurations
"""

from .categories_config import (
    CATEGORIES,
    REQUEST_CATEGORIES,
    PRIORITIES,
    REQUEST_TYPES,
    SLOT_NAMES,
    REQUIRED_SLOTS,
    EQUIVALENT_SLOTS,
    FOLLOW_UP_ORDER,
    BLOOD_TYPES,
    ELDER_SERVICE_TYPES,
    COMPLAINT_CATEGORIES
)
from .settings import (
    SUPPORTED_LANGUAGES,
    LANGUAGE_NAMES,
    AGENT_SETTINGS,
    LLM_SETTINGS,
    DEFAULT_LOCATION
)

__all__ = [
    "CATEGORIES",
    "REQUEST_CATEGORIES",
    "PRIORITIES",
    "REQUEST_TYPES",
    "SLOT_NAMES",
    "REQUIRED_SLOTS",
    "EQUIVALENT_SLOTS",
    "FOLLOW_UP_ORDER",
    "BLOOD_TYPES",
    "ELDER_SERVICE_TYPES",
    "COMPLAINT_CATEGORIES",
    "SUPPORTED_LANGUAGES",
    "LANGUAGE_NAMES",
    "AGENT_SETTINGS",
    "LLM_SETTINGS",
    "DEFAULT_LOCATION"
]
