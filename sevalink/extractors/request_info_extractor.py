"""
Request Info Extractor - dispatches to the category extractor and merges
with the slots carried over from earlier turns
"""

import logging
from typing import Optional, Dict, Any

from .blood_request_extractor import BloodRequestExtractor
from .elder_support_extractor import ElderSupportExtractor
from .complaint_extractor import ComplaintExtractor
from ..models.slots import SlotMap, merge_slot_maps

logger = logging.getLogger(__name__)


class RequestInfoExtractor:
    """Category-scoped slot extraction"""

    def __init__(self):
        self.extractors = {
            "blood_request": BloodRequestExtractor(),
            "elder_support": ElderSupportExtractor(),
            "complaint": ComplaintExtractor(),
        }

    def extract_new(self, message: str, category: str, prior: Optional[SlotMap] = None) -> SlotMap:
        """Only the slots found in this message"""
        extractor = self.extractors.get(category)
        if extractor is None:
            return {}
        return extractor.extract(message, prior or {})

    def extract_request_info(self, message: str, category: str, prior: Optional[SlotMap] = None) -> SlotMap:
        """Prior slots unioned with new ones, new values win"""
        new_slots = self.extract_new(message, category, prior)
        if new_slots:
            logger.info(f"🔍 Extracted {category} slots: {sorted(new_slots)}")
        return merge_slot_maps(prior, new_slots)
