"""
Blood Type Extractor - Latin, Hindi and Telugu renderings of ABO/Rh groups
"""

import re
from typing import Optional, Dict, Any

from .base_extractor import BaseExtractor
from ..utils.patterns import (
    BLOOD_TYPE_COMPACT,
    BLOOD_TYPE_NEED_PHRASE,
    HINDI_BLOOD_TYPE,
    TELUGU_BLOOD_TYPE
)


class BloodTypeExtractor(BaseExtractor):
    """Finds one blood group in a message and normalizes it to e.g. 'O+'"""

    # Script letter -> Latin group
    GROUP_MAP = {
        'एबी': 'AB', 'ए': 'A', 'बी': 'B', 'ओ': 'O',
        'ఎబి': 'AB', 'ఎ': 'A', 'బి': 'B', 'ఓ': 'O'
    }

    NEGATIVE_RH = {
        '-', '-ve', 'negative', 'neg',
        'नेगेटिव', 'नेगटिव',
        'నెగటివ్', 'నెగెటివ్'
    }

    def __init__(self):
        super().__init__()
        # Extraction order, first match wins
        self.patterns = [
            (BLOOD_TYPE_COMPACT, 'compact'),
            (BLOOD_TYPE_NEED_PHRASE, 'need_phrase'),
            (HINDI_BLOOD_TYPE, 'hindi'),
            (TELUGU_BLOOD_TYPE, 'telugu'),
        ]

    def extract(self, message: str, context: Optional[Dict[str, Any]] = None) -> Optional[Dict]:
        """Extract blood type from message"""
        if not message or not message.strip():
            return None

        message = self.clean_message(message)

        for pattern, method in self.patterns:
            match = pattern.search(message)
            if match:
                blood_type = self.normalize(match.group(1), match.group(2))
                self.log_extraction('bloodType', True, method)
                return self.build_result(blood_type, 'high', method, raw=match.group(0))

        self.log_extraction('bloodType', False)
        return None

    def extract_blood_type(self, message: str) -> Optional[str]:
        """Normalized blood type or None, never guesses"""
        result = self.extract(message)
        return result['value'] if result else None

    def normalize(self, group: str, rh: str) -> str:
        """('ओ', 'पॉजिटिव') -> 'O+', ('ab', '-ve') -> 'AB-'"""
        letter = self.GROUP_MAP.get(group, group.upper())
        rh = re.sub(r'\s+', '', rh).lower()
        sign = '-' if rh in self.NEGATIVE_RH else '+'
        return f"{letter}{sign}"
