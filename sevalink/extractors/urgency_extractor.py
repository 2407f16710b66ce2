"""
Urgency Extractor - tiered urgency wording
"""

from typing import Optional, Dict, Any

from .base_extractor import BaseExtractor
from ..utils.patterns import compile_keywords


class UrgencyExtractor(BaseExtractor):
    """Maps wording to an urgency level: urgent > low > high > medium"""

    def __init__(self):
        super().__init__()
        self.tiers = [
            # Negated urgency has to be checked before "urgent"
            (compile_keywords(latin=[r'not\s+urgent', r'no\s+rush', r'no\s+hurry', r'can\s+wait']), 'low'),
            (compile_keywords(
                latin=[r'urgent(?:ly)?', r'emergency', r'asap', r'immediately', r'critical',
                       r'dying', r'serious(?:ly)?'],
                native=['तुरंत', 'तत्काल', 'अत्यावश्यक', 'అత్యవసర', 'తక్షణ']
            ), 'urgent'),
            (compile_keywords(latin=[r'low', r'flexible', r'when\s+possible', r'whenever']), 'low'),
            (compile_keywords(
                latin=[r'high', r'soon', r'needed', r'required', r'fast', r'quick(?:ly)?'],
                native=['जल्दी', 'త్వరగా']
            ), 'high'),
            (compile_keywords(latin=[r'medium', r'normal', r'regular', r'moderate', r'standard']), 'medium'),
        ]

    def extract(self, message: str, context: Optional[Dict[str, Any]] = None) -> Optional[Dict]:
        if not message:
            return None

        level = self.first_match(message, self.tiers)
        if level:
            self.log_extraction('urgencyLevel', True, 'keyword_tier')
            return self.build_result(level, 'medium', 'keyword_tier')
        return None

    def extract_level(self, message: str) -> Optional[str]:
        result = self.extract(message)
        return result['value'] if result else None
