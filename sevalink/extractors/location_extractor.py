"""
Location Extractor - capitalized place phrase after in/at/near
"""

from typing import Optional, Dict, Any

from .base_extractor import BaseExtractor
from ..utils.helpers import Helpers
from ..utils.patterns import LOCATION_PATTERN


class LocationExtractor(BaseExtractor):
    """Extracts a place name such as 'MG Road' or 'Benz Circle, Vijayawada'"""

    # Capitalized words that are never places
    STOP_WORDS = {'I', 'My', 'The', 'This', 'That', 'It'}

    def extract(self, message: str, context: Optional[Dict[str, Any]] = None) -> Optional[Dict]:
        """
        Context key ``exclude`` holds phrases already claimed by another
        slot (the hospital name), those are skipped.
        """
        if not message:
            return None

        excluded = {
            phrase.lower() for phrase in (context or {}).get('exclude', []) if phrase
        }

        for match in LOCATION_PATTERN.finditer(self.clean_message(message)):
            location = Helpers.strip_trailing_punctuation(match.group(1))
            if not location or location in self.STOP_WORDS:
                continue
            if location.lower() in excluded:
                continue
            self.log_extraction('location', True, 'preposition')
            return self.build_result(location, 'medium', 'preposition')

        return None

    def extract_location(self, message: str, exclude=None) -> Optional[str]:
        result = self.extract(message, {'exclude': list(exclude or [])})
        return result['value'] if result else None
