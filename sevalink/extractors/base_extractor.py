"""
Base Extractor - Abstract base class for all extractors
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List, Tuple, Pattern
import re
import logging

logger = logging.getLogger(__name__)

# Ordered (pattern, result) pairs, first match wins
KeywordTable = List[Tuple[Pattern, Any]]


class BaseExtractor(ABC):
    """Base class for all slot extractors with common utilities"""

    def __init__(self):
        """Initialize base extractor"""
        self.logger = logger

    @abstractmethod
    def extract(self, message: str, context: Optional[Dict[str, Any]] = None) -> Optional[Dict]:
        """
        Extract from message

        Args:
            message: The input message to extract from
            context: Slots accumulated on previous turns

        Returns:
            Single-field extractors return a result dictionary
            ({'value', 'confidence', 'method'}) or None. Category
            extractors return only the newly found slots.
        """
        pass

    def clean_message(self, message: str) -> str:
        """
        Collapse whitespace. Punctuation and combining marks are kept,
        Rh symbols and Indic vowel signs carry meaning here.
        """
        if not message:
            return ""
        return re.sub(r'\s+', ' ', message.strip())

    def find_pattern(self, message: str, pattern: Pattern) -> Optional[str]:
        """
        First match group of a compiled pattern, or None
        """
        match = pattern.search(message)
        return match.group(1) if match else None

    def first_match(self, message: str, table: KeywordTable) -> Optional[Any]:
        """
        Walk an ordered keyword table and return the result of the first
        pattern found in the message
        """
        for pattern, result in table:
            if pattern.search(message):
                return result
        return None

    def extract_from_context(self, field_name: str, context: Optional[Dict[str, Any]]) -> Optional[Any]:
        """
        Slot value carried over from a previous turn
        """
        if not context:
            return None
        return context.get(field_name)

    def build_result(self, value: Any, confidence: str = 'medium',
                     method: str = 'unknown', **kwargs) -> Dict:
        """
        Build standardized result dictionary
        """
        result = {
            'value': value,
            'confidence': confidence,
            'method': method
        }
        result.update(kwargs)
        return result

    def log_extraction(self, field: str, success: bool, method: str = None):
        """
        Log extraction attempt
        """
        status = "SUCCESS" if success else "FAILED"
        method_str = f" ({method})" if method else ""
        self.logger.debug(f"{status}: {field} extraction{method_str}")
