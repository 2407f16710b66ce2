"""
General helper utilities
"""

import re
import logging
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)


class Helpers:
    """Helper utilities"""

    @staticmethod
    def get_timestamp() -> str:
        """Get current timestamp in ISO format"""
        return datetime.utcnow().isoformat()

    @staticmethod
    def log_processing(stage: str, message: str, extra: Optional[dict] = None):
        """Log processing information"""
        log_data = {
            "stage": stage,
            "message_preview": Helpers.summarize(message, 50),
            "timestamp": Helpers.get_timestamp()
        }

        if extra:
            log_data.update(extra)

        logger.info(f"📝 Processing: {log_data}")

    @staticmethod
    def clean_text(text: str) -> str:
        """Collapse whitespace and trim"""
        if not text:
            return ""
        return ' '.join(text.strip().split())

    @staticmethod
    def summarize(text: str, limit: int = 80) -> str:
        """First ``limit`` characters of the text, with an ellipsis when cut"""
        cleaned = Helpers.clean_text(text)
        if len(cleaned) <= limit:
            return cleaned
        return cleaned[:limit].rstrip() + "..."

    @staticmethod
    def strip_trailing_punctuation(text: str) -> str:
        if not text:
            return ""
        return re.sub(r'[\s.,;:!?]+$', '', text.strip())

    @staticmethod
    def is_empty_value(value) -> bool:
        """Slot values that count as not provided"""
        return value is None or value == "" or value == [] or value == {}
