"""
Language Detector - en / hi / te from script ranges and keyword lists
"""

import logging
from typing import Optional

from ..config.settings import SUPPORTED_LANGUAGES
from ..utils.patterns import DEVANAGARI_PATTERN, TELUGU_PATTERN, compile_keywords

logger = logging.getLogger(__name__)


class LanguageDetector:
    """Pure, total language detection. Never raises."""

    HINDI_KEYWORDS = compile_keywords(
        native=['खून', 'रक्त', 'चाहिए', 'आवश्यक', 'पॉजिटिव', 'नेगेटिव', 'तुरंत', 'आपातकाल']
    )
    TELUGU_KEYWORDS = compile_keywords(
        native=['రక్తం', 'కావాలి', 'అవసరం', 'పాజిటివ్', 'నెగటివ్', 'అత్యవసరం', 'త్వరగా']
    )

    # "positive"/"negative" are English and deliberately absent
    ROMANIZED_HINDI = compile_keywords(
        latin=['khoon', 'rakth', 'chahiye', 'aavashyak', 'turant', 'aapatkaal', 'jaldi']
    )
    ROMANIZED_TELUGU = compile_keywords(
        latin=['rakthamu', 'kavali', 'avasaram', 'athyavasaram', 'thvaraga']
    )

    def __init__(self):
        self.rules = [
            (DEVANAGARI_PATTERN, "hi"),
            (TELUGU_PATTERN, "te"),
            (self.HINDI_KEYWORDS, "hi"),
            (self.TELUGU_KEYWORDS, "te"),
            (self.ROMANIZED_HINDI, "hi"),
            (self.ROMANIZED_TELUGU, "te"),
        ]

    def detect(self, text: str) -> str:
        """Detect language of text, first matching rule wins"""
        if not text:
            return "en"

        for pattern, language in self.rules:
            if pattern.search(text):
                return language
        return "en"

    def resolve(self, declared: Optional[str], text: str) -> str:
        """Declared language when supported, otherwise detected"""
        if declared and declared in SUPPORTED_LANGUAGES:
            return declared

        detected = self.detect(text)
        logger.info(f"🌐 Detected language: {detected}")
        return detected
