"""
Normalizer - rewrites Hindi/Telugu domain terms into English for storage

Lossy by design: only the terms in the translation tables are rewritten,
everything else is left untouched.
"""

import re
import logging
from typing import List, Tuple, Pattern

from .translation_tables import (
    HINDI_GROUPS,
    HINDI_RH,
    HINDI_TERMS,
    TELUGU_GROUPS,
    TELUGU_RH,
    TELUGU_TERMS
)
from ..utils.patterns import DEVANAGARI_CHARS, TELUGU_CHARS, INDIC_PATTERN

logger = logging.getLogger(__name__)

SubstitutionTable = List[Tuple[Pattern, str]]


def _blood_type_rules(groups, rh_forms, script_chars: str) -> SubstitutionTable:
    rules = []
    for group, latin_group in groups:
        for forms, latin_rh in rh_forms:
            alternation = '|'.join(re.escape(form) for form in forms)
            pattern = re.compile(rf'(?<![{script_chars}]){re.escape(group)}\s*(?:{alternation})')
            rules.append((pattern, f"{latin_group} {latin_rh}"))
    return rules


def _term_rules(terms) -> SubstitutionTable:
    rules = []
    for sources, replacement in terms:
        # Longest source first inside one row as well
        ordered = sorted(sources, key=len, reverse=True)
        pattern = re.compile('|'.join(re.escape(source) for source in ordered))
        rules.append((pattern, replacement))
    return rules


class Normalizer:
    """Dictionary based hi/te -> English normalization"""

    def __init__(self):
        self.rules: SubstitutionTable = (
            _blood_type_rules(HINDI_GROUPS, HINDI_RH, DEVANAGARI_CHARS)
            + _blood_type_rules(TELUGU_GROUPS, TELUGU_RH, TELUGU_CHARS)
            + _term_rules(HINDI_TERMS)
            + _term_rules(TELUGU_TERMS)
        )

    def translate_to_english(self, text: str) -> str:
        """
        Apply the substitution tables in order.

        Text with no Devanagari or Telugu code point is returned as is.
        The output never contains a source term, so applying it twice
        gives the same result.
        """
        if not text or not INDIC_PATTERN.search(text):
            return text

        translated = text
        for pattern, replacement in self.rules:
            translated = pattern.sub(replacement, translated)

        return translated
