"""
Data formatting utilities
"""

import re


class Formatters:
    """Data formatting utilities"""

    # Emoji and pictographs
    EMOJI_PATTERN = re.compile(
        "[\U0001F300-\U0001FAFF\U00002600-\U000027BF\U0001F1E6-\U0001F1FF\uFE0F]+"
    )

    @staticmethod
    def format_for_voice(text: str) -> str:
        """
        Make a reply suitable for text-to-speech: drop markdown markers,
        emoji and bullet glyphs, collapse whitespace.
        """
        if not text:
            return ""

        spoken = re.sub(r'\*\*|__|`+|#+\s*', '', text)
        spoken = Formatters.EMOJI_PATTERN.sub('', spoken)
        spoken = re.sub(r'^\s*[-•*]\s+', '', spoken, flags=re.MULTILINE)
        spoken = re.sub(r'\s*\n+\s*', '. ', spoken)
        spoken = re.sub(r'\.\s*\.', '.', spoken)
        return re.sub(r'\s{2,}', ' ', spoken).strip()

    @staticmethod
    def format_slot_name(slot: str) -> str:
        """'bloodType' -> 'blood type'"""
        if not slot:
            return ""
        return re.sub(r'(?<!^)(?=[A-Z])', ' ', slot).lower()
