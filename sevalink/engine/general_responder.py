"""
General Responder - local replies for greetings, small talk and FAQs
"""

from typing import Optional

from ..prompts.templates import PromptTemplates
from ..utils.patterns import compile_keywords


class GeneralResponder:
    """Keyword-intent replies used when no AI answer is available"""

    GREETING = compile_keywords(
        latin=[r'hi', r'hello', r'hey', r'good\s+(?:morning|afternoon|evening)', r'namaste', r'namaskar(?:am)?'],
        native=['नमस्ते', 'नमस्कार', 'నమస్కారం', 'నమస్తే']
    )
    HOW_ARE_YOU = compile_keywords(latin=[r'how\s+are\s+you', r'how\s+do\s+you\s+do'])
    THANKS = compile_keywords(latin=[r'thank\s+you', r'thanks', r'thx'], native=['धन्यवाद', 'ధన్యవాదాలు'])
    CAPABILITIES = compile_keywords(
        latin=[r'what\s+can\s+you\s+do', r'what\s+do\s+you\s+do', r'help\s+me', r'capabilities']
    )
    ABOUT = compile_keywords(latin=[r'sevalink'])
    QUESTION = compile_keywords(latin=[r'what\s+is', r'what\s+are', r'tell\s+me\s+about', r'explain'])

    # Greetings only count when they are (almost) the whole message
    GREETING_MAX_WORDS = 3

    def __init__(self, templates: Optional[PromptTemplates] = None):
        self.templates = templates or PromptTemplates()

    def respond(self, message: str, category: str = "general_inquiry", language: str = "en") -> str:
        """Pick a reply by message intent, first match wins"""
        text = (message or "").strip()

        if category == "emergency":
            return self.templates.get_emergency_advice(language)

        if self.GREETING.search(text) and len(text.split()) <= self.GREETING_MAX_WORDS:
            return self.templates.get_greeting()
        if self.HOW_ARE_YOU.search(text):
            return self.templates.get_how_are_you()
        if self.THANKS.search(text):
            return self.templates.get_thanks_reply()
        if self.CAPABILITIES.search(text):
            return self.templates.get_capabilities()
        if self.ABOUT.search(text):
            return self.templates.get_about()
        if self.QUESTION.search(text):
            return self.templates.get_knowledge_answer(text) or self.templates.get_out_of_scope()

        return self.templates.get_default_reply()
