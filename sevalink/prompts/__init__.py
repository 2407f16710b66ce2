"""
Prompts Package - reply templates and AI prompt construction
"""

from .templates import PromptTemplates
from .builder import PromptBuilder

__all__ = [
    "PromptTemplates",
    "PromptBuilder"
]
