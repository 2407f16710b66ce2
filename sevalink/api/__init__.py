"""
API Package - chatbot HTTP routes
"""

from .endpoints import ChatbotEndpoints
from .router import create_chatbot_router

__all__ = [
    "ChatbotEndpoints",
    "create_chatbot_router"
]
