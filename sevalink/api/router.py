"""
Chatbot API Router
"""

from typing import Callable

from fastapi import APIRouter, BackgroundTasks, Depends

from .endpoints import ChatbotEndpoints
from ..models.api_models import (
    TextMessageRequest,
    VoiceTextRequest,
    DetectLanguageRequest,
    TranslateRequest,
    ChatEnvelope
)


def create_chatbot_router(orchestrator, chat_log_service, auth_dependency: Callable,
                          rate_limiter=None) -> APIRouter:
    """
    Create and configure chatbot router

    Args:
        auth_dependency: FastAPI dependency returning the caller's user id
    """

    router = APIRouter(prefix="/chatbot", tags=["Chatbot"])
    endpoints = ChatbotEndpoints(orchestrator, chat_log_service, rate_limiter)

    @router.post("/text", response_model=ChatEnvelope)
    async def text_message(request: TextMessageRequest, background_tasks: BackgroundTasks,
                           user_id: str = Depends(auth_dependency)):
        return await endpoints.text_message(request, background_tasks, user_id)

    @router.post("/voice-text", response_model=ChatEnvelope)
    async def voice_text(request: VoiceTextRequest, background_tasks: BackgroundTasks,
                         user_id: str = Depends(auth_dependency)):
        return await endpoints.voice_text(request, background_tasks, user_id)

    @router.get("/history")
    async def history(limit: int = 50, skip: int = 0, user_id: str = Depends(auth_dependency)):
        return await endpoints.get_history(user_id, limit=limit, skip=skip)

    # Stateless helpers, no user context needed
    router.post("/detect-language")(endpoints.detect_language)
    router.post("/translate")(endpoints.translate)
    router.get("/health")(endpoints.health_check)

    return router
