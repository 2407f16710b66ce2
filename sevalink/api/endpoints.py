"""
Chatbot API Endpoints
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException, BackgroundTasks

from ..config.settings import AGENT_SETTINGS
from ..models.api_models import (
    TextMessageRequest,
    VoiceTextRequest,
    DetectLanguageRequest,
    TranslateRequest,
    ChatResponse,
    ChatEnvelope
)
from ..models.message import IncomingMessage
from ..orchestrator import RequestOrchestrator
from ..services.chat_log_service import ChatLogService
from ..utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class ChatbotEndpoints:
    """Chatbot API endpoint handlers"""

    def __init__(self, orchestrator: RequestOrchestrator, chat_log_service: ChatLogService,
                 rate_limiter: Optional[RateLimiter] = None):
        self.orchestrator = orchestrator
        self.chat_log_service = chat_log_service
        self.rate_limiter = rate_limiter or RateLimiter(
            max_requests=AGENT_SETTINGS["voice_rate_limit_per_minute"], window_seconds=60
        )

        logger.info("ChatbotEndpoints initialized")

    async def text_message(self, request: TextMessageRequest, background_tasks: BackgroundTasks,
                           user_id: str) -> ChatEnvelope:
        """Typed chat message"""
        message = IncomingMessage(
            text=request.message,
            language=request.language,
            input_method="text",
            conversation_context=request.conversation_context,
            pending_category=request.pending_category
        )
        return await self._process(message, background_tasks, user_id)

    async def voice_text(self, request: VoiceTextRequest, background_tasks: BackgroundTasks,
                         user_id: str) -> ChatEnvelope:
        """Voice message already transcribed on the client"""
        if not self.rate_limiter.check_rate_limit(user_id):
            remaining_time = int(self.rate_limiter.get_reset_time(user_id))
            raise HTTPException(
                status_code=429,
                detail=f"Too many voice requests. Please wait {remaining_time} seconds."
            )

        message = IncomingMessage(
            text=request.message,
            language=request.language,
            input_method="voice",
            confidence=request.confidence,
            conversation_context=request.conversation_context,
            pending_category=request.pending_category
        )
        return await self._process(message, background_tasks, user_id, request.voice_metadata)

    async def detect_language(self, request: DetectLanguageRequest):
        try:
            language = self.orchestrator.detect_language(request.text)
            return {"success": True, "data": {"language": language}}
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.error(f"Language detection error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error")

    async def translate(self, request: TranslateRequest):
        try:
            translated = self.orchestrator.translate(request.text)
            return {"success": True, "data": {"original": request.text, "translated": translated}}
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.error(f"Translation error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error")

    async def get_history(self, user_id: str, limit: int = 50, skip: int = 0):
        """Conversation history of the current user"""
        limit = max(1, min(limit, AGENT_SETTINGS["history_max_limit"]))
        skip = max(0, skip)
        try:
            messages = self.chat_log_service.get_history(user_id, limit=limit, skip=skip)
            return {"success": True, "data": {"messages": messages, "limit": limit, "skip": skip}}
        except Exception as e:
            logger.error(f"History error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error")

    async def health_check(self):
        return {
            "status": "healthy",
            "ai_enabled": self.orchestrator.augmentation is not None,
            "timestamp": datetime.utcnow().isoformat()
        }

    async def _process(self, message: IncomingMessage, background_tasks: BackgroundTasks,
                       user_id: str, voice_metadata: Optional[dict] = None) -> ChatEnvelope:
        try:
            logger.info(f"Chat request: user={user_id}, method={message.input_method}")

            response = await self.orchestrator.process_message(message, user_id)

            background_tasks.add_task(
                self.chat_log_service.save_turn,
                user_id=user_id,
                message=message.clean_text,
                response=response.response_message,
                category=response.category,
                priority=response.priority,
                message_type=message.input_method,
                voice_metadata=self._voice_metadata(message, voice_metadata),
                ai_metadata=self._ai_metadata(response),
                request_id=response.created_request_id
            )

            return ChatEnvelope(success=True, message=self._envelope_message(response), data=response)

        except ValueError as e:
            logger.warning(f"Validation error: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.error(f"Chat endpoint error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error")

    def _envelope_message(self, response: ChatResponse) -> str:
        if response.created_request_id:
            return "Request created successfully"
        if response.needs_more_info:
            return "Need more information"
        return "Message processed"

    def _voice_metadata(self, message: IncomingMessage, extra: Optional[dict]) -> Optional[dict]:
        if not message.is_voice:
            return None
        metadata = dict(extra or {})
        metadata.setdefault("confidence", message.confidence)
        metadata.setdefault("language", message.language)
        return metadata

    def _ai_metadata(self, response: ChatResponse) -> dict:
        return {
            "detectedLanguage": response.detected_language,
            "usingFallback": response.using_fallback,
            "aiExtraction": response.ai_extraction,
            "missingInfo": response.missing_info,
            "extractedInfo": response.extracted_info
        }
