"""
Chat Log Service - conversation history
"""

import logging
from datetime import datetime
from typing import Dict, Any, List, Optional

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class ChatLogService:
    """Stores one document per turn and serves it back as a message list"""

    def __init__(self, chats_collection):
        self.chats_collection = chats_collection

    def save_turn(self, user_id: str, message: str, response: str, category: str, priority: str,
                  message_type: str = "text", voice_metadata: Optional[Dict[str, Any]] = None,
                  ai_metadata: Optional[Dict[str, Any]] = None,
                  request_id: Optional[str] = None) -> Optional[str]:
        """
        Persist one turn. Runs after the response is sent, so failures are
        logged and swallowed.
        """
        document = {
            "user": user_id,
            "message": message,
            "response": response,
            "category": category,
            "priority": priority,
            "messageType": message_type,
            "voiceMetadata": voice_metadata,
            "aiMetadata": ai_metadata or {},
            "requestCreated": request_id,
            "createdAt": datetime.utcnow()
        }

        try:
            result = self.chats_collection.insert_one(document)
            return str(result.inserted_id)
        except PyMongoError as e:
            logger.error(f"❌ Failed to save chat turn: {e}", exc_info=True)
            return None

    def get_history(self, user_id: str, limit: int = 50, skip: int = 0) -> List[Dict[str, Any]]:
        """Chronological user/bot messages for the most recent turns"""
        cursor = (
            self.chats_collection.find({"user": user_id})
            .sort("createdAt", DESCENDING)
            .skip(skip)
            .limit(limit)
        )

        messages = []
        for chat in reversed(list(cursor)):
            chat_id = str(chat.get("_id"))
            timestamp = chat.get("createdAt")
            messages.append({
                "id": f"{chat_id}_user",
                "type": "user",
                "content": chat.get("message"),
                "messageType": chat.get("messageType", "text"),
                "timestamp": timestamp
            })
            messages.append({
                "id": f"{chat_id}_bot",
                "type": "bot",
                "content": chat.get("response"),
                "category": chat.get("category"),
                "priority": chat.get("priority"),
                "requestCreated": chat.get("requestCreated"),
                "timestamp": timestamp
            })
        return messages
