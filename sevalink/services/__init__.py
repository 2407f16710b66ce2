"""
Services Package - AI collaborator and persistence adapters
"""

from .augmentation_service import AugmentationService
from .request_service import RequestService
from .chat_log_service import ChatLogService

__all__ = [
    "AugmentationService",
    "RequestService",
    "ChatLogService"
]
