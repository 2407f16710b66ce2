from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime
import logging

from config import GROQ_API_KEY, CORS_ORIGINS, AI_TIMEOUT_SECONDS
from database import users_collection, requests_collection, chats_collection, create_indexes
from security import get_current_user_id

from sevalink.api import create_chatbot_router
from sevalink.config.settings import AGENT_SETTINGS
from sevalink.orchestrator import RequestOrchestrator
from sevalink.services import AugmentationService, RequestService, ChatLogService
from sevalink.utils.rate_limiter import RateLimiter

# ----------------------
# Basic Logging
# ----------------------
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ----------------------
# App Setup
# ----------------------
app = FastAPI(title="SevaLink Request Agent")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ----------------------
# Services
# ----------------------
augmentation = AugmentationService(api_key=GROQ_API_KEY) if GROQ_API_KEY else None
if augmentation is None:
    logger.warning("⚠️ GROQ_API_KEY not set, running on heuristics only")

request_service = RequestService(users_collection, requests_collection)
chat_log_service = ChatLogService(chats_collection)
voice_rate_limiter = RateLimiter(
    max_requests=AGENT_SETTINGS["voice_rate_limit_per_minute"],
    window_seconds=60
)

orchestrator = RequestOrchestrator(request_service, augmentation, timeout=AI_TIMEOUT_SECONDS)

# ----------------------
# Routes
# ----------------------
app.include_router(create_chatbot_router(
    orchestrator,
    chat_log_service,
    auth_dependency=get_current_user_id,
    rate_limiter=voice_rate_limiter
))


@app.on_event("startup")
async def startup():
    create_indexes()
    logger.info("✅ SevaLink request agent started")


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "ok", "timestamp": datetime.utcnow().isoformat()}
