"""
Agent and LLM configuration settings
"""

# Language support
SUPPORTED_LANGUAGES = ["en", "hi", "te"]
LANGUAGE_NAMES = {
    "en": "English",
    "hi": "Hindi",
    "te": "Telugu"
}

# Agent settings
AGENT_SETTINGS = {
    "max_message_length": 1000,
    "voice_rate_limit_per_minute": 10,
    "text_rate_limit_per_minute": 30,
    "history_default_limit": 50,
    "history_max_limit": 200,
    "classification_cache_ttl_seconds": 300,
    "classification_cache_size": 512
}

# LLM settings
LLM_SETTINGS = {
    "api_url": "https://api.groq.com/openai/v1/chat/completions",
    "model": "llama-3.1-8b-instant",
    "temperature": 0.3,
    "max_tokens": 400,
    "timeout": 10
}

# Used when no location could be extracted from the conversation
DEFAULT_LOCATION = {
    "type": "manual",
    "coordinates": {
        "lat": 16.523699,
        "lng": 80.61359225
    },
    "address": "Potti Sriramulu College Road, Vinchipeta",
    "city": "Vijayawada",
    "state": "Andhra Pradesh",
    "pincode": "520001",
    "country": "India"
}
