import os
from dotenv import load_dotenv

# Load Environment Variables
load_dotenv()

# ----------------------
# API Keys
# ----------------------
GROQ_API_KEY = os.getenv("GROQ_API_KEY")

# ----------------------
# MongoDB
# ----------------------
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "sevalink")

# ----------------------
# JWT Configuration
# ----------------------
JWT_SECRET = os.getenv("JWT_SECRET", "your-super-secret-jwt-key-change-this")
JWT_ALGORITHM = "HS256"

# ----------------------
# AI Collaborator
# ----------------------
AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "10"))

# ----------------------
# CORS Origins
# ----------------------
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]
