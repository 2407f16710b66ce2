import logging

from pymongo import MongoClient, ASCENDING, DESCENDING
from config import MONGO_URI, MONGO_DB_NAME

logger = logging.getLogger(__name__)

# ----------------------
# MongoDB Connection
# ----------------------
mongo_client = MongoClient(MONGO_URI)
db = mongo_client[MONGO_DB_NAME]

# ----------------------
# Collections
# ----------------------
users_collection = db["users"]
requests_collection = db["requests"]
chats_collection = db["chats"]


# ----------------------
# Create Indexes
# ----------------------
def create_indexes():
    """Create database indexes for better performance"""

    # Requests - dashboards filter by type, status and recency
    requests_collection.create_index([("type", ASCENDING), ("status", ASCENDING)])
    requests_collection.create_index([("user", ASCENDING), ("createdAt", DESCENDING)])
    requests_collection.create_index("priority")

    # Chats - history per user
    chats_collection.create_index([("user", ASCENDING), ("createdAt", DESCENDING)])

    logger.info(f"Database indexes ready: {MONGO_DB_NAME}")
