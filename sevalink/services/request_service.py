"""
Request Service - users lookup and service request persistence
"""

import logging
from typing import Dict, Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from ..errors import PersistenceError
from ..models.request_entity import ServiceRequestEntity

logger = logging.getLogger(__name__)


class RequestService:
    """Mongo-backed persistence for finalized requests"""

    def __init__(self, users_collection, requests_collection):
        """Initialize request service"""
        self.users_collection = users_collection
        self.requests_collection = requests_collection

    def find_user_by_id(self, user_id: str) -> Dict[str, Any]:
        """Requester profile; raises PersistenceError when absent"""
        try:
            user = self.users_collection.find_one({"_id": ObjectId(user_id)})
        except InvalidId as e:
            raise PersistenceError(f"Invalid user id: {user_id}") from e
        except PyMongoError as e:
            logger.error(f"❌ User lookup failed: {e}", exc_info=True)
            raise PersistenceError("User lookup failed") from e

        if not user:
            raise PersistenceError("User not found")

        return {
            "id": str(user["_id"]),
            "name": user.get("name") or "Citizen",
            "phone": user.get("phone"),
            "email": user.get("email")
        }

    def create(self, entity: ServiceRequestEntity) -> str:
        """Insert the entity, returns its id"""
        document = entity.to_document()
        if ObjectId.is_valid(entity.user):
            document["user"] = ObjectId(entity.user)

        try:
            result = self.requests_collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"❌ Request insert failed: {e}", exc_info=True)
            raise PersistenceError("Could not save the request") from e

        request_id = str(result.inserted_id)
        logger.info(f"✅ {entity.type} request created: {request_id}")
        return request_id
