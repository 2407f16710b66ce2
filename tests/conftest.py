import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId

ROOT_PATH = Path(__file__).resolve().parents[1]
if str(ROOT_PATH) not in sys.path:
    sys.path.insert(0, str(ROOT_PATH))

from sevalink.errors import AugmentationUnavailable, PersistenceError  # noqa: E402


class FakeAugmentation:
    """AI collaborator double: canned replies, failure or delay per operation"""

    def __init__(self, replies: Optional[Dict[str, Any]] = None, fail: bool = False, delay: float = 0.0):
        self.replies = replies or {}
        self.fail = fail
        self.delay = delay
        self.calls: List[str] = []

    async def _reply(self, operation: str) -> Dict[str, Any]:
        self.calls.append(operation)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail or operation not in self.replies:
            raise AugmentationUnavailable(operation, "test double")
        return self.replies[operation]

    async def classify(self, text, context=None):
        return await self._reply("classify")

    async def extract(self, text, category, language, context=None):
        return await self._reply("extract")

    async def generate_follow_up(self, category, missing_field, slots, language):
        return await self._reply("follow_up")

    async def generate_confirmation(self, prompt, language):
        return await self._reply("confirmation")


class FakeRequestService:
    """In-memory stand-in for the Mongo-backed RequestService"""

    def __init__(self, fail_create: bool = False, known_users: Optional[Dict[str, Dict[str, Any]]] = None):
        self.fail_create = fail_create
        self.users = known_users if known_users is not None else {
            "user-1": {"id": "user-1", "name": "Ravi Kumar", "phone": "+919876543210", "email": "ravi@example.com"}
        }
        self.created: List[Any] = []

    def find_user_by_id(self, user_id):
        if user_id not in self.users:
            raise PersistenceError("User not found")
        return self.users[user_id]

    def create(self, entity):
        if self.fail_create:
            raise PersistenceError("Could not save the request")
        self.created.append(entity)
        return f"req-{len(self.created)}"


class FakeChatLog:
    def __init__(self):
        self.saved: List[Dict[str, Any]] = []

    def save_turn(self, user_id, message, response, category, priority, message_type="text",
                  voice_metadata=None, ai_metadata=None, request_id=None):
        self.saved.append({
            "user_id": user_id,
            "message": message,
            "response": response,
            "category": category,
            "priority": priority,
            "message_type": message_type,
            "voice_metadata": voice_metadata,
            "request_id": request_id
        })
        return str(len(self.saved))

    def get_history(self, user_id, limit=50, skip=0):
        return [
            {"type": "user", "content": turn["message"]}
            for turn in self.saved if turn["user_id"] == user_id
        ][skip:skip + limit]


class FakeCursor:
    def __init__(self, documents):
        self.documents = list(documents)

    def sort(self, key, direction):
        # Ties keep insertion order, like an ObjectId tiebreak
        indexed = list(enumerate(self.documents))
        indexed.sort(key=lambda pair: (pair[1].get(key), pair[0]), reverse=direction < 0)
        self.documents = [doc for _, doc in indexed]
        return self

    def skip(self, count):
        self.documents = self.documents[count:]
        return self

    def limit(self, count):
        self.documents = self.documents[:count]
        return self

    def __iter__(self):
        return iter(self.documents)


class FakeInsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCollection:
    """Just enough of a pymongo collection for the services"""

    def __init__(self, documents=None, error: Optional[Exception] = None):
        self.documents = list(documents or [])
        self.error = error

    def _matches(self, document, query):
        return all(document.get(key) == value for key, value in query.items())

    def find_one(self, query):
        if self.error:
            raise self.error
        for document in self.documents:
            if self._matches(document, query):
                return document
        return None

    def find(self, query):
        if self.error:
            raise self.error
        return FakeCursor(doc for doc in self.documents if self._matches(doc, query))

    def insert_one(self, document):
        if self.error:
            raise self.error
        document = dict(document)
        document.setdefault("_id", ObjectId())
        self.documents.append(document)
        return FakeInsertResult(document["_id"])


@pytest.fixture
def request_service():
    return FakeRequestService()


@pytest.fixture
def chat_log():
    return FakeChatLog()
