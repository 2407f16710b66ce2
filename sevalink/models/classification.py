"""
Classification Result Model
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ..config.categories_config import CATEGORIES, PRIORITIES, REQUEST_CATEGORIES


class ClassificationResult(BaseModel):
    """Category and priority decided for one turn"""

    model_config = ConfigDict(frozen=True)

    category: str = "general_inquiry"
    priority: str = "medium"
    using_fallback: bool = False

    # Direct answer from the AI collaborator, used for general replies
    response: Optional[str] = None

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        if v not in CATEGORIES:
            raise ValueError(f"Unknown category: {v}")
        return v

    @field_validator('priority')
    @classmethod
    def validate_priority(cls, v):
        if v not in PRIORITIES:
            raise ValueError(f"Unknown priority: {v}")
        return v

    def needs_request(self) -> bool:
        """True when this turn should end in a service request"""
        return self.category in REQUEST_CATEGORIES
