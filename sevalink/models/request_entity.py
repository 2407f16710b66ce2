"""
Service Request Entities - the documents persisted for finalized requests
"""

from datetime import datetime
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..config.categories_config import BLOOD_TYPES, PRIORITIES


class RequestLocation(BaseModel):
    """Where the help is needed"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str = "manual"
    coordinates: Dict[str, float]
    address: str
    city: str
    state: str
    pincode: str
    country: str


class ServiceRequestEntity(BaseModel):
    """Fields shared by every request type"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str
    user: str
    name: str
    phone: str = "Not provided"
    email: Optional[str] = None
    location: RequestLocation
    priority: str = "medium"
    status: str = "pending"
    title: str = ""
    description: str = ""
    source: str = "text_chat"
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @field_validator('priority')
    @classmethod
    def validate_priority(cls, v):
        if v not in PRIORITIES:
            raise ValueError(f"Invalid priority: {v}")
        return v

    def to_document(self) -> Dict[str, Any]:
        """Mongo document with camelCase keys"""
        return self.model_dump(by_alias=True)


class BloodRequestEntity(ServiceRequestEntity):
    """Blood donation request"""

    type: str = "blood"
    blood_type: str
    urgency_level: str = "high"
    units_needed: int = 1
    hospital_name: str = "To be specified"
    patient_name: str
    relationship: str = "Self"
    medical_condition: str = ""
    contact_number: str = "Not provided"
    required_date: datetime = Field(default_factory=datetime.utcnow)
    additional_notes: str = ""

    @field_validator('blood_type')
    @classmethod
    def validate_blood_type(cls, v):
        if v not in BLOOD_TYPES:
            raise ValueError(f"Invalid blood type: {v}")
        return v

    @field_validator('units_needed')
    @classmethod
    def validate_units(cls, v):
        if v < 1:
            raise ValueError("At least one unit must be requested")
        return v


class ElderSupportEntity(ServiceRequestEntity):
    """Support request for an elderly person"""

    type: str = "elder_support"
    service_type: str = "Other"
    elder_name: str
    age: str = "Not specified"
    support_type: List[str] = Field(default_factory=lambda: ["other"])
    frequency: str = "one-time"
    time_slot: str = "flexible"
    special_requirements: str = ""
    due_date: datetime

    @field_validator('age', mode='before')
    @classmethod
    def coerce_age(cls, v):
        if v is None:
            return "Not specified"
        return str(v)

    @field_validator('support_type', mode='before')
    @classmethod
    def coerce_support_type(cls, v):
        if not v:
            return ["other"]
        if isinstance(v, str):
            return [v]
        return list(v)


class ComplaintEntity(ServiceRequestEntity):
    """Civic complaint"""

    type: str = "complaint"
    complaint_category: str = "Other"
    complaint_location: str = "Not specified"
    severity: str = "medium"
