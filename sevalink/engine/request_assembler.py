"""
Request Assembler - builds the persisted entity from category, slots and message
"""

import copy
import logging
from datetime import datetime, timedelta
from typing import Dict, Any, Optional

from dateutil import parser as date_parser

from .normalizer import Normalizer
from .title_builder import TitleBuilder
from ..config.categories_config import REQUEST_TYPES, PRIORITIES
from ..config.settings import DEFAULT_LOCATION
from ..models.request_entity import (
    ServiceRequestEntity,
    BloodRequestEntity,
    ElderSupportEntity,
    ComplaintEntity,
    RequestLocation
)
from ..models.slots import SlotMap
from ..utils.patterns import URGENT_WORDING

logger = logging.getLogger(__name__)


class RequestAssembler:
    """Maps (category, slots, message, requester) to a ServiceRequestEntity"""

    def __init__(self, normalizer: Optional[Normalizer] = None, title_builder: Optional[TitleBuilder] = None):
        self.normalizer = normalizer or Normalizer()
        self.title_builder = title_builder or TitleBuilder()

    @staticmethod
    def map_priority(priority: str) -> str:
        """urgent and high are kept, everything else becomes medium"""
        return priority if priority in ("urgent", "high") else "medium"

    @staticmethod
    def resolve_blood_urgency(message: str, slots: SlotMap) -> str:
        """
        Urgent wording in the raw message, then the slot (heuristic or AI),
        then "high". Blood requests only.
        """
        if URGENT_WORDING.search(message or ""):
            return "urgent"

        suggested = str(slots.get("urgencyLevel") or "").lower()
        if suggested in PRIORITIES:
            return suggested

        return "high"

    @staticmethod
    def parse_date(value: Any, default: datetime) -> datetime:
        """Slot dates are ISO strings from extraction or free text from the AI"""
        if isinstance(value, datetime):
            return value
        if not value:
            return default
        try:
            return date_parser.parse(str(value))
        except (ValueError, OverflowError):
            logger.warning(f"⚠️ Unparseable requiredDate '{value}', using now")
            return default

    def build_location(self, place: Optional[str]) -> RequestLocation:
        location = copy.deepcopy(DEFAULT_LOCATION)
        if place:
            location["address"] = str(place)
        return RequestLocation(**location)

    def assemble(self, category: str, slots: SlotMap, message: str, user: Dict[str, Any],
                 priority: str, input_method: str = "text") -> ServiceRequestEntity:
        """Build the entity; the caller validates slots beforehand"""
        request_type = REQUEST_TYPES[category]
        english = self.normalizer.translate_to_english(message)
        now = datetime.utcnow()

        common = {
            "user": user["id"],
            "name": user.get("name") or "Citizen",
            "phone": user.get("phone") or "Not provided",
            "email": user.get("email"),
            "priority": self.map_priority(priority),
            "status": "pending",
            "source": "voice_chat" if input_method == "voice" else "text_chat",
            "created_at": now
        }

        if request_type == "blood":
            urgency = self.resolve_blood_urgency(message, slots)
            location = slots.get("location")
            title, description = self.title_builder.build(
                english, "blood", blood_type=slots.get("bloodType"), location=location
            )
            entity = BloodRequestEntity(
                **{**common, "priority": self.map_priority(urgency)},
                location=self.build_location(location),
                title=title,
                description=description,
                blood_type=slots["bloodType"],
                urgency_level=urgency,
                units_needed=int(slots.get("unitsNeeded") or 1),
                hospital_name=slots.get("hospitalName") or "To be specified",
                patient_name=slots.get("patientName") or common["name"],
                relationship=slots.get("relationship") or "Self",
                medical_condition=english,
                contact_number=common["phone"],
                required_date=self.parse_date(slots.get("requiredDate"), now),
                additional_notes=english
            )

        elif request_type == "elder_support":
            location = slots.get("location")
            title, description = self.title_builder.build(english, "elder_support", location=location)
            entity = ElderSupportEntity(
                **common,
                location=self.build_location(location),
                title=title,
                description=description,
                service_type=slots.get("serviceType") or "Other",
                elder_name=slots.get("elderName") or common["name"],
                age=slots.get("age") or "Not specified",
                support_type=slots.get("supportType") or ["other"],
                frequency=slots.get("frequency") or "one-time",
                time_slot=slots.get("timeSlot") or "flexible",
                special_requirements=english,
                due_date=now + timedelta(days=1)
            )

        else:
            location = slots.get("complaintLocation")
            complaint_category = slots.get("complaintCategory") or "Other"
            title, description = self.title_builder.build(
                english, "complaint", complaint_category=complaint_category, location=location
            )
            entity = ComplaintEntity(
                **common,
                location=self.build_location(location),
                title=title,
                description=description,
                complaint_category=complaint_category,
                complaint_location=str(location or "Not specified"),
                severity=slots.get("severity") or ("high" if priority == "urgent" else "medium")
            )

        logger.info(f"🧩 Assembled {request_type} request: {entity.title}")
        return entity
