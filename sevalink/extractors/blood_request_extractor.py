"""
Blood Request Extractor - slots for blood donation requests
"""

from datetime import datetime, timedelta
from typing import Optional, Dict, Any

from .base_extractor import BaseExtractor
from .blood_type_extractor import BloodTypeExtractor
from .urgency_extractor import UrgencyExtractor
from .location_extractor import LocationExtractor
from ..utils.helpers import Helpers
from ..utils.patterns import (
    compile_keywords,
    UNITS_PATTERN,
    HOSPITAL_PATTERN,
    PATIENT_NAME_PATTERN,
    URGENT_WORDING,
    TODAY_WORDING,
    TOMORROW_WORDING
)


class BloodRequestExtractor(BaseExtractor):
    """Blood type, units, hospital, patient, relationship, urgency and location"""

    RELATIONSHIPS = [
        (compile_keywords(latin=[r'my\s+mother', r'mom', r'mummy', r'amma']), 'Mother'),
        (compile_keywords(latin=[r'my\s+father', r'dad', r'papa', r'nanna']), 'Father'),
        (compile_keywords(latin=[r'my\s+brother']), 'Brother'),
        (compile_keywords(latin=[r'my\s+sister']), 'Sister'),
        (compile_keywords(latin=[r'my\s+friend']), 'Friend'),
        (compile_keywords(latin=[r'myself', r'for\s+me']), 'Self'),
    ]

    def __init__(self):
        super().__init__()
        self.blood_type_extractor = BloodTypeExtractor()
        self.urgency_extractor = UrgencyExtractor()
        self.location_extractor = LocationExtractor()

    def extract(self, message: str, context: Optional[Dict[str, Any]] = None) -> Dict:
        """Newly found blood request slots"""
        slots: Dict[str, Any] = {}
        if not message:
            return slots

        message = self.clean_message(message)

        blood_type = self.blood_type_extractor.extract_blood_type(message)
        if blood_type:
            slots['bloodType'] = blood_type

        units = self.find_pattern(message, UNITS_PATTERN)
        if units and int(units) > 0:
            slots['unitsNeeded'] = int(units)

        hospital = self.find_pattern(message, HOSPITAL_PATTERN)
        if hospital:
            slots['hospitalName'] = Helpers.clean_text(hospital)

        patient = self.find_pattern(message, PATIENT_NAME_PATTERN)
        if patient:
            slots['patientName'] = patient

        relationship = self.first_match(message, self.RELATIONSHIPS)
        if relationship:
            slots['relationship'] = relationship

        slots.update(self.extract_timing(message))

        location = self.location_extractor.extract_location(
            message, exclude=[slots.get('hospitalName'), self.extract_from_context('hospitalName', context)]
        )
        if location:
            slots['location'] = location

        return slots

    def extract_timing(self, message: str) -> Dict[str, Any]:
        """
        Explicit urgent wording sets urgencyLevel and requiredDate to now;
        otherwise today/tomorrow set requiredDate and the tiered wording
        may still set urgencyLevel.
        """
        now = datetime.utcnow()

        if URGENT_WORDING.search(message):
            return {'urgencyLevel': 'urgent', 'requiredDate': now.isoformat()}

        timing: Dict[str, Any] = {}
        if TODAY_WORDING.search(message):
            timing['requiredDate'] = now.isoformat()
        elif TOMORROW_WORDING.search(message):
            timing['requiredDate'] = (now + timedelta(days=1)).isoformat()

        level = self.urgency_extractor.extract_level(message)
        if level:
            timing['urgencyLevel'] = level

        return timing
