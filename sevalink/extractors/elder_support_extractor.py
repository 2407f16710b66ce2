"""
Elder Support Extractor - slots for elderly care requests
"""

from typing import Optional, Dict, Any

from .base_extractor import BaseExtractor
from .location_extractor import LocationExtractor
from ..utils.patterns import compile_keywords, AGE_PATTERNS, ELDER_NAME_PATTERN


class ElderSupportExtractor(BaseExtractor):
    """Age, elder name, service type, frequency, time slot and location"""

    # (pattern, (serviceType, supportType tag))
    SERVICE_TYPES = [
        (compile_keywords(latin=[r'medicines?', r'medications?', r'pills', r'tablets'],
                          native=['दवा', 'दवाई', 'మందు']),
         ('Medicine Delivery', 'medical')),
        (compile_keywords(latin=[r'doctor', r'appointment', r'medical', r'check-?up', r'hospital\s+visit']),
         ('Medical Appointment', 'medical')),
        (compile_keywords(latin=[r'food', r'meals?', r'cooking', r'grocer(?:y|ies)', r'vegetables'],
                          native=['किराना', 'खाना', 'కిరాణా', 'భోజనం']),
         ('Grocery Shopping', 'food')),
        (compile_keywords(latin=[r'clean(?:ing)?', r'hygiene', r'household', r'laundry', r'bath(?:ing)?']),
         ('Household Help', 'hygiene')),
        (compile_keywords(latin=[r'companion(?:ship)?', r'company', r'talk', r'lonely']),
         ('Companionship', 'companionship')),
        (compile_keywords(latin=[r'emergency', r'urgent(?:ly)?', r'fell', r'fallen']),
         ('Emergency Assistance', 'emergency')),
    ]

    FREQUENCIES = [
        (compile_keywords(latin=[r'daily', r'every\s*day'], native=['रोज', 'ప్రతిరోజు']), 'daily'),
        (compile_keywords(latin=[r'weekly', r'every\s+week', r'once\s+a\s+week']), 'weekly'),
        (compile_keywords(latin=[r'monthly', r'every\s+month']), 'monthly'),
        (compile_keywords(latin=[r'one[\s-]time', r'just\s+once', r'only\s+once']), 'one-time'),
    ]

    TIME_SLOTS = [
        (compile_keywords(latin=[r'morning'], native=['सुबह', 'ఉదయం']), 'morning'),
        (compile_keywords(latin=[r'afternoon'], native=['दोपहर', 'మధ్యాహ్నం']), 'afternoon'),
        (compile_keywords(latin=[r'evening'], native=['शाम', 'సాయంత్రం']), 'evening'),
        (compile_keywords(latin=[r'night'], native=['रात', 'రాత్రి']), 'night'),
    ]

    def __init__(self):
        super().__init__()
        self.location_extractor = LocationExtractor()

    def extract(self, message: str, context: Optional[Dict[str, Any]] = None) -> Dict:
        """Newly found elder support slots"""
        slots: Dict[str, Any] = {}
        if not message:
            return slots

        message = self.clean_message(message)

        for pattern in AGE_PATTERNS:
            age = self.find_pattern(message, pattern)
            if age:
                slots['age'] = age
                break

        elder_name = self.find_pattern(message, ELDER_NAME_PATTERN)
        if elder_name:
            slots['elderName'] = elder_name

        service = self.first_match(message, self.SERVICE_TYPES)
        if service:
            service_type, support_tag = service
            slots['serviceType'] = service_type
            slots['supportType'] = [support_tag]

        frequency = self.first_match(message, self.FREQUENCIES)
        if frequency:
            slots['frequency'] = frequency

        time_slot = self.first_match(message, self.TIME_SLOTS)
        if time_slot:
            slots['timeSlot'] = time_slot

        location = self.location_extractor.extract_location(message)
        if location:
            slots['location'] = location

        return slots
