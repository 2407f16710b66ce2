"""
Complaint Extractor - slots for civic complaints
"""

from typing import Optional, Dict, Any

from .base_extractor import BaseExtractor
from .location_extractor import LocationExtractor
from ..utils.patterns import compile_keywords


class ComplaintExtractor(BaseExtractor):
    """Complaint category, location and severity"""

    # First match wins. "street light" is an electrical fault, not a road one.
    CATEGORIES = [
        (compile_keywords(latin=[r'roads?', r'potholes?', r'pot\s+holes?', r'street(?!\s*lights?)',
                                 r'pavement', r'footpath'],
                          native=['सड़क', 'सडक', 'రోడ్డు']),
         'Road Maintenance'),
        (compile_keywords(latin=[r'water', r'drainage', r'leak(?:s|ing|age)?', r'sewage', r'pipeline'],
                          native=['पानी', 'నీరు', 'నీళ్లు']),
         'Water Supply'),
        (compile_keywords(latin=[r'garbage', r'waste', r'trash', r'dump(?:ing)?'],
                          native=['कचरा', 'చెత్త']),
         'Waste Management'),
        (compile_keywords(latin=[r'electricity', r'power', r'lights?', r'electric(?:al)?', r'transformer'],
                          native=['बिजली', 'కరెంటు', 'విద్యుత్']),
         'Electricity'),
        (compile_keywords(latin=[r'safety', r'crime', r'security', r'theft', r'harassment']),
         'Public Safety'),
    ]

    SEVERITIES = [
        (compile_keywords(latin=[r'dangerous', r'danger', r'severe(?:ly)?', r'accidents?', r'hazard(?:ous)?',
                                 r'major', r'flood(?:ing|ed)?', r'live\s+wire']),
         'high'),
        (compile_keywords(latin=[r'minor', r'small', r'slight(?:ly)?']), 'low'),
    ]

    def __init__(self):
        super().__init__()
        self.location_extractor = LocationExtractor()

    def extract(self, message: str, context: Optional[Dict[str, Any]] = None) -> Dict:
        """Newly found complaint slots"""
        slots: Dict[str, Any] = {}
        if not message:
            return slots

        message = self.clean_message(message)

        location = self.location_extractor.extract_location(message)
        if location:
            slots['complaintLocation'] = location
            # Place names like "MG Road" say nothing about the issue
            message = message.replace(location, ' ')

        category = self.first_match(message, self.CATEGORIES)
        if category:
            slots['complaintCategory'] = category

        severity = self.first_match(message, self.SEVERITIES)
        if severity:
            slots['severity'] = severity

        return slots
