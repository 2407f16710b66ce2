"""
Title Builder - short card title and description for a request
"""

import re
from typing import Optional, Tuple

from ..utils.helpers import Helpers
from ..utils.patterns import ROUGH_LOCATION_PATTERN


class TitleBuilder:
    """Rule based title/description composition"""

    ELDER_KINDS = [
        (re.compile(r'medicine|tablet|paracetamol|prescription', re.IGNORECASE), 'Medicine delivery needed'),
        (re.compile(r'grocery|vegetable|milk|shopping', re.IGNORECASE), 'Grocery help needed'),
        (re.compile(r'appointment|hospital|clinic|checkup', re.IGNORECASE), 'Medical appointment help'),
        (re.compile(r'house|clean|cook|laundry|household', re.IGNORECASE), 'Household help needed'),
    ]

    # Sub-issue phrases checked before the per-category phrase
    COMPLAINT_OVERRIDES = [
        (re.compile(r'street\s*lights?', re.IGNORECASE), 'Street lights not working'),
        (re.compile(r'pot\s*holes?|holes?\s+in\s+(?:the\s+)?road', re.IGNORECASE), 'Potholes on road'),
        (re.compile(r'garbage|trash|waste', re.IGNORECASE), 'Garbage accumulation issue'),
        (re.compile(r'water\s*leak|no\s*water', re.IGNORECASE), 'Water supply problem'),
        (re.compile(r'power\s*cut|electricity\s*outage|transformer', re.IGNORECASE), 'Electricity outage issue'),
    ]

    COMPLAINT_BASE = {
        'Road Maintenance': 'Road maintenance issue',
        'Water Supply': 'Water supply issue',
        'Waste Management': 'Waste management issue',
        'Electricity': 'Electricity issue',
        'Public Safety': 'Public safety issue',
        'Other': 'Community issue'
    }

    def extract_location(self, text: str) -> Optional[str]:
        """Rough location after in/at/near"""
        match = ROUGH_LOCATION_PATTERN.search(text or "")
        if not match:
            return None
        return Helpers.clean_text(match.group(1)) or None

    def build(self, message: str, request_type: str, blood_type: Optional[str] = None,
              complaint_category: Optional[str] = None,
              location: Optional[str] = None) -> Tuple[str, str]:
        """
        Returns (title, description).

        ``location`` is the extracted location slot when there is one,
        otherwise a rough location is pulled from the message.
        """
        location = location or self.extract_location(message)

        if request_type == 'blood':
            group = blood_type or 'blood'
            title = f"Need {group} blood" + (f" - {location}" if location else "")
            description = f"Request for {group} blood" + (f" in {location}" if location else "") + "."

        elif request_type == 'elder_support':
            kind = 'Elder support needed'
            for pattern, label in self.ELDER_KINDS:
                if pattern.search(message):
                    kind = label
                    break
            title = kind + (f" - {location}" if location else "")
            description = f"Elder support request: {kind}" + (f" in {location}" if location else "") + "."

        elif request_type == 'complaint':
            category = complaint_category or 'Other'
            title = self.COMPLAINT_BASE.get(category, self.COMPLAINT_BASE['Other'])
            for pattern, phrase in self.COMPLAINT_OVERRIDES:
                if pattern.search(message):
                    title = phrase
                    break
            if location:
                title += f" - {location}"
            description = f"{title}. Category: {category}."

        else:
            summary = Helpers.summarize(message, 80)
            title = summary[:1].upper() + summary[1:]
            description = title

        return title, description
