"""
Request Classifier and Priority Resolver

Both are ordered rule tables; the first rule whose pattern is found in
the message decides. A message that mentions blood and an emergency is
a blood request.
"""

import logging
from typing import List, Tuple, Pattern

from ..extractors.blood_type_extractor import BloodTypeExtractor
from ..utils.patterns import compile_keywords

logger = logging.getLogger(__name__)

RuleTable = List[Tuple[str, Pattern]]


CATEGORY_RULES: RuleTable = [
    ("blood_request", compile_keywords(
        latin=[r'blood', r'donate', r'donation', r'donors?', r'transfusion', r'plasma', r'platelets?',
               r'surgery', r'operation', r'hospital', r'patient', r'khoon', r'rakth', r'rakthamu'],
        native=['रक्त', 'खून', 'రక్తం', 'రక్త']
    )),
    ("emergency", compile_keywords(
        latin=[r'emergency', r'urgent(?:ly)?', r'critical', r'immediate(?:ly)?', r'asap', r'ambulance',
               r'911', r'108', r'112'],
        native=['आपातकाल', 'तुरंत', 'అత్యవసరం']
    )),
    ("elder_support", compile_keywords(
        latin=[r'elderly', r'old', r'senior', r'medicines?', r'grocer(?:y|ies)', r'care', r'caregiver',
               r'nursing', r'assistance', r'grandfather', r'grandmother', r'grandparents?', r'parents?',
               r'mom', r'dad', r'mother', r'father'],
        native=['बुजुर्ग', 'दवा', 'వృద్ధులు', 'మందులు']
    )),
    ("complaint", compile_keywords(
        latin=[r'complaint', r'complain', r'problem', r'issue', r'broken', r'not\s+working', r'damaged',
               r'fault(?:y)?', r'repair', r'fix', r'street', r'lights?', r'roads?', r'water', r'electricity',
               r'garbage', r'sewage', r'drainage', r'potholes?', r'noise', r'pollution'],
        native=['शिकायत', 'समस्या', 'ఫిర్యాదు', 'సమస్య']
    )),
]


PRIORITY_RULES: RuleTable = [
    ("urgent", compile_keywords(
        latin=[r'emergency', r'(?<!not )urgent(?:ly)?', r'critical'],
        native=['आपातकाल', 'तुरंत', 'అత్యవసరం']
    )),
    ("high", compile_keywords(
        latin=[r'important', r'asap', r'soon'],
        native=['जल्दी', 'త్వరగా']
    )),
    ("low", compile_keywords(
        latin=[r'whenever', r'no\s+rush', r'not\s+urgent'],
        native=['जब समय हो', 'సమయం ఉన్నప్పుడు']
    )),
]


class RequestClassifier:
    """Maps a message to one of the five categories"""

    def __init__(self, rules: RuleTable = None):
        self.rules = rules or CATEGORY_RULES
        self.blood_type_extractor = BloodTypeExtractor()

    def categorize(self, text: str) -> str:
        """First matching rule wins, default general_inquiry"""
        if not text:
            return "general_inquiry"

        for category, pattern in self.rules:
            if pattern.search(text):
                return category
            # A bare blood group ("AB negative") is a blood request too
            if category == "blood_request" and self.blood_type_extractor.extract_blood_type(text):
                return category

        return "general_inquiry"


class PriorityResolver:
    """Maps urgency and softening wording to a priority, independent of category"""

    def __init__(self, rules: RuleTable = None):
        self.rules = rules or PRIORITY_RULES

    def determine(self, text: str) -> str:
        if not text:
            return "medium"

        for priority, pattern in self.rules:
            if pattern.search(text):
                return priority
        return "medium"
