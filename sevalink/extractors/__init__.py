"""
Extractors package
"""

from .base_extractor import BaseExtractor
from .blood_type_extractor import BloodTypeExtractor
from .urgency_extractor import UrgencyExtractor
from .location_extractor import LocationExtractor
from .blood_request_extractor import BloodRequestExtractor
from .elder_support_extractor import ElderSupportExtractor
from .complaint_extractor import ComplaintExtractor
from .request_info_extractor import RequestInfoExtractor

__all__ = [
    "BaseExtractor",
    "BloodTypeExtractor",
    "UrgencyExtractor",
    "LocationExtractor",
    "BloodRequestExtractor",
    "ElderSupportExtractor",
    "ComplaintExtractor",
    "RequestInfoExtractor"
]
