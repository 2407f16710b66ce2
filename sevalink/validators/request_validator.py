"""
Request Validator - hard preconditions checked right before finalizing
"""

from typing import Dict, Any

from ..config.categories_config import BLOOD_TYPES, REQUEST_CATEGORIES
from ..errors import ValidationError


class RequestValidator:
    """Category preconditions, independent of the completeness check"""

    def __init__(self):
        """Initialize request validator"""
        self.rules = {
            "blood_request": self._validate_blood_request
        }

    def validate(self, category: str, slots: Dict[str, Any]) -> None:
        """Raise ValidationError when ``slots`` cannot become a request"""
        if category not in REQUEST_CATEGORIES:
            raise ValidationError(category, "category", f"'{category}' does not create requests")

        rule = self.rules.get(category)
        if rule:
            rule(slots)

    def _validate_blood_request(self, slots: Dict[str, Any]) -> None:
        blood_type = slots.get("bloodType")
        if not blood_type:
            raise ValidationError("blood_request", "bloodType", "Blood type is required for a blood request")
        if blood_type not in BLOOD_TYPES:
            raise ValidationError("blood_request", "bloodType", f"Invalid blood type: {blood_type}")

        units = slots.get("unitsNeeded")
        if units is not None:
            try:
                valid_units = int(units) >= 1
            except (TypeError, ValueError):
                valid_units = False
            if not valid_units:
                raise ValidationError("blood_request", "unitsNeeded", f"Invalid number of units: {units}")
