"""
Completeness Checker - which required slots are still missing
"""

from typing import List, Optional

from ..config.categories_config import REQUIRED_SLOTS, EQUIVALENT_SLOTS, FOLLOW_UP_ORDER
from ..models.slots import SlotMap
from ..utils.helpers import Helpers


class CompletenessChecker:
    """Required-slot bookkeeping per category"""

    def is_filled(self, slot: str, slots: SlotMap) -> bool:
        """A slot is filled directly or through an equivalent slot"""
        names = [slot] + EQUIVALENT_SLOTS.get(slot, [])
        return any(not Helpers.is_empty_value(slots.get(name)) for name in names)

    def get_missing_required_info(self, category: str, slots: Optional[SlotMap]) -> List[str]:
        """Required slots absent from ``slots``, in follow-up order"""
        slots = slots or {}
        missing = [
            slot for slot in REQUIRED_SLOTS.get(category, [])
            if not self.is_filled(slot, slots)
        ]
        return self.order_missing(category, missing)

    def order_missing(self, category: str, missing: List[str]) -> List[str]:
        """
        Sort by the per-category follow-up order; unknown names keep their
        relative order after the known ones
        """
        order = FOLLOW_UP_ORDER.get(category, [])
        rank = {name: index for index, name in enumerate(order)}
        return sorted(dict.fromkeys(missing), key=lambda name: rank.get(name, len(order)))

    def next_slot(self, category: str, missing: List[str]) -> Optional[str]:
        """Highest-priority missing slot, or None"""
        ordered = self.order_missing(category, missing)
        return ordered[0] if ordered else None
