"""
Slot map helpers

A slot map is a plain dict from slot name (camelCase, e.g. ``bloodType``) to
value. Slot maps are never mutated in place; merging returns a new dict.
"""

from typing import Dict, Any, Optional, Tuple

from ..config.categories_config import SLOT_NAMES, ENUMERATED_SLOTS

SlotMap = Dict[str, Any]


def merge_slot_maps(prior: Optional[SlotMap], new: Optional[SlotMap]) -> SlotMap:
    """Union of two slot maps, values from ``new`` win"""
    merged = dict(prior or {})
    for name, value in (new or {}).items():
        if value is None or value == "" or value == []:
            continue
        merged[name] = value
    return merged


def filter_slots(category: str, slots: Optional[SlotMap]) -> SlotMap:
    """Keep only the slots that belong to ``category``"""
    allowed = SLOT_NAMES.get(category, [])
    return {
        name: value for name, value in (slots or {}).items()
        if name in allowed and value not in (None, "", [])
    }


def category_for_slots(slots: Optional[SlotMap]) -> Optional[str]:
    """
    Infer the pending request category from the slots carried over
    from a previous turn.

    Returns None when the slots are empty or fit more than one category
    (``location`` alone is shared by blood and elder requests).
    """
    if not slots:
        return None

    matches = []
    for category, names in SLOT_NAMES.items():
        shared = set()
        for other_category, other_names in SLOT_NAMES.items():
            if other_category != category:
                shared.update(other_names)

        if any(name in names and name not in shared for name in slots):
            matches.append(category)

    return matches[0] if len(matches) == 1 else None


def enumerated_answer(category: Optional[str], text: str) -> Optional[Tuple[str, str]]:
    """
    ``(slot, value)`` when the whole answer is one of the fixed choices
    offered for ``category``, e.g. "Household Help" -> serviceType.
    """
    if category not in ENUMERATED_SLOTS or not text:
        return None

    slot, choices = ENUMERATED_SLOTS[category]
    answer = ' '.join(text.strip().strip('.!?').split()).lower()
    for choice in choices:
        if answer == choice.lower():
            return slot, choice
    return None
