"""
Extraction Result Model
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .slots import SlotMap


class ExtractionResult(BaseModel):
    """Merged slots for one turn and what is still missing"""

    model_config = ConfigDict(frozen=True)

    slots: SlotMap = Field(default_factory=dict)
    missing: List[str] = Field(default_factory=list)
    needs_more_info: bool = False
    using_fallback: bool = False
