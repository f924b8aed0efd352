"""Models for the calendar multi-range picker state."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DateRange(BaseModel):
    """Inclusive range of calendar days."""

    start: date
    end: date

    model_config = ConfigDict(frozen=True)

    def contains(self, day: date) -> bool:
        """True if day falls within the range, both ends included."""
        return self.start <= day <= self.end


class DragSelectionState(BaseModel):
    """Snapshot of the picker: the drag in progress plus finalized ranges."""

    is_dragging: bool = False
    drag_start: Optional[date] = None
    drag_end: Optional[date] = None
    selected_ranges: list[DateRange] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
