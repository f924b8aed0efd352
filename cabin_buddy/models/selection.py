"""Pydantic models for rotation selection periods."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SelectionStatus(str, Enum):
    """Display classification of a selection period."""

    SCHEDULED = "scheduled"
    ACTIVE = "active"
    COMPLETED = "completed"


class ReservationPeriod(BaseModel):
    """One family group's selection window within a rotation year.

    Mirrors the reservation_periods table row. id and timestamps are absent
    on periods generated locally before they are persisted.
    """

    id: Optional[str] = None
    organization_id: str
    rotation_year: int = Field(description="Reservation year the window selects for")
    current_family_group: str = Field(description="Family group selecting in this window")
    current_group_index: int = Field(description="Position in rotation order")
    selection_start_date: date
    selection_end_date: date
    reservations_completed: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class SelectionPeriodDisplayInfo(BaseModel):
    """Derived view of a selection period for display."""

    family_group: str
    status: SelectionStatus
    scheduled_start_date: date
    scheduled_end_date: date
    days_until_scheduled: int = Field(
        description="Calendar days from today to the window start (negative if past)"
    )
    is_currently_active: bool
    display_text: str
    days_remaining: Optional[int] = Field(
        None,
        description="Days left in the active window; only set for the active group",
    )

    model_config = ConfigDict(frozen=True)
