"""Domain models."""

from cabin_buddy.models.billing import (
    BillingBreakdown,
    BillingConfig,
    BillingMethod,
    DayCost,
    OccupancyBillingBreakdown,
    StayDetails,
    ValidationResult,
)
from cabin_buddy.models.drag import DateRange, DragSelectionState
from cabin_buddy.models.selection import (
    ReservationPeriod,
    SelectionPeriodDisplayInfo,
    SelectionStatus,
)

__all__ = [
    "BillingMethod",
    "BillingConfig",
    "StayDetails",
    "BillingBreakdown",
    "DayCost",
    "OccupancyBillingBreakdown",
    "ValidationResult",
    "DateRange",
    "DragSelectionState",
    "ReservationPeriod",
    "SelectionPeriodDisplayInfo",
    "SelectionStatus",
]
