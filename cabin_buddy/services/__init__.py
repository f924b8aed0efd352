"""Business services package."""

from cabin_buddy.services.billing_calculator import (
    BillingCalculationError,
    BillingCalculator,
)
from cabin_buddy.services.drag_selection import DragSelection
from cabin_buddy.services.rotation import (
    calculate_days_remaining,
    calculate_rotation_for_year,
    generate_reservation_periods,
    get_selection_rotation_year,
)

__all__ = [
    "BillingCalculator",
    "BillingCalculationError",
    "DragSelection",
    "calculate_rotation_for_year",
    "get_selection_rotation_year",
    "calculate_days_remaining",
    "generate_reservation_periods",
]
