"""Rotation order and selection-window scheduling for family groups."""

from datetime import date, timedelta
from typing import Literal, Optional

from structlog import get_logger

from cabin_buddy.models.selection import ReservationPeriod

logger = get_logger(__name__)

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

DEFAULT_START_MONTH = "October"
DEFAULT_SELECTION_DAYS = 14


def _month_number(month_name: Optional[str]) -> Optional[int]:
    """1-based month number for an English month name, or None."""
    if month_name in MONTH_NAMES:
        return MONTH_NAMES.index(month_name) + 1
    return None


def calculate_rotation_for_year(
    base_order: list[str],
    start_year: int,
    target_year: int,
    first_last_option: Literal["first", "last"] = "first",
) -> list[str]:
    """Rotate the base order once for every year after start_year.

    "first": the group that picked first moves to the end (1,2,3 -> 2,3,1).
    "last": the group that picked last moves to the front (1,2,3 -> 3,1,2).

    Args:
        base_order: Family groups in the order they pick in start_year
        start_year: Year the base order applies to
        target_year: Year to compute the order for
        first_last_option: Which end of the order rotates

    Returns:
        New list with the order for target_year
    """
    order = list(base_order)
    if not order or target_year <= start_year:
        return order

    shift = (target_year - start_year) % len(order)
    if first_last_option == "first":
        return order[shift:] + order[:shift]
    return order[len(order) - shift:] + order[:len(order) - shift]


def get_selection_rotation_year(
    start_month: Optional[str],
    today: Optional[date] = None,
) -> int:
    """Year whose rotation is being selected for.

    Selection opens on the first of start_month and picks stays for the
    following year, so from that day on the rotation year is next year.
    """
    today = today or date.today()
    month = _month_number(start_month)
    if month is None:
        return today.year
    rotation_start = date(today.year, month, 1)
    return today.year + 1 if today >= rotation_start else today.year


def calculate_days_remaining(
    started_on: date,
    allowed_days: int,
    today: Optional[date] = None,
) -> int:
    """Days left in a selection turn that began on started_on (never negative)."""
    today = today or date.today()
    days_passed = (today - started_on).days
    return max(0, allowed_days - days_passed)


def generate_reservation_periods(
    organization_id: str,
    base_order: list[str],
    base_year: int,
    selection_year: int,
    first_last_option: Literal["first", "last"] = "first",
    selection_days: int = DEFAULT_SELECTION_DAYS,
    start_month: str = DEFAULT_START_MONTH,
) -> list[ReservationPeriod]:
    """Build consecutive selection windows for one rotation year.

    Selection that opens in selection_year picks stays for
    selection_year + 1, so periods carry that reservation year and use its
    rotation order. The first window opens on the first of start_month.

    Args:
        organization_id: Owning organization
        base_order: Rotation order as configured for base_year
        base_year: Year the configured order applies to
        selection_year: Year selection takes place in
        first_last_option: Rotation direction
        selection_days: Length of each window in days
        start_month: Month the first window opens (unknown names use October)

    Returns:
        One ReservationPeriod per family group, in picking order
    """
    reservation_year = selection_year + 1
    order = calculate_rotation_for_year(
        base_order, base_year, reservation_year, first_last_option
    )
    month = _month_number(start_month) or _month_number(DEFAULT_START_MONTH)

    periods = []
    window_start = date(selection_year, month, 1)
    for index, family_group in enumerate(order):
        window_end = window_start + timedelta(days=selection_days - 1)
        periods.append(
            ReservationPeriod(
                organization_id=organization_id,
                rotation_year=reservation_year,
                current_family_group=family_group,
                current_group_index=index,
                selection_start_date=window_start,
                selection_end_date=window_end,
                reservations_completed=False,
            )
        )
        window_start = window_end + timedelta(days=1)

    logger.info(
        "Generated reservation periods",
        organization_id=organization_id,
        reservation_year=reservation_year,
        period_count=len(periods),
    )

    return periods
