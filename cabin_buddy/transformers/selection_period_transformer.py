"""Transformer turning rotation periods into per-group selection display info."""

from datetime import date, timedelta
from typing import Any, Callable, Mapping, Optional

from structlog import get_logger

from cabin_buddy.models.selection import (
    ReservationPeriod,
    SelectionPeriodDisplayInfo,
    SelectionStatus,
)
from cabin_buddy.utils.dates import days_between, format_display_date

logger = get_logger(__name__)

UPCOMING_STATUSES = (SelectionStatus.ACTIVE, SelectionStatus.SCHEDULED)


class SelectionPeriodTransformer:
    """Classifies selection periods as scheduled, active or completed."""

    @staticmethod
    def _project_windows(
        periods: list[ReservationPeriod],
        current_family_group: str,
        today: date,
        selection_days: int,
    ) -> dict[str, tuple[date, date]]:
        """Lay windows back to back starting today with the active group.

        Order follows the period list from the active group onward, wrapping
        around to the groups before it.

        Returns:
            Mapping of family group to projected (start, end), or empty if the
            active group has no period
        """
        active_index = next(
            (
                i
                for i, period in enumerate(periods)
                if period.current_family_group == current_family_group
            ),
            -1,
        )
        if active_index < 0:
            return {}

        windows: dict[str, tuple[date, date]] = {}
        next_start = today
        for offset in range(len(periods)):
            period = periods[(active_index + offset) % len(periods)]
            end = next_start + timedelta(days=selection_days - 1)
            windows[period.current_family_group] = (next_start, end)
            next_start = end + timedelta(days=1)

        return windows

    @staticmethod
    def get_selection_period_display_info(
        periods: list[ReservationPeriod | Mapping[str, Any]],
        current_family_group: Optional[str],
        get_days_remaining: Optional[Callable[[str], Optional[int]]] = None,
        *,
        today: Optional[date] = None,
        selection_days: Optional[int] = None,
    ) -> list[SelectionPeriodDisplayInfo]:
        """Build display info for every period, in input order.

        Classification, first match wins:
        1. The group is currently selecting: active
        2. Its scheduled start has passed: completed
        3. Otherwise: scheduled

        An active group that started late shows the same "Active Now" text as
        one that started on time.

        Args:
            periods: Reservation periods (models or row dicts)
            current_family_group: Group whose turn it is now, if any
            get_days_remaining: Lookup for the active group's remaining days
            today: Reference day, defaults to the local date
            selection_days: When set, active and scheduled windows are
                projected back to back from today starting with the active group

        Returns:
            List of SelectionPeriodDisplayInfo
        """
        today = today or date.today()
        periods = [
            p if isinstance(p, ReservationPeriod) else ReservationPeriod(**p)
            for p in periods
        ]

        projected: dict[str, tuple[date, date]] = {}
        if selection_days and current_family_group:
            projected = SelectionPeriodTransformer._project_windows(
                periods, current_family_group, today, selection_days
            )

        results = []
        for period in periods:
            scheduled_start = period.selection_start_date
            days_until_scheduled = days_between(today, scheduled_start)
            is_currently_active = current_family_group == period.current_family_group
            window = projected.get(
                period.current_family_group,
                (period.selection_start_date, period.selection_end_date),
            )
            days_remaining = None

            if is_currently_active:
                status = SelectionStatus.ACTIVE
                if get_days_remaining is not None:
                    days_remaining = get_days_remaining(period.current_family_group)
                days_until = 0  # Their turn is now

                if days_until_scheduled > 0:
                    # Started early
                    display_text = (
                        "Active Now (Originally scheduled for "
                        f"{format_display_date(scheduled_start)})"
                    )
                else:
                    display_text = "Active Now"

            elif days_until_scheduled < 0:
                status = SelectionStatus.COMPLETED
                window = (period.selection_start_date, period.selection_end_date)
                days_until = days_until_scheduled
                display_text = (
                    f"Completed (was scheduled for {format_display_date(scheduled_start)})"
                )

            else:
                status = SelectionStatus.SCHEDULED
                days_until = days_between(today, window[0])
                display_text = f"Scheduled in {days_until} day{'' if days_until == 1 else 's'}"

            results.append(
                SelectionPeriodDisplayInfo(
                    family_group=period.current_family_group,
                    status=status,
                    scheduled_start_date=window[0],
                    scheduled_end_date=window[1],
                    days_until_scheduled=days_until,
                    is_currently_active=is_currently_active,
                    display_text=display_text,
                    days_remaining=days_remaining,
                )
            )

        logger.debug(
            "Selection period display info built",
            period_count=len(results),
            current_family_group=current_family_group,
        )

        return results

    @staticmethod
    def get_upcoming_selection_periods_with_status(
        display_info: list[SelectionPeriodDisplayInfo],
    ) -> list[SelectionPeriodDisplayInfo]:
        """Keep only active and scheduled entries."""
        return [info for info in display_info if info.status in UPCOMING_STATUSES]
