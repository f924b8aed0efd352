"""Unit tests for selection period display classification."""

from datetime import date, timedelta
from unittest.mock import Mock

from cabin_buddy.models.selection import (
    ReservationPeriod,
    SelectionPeriodDisplayInfo,
    SelectionStatus,
)
from cabin_buddy.transformers import SelectionPeriodTransformer


def make_period(family_group, start, end=None, index=0):
    return ReservationPeriod(
        organization_id="org-lakehouse",
        rotation_year=2026,
        current_family_group=family_group,
        current_group_index=index,
        selection_start_date=start,
        selection_end_date=end or start + timedelta(days=13),
    )


class TestGetSelectionPeriodDisplayInfo:
    """Tests for SelectionPeriodTransformer.get_selection_period_display_info."""

    def test_no_active_group(self, reservation_periods, today):
        """Test past windows complete and future windows are scheduled."""
        info = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, None, today=today
        )

        assert [i.status for i in info] == [
            SelectionStatus.COMPLETED,
            SelectionStatus.COMPLETED,
            SelectionStatus.SCHEDULED,
        ]
        assert info[0].display_text == "Completed (was scheduled for 10/1/2025)"
        assert info[0].days_until_scheduled == -19
        assert info[2].display_text == "Scheduled in 9 days"
        assert info[2].scheduled_start_date == date(2025, 10, 29)
        assert info[2].scheduled_end_date == date(2025, 11, 11)
        assert all(i.days_remaining is None for i in info)

    def test_active_group_that_started_late(self, reservation_periods, today):
        """Test that a late start shows the same text as an on-time start."""
        days_remaining = Mock(return_value=9)

        info = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, "Bakers", days_remaining, today=today
        )

        bakers = info[1]
        assert bakers.status == SelectionStatus.ACTIVE
        assert bakers.is_currently_active is True
        assert bakers.display_text == "Active Now"
        assert bakers.days_until_scheduled == 0
        assert bakers.days_remaining == 9
        days_remaining.assert_called_once_with("Bakers")

        assert info[0].status == SelectionStatus.COMPLETED
        assert info[2].display_text == "Scheduled in 9 days"
        assert info[2].days_remaining is None

    def test_active_group_that_started_early(self, reservation_periods, today):
        """Test that an early start mentions the original date."""
        info = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, "Chens", today=today
        )

        chens = info[2]
        assert chens.status == SelectionStatus.ACTIVE
        assert chens.display_text == "Active Now (Originally scheduled for 10/29/2025)"
        assert chens.days_remaining is None

    def test_active_group_on_time(self, today):
        """Test an active group whose window starts today."""
        periods = [make_period("Andersons", today)]

        info = SelectionPeriodTransformer.get_selection_period_display_info(
            periods, "Andersons", lambda group: 14, today=today
        )

        assert info[0].display_text == "Active Now"
        assert info[0].days_remaining == 14

    def test_window_starting_today_is_scheduled(self, today):
        """Test the boundary between scheduled and completed."""
        periods = [
            make_period("Andersons", today),
            make_period("Bakers", today - timedelta(days=1)),
            make_period("Chens", today + timedelta(days=1)),
        ]

        info = SelectionPeriodTransformer.get_selection_period_display_info(
            periods, None, today=today
        )

        assert info[0].status == SelectionStatus.SCHEDULED
        assert info[0].display_text == "Scheduled in 0 days"
        assert info[1].status == SelectionStatus.COMPLETED
        assert info[2].display_text == "Scheduled in 1 day"

    def test_same_inputs_give_equal_output(self, reservation_periods, today):
        """Test that classification is a pure function of its inputs."""
        first = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, "Bakers", lambda group: 3, today=today
        )
        second = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, "Bakers", lambda group: 3, today=today
        )

        assert first == second

    def test_input_periods_are_not_modified(self, today):
        """Test that model inputs are left as they were."""
        periods = [make_period("Andersons", date(2025, 10, 1))]
        snapshot = [p.model_copy() for p in periods]

        SelectionPeriodTransformer.get_selection_period_display_info(
            periods, "Andersons", today=today, selection_days=14
        )

        assert periods == snapshot

    def test_projected_windows_follow_active_group(self, reservation_periods, today):
        """Test back-to-back projection from today when selection_days is set."""
        info = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, "Bakers", today=today, selection_days=14
        )

        andersons, bakers, chens = info
        assert bakers.scheduled_start_date == date(2025, 10, 20)
        assert bakers.scheduled_end_date == date(2025, 11, 2)
        assert chens.status == SelectionStatus.SCHEDULED
        assert chens.scheduled_start_date == date(2025, 11, 3)
        assert chens.scheduled_end_date == date(2025, 11, 16)
        assert chens.display_text == "Scheduled in 14 days"
        # Past windows keep their stored dates
        assert andersons.status == SelectionStatus.COMPLETED
        assert andersons.scheduled_start_date == date(2025, 10, 1)

    def test_projection_ignored_without_active_group(self, reservation_periods, today):
        """Test that selection_days has no effect when nobody is active."""
        plain = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, None, today=today
        )
        projected = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, None, today=today, selection_days=14
        )

        assert plain == projected

    def test_empty_periods(self, today):
        """Test that no periods give no display info."""
        assert SelectionPeriodTransformer.get_selection_period_display_info(
            [], "Bakers", today=today
        ) == []


class TestGetUpcomingSelectionPeriodsWithStatus:
    """Tests for SelectionPeriodTransformer.get_upcoming_selection_periods_with_status."""

    def test_drops_completed(self, reservation_periods, today):
        """Test that only active and scheduled entries remain, in order."""
        info = SelectionPeriodTransformer.get_selection_period_display_info(
            reservation_periods, "Bakers", today=today
        )

        upcoming = SelectionPeriodTransformer.get_upcoming_selection_periods_with_status(info)

        assert [i.family_group for i in upcoming] == ["Bakers", "Chens"]

    def test_empty_input(self):
        """Test that empty input gives empty output."""
        assert SelectionPeriodTransformer.get_upcoming_selection_periods_with_status([]) == []

    def test_all_completed(self):
        """Test that all-completed input gives empty output."""
        completed = SelectionPeriodDisplayInfo(
            family_group="Andersons",
            status=SelectionStatus.COMPLETED,
            scheduled_start_date=date(2025, 10, 1),
            scheduled_end_date=date(2025, 10, 14),
            days_until_scheduled=-19,
            is_currently_active=False,
            display_text="Completed (was scheduled for 10/1/2025)",
        )

        assert SelectionPeriodTransformer.get_upcoming_selection_periods_with_status(
            [completed, completed]
        ) == []
