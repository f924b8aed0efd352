"""Calendar multi-range picker driven by pointer drag gestures."""

from datetime import date
from typing import Callable, Optional

from structlog import get_logger

from cabin_buddy.models.drag import DateRange, DragSelectionState

logger = get_logger(__name__)

DEFAULT_MAX_RANGES = 5

RangeSelectCallback = Callable[[list[DateRange]], None]


class DragSelection:
    """Accumulates date ranges from drag gestures on a calendar grid.

    States: idle -> dragging (start_drag) -> idle (end_drag, appending the
    normalized range unless max_ranges is already reached). Each operation
    replaces drag_state with a new snapshot. Nothing here raises; invalid
    calls are ignored.
    """

    def __init__(
        self,
        on_range_select: Optional[RangeSelectCallback] = None,
        max_ranges: int = DEFAULT_MAX_RANGES,
    ):
        """Initialize the picker.

        Args:
            on_range_select: Called with the full range list whenever it changes
            max_ranges: Most finalized ranges kept; extra drags are dropped
        """
        self.on_range_select = on_range_select
        self.max_ranges = max_ranges
        self.drag_state = DragSelectionState()

    def _set_state(self, **changes) -> None:
        self.drag_state = self.drag_state.model_copy(update=changes)

    def _notify(self, ranges: list[DateRange]) -> None:
        if self.on_range_select is not None:
            self.on_range_select(list(ranges))

    def _current_bounds(self) -> Optional[tuple[date, date]]:
        """Normalized (start, end) of the drag in progress, if any."""
        state = self.drag_state
        if not state.is_dragging or state.drag_start is None or state.drag_end is None:
            return None
        return min(state.drag_start, state.drag_end), max(state.drag_start, state.drag_end)

    def start_drag(self, day: date) -> None:
        """Begin a drag on day. Allowed even when the range cap is full."""
        self._set_state(is_dragging=True, drag_start=day, drag_end=day)

    def update_drag(self, day: date) -> None:
        """Move the drag end to day; ignored when not dragging."""
        if not self.drag_state.is_dragging or self.drag_state.drag_start is None:
            return
        self._set_state(drag_end=day)

    def end_drag(self) -> Optional[DateRange]:
        """Finish the drag and append its range.

        Returns:
            The appended range, or None if no drag was in progress or the
            range cap was already reached (the drag is discarded silently)
        """
        bounds = self._current_bounds()
        if bounds is None:
            self._set_state(is_dragging=False, drag_start=None, drag_end=None)
            return None

        if len(self.drag_state.selected_ranges) >= self.max_ranges:
            logger.debug(
                "Range cap reached, drag discarded",
                max_ranges=self.max_ranges,
            )
            self._set_state(is_dragging=False, drag_start=None, drag_end=None)
            return None

        new_range = DateRange(start=bounds[0], end=bounds[1])
        new_ranges = [*self.drag_state.selected_ranges, new_range]
        self._set_state(
            is_dragging=False,
            drag_start=None,
            drag_end=None,
            selected_ranges=new_ranges,
        )
        self._notify(new_ranges)
        return new_range

    def remove_range(self, index: int) -> None:
        """Drop the finalized range at index (no change if out of bounds)."""
        new_ranges = [
            r for i, r in enumerate(self.drag_state.selected_ranges) if i != index
        ]
        self._set_state(selected_ranges=new_ranges)
        self._notify(new_ranges)

    def clear_selection(self) -> None:
        """Remove every finalized range."""
        self._set_state(selected_ranges=[])
        self._notify([])

    def is_date_in_current_drag(self, day: date) -> bool:
        """True if day is inside the drag in progress, both ends included."""
        bounds = self._current_bounds()
        if bounds is None:
            return False
        return bounds[0] <= day <= bounds[1]

    def is_date_in_selected_ranges(self, day: date) -> bool:
        """True if day is inside any finalized range, both ends included."""
        return any(r.contains(day) for r in self.drag_state.selected_ranges)
