"""Trip date selection for the calendar picker.

A pure reducer: every calendar tap maps the previous selection and the
tapped day to a new selection, including the days to highlight and the
text shown in the "When?" field.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from backend.app.scheduling.buckets import expand_date_range


class SelectionState(str, Enum):
    """Where the user is in picking a start/end pair."""

    EMPTY = "empty"
    PARTIAL_START = "partial_start"
    COMPLETE = "complete"


@dataclass(frozen=True)
class MarkedDate:
    """Calendar highlight for one day."""

    selected: bool = True
    starting_day: bool = False
    ending_day: bool = False


@dataclass(frozen=True)
class DateSelection:
    """Selected trip dates plus their derived view data."""

    starts_at: date | None = None
    ends_at: date | None = None
    marked_dates: dict[str, MarkedDate] = field(default_factory=dict)
    label: str = ""

    @property
    def state(self) -> SelectionState:
        if self.starts_at is None:
            return SelectionState.EMPTY
        if self.ends_at is None:
            return SelectionState.PARTIAL_START
        return SelectionState.COMPLETE


def select_date(current: DateSelection, tapped: date) -> DateSelection:
    """Apply a calendar tap to the current selection.

    - nothing chosen yet, or both dates chosen: tapped day starts a new range
    - only a start chosen: an earlier day replaces the start, any other day
      becomes the end

    Args:
        current: Selection before the tap
        tapped: Day the user tapped

    Returns:
        New selection with marked dates and label recomputed
    """
    if current.state is SelectionState.PARTIAL_START and current.starts_at is not None:
        if tapped < current.starts_at:
            return _build(tapped, None)
        return _build(current.starts_at, tapped)

    return _build(tapped, None)


def _build(starts_at: date, ends_at: date | None) -> DateSelection:
    return DateSelection(
        starts_at=starts_at,
        ends_at=ends_at,
        marked_dates=mark_dates(starts_at, ends_at),
        label=format_dates_in_text(starts_at, ends_at),
    )


def mark_dates(starts_at: date, ends_at: date | None) -> dict[str, MarkedDate]:
    """Highlight every day of the selection, inclusive."""
    days = expand_date_range(starts_at, ends_at or starts_at)
    last = len(days) - 1

    return {
        day: MarkedDate(starting_day=index == 0, ending_day=index == last)
        for index, day in enumerate(days)
    }


def format_dates_in_text(starts_at: date | None, ends_at: date | None) -> str:
    """Human readable selection label.

    Examples: "Mar 5", "Mar 5 - 20", "Mar 28 - Apr 2",
    "Dec 30, 2024 - Jan 2, 2025".
    """
    if starts_at is None:
        return ""

    start_label = f"{starts_at.strftime('%b')} {starts_at.day}"

    if ends_at is None:
        return start_label

    if starts_at.year != ends_at.year:
        end_label = f"{ends_at.strftime('%b')} {ends_at.day}, {ends_at.year}"
        return f"{start_label}, {starts_at.year} - {end_label}"

    if starts_at.month == ends_at.month:
        return f"{start_label} - {ends_at.day}"

    return f"{start_label} - {ends_at.strftime('%b')} {ends_at.day}"
