"""Test the calendar date selection reducer."""

from datetime import date

from ui.date_selection import (
    DateSelection,
    SelectionState,
    format_dates_in_text,
    mark_dates,
    select_date,
)


def test_empty_selection() -> None:
    """Test the initial selection."""
    selection = DateSelection()

    assert selection.state is SelectionState.EMPTY
    assert selection.marked_dates == {}
    assert selection.label == ""


def test_tap_sequence() -> None:
    """Test tapping days 10, 5, 20, 7 in order."""
    selection = select_date(DateSelection(), date(2024, 3, 10))
    assert selection.state is SelectionState.PARTIAL_START
    assert selection.starts_at == date(2024, 3, 10)
    assert selection.ends_at is None

    # Earlier day replaces the start
    selection = select_date(selection, date(2024, 3, 5))
    assert selection.state is SelectionState.PARTIAL_START
    assert selection.starts_at == date(2024, 3, 5)
    assert selection.ends_at is None

    # Later day completes the range
    selection = select_date(selection, date(2024, 3, 20))
    assert selection.state is SelectionState.COMPLETE
    assert selection.starts_at == date(2024, 3, 5)
    assert selection.ends_at == date(2024, 3, 20)

    # Any tap on a complete range starts over
    selection = select_date(selection, date(2024, 3, 7))
    assert selection.state is SelectionState.PARTIAL_START
    assert selection.starts_at == date(2024, 3, 7)
    assert selection.ends_at is None


def test_tap_same_day_completes_single_day_range() -> None:
    """Test that tapping the start again makes it a one-day trip."""
    selection = select_date(DateSelection(), date(2024, 3, 10))
    selection = select_date(selection, date(2024, 3, 10))

    assert selection.state is SelectionState.COMPLETE
    assert selection.starts_at == selection.ends_at == date(2024, 3, 10)
    assert list(selection.marked_dates) == ["2024-03-10"]


def test_reducer_does_not_mutate_input() -> None:
    """Test that the previous selection is left untouched."""
    first = select_date(DateSelection(), date(2024, 3, 10))
    select_date(first, date(2024, 3, 12))

    assert first.ends_at is None
    assert list(first.marked_dates) == ["2024-03-10"]


def test_reducer_is_deterministic() -> None:
    """Test that the same selection and tap give equal results."""
    base = select_date(DateSelection(), date(2024, 3, 10))
    assert select_date(base, date(2024, 3, 14)) == select_date(base, date(2024, 3, 14))


def test_marked_dates_cover_range() -> None:
    """Test that every day of a complete range is marked, with start/end flags."""
    selection = select_date(select_date(DateSelection(), date(2024, 3, 30)), date(2024, 4, 2))

    assert list(selection.marked_dates) == [
        "2024-03-30",
        "2024-03-31",
        "2024-04-01",
        "2024-04-02",
    ]
    assert selection.marked_dates["2024-03-30"].starting_day
    assert not selection.marked_dates["2024-03-31"].starting_day
    assert not selection.marked_dates["2024-03-31"].ending_day
    assert selection.marked_dates["2024-04-02"].ending_day


def test_mark_dates_start_only() -> None:
    """Test that only the start is marked while the end is unset."""
    marked = mark_dates(date(2024, 3, 5), None)

    assert list(marked) == ["2024-03-05"]
    assert marked["2024-03-05"].starting_day
    assert marked["2024-03-05"].ending_day


def test_labels() -> None:
    """Test label formats for start only, same month, cross month and cross year."""
    assert format_dates_in_text(None, None) == ""
    assert format_dates_in_text(date(2024, 3, 5), None) == "Mar 5"
    assert format_dates_in_text(date(2024, 3, 5), date(2024, 3, 20)) == "Mar 5 - 20"
    assert format_dates_in_text(date(2024, 3, 28), date(2024, 4, 2)) == "Mar 28 - Apr 2"
    assert (
        format_dates_in_text(date(2024, 12, 30), date(2025, 1, 2))
        == "Dec 30, 2024 - Jan 2, 2025"
    )


def test_selection_label_follows_taps() -> None:
    """Test that the label is recomputed on each tap."""
    selection = select_date(DateSelection(), date(2024, 3, 5))
    assert selection.label == "Mar 5"

    selection = select_date(selection, date(2024, 3, 20))
    assert selection.label == "Mar 5 - 20"
