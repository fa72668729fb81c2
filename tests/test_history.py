# tests/test_history.py
import pytest

from grid import Grid
from history import SolutionHistory


def _filled(value):
    grid = Grid.empty()
    grid.set(0, 0, value)
    return grid


def test_empty_history_has_no_current():
    history = SolutionHistory()
    assert len(history) == 0
    assert history.cursor == 0
    with pytest.raises(IndexError):
        history.current()


def test_record_original_appends_then_overwrites():
    history = SolutionHistory()
    history.record_original(_filled(1))
    history.record_original(_filled(2))
    assert len(history) == 1
    assert history.original()[0, 0] == 2


def test_navigation_stays_in_bounds():
    history = SolutionHistory()
    history.record_original(_filled(0))
    history.append_solutions([_filled(1), _filled(2)])

    history.step_back()
    assert history.cursor == 0
    history.step_forward()
    history.step_forward()
    assert history.current()[0, 0] == 2
    history.step_forward()
    assert history.cursor == 2
    history.step_back()
    assert history.current()[0, 0] == 1


def test_go_to_first_solution():
    history = SolutionHistory()
    history.record_original(_filled(0))
    history.go_to_first_solution()
    assert history.cursor == 0
    history.append_solutions([_filled(3)])
    history.go_to_first_solution()
    assert history.cursor == 1
    assert history.solution_count == 1


def test_stored_grids_are_copies():
    history = SolutionHistory()
    original = _filled(4)
    history.record_original(original)
    original.set(0, 0, 9)
    assert history.current()[0, 0] == 4
    history.current().set(0, 0, 7)
    assert history.current()[0, 0] == 4


def test_reset_clears_grids_and_cursor():
    history = SolutionHistory()
    history.record_original(_filled(0))
    history.append_solutions([_filled(1)])
    history.step_forward()
    history.reset()
    assert len(history) == 0
    assert history.cursor == 0


def test_append_requires_original_and_respects_limit():
    history = SolutionHistory(max_solutions=2)
    with pytest.raises(IndexError):
        history.append_solutions([_filled(1)])
    history.record_original(_filled(0))
    history.append_solutions([_filled(1), _filled(2)])
    with pytest.raises(ValueError):
        history.append_solutions([_filled(3)])
    assert len(history) == 3
