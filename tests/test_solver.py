"""
Tests for the shortest and everything solvers.

Covers single-route, tied-route and unreachable boards, agreement between
stack and queue storage, and pruning.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from circuit_tracer.board_file import load_board
from circuit_tracer.solver import (
    CircuitBoard,
    DIRECTIONS,
    QueueStorage,
    StackStorage,
    TRACE,
    create_solver,
    create_storage,
)

BOARDS_DIR = Path(__file__).parent.parent / "boards"

STRAIGHT_LINE = ["XXX", "1O2", "XXX"]
TWO_CORRIDORS = ["OOO", "1X2", "OOO"]
BLOCKED = ["1X2"]
OPEN_2X3 = ["1OO", "OO2"]


def _solve(solver_name, rows, storage_kind="stack"):
    board = CircuitBoard.from_strings(rows)
    return create_solver(solver_name).solve(create_storage(storage_kind), board)


def _patterns(boards):
    return [tuple(board.to_rows()) for board in boards]


def _route_cells(board):
    """Cells covered by the route: start, traces and end."""
    return board.count(TRACE) + 2


@pytest.mark.parametrize("storage_kind", ["stack", "queue"])
@pytest.mark.parametrize("solver_name", ["shortest", "everything"])
def test_straight_line_single_solution(solver_name, storage_kind):
    solved = _solve(solver_name, STRAIGHT_LINE, storage_kind)

    assert len(solved) == 1
    assert solved[0].to_rows() == ["XXX", "1T2", "XXX"]
    assert _route_cells(solved[0]) == 3


@pytest.mark.parametrize("storage_kind", ["stack", "queue"])
def test_two_corridors_give_two_tied_solutions(storage_kind):
    solved = _solve("shortest", TWO_CORRIDORS, storage_kind)

    assert len(solved) == 2
    assert set(_patterns(solved)) == {
        ("TTT", "1X2", "OOO"),
        ("OOO", "1X2", "TTT"),
    }
    assert all(_route_cells(board) == 5 for board in solved)


def test_discovery_order_depends_on_storage():
    stack_solved = _solve("shortest", TWO_CORRIDORS, "stack")
    queue_solved = _solve("shortest", TWO_CORRIDORS, "queue")

    # Up is stored last, so the stack explores the top corridor first
    assert _patterns(stack_solved) == [("TTT", "1X2", "OOO"), ("OOO", "1X2", "TTT")]
    assert _patterns(queue_solved) == [("OOO", "1X2", "TTT"), ("TTT", "1X2", "OOO")]


@pytest.mark.parametrize("storage_kind", ["stack", "queue"])
@pytest.mark.parametrize("solver_name", ["shortest", "everything"])
def test_no_route_returns_empty(solver_name, storage_kind):
    assert _solve(solver_name, BLOCKED, storage_kind) == []


def test_enclosed_start_returns_empty():
    assert _solve("shortest", ["XXXO", "X1XO", "XXX2"]) == []


def test_start_adjacent_to_end():
    solved = _solve("shortest", ["12"])
    assert len(solved) == 1
    assert solved[0].to_rows() == ["12"]


@pytest.mark.parametrize("storage_kind", ["stack", "queue"])
def test_everything_finds_all_simple_paths(storage_kind):
    solved = _solve("everything", OPEN_2X3, storage_kind)

    assert sorted(_route_cells(board) for board in solved) == [4, 4, 4, 6]
    assert set(_patterns(solved)) == {
        ("1TT", "OO2"),
        ("1TO", "OT2"),
        ("1OO", "TT2"),
        ("1TT", "TT2"),
    }


@pytest.mark.parametrize("storage_kind", ["stack", "queue"])
def test_shortest_keeps_only_minimum_length(storage_kind):
    solved = _solve("shortest", OPEN_2X3, storage_kind)

    assert len(solved) == 3
    assert len(set(_patterns(solved))) == 3
    assert all(_route_cells(board) == 4 for board in solved)


def test_shorter_solution_replaces_longer_ones():
    # With a stack the long route around the open 2x3 board is found first
    board = CircuitBoard.from_strings(OPEN_2X3)
    result = create_solver("shortest").run(StackStorage(), board)

    assert result.solution_count == 3
    assert result.path_length == 3
    assert result.metrics.pruned_branches >= 1


@pytest.mark.parametrize("rows", [STRAIGHT_LINE, TWO_CORRIDORS, BLOCKED, OPEN_2X3])
def test_storage_choice_does_not_change_solution_set(rows):
    stack_solved = _solve("shortest", rows, "stack")
    queue_solved = _solve("shortest", rows, "queue")
    assert sorted(_patterns(stack_solved)) == sorted(_patterns(queue_solved))


@pytest.mark.parametrize("storage_kind", ["stack", "queue"])
def test_rerun_is_idempotent(storage_kind):
    board = CircuitBoard.from_strings(TWO_CORRIDORS)
    solver = create_solver("shortest")

    first = solver.solve(create_storage(storage_kind), board)
    second = solver.solve(create_storage(storage_kind), board)

    assert sorted(_patterns(first)) == sorted(_patterns(second))


def test_unsolved_board_not_modified():
    board = CircuitBoard.from_strings(OPEN_2X3)
    before = board.duplicate()

    for solver_name in ("shortest", "everything"):
        for storage_kind in ("stack", "queue"):
            solved = create_solver(solver_name).solve(create_storage(storage_kind), board)
            assert solved
            assert all(solved_board is not board for solved_board in solved)

    assert board == before


@pytest.mark.parametrize("storage_kind", ["stack", "queue"])
def test_sample_board_shortest_matches_exhaustive_minimum(storage_kind):
    board = load_board(BOARDS_DIR / "grid1.dat")

    shortest = create_solver("shortest").solve(create_storage(storage_kind), board)
    everything = create_solver("everything").solve(create_storage(storage_kind), board)

    assert shortest
    min_cells = min(_route_cells(b) for b in everything)
    expected = {p for p, b in zip(_patterns(everything), everything) if _route_cells(b) == min_cells}
    assert set(_patterns(shortest)) == expected
    assert len(shortest) == len(expected)


def test_solution_set_endpoints_intact():
    for solved in _solve("everything", OPEN_2X3):
        assert solved.char_at(0, 0) == "1"
        assert solved.char_at(1, 2) == "2"


def test_non_empty_storage_rejected():
    board = CircuitBoard.from_strings(STRAIGHT_LINE)
    storage = QueueStorage()
    storage.store("leftover")
    with pytest.raises(ValueError, match="must be empty"):
        create_solver("shortest").solve(storage, board)


def test_run_reports_metrics():
    board = CircuitBoard.from_strings(TWO_CORRIDORS)
    result = create_solver("everything").run(QueueStorage(), board)

    assert result.has_solutions
    assert result.solution_count == 2
    assert result.path_length == 4
    assert result.metrics.solver_name == "everything"
    assert result.metrics.storage_kind == "queue"
    assert result.metrics.states_explored == 8
    assert result.metrics.pruned_branches == 0
    assert result.metrics.peak_frontier >= 2
    assert result.metrics.computation_time_ms >= 0.0


def test_empty_result_path_length():
    board = CircuitBoard.from_strings(BLOCKED)
    result = create_solver("shortest").run(StackStorage(), board)
    assert not result.has_solutions
    assert result.path_length == 0


def test_direction_order():
    # right, left, down, up
    assert DIRECTIONS == ((0, 1), (0, -1), (1, 0), (-1, 0))
