import pytest

from valik.traceback import TraceDirection, TraceSegment, banded_traceback

D = TraceDirection.DIAGONAL
H = TraceDirection.HORIZONTAL
V = TraceDirection.VERTICAL


def _consumed(segments):
    cols = sum(s.length for s in segments if s.direction in (D, H))
    rows = sum(s.length for s in segments if s.direction in (D, V))
    return rows, cols


def test_main_diagonal_only():
    trace = [D] * 4
    segments = banded_traceback(trace, (3, 0), 0, 0)
    assert segments == [TraceSegment(D, 3, 0, 0)]


def test_horizontal_then_diagonal_consumes_start_cell():
    # band of three diagonals, all cells diagonal except the start cell
    trace = [D] * 12
    trace[3 * 3 + 2] = H
    segments = banded_traceback(trace, (3, 2), -1, 1)
    assert [s.direction for s in segments] == [H, D]
    # start cell is unbanded row 3, column 4
    assert _consumed(segments) == (3, 4)


def test_border_remainder_is_vertical():
    trace = [D] * 9
    segments = banded_traceback(trace, (2, 0), -1, 1)
    assert segments[-1].direction is V
    assert segments[-1].h_position == 0 and segments[-1].v_position == 0
    # start cell is unbanded row 2, column 1
    assert _consumed(segments) == (2, 1)


def test_start_on_top_border_gives_horizontal_run():
    trace = [D] * 9
    segments = banded_traceback(trace, (0, 2), -1, 1)
    assert [s.direction for s in segments] == [H]
    # unbanded column of the start cell: 2 + (-1) + 0
    assert _consumed(segments) == (0, 1)


def test_origin_gives_nothing():
    assert banded_traceback([D] * 3, (0, 1), -1, 1) == []


def test_vertical_moves_keep_column():
    trace = [D] * 12
    trace[3 * 3 + 0] = V
    trace[2 * 3 + 1] = V
    segments = banded_traceback(trace, (3, 0), -1, 1)
    assert segments[0].direction is V
    assert segments[0].length == 2
    # start cell is unbanded row 3, column 2
    assert _consumed(segments) == (3, 2)


def test_trace_too_short_raises():
    with pytest.raises(ValueError):
        banded_traceback([D, D], (3, 0), 0, 0)


def test_inverted_band_raises():
    with pytest.raises(ValueError):
        banded_traceback([D] * 9, (1, 1), 1, -1)


def test_coordinate_outside_band_raises():
    with pytest.raises(ValueError):
        banded_traceback([D] * 9, (2, 5), -1, 1)