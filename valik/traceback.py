"""Traceback through a banded Needleman-Wunsch trace matrix.

The band is stored row by row. Each row holds ``diag_upper - diag_lower + 1``
cells, one per diagonal. A cell holds the direction that led into it.
"""

from __future__ import annotations

import enum
from typing import NamedTuple, Sequence


class TraceDirection(enum.IntEnum):
    """Direction stored in a trace cell."""

    DIAGONAL = 0
    HORIZONTAL = 1
    VERTICAL = 2


class TraceSegment(NamedTuple):
    """A run of equal moves in the traceback.

    ``h_position`` and ``v_position`` are the unbanded matrix coordinates
    where the run was closed. They are 0 for the final border run.
    """

    direction: TraceDirection
    length: int
    h_position: int
    v_position: int


class _Band:
    def __init__(self, trace: Sequence[int], diag_lower: int, diag_upper: int) -> None:
        if diag_upper < diag_lower:
            raise ValueError(
                f"Upper diagonal {diag_upper} lies below lower diagonal {diag_lower}"
            )
        self.trace = trace
        self.width = diag_upper - diag_lower + 1
        self.lo_row = -diag_upper if diag_upper <= 0 else 0
        self.diag_lower = diag_lower

    def actual(self, row: int, col: int) -> tuple[int, int]:
        """Unbanded (row, column) of a banded cell."""
        actual_row = row + self.lo_row
        return actual_row, col + self.diag_lower + actual_row

    def direction(self, row: int, col: int) -> TraceDirection:
        if row < 0 or not 0 <= col < self.width:
            raise ValueError(f"Trace cell ({row}, {col}) lies outside the band")
        index = row * self.width + col
        if index >= len(self.trace):
            raise ValueError(f"Trace cell ({row}, {col}) lies outside the matrix")
        return TraceDirection(self.trace[index])


def _step(direction: TraceDirection, row: int, col: int) -> tuple[int, int]:
    if direction is TraceDirection.HORIZONTAL:
        return row, col - 1
    if direction is TraceDirection.VERTICAL:
        return row - 1, col + 1
    return row - 1, col


def banded_traceback(
    trace: Sequence[int],
    coordinate: tuple[int, int],
    diag_lower: int,
    diag_upper: int,
) -> list[TraceSegment]:
    """Trace back from a banded cell to the matrix origin.

    ``coordinate`` is the banded (row, diagonal index) of the start cell.
    The result lists runs of moves from the start cell towards the origin.
    A run along the top or left border closes the list if one is needed.
    """
    band = _Band(trace, diag_lower, diag_upper)
    row, col = coordinate
    actual_row, actual_col = band.actual(row, col)
    if actual_row < 0 or actual_col < 0:
        raise ValueError(f"Coordinate {coordinate} lies outside the matrix")

    segments: list[TraceSegment] = []

    def emit(direction: TraceDirection, length: int, h_pos: int, v_pos: int) -> None:
        segments.append(TraceSegment(direction, length, h_pos, v_pos))

    if actual_row != 0 and actual_col != 0:
        tv = band.direction(row, col)
        row, col = _step(tv, row, col)
        run = 1
        while True:
            actual_row, actual_col = band.actual(row, col)
            if actual_row == 0 or actual_col == 0:
                break
            new_tv = band.direction(row, col)
            if new_tv is tv:
                row, col = _step(tv, row, col)
                run += 1
            else:
                emit(tv, run, actual_col, actual_row)
                row, col = _step(new_tv, row, col)
                run = 1
            tv = new_tv
        if run:
            emit(tv, run, actual_col, actual_row)

    if actual_col != 0:
        emit(TraceDirection.HORIZONTAL, actual_col, 0, 0)
    elif actual_row != 0:
        emit(TraceDirection.VERTICAL, actual_row, 0, 0)
    return segments