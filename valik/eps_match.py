"""Longest epsilon match inside a pairwise alignment.

An alignment is given as two rows of equal length in which ``-`` marks a gap.
An epsilon match is a stretch of the alignment that starts and ends with a
match column and whose share of error columns is at most epsilon.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

GAP = "-"

# Tolerance for floating point noise when comparing error rates.
_DELTA = 0.000001


class GapInfo(NamedTuple):
    """A run of error columns in an alignment.

    ``begin`` and ``end`` delimit the run (end exclusive); ``errors`` counts
    all error columns from the start of the alignment up to ``end``.
    """

    begin: int
    end: int
    errors: int


def _check_rows(row0: Sequence[str], row1: Sequence[str]) -> None:
    if len(row0) != len(row1):
        raise ValueError(
            f"Alignment rows differ in length: {len(row0)} and {len(row1)}"
        )


def is_match(row0: Sequence[str], row1: Sequence[str], pos: int) -> bool:
    """Whether column ``pos`` holds the same character in both rows, no gap."""
    a, b = row0[pos], row1[pos]
    return a != GAP and b != GAP and a == b


def fill_gaps(row0: Sequence[str], row1: Sequence[str]) -> list[GapInfo]:
    """Runs of error columns, where a match may begin or end.

    The first run always starts at column 0 and the last always ends at the
    end of the alignment, even when they are empty.
    """
    _check_rows(row0, row1)
    length = len(row0)
    gaps: list[GapInfo] = []
    total_errors = 0
    i = 0

    while i < length and not is_match(row0, row1, i):
        i += 1
        total_errors += 1
    gaps.append(GapInfo(0, i, total_errors))

    while i < length:
        while i < length and is_match(row0, row1, i):
            i += 1
        gap_begin = i
        while i < length and not is_match(row0, row1, i):
            i += 1
            total_errors += 1
        gaps.append(GapInfo(gap_begin, i, total_errors))

    return gaps


def is_eps_match(left: GapInfo, right: GapInfo, eps: float) -> bool:
    """Whether the stretch between the end of ``left`` and the start of
    ``right`` has an error rate of at most ``eps``."""
    errors = right.errors - left.errors - (right.end - right.begin)
    length = right.begin - left.end
    if length <= 0:
        raise ValueError("The right gap must start after the left gap ends")
    return errors / length <= eps + _DELTA


def longest_eps_match(
    row0: Sequence[str],
    row1: Sequence[str],
    min_length: int,
    epsilon: float,
) -> tuple[int, int] | None:
    """Find the longest epsilon match of at least ``min_length`` columns.

    Returns the column range ``(begin, end)``, end exclusive, or None when
    there is no such match.
    """
    if min_length < 1:
        raise ValueError(f"min_length must be positive, got {min_length}")
    gaps = fill_gaps(row0, row1)
    last = len(gaps) - 1

    begin_pos = 0
    end_pos = 0
    shortest = min_length - 1

    left = 0
    while gaps[left].end + shortest < gaps[last].begin:
        right = last
        while gaps[left].end + shortest < gaps[right].begin:
            if is_eps_match(gaps[left], gaps[right], epsilon):
                begin_pos = gaps[left].end
                end_pos = gaps[right].begin
                shortest = end_pos - begin_pos
                break
            right -= 1
        left += 1

    if begin_pos == 0 and end_pos == 0:
        return None
    return begin_pos, end_pos