"""Shared helpers for the parameter tuning of the k-mer threshold search."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import ClassVar

QUERY_EVERY = 2
"""Query every n-th pattern by default."""

_ALPHABET_SIZE = 4


class SearchKind(enum.IntEnum):
    """Kind of search chosen for a given error count."""

    LEMMA = 0
    HEURISTIC = 1
    MINIMISER = 2
    STELLAR = 3


def expected_kmer_occurrences(bin_size: int, kmer_size: int) -> float:
    """Expected count of a k-mer in a uniformly random bin of the given size."""
    return (bin_size - kmer_size + 1) / float(_ALPHABET_SIZE**kmer_size)


@dataclass
class ParamSpace:
    """Search space for the parameter tuning algorithm."""

    max_errors: ClassVar[int] = 15
    max_len: ClassVar[int] = 150
    kmer_range: ClassVar[tuple[int, int]] = (7, 23)

    max_thresh: int = 20

    def min_k(self) -> int:
        return self.kmer_range[0]

    def max_k(self) -> int:
        return self.kmer_range[1]


def combinations(k: int, n: int) -> int:
    """Number of ways to choose k out of n; 0 when k exceeds n."""
    if n < k:
        return 0
    return math.comb(n, k)