"""Run time statistics of a search and their tab separated report."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

HEADER = (
    "Ref I/O\tIBF I/O\t\tSearch\tEffective query count\t"
    "Min cart time\tAvg cart time\tMax cart time\tConsolidation\n"
)


@dataclass
class SearchTimeStatistics:
    """Wall clock times of the search stages in seconds."""

    ref_io_time: float = 0.0
    index_io_time: float = 0.0
    cart_processing_times: list[float] = field(default_factory=list)
    search_time: float = 0.0
    consolidation_time: float = 0.0

    def _require_carts(self) -> None:
        if not self.cart_processing_times:
            raise ValueError("No cart processing times recorded")

    def cart_min(self) -> float:
        self._require_carts()
        return min(self.cart_processing_times)

    def cart_avg(self) -> float:
        self._require_carts()
        return sum(self.cart_processing_times) / len(self.cart_processing_times)

    def cart_max(self) -> float:
        self._require_carts()
        return max(self.cart_processing_times)


def write_time_statistics(
    statistics: SearchTimeStatistics, time_file: str | Path, cart_max_capacity: int
) -> None:
    """Append a header and one line of timings to the given file.

    The effective query count is an upper bound on the queries done across
    all reference segments, since some carts are only partly filled.
    """
    parts = [
        f"{statistics.ref_io_time:.2f}",
        f"{statistics.index_io_time:.2f}",
        f"{statistics.search_time:.2f}",
    ]
    precision = 2
    if statistics.cart_processing_times:
        precision = 4
        parts += [
            str(len(statistics.cart_processing_times) * cart_max_capacity),
            f"{statistics.cart_min():.4f}",
            f"{statistics.cart_avg():.4f}",
            f"{statistics.cart_max():.4f}",
        ]
    parts.append(f"{statistics.consolidation_time:.{precision}f}")
    with open(time_file, "a", encoding="utf-8") as handle:
        handle.write(HEADER)
        handle.write("\t".join(parts) + "\n")