"""Human readable statistics about the aligner's search and its output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence, TextIO


@dataclass
class ComputeStatistics:
    """Counts gathered while verifying the filter hits of one database."""

    num_swift_hits: int = 0
    max_length: int = 0
    total_length: int = 0


@dataclass
class OutputStatistics:
    """Counts about the matches that were written out."""

    num_matches: int = 0
    max_length: int = 0
    total_length: int = 0
    num_disabled: int = 0


def write_kernel_statistics(statistics: ComputeStatistics, out: TextIO) -> None:
    """Write filter hit counts; nothing when there were no hits."""
    hits = statistics.num_swift_hits
    if hits == 0:
        return
    out.write(f"\n    # SWIFT hits      : {hits}")
    out.write(f"\n    Longest hit       : {statistics.max_length}")
    out.write(f"\n    Avg hit length    : {statistics.total_length // hits}")


def write_database_statistics(
    verbose: bool,
    database_strand: bool,
    database_id: str,
    statistics: ComputeStatistics,
    out: TextIO,
) -> None:
    """Write one database id line, with hit statistics when verbose."""
    out.write(f"  {database_id}")
    if not database_strand:
        out.write(", complement")
    out.flush()
    if verbose:
        write_kernel_statistics(statistics, out)
    out.write("\n")


def write_stellar_statistics(
    verbose: bool,
    database_strand: bool,
    database_ids: Sequence[str],
    statistics: Sequence[ComputeStatistics],
    out: TextIO,
) -> None:
    """Write a statistics line for every database."""
    if len(statistics) < len(database_ids):
        raise ValueError("Fewer statistics than database ids")
    # the filter's progress output ends without a line break
    sys.stderr.write("\n")
    for database_id, stats in zip(database_ids, statistics):
        write_database_statistics(verbose, database_strand, database_id, stats, out)


def write_output_statistics(
    statistics: OutputStatistics,
    verbose: bool,
    write_disabled_queries_file: bool,
    out: TextIO,
) -> None:
    """Write the number of matches and, when verbose, their lengths."""
    out.write(f"# Eps-matches     : {statistics.num_matches}\n")
    if not verbose:
        return
    if statistics.num_matches > 0:
        out.write(f"Longest eps-match : {statistics.max_length}\n")
        out.write(
            f"Avg match length  : {statistics.total_length // statistics.num_matches}\n"
        )
    if write_disabled_queries_file:
        out.write(f"# Disabled queries: {statistics.num_disabled}\n")