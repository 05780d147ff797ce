"""Options of the local aligner and the lemma helpers shared with it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

# Karlin-Altschul values for a linear gap cost scoring scheme (empirical values).
BLAST_MATCH = 1
BLAST_MISMATCH = 2
BLAST_LAMBDA = 1.28
BLAST_K = 0.46
BLAST_ALPHA = 1.5
BLAST_BETA = -2.0


@dataclass
class StellarOptions:
    """Input, output and filtering options of the local aligner."""

    database_file: str = ""
    query_file: str = ""
    output_file: str = "stellar.gff"
    disabled_queries_file: str = "stellar.disabled.fasta"
    output_format: str = "gff"
    alphabet: str = "dna4"
    write_time: bool = False

    forward: bool = True
    only_forward: bool = False
    reverse: bool = True
    only_reverse: bool = False

    disable_thresh: int | None = None  # None: never disable a query
    compact_thresh: int = 500
    num_matches: int = 50
    max_repeat_period: int = 1
    min_repeat_length: int = 1000
    verbose: bool = False


def kmer_count(sequence_length: int, kmer_size: int) -> int:
    """Number of k-mers in a sequence of the given length."""
    if kmer_size <= 0:
        raise ValueError("kmer_size must be positive")
    if sequence_length < kmer_size - 1:
        raise ValueError("sequence_length must be at least kmer_size - 1")
    return sequence_length + 1 - kmer_size


def kmer_lemma(sequence_length: int, kmer_size: int, errors: int) -> int:
    """Shared k-mers that survive the given number of errors."""
    affected = kmer_size * errors
    count = kmer_count(sequence_length, kmer_size)
    return max(count, affected) - affected


def pigeonhole_lemma(sequence_length: int, errors: int) -> int:
    """Length of the error-free stretch guaranteed by the pigeonhole principle."""
    if sequence_length < errors:
        raise ValueError("sequence_length must be at least errors")
    return math.ceil(Fraction(sequence_length - errors, errors + 1))


def min_length_with_exact_error(absolute_error: int, epsilon) -> int | float:
    """Shortest length whose error budget at rate epsilon reaches absolute_error.

    Returns math.inf when epsilon is zero.
    """
    eps = Fraction(epsilon)
    if eps.numerator == 0:
        return math.inf
    return math.ceil(Fraction(absolute_error) / eps)


def absolute_errors(epsilon, sequence_length: int) -> int:
    """Number of errors allowed at rate epsilon for a sequence of the given length."""
    return math.floor(Fraction(sequence_length) * Fraction(epsilon))