"""Derivation and checking of the build command's parameters."""

from __future__ import annotations

import math
import re
from pathlib import Path

from valik.settings import adjust_bin_count
from valik.shape import Shape, shape_from_binary, ungapped
from valik.threshold_basics import ParamSpace

_SIZE_PATTERN = re.compile(r"\d+\s{0,1}[k,m,g,t,K,M,G,T]")
_SHAPE_PATTERN = re.compile(r"[01]+")
_LEADING_DIGITS = re.compile(r"\d*")

_MULTIPLIERS = {
    "t": 8 * 1024**4,
    "g": 8 * 1024**3,
    "m": 8 * 1024**2,
    "k": 8 * 1024,
}


class BuildConfigError(ValueError):
    """Raised when the build parameters are missing, invalid or inconsistent."""


def resolve_shape(kmer_size: int | None, shape_str: str | None) -> Shape | None:
    """Choose the k-mer shape from either a k-mer size or a binary shape string.

    Returns None when neither is given, leaving the choice to parameter tuning.
    """
    has_kmer = kmer_size is not None
    has_shape = bool(shape_str)
    if has_kmer and has_shape:
        raise BuildConfigError("Arguments --kmer and --shape are mutually exclusive.")
    if has_kmer:
        space = ParamSpace()
        if not space.min_k() <= kmer_size <= space.max_k():
            raise BuildConfigError(
                f"Value {kmer_size} is not in range [{space.min_k()},{space.max_k()}]."
            )
        return ungapped(kmer_size)
    if has_shape:
        if not _SHAPE_PATTERN.fullmatch(shape_str):
            raise BuildConfigError(
                f"Value {shape_str} does not match the regular expression [01]+."
            )
        return shape_from_binary(shape_str)
    return None


def errors_for(error_rate: float, pattern_size: int) -> int:
    """Number of errors allowed in a pattern at the given error rate, rounded up."""
    if error_rate < 0:
        raise BuildConfigError(f"Error rate must not be negative: {error_rate}")
    return math.ceil(error_rate * pattern_size)


def _check_exists(path: str | Path) -> None:
    if not Path(path).is_file():
        raise BuildConfigError(f'The file "{path}" does not exist!')


def read_bin_paths(db_file: str | Path, metagenome: bool) -> list[str]:
    """List the sequence files that make up the bins of the index.

    For a metagenome, ``db_file`` lists one cluster file per line; otherwise it
    is the single reference file.
    """
    _check_exists(db_file)
    if not metagenome:
        return [str(db_file)]
    bin_paths: list[str] = []
    with open(db_file, encoding="utf-8") as handle:
        for line in handle:
            bin_path = line.rstrip("\r\n")
            if not bin_path:
                continue
            _check_exists(bin_path)
            bin_paths.append(bin_path)
    return bin_paths


def default_output_path(db_file: str | Path) -> Path:
    """Index path used when no output is given: the database path with '.index'."""
    return Path(db_file).with_suffix(".index")


def segment_count(seg_count_in: int | None, manual_parameters: bool) -> int:
    """Segment count to split into; a multiple of 64 unless set manually."""
    if manual_parameters and seg_count_in is not None:
        return seg_count_in
    return adjust_bin_count(seg_count_in)


def default_window_size(kmer_size: int, fast: bool) -> tuple[int, bool]:
    """Window size used when none is given, and whether input is minimised."""
    if fast:
        return kmer_size + 2, True
    return kmer_size, False


def check_window(kmer_size: int, window_size: int) -> None:
    """Reject a k-mer that does not fit into the window."""
    if kmer_size > window_size:
        raise BuildConfigError("The k-mer size cannot be bigger than the window size.")


def size_multiplier(suffix: str) -> int:
    """Number of bits per unit for a size suffix such as 'k' or 'G'."""
    try:
        return _MULTIPLIERS[suffix.lower()]
    except KeyError:
        raise BuildConfigError(
            "Use {k, m, g, t} to pass size. E.g., --size 8g."
        ) from None


def ibf_bits_from_size(size: str, seg_count: int) -> int:
    """Bits per bin for a total index size such as '8m' split over the segments."""
    if not _SIZE_PATTERN.fullmatch(size):
        raise BuildConfigError(
            f"Value {size} must be an integer followed by [k,m,g,t] (case insensitive)."
        )
    compact = size.replace(" ", "")
    multiplier = size_multiplier(compact[-1])
    digits = _LEADING_DIGITS.match(compact[:-1]).group()
    total = int(digits) * multiplier if digits else 0
    bins = ((seg_count + 63) >> 6) << 6
    if bins == 0:
        raise BuildConfigError("Segment count must be positive.")
    return total // bins