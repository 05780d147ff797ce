"""Arguments of the build and search commands and related helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from valik.shape import Shape, ungapped
from valik.stellar_options import StellarOptions
from valik.threshold_basics import SearchKind

DEFAULT_SEED = 0x8F3F73B5CF1C9ADE
_UINT32_MAX = 2**32 - 1


def adjust_seed(kmer_size: int, seed: int = DEFAULT_SEED) -> int:
    """Shift the hash seed to the 2*k bits used by a k-mer of the given size."""
    if not 1 <= kmer_size <= 32:
        raise ValueError(f"kmer_size must be in [1, 32], got {kmer_size}")
    return seed >> (64 - 2 * kmer_size)


def adjust_bin_count(n: int | None) -> int:
    """Round a segment count to the closest multiple of 64 (at least 64).

    None, or the unset sentinel 2**32 - 1, gives the default of 64.
    """
    if n is None or n == _UINT32_MAX:
        return 64
    remainder = n % 64
    if remainder == 0:
        return n
    if remainder <= 32:
        return max(n - remainder, 64)
    return n + 64 - remainder


@dataclass
class SplitArguments:
    """Arguments that govern how the reference database is split into segments."""

    bin_path: list[str] = field(default_factory=list)
    db_file: Path = field(default_factory=Path)

    pattern_size: int = 150
    seg_count: int = 64
    seg_count_in: int | None = None
    error_rate: float = 0.05
    errors: int = 0
    kmer_size: int | None = None  # None: choose automatically
    shape_str: str = ""
    shape: Shape = field(default_factory=Shape)
    shape_weight: int = 0
    window_size: int = 0

    metagenome: bool = False
    ref_meta_path: Path = field(default_factory=Path)
    write_out: bool = False
    split_query: bool = False


@dataclass
class BuildArguments(SplitArguments):
    """Arguments of the index build command."""

    threads: int = 1
    out_path: Path = field(default_factory=Path)
    out_dir: Path = field(default_factory=lambda: Path("./"))
    fpr: float = 0.05
    size: str = ""
    bits: int = 4096
    hash: int = 2
    fast: bool = False
    manual_parameters: bool = False
    input_is_minimiser: bool = False

    kmer_count_min_cutoff: int = 2
    kmer_count_max_cutoff: int = 64
    use_filesize_dependent_cutoff: bool = False

    verbose: bool = False


@dataclass
class SearchArguments(StellarOptions):
    """Arguments of the search command, including the aligner options."""

    # minimiser threshold
    tau: float = 0.9999
    p_max: float = 0.15
    fpr: float = 0.05
    errors: int = 0
    pattern_size: int = 100
    threshold_percentage: float | None = None
    threshold_was_set: bool = False
    cache_thresholds: bool = False

    # search profile
    split_query: bool = False
    manual_parameters: bool = False
    search_type: SearchKind = SearchKind.LEMMA
    fnr: float = 0.0

    window_size: int = 23
    shape: Shape = field(default_factory=lambda: ungapped(20))
    shape_size: int | None = None  # derived from shape when not given
    shape_weight: int | None = None  # derived from shape when not given
    query_every: int = 2
    threshold: int = 0
    seg_count: int = 64
    seg_count_in: int | None = None
    max_segment_len: int = 2500

    threads: int = 1

    bin_path: list[str] = field(default_factory=list)
    query_file: Path = field(default_factory=Path)
    index_file: Path = field(default_factory=Path)
    all_matches: Path = field(default_factory=Path)
    out_file: Path = field(default_factory=lambda: Path("search.gff"))

    write_time: bool = False
    fast: bool = False
    verbose: bool = False
    very_verbose: bool = False
    keep_best_repeats: bool = False
    best_bin_entropy_cutoff: float = 0.25
    keep_all_repeats: bool = False
    stellar_only: bool = False

    cart_max_capacity: int = 1000
    max_queued_carts: int | None = None  # None: unbounded

    error_rate: float = 0.0
    ref_meta_path: Path = field(default_factory=Path)
    distribute: bool = False

    def __post_init__(self) -> None:
        if self.shape_size is None:
            self.shape_size = self.shape.size()
        if self.shape_weight is None:
            self.shape_weight = self.shape.count()