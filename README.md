# valik

Building blocks for prefiltering nucleotide databases before they are searched
for approximate local matches (epsilon matches). The package covers k-mer
shapes and the thresholds derived from them, the parameter search space, the
settings of the build and search steps, epsilon matches inside a pairwise
alignment, banded traceback, and the GFF match records of the alignment stage.

It has no dependencies outside the standard library.

## Modules

- `valik.shape` – `Shape` (a pattern of `1` and `0` positions), `ungapped`,
  `shape_from_binary` and `shape_from_int`. `Kmer` wraps a shape (or an int for
  an ungapped one) and gives `weight`, `size`, `effective_size`,
  `longest_ungapped`, `ungapped_triplet_length`, the k-mer lemma threshold
  `lemma_threshold(l, e)` and its gapped counterpart `gapped_threshold(l, e)`.
- `valik.threshold_basics` – `ParamSpace` (errors up to 15, match lengths up to
  150, k from 7 to 23, `max_thresh` 20 by default), `SearchKind`,
  `combinations(k, n)` and `expected_kmer_occurrences(bin_size, kmer_size)`.
- `valik.stellar_options` – the `StellarOptions` dataclass, the `BLAST_*`
  Karlin-Altschul constants and the filtering lemmas `kmer_count`,
  `kmer_lemma`, `pigeonhole_lemma`, `min_length_with_exact_error` (returns
  `math.inf` for an error rate of zero) and `absolute_errors`.
- `valik.settings` – the `SplitArguments`, `BuildArguments` and
  `SearchArguments` dataclasses with their defaults, `adjust_seed` and
  `adjust_bin_count`.
- `valik.build_config` – checks and derived values for building an index:
  `resolve_shape`, `errors_for`, `read_bin_paths`, `default_output_path`,
  `segment_count`, `default_window_size`, `check_window`, `size_multiplier`
  and `ibf_bits_from_size`. Invalid input raises `BuildConfigError`.
- `valik.matches` – `StellarMatch`, built from the nine columns of a GFF record
  with `StellarMatch.from_fields`, written back with `to_gff`, and ordered by
  reference index, begin, end and percent identity. `read_alignment_output`
  and `write_alignment_output` read and write whole files.
- `valik.time_statistics` – `SearchTimeStatistics` and `write_time_statistics`,
  which appends a header and a tab separated line of timings to a file.
- `valik.report` – `ComputeStatistics`, `OutputStatistics` and functions that
  write plain-text statistics to a text stream.
- `valik.eps_match` – `fill_gaps`, `is_eps_match` and `longest_eps_match`,
  which finds the longest stretch of an alignment (two rows of equal length,
  `-` for a gap) with an error rate of at most epsilon.
- `valik.traceback` – `banded_traceback`, which walks a banded trace matrix
  back to the origin and returns a list of `TraceSegment` runs.
- `valik.database_ids` – `DatabaseIdMap`, which maps a database sequence object
  (by identity) or a record number to its record number and id.

## Examples

```python
from valik.threshold_basics import combinations, expected_kmer_occurrences
from valik.shape import Kmer, ungapped, shape_from_binary
from valik.settings import adjust_bin_count

combinations(3, 5)                  # 10
expected_kmer_occurrences(259, 4)   # 1.0

ungapped(10).to_string()            # '1111111111'
shape_from_binary("1101").count()   # 3 informative positions
Kmer(10).lemma_threshold(100, 2)    # 71

adjust_bin_count(100)               # 128, the nearest multiple of 64
adjust_bin_count(70)                # 64
```

```python
from valik.eps_match import longest_eps_match

longest_eps_match("ACGTACGT", "ACGAACGT", 4, 0.2)   # (0, 8)
```

Match records written by the alignment stage can be loaded, sorted and
written back:

```python
from valik.matches import read_alignment_output, write_alignment_output

ids = {"chr1": 0, "chr2": 1}
matches = read_alignment_output("search.gff", ids.__getitem__)
matches.sort(key=lambda m: m.length())
write_alignment_output("longest_last.gff", matches, False)
```

## What the package does not do

This is a library only. It has no command-line program, and it does not read
FASTA files, split a database into segments, build or query an interleaved
Bloom filter, compute false negative rates for parameter sets, or run the
alignment itself. `valik.build_config` checks and derives build parameters but
does not build an index, and the settings dataclasses only hold values.

## Tests

The test suite uses pytest, which is installed with the `test` extra.