"""K-mer shapes and thresholds, build settings, epsilon matches and GFF match handling for prefiltered local alignment search."""

__version__ = "1.0.0"