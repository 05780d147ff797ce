"""K-mer shapes and the k-mer lemma thresholds derived from them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Shape:
    """A k-mer shape given as a pattern of '1' (used) and '0' (gap) positions."""

    pattern: str = ""

    def __post_init__(self) -> None:
        if any(c not in "01" for c in self.pattern):
            raise ValueError(f"Shape pattern may only contain '0' and '1': {self.pattern!r}")

    def size(self) -> int:
        """Total span of the shape."""
        return len(self.pattern)

    def count(self) -> int:
        """Number of informative (non-gap) positions."""
        return self.pattern.count("1")

    def to_string(self) -> str:
        return self.pattern

    def __str__(self) -> str:
        return self.pattern


def ungapped(size: int) -> Shape:
    """Return an ungapped shape of the given size."""
    if size < 0:
        raise ValueError(f"Shape size must not be negative: {size}")
    return Shape("1" * size)


def shape_from_int(bits: int) -> Shape:
    """Build a shape from the binary digits of an integer; leading zeros vanish."""
    if bits < 0:
        raise ValueError(f"Shape bits must not be negative: {bits}")
    return Shape(format(bits, "b") if bits else "")


def shape_from_binary(text: str) -> Shape:
    """Build a shape from a string of binary digits such as '1100110011'."""
    try:
        bits = int(text, 2)
    except ValueError:
        raise ValueError(f"Not a binary shape string: {text!r}") from None
    return shape_from_int(bits)


@dataclass(frozen=True)
class Kmer:
    """A sequence submer described by its shape; an int stands for an ungapped shape."""

    shape: Shape

    def __post_init__(self) -> None:
        if isinstance(self.shape, int):
            object.__setattr__(self, "shape", ungapped(self.shape))
        elif not isinstance(self.shape, Shape):
            raise TypeError(f"Expected Shape or int, got {type(self.shape).__name__}")

    def is_gapped(self) -> bool:
        return self.shape.count() < self.shape.size()

    def longest_ungapped(self) -> int:
        """Length of the longest run of consecutive informative positions."""
        if not self.is_gapped():
            return self.shape.count()
        return max((len(run) for run in self.shape.to_string().split("0")), default=0)

    def ungapped_triplet_length(self) -> int:
        """Number of positions covered by ungapped triplets of the shape."""
        if not self.is_gapped():
            return self.size()
        text = self.to_string()
        positions = [i for i in range(len(text) - 2) if text.startswith("111", i)]
        if not positions:
            return 0
        total = 0
        previous = positions[0]
        for pos in positions:
            total += 1 if pos == previous + 1 else 3
            previous = pos
        return total

    def weight(self) -> int:
        return self.shape.count()

    def size(self) -> int:
        return self.shape.size()

    def effective_size(self) -> int:
        """Size used for error thresholds; smaller than the span for gapped shapes."""
        if self.is_gapped():
            return self.ungapped_triplet_length()
        return self.size()

    def to_string(self) -> str:
        return self.shape.to_string()

    def lemma_threshold(self, l: int, e: int) -> int:
        """K-mer lemma: shared k-mers guaranteed for length l with e errors."""
        k = self.size()
        if l < k or l - k + 1 <= e * k:
            return 0
        return l - k + 1 - e * k

    def gapped_threshold(self, l: int, e: int) -> int:
        """Shared k-mer threshold using the effective size of a gapped shape."""
        k = self.size()
        destroyed = e * self.effective_size()
        if l < k or l - k + 1 <= destroyed:
            return 0
        return l - k + 1 - destroyed