"""Local alignment matches in the aligner's GFF output and their file I/O."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

GFF_COLUMNS = 9


def _qrange_bounds(seq2_range: str) -> tuple[int, int]:
    """Parse 'seq2Range=<begin>,<end>' into its two positions."""
    _, _, value = seq2_range.partition("=")
    begin, sep, end = value.partition(",")
    if not sep:
        raise ValueError(f"Malformed query range: {seq2_range!r}")
    return int(begin), int(end)


@dataclass(eq=False)
class StellarMatch:
    """One local match between a database sequence and a query sequence."""

    dname: str
    ref_ind: int
    dbegin: int
    dend: int
    percid: str
    is_forward_match: bool
    qname: str
    qbegin: int
    qend: int
    alignment_attributes: str

    @classmethod
    def from_fields(
        cls, fields: Sequence[str], ind_from_id: Callable[[str], int]
    ) -> StellarMatch:
        """Build a match from the nine columns of a GFF record.

        ``ind_from_id`` maps a database sequence id to its index.
        """
        if len(fields) != GFF_COLUMNS:
            raise ValueError(
                f"Expected {GFF_COLUMNS} GFF columns, got {len(fields)}"
            )
        dname = fields[0]
        attributes = fields[8].split(";")
        # 1;seq2Range=1280,1378;cigar=97M1D2M;mutations=14A,45G,58T,92C
        # optionally with an eValue attribute before the cigar
        if len(attributes) not in (4, 5):
            raise ValueError("Malformed GFF record:\n" + ";".join(attributes))
        qbegin, qend = _qrange_bounds(attributes[1])
        return cls(
            dname=dname,
            ref_ind=ind_from_id(dname),
            dbegin=int(fields[3]),
            dend=int(fields[4]),
            percid=fields[5],
            is_forward_match=fields[6] != "-",
            qname=attributes[0],
            qbegin=qbegin,
            qend=qend,
            alignment_attributes=";".join(attributes[2:]),
        )

    def length(self) -> int:
        """Length of the match on the database sequence."""
        return self.dend - self.dbegin

    def cigar(self) -> str:
        """The cigar attribute, e.g. 'cigar=97M1D2M'."""
        return self.alignment_attributes.split(";")[-2]

    def mutations(self) -> str:
        """The mutations attribute and whatever follows it."""
        index = self.alignment_attributes.find("mutations=")
        if index < 0:
            raise ValueError("Match has no mutations attribute")
        return self.alignment_attributes[index:]

    def percid_is_greater(self, other: str) -> bool:
        """Whether this match's percent identity exceeds the given one."""
        return float(self.percid) > float(other)

    def to_gff(self) -> str:
        """Render the match as one GFF line, newline included."""
        strand = "+" if self.is_forward_match else "-"
        columns = [
            self.dname,
            "Stellar",
            "eps-matches",
            str(self.dbegin),
            str(self.dend),
            self.percid,
            strand,
            ".",
            f"{self.qname};seq2Range={self.qbegin},{self.qend};{self.alignment_attributes}",
        ]
        return "\t".join(columns) + "\n"

    def _key(self) -> tuple:
        return (
            self.dname,
            self.dbegin,
            self.dend,
            self.is_forward_match,
            self.qname,
            self.qbegin,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StellarMatch):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __gt__(self, other: StellarMatch) -> bool:
        if not isinstance(other, StellarMatch):
            return NotImplemented
        mine = (self.ref_ind, self.dbegin, self.dend)
        theirs = (other.ref_ind, other.dbegin, other.dend)
        if mine != theirs:
            return mine > theirs
        return self.percid_is_greater(other.percid)


def read_alignment_output(
    path: str | Path, ind_from_id: Callable[[str], int]
) -> list[StellarMatch]:
    """Read matches from a GFF file; a single-column line ends the input."""
    matches: list[StellarMatch] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.rstrip("\r\n").split("\t")
            if len(fields) == 1:
                break
            matches.append(StellarMatch.from_fields(fields, ind_from_id))
    return matches


def write_alignment_output(
    path: str | Path, matches: Iterable[StellarMatch], append: bool = False
) -> None:
    """Write matches as GFF lines, replacing or appending to the file."""
    with open(path, "a" if append else "w", encoding="utf-8") as handle:
        handle.writelines(match.to_gff() for match in matches)