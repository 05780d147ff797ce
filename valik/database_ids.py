"""Mapping from database sequences to their record numbers and ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class DatabaseIdMap:
    """Finds the record number and id of a database sequence.

    Sequences are matched by identity, not by value, as equal sequences
    may belong to different records.
    """

    databases: Sequence[Any]
    database_ids: Sequence[str]

    def record_id(self, database: Any) -> int:
        """Record number of the given sequence object."""
        for index, candidate in enumerate(self.databases):
            if candidate is database:
                return index
        raise ValueError("Sequence is not one of the databases")

    def database_id(self, record: Any) -> str:
        """Id of a record, given by its number or by its sequence object."""
        if isinstance(record, int) and not isinstance(record, bool):
            if not 0 <= record < len(self.database_ids):
                raise IndexError(f"No database record {record}")
            return self.database_ids[record]
        return self.database_ids[self.record_id(record)]