"""
Record and RecordCollection types.

A RecordCollection is an ordered, capacity-checked sequence of
(timestamp, value) records. Sorters rearrange records in place through
index and slice assignment; the collection never grows past its capacity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, overload

from tempsort._api import MAX_ENTRIES, MAX_TIMESTAMP_LEN, CapacityError, _coerce_index, _coerce_value


@dataclass(frozen=True)
class Record:
    """Single timestamp/value reading."""

    timestamp: str
    value: float

    def __post_init__(self) -> None:
        if len(self.timestamp) > MAX_TIMESTAMP_LEN:
            raise ValueError(
                f"timestamp {self.timestamp!r} exceeds {MAX_TIMESTAMP_LEN} characters"
            )
        object.__setattr__(self, "value", _coerce_value(self.value))


class RecordCollection:
    """
    Ordered sequence of Record with a hard maximum size.

    Supports len(), iteration, index and slice reads, index writes and
    length-preserving slice writes. Use copy() to hand an independent
    collection to each sorter.

    Args:
        records: Initial records (optional).
        capacity: Maximum number of records. Default: MAX_ENTRIES.

    Raises:
        ValueError: capacity is negative.
        CapacityError: more initial records than capacity.
    """

    __slots__ = ("_records", "_capacity")

    def __init__(self, records: Iterable[Record] = (), *, capacity: int = MAX_ENTRIES):
        capacity = _coerce_index(capacity)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._records: list[Record] = []
        for rec in records:
            self.append(rec)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self._capacity

    def append(self, record: Record) -> None:
        """
        Append a record at the end.

        Raises:
            TypeError: record is not a Record.
            CapacityError: the collection is full.
        """
        if not isinstance(record, Record):
            raise TypeError(f"expected Record, not {type(record).__name__}")
        if self.is_full:
            raise CapacityError(f"collection is full ({self._capacity} records)")
        self._records.append(record)

    def copy(self) -> RecordCollection:
        """Return an independent collection with the same records and capacity."""
        dup = RecordCollection(capacity=self._capacity)
        dup._records = list(self._records)
        return dup

    def values(self) -> list[float]:
        return [r.value for r in self._records]

    def timestamps(self) -> list[str]:
        return [r.timestamp for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    @overload
    def __getitem__(self, key: int) -> Record: ...

    @overload
    def __getitem__(self, key: slice) -> list[Record]: ...

    def __getitem__(self, key):
        return self._records[key]

    def __setitem__(self, key, value) -> None:
        if isinstance(key, slice):
            items = list(value)
            if any(not isinstance(r, Record) for r in items):
                raise TypeError("slice assignment expects Record items")
            target = range(*key.indices(len(self._records)))
            if len(items) != len(target):
                raise ValueError(
                    f"slice assignment must preserve length "
                    f"({len(target)} slots, {len(items)} records)"
                )
            self._records[key] = items
            return
        if not isinstance(value, Record):
            raise TypeError(f"expected Record, not {type(value).__name__}")
        self._records[_coerce_index(key)] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RecordCollection):
            return self._records == other._records
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"RecordCollection({len(self._records)} records, capacity={self._capacity})"
