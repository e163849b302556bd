"""
tempsort: extract timestamp/value readings from loose text and compare sorts.

This package provides:

- A tolerant scanner that pulls quoted timestamps and their numeric values
  out of JSON-like dumps, skipping anything malformed
- A capacity-bounded RecordCollection
- Partition-exchange (quick) and merge sorts ordering records by value
- A timing harness measuring each sort on an independent copy

Example:
    >>> from tempsort import extract, compare_sorts, SortAlgorithm
    >>>
    >>> records = extract('{"2014-01-01 00:00:00": 5.5, "2014-01-01 01:00:00": 3.2}')
    >>> result = compare_sorts(records)
    >>> [r.value for r in result.sorted_by[SortAlgorithm.MERGE]]
    [3.2, 5.5]

Bounds:
    A collection holds at most MAX_ENTRIES records and a timestamp is at
    most MAX_TIMESTAMP_LEN characters. Extraction stops quietly once the
    collection is full; over-long timestamps are skipped.
"""

from __future__ import annotations

try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("tempsort")
except Exception:
    __version__ = "0+unknown"

from tempsort._api import (
    DEFAULT_ANCHOR,
    MAX_ENTRIES,
    MAX_TIMESTAMP_LEN,
    CapacityError,
    SourceUnavailableError,
    TempsortError,
)
from tempsort.scan import extract
from tempsort.harness import (
    ComparisonResult,
    SortTiming,
    compare_sorts,
    faster_algorithm,
    measure,
    profile_sort,
)
from tempsort.records import Record, RecordCollection
from tempsort.sorts import SortAlgorithm, sort_function, sort_merge, sort_quickselect
from tempsort.source import read_all

__all__ = [
    # Data model
    "Record",
    "RecordCollection",
    # Extraction
    "extract",
    "read_all",
    # Sorting
    "SortAlgorithm",
    "sort_quickselect",
    "sort_merge",
    "sort_function",
    # Timing
    "measure",
    "profile_sort",
    "compare_sorts",
    "faster_algorithm",
    "SortTiming",
    "ComparisonResult",
    # Exceptions
    "TempsortError",
    "SourceUnavailableError",
    "CapacityError",
    # Bounds
    "MAX_ENTRIES",
    "MAX_TIMESTAMP_LEN",
    "DEFAULT_ANCHOR",
    # Version
    "__version__",
]
