"""Define the immutable value types passed between pipeline stages."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

Record = Tuple[str, ...]
Table = Sequence[Record]
Point = Tuple[float, float]
Data = List[Point]


class Delimiter(enum.Enum):
    """Field separator chosen once for a whole input text.

    The member value is the separator character itself, so
    ``Delimiter.TAB.value == "\\t"``.
    """

    SPACE = " "
    TAB = "\t"
    COMMA = ","

    @property
    def char(self) -> str:
        return self.value


@dataclass(frozen=True)
class RawTable:
    """Packaged result of ingesting one text blob.

    Attributes:
        metadata: Leading free-text lines that precede the tabular block,
            each re-joined with single spaces.
        column_headers: Header row sitting directly above the numeric data.
        data: Cleaned string table. Every record has exactly
            ``len(column_headers)`` fields.
        delimiter: Separator that was used to split the text.

    A new load always produces a new ``RawTable``; instances are never
    modified in place.
    """

    metadata: Tuple[str, ...]
    column_headers: Record
    data: Tuple[Record, ...]
    delimiter: Delimiter = Delimiter.SPACE

    @property
    def metadata_text(self) -> str:
        return " ".join(self.metadata)

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.data), len(self.column_headers)


@dataclass(frozen=True)
class Filter:
    """Inclusive x-range restriction applied before recomputing statistics.

    Filtering only happens when both bounds are given.
    """

    x_min: Optional[float] = None
    x_max: Optional[float] = None


@dataclass(frozen=True)
class IngestOptions:
    """Knobs for :func:`datasift.data_processing.load_raw_data`.

    Attributes:
        delimiter: Skip sniffing and split with this delimiter.
        header_column: Restrict the header/data boundary search to one
            column. ``None`` scans every column.
    """

    delimiter: Optional[Delimiter] = None
    header_column: Optional[int] = None
