"""Locate the header row that sits directly above the numeric data block."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..schema import Record, Table
from .fields import parse_float

logger = logging.getLogger(__name__)


def _is_numeric_row(record: Record, column: Optional[int]) -> bool:
    if column is None:
        return all(parse_float(field) is not None for field in record)
    if column >= len(record):
        return False
    return parse_float(record[column]) is not None


def find_header_boundary(table: Table, column: Optional[int] = None) -> Optional[int]:
    """Return the index of the last row holding a non-numeric field.

    Args:
        table (Table): A normalized table (uniform record length).
        column (int, optional): Only inspect this column. Defaults to
            ``None``, which inspects every column of every row.

    Returns:
        int | None: Row index of the header, or ``None`` when the table is
        empty, every row is numeric, or ``column`` is outside the table.
    """
    if column is not None and table:
        width = len(table[0])
        if not 0 <= column < width:
            logger.warning(
                "Header column %d is out of range for a %d-field table", column, width
            )
            return None
    boundary = None
    for index, record in enumerate(table):
        if not _is_numeric_row(record, column):
            boundary = index
    return boundary


def split_header_and_data(
    table: Table, column: Optional[int] = None
) -> Optional[Tuple[Record, Tuple[Record, ...]]]:
    """Separate the header row from the numeric rows below it.

    The header is the last row, scanning from the top, that contains a
    non-numeric field. Every row after it is data. Numeric rows above the
    header are assumed not to exist.

    Returns:
        tuple | None: ``(column_headers, data_rows)``, or ``None`` when no
        header can be distinguished.
    """
    boundary = find_header_boundary(table, column)
    if boundary is None:
        logger.debug("No non-numeric row found in %d rows", len(table))
        return None
    return tuple(table[boundary]), tuple(table[boundary + 1 :])
