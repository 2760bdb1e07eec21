"""
Turns raw delimited text into a RawTable and pulls numeric columns out of it.
"""

# Algorithm summary: sniff the delimiter from raw character counts, split
# every line into a record, keep only records of the most frequent length,
# treat the leading run of other lines as metadata, then take the last row
# holding a non-numeric field as the header and everything below it as data.

import logging
from typing import List, Optional, Sequence, Union

import pandas as pd

from .ingest import (
    detect_delimiter,
    normalize,
    parse_float,
    parse_table,
    split_header_and_data,
)
from .schema import Data, IngestOptions, RawTable, Record

logger = logging.getLogger(__name__)

TableLike = Union[RawTable, Sequence[Record]]


def load_raw_data(text, options=None):
    """Ingest one text blob.

    The input is typically a spreadsheet or instrument export with a few
    lines of free text (title, units, source) above a header row and a
    block of numbers, e.g.::

        Global Land and Ocean Temperature Anomalies
        Units: Degrees Celsius
        Year,Value
        1880,-0.12

    Args:
        text (str): Full file contents. Reading the file is the caller's job.
        options (IngestOptions, optional): Delimiter override and header
            search column.

    Returns:
        RawTable | None: Metadata lines, column headers and the cleaned
        string table, or ``None`` when no header/data boundary is found.
        A ``None`` result means the text could not be understood; no partial
        table is returned.
    """
    options = options or IngestOptions()

    delimiter = options.delimiter or detect_delimiter(text)
    table = parse_table(text, delimiter)
    metadata, clean = normalize(table)

    split = split_header_and_data(clean, column=options.header_column)
    if split is None:
        logger.warning(
            "Could not find a header/data boundary in %d lines (%s separated)",
            len(table),
            delimiter.name.lower(),
        )
        return None

    headers, rows = split
    logger.debug(
        "Loaded %d rows x %d columns with %d metadata lines",
        len(rows),
        len(headers),
        len(metadata),
    )
    return RawTable(metadata=metadata, column_headers=headers, data=rows, delimiter=delimiter)


def _rows(table: TableLike) -> Sequence[Record]:
    return table.data if isinstance(table, RawTable) else table


def extract_column(table: TableLike, column_index: int) -> Optional[List[float]]:
    """Parse one column as floats, all or nothing.

    Args:
        table: A :class:`RawTable` or a uniform sequence of records.
        column_index (int): Zero-based column position.

    Returns:
        list[float] | None: The parsed column in row order, or ``None`` if
        any field fails to parse or the index does not exist.
    """
    rows = _rows(table)
    values = []
    for row_number, record in enumerate(rows):
        if not 0 <= column_index < len(record):
            logger.warning(
                "Column %d is out of range for a %d-field record", column_index, len(record)
            )
            return None
        value = parse_float(record[column_index])
        if value is None:
            logger.debug(
                "Column %d row %d is not numeric: %r",
                column_index,
                row_number,
                record[column_index],
            )
            return None
        values.append(value)
    return values


def extract_points(table: TableLike, i_index: int, j_index: int) -> Optional[Data]:
    """Zip columns ``i_index`` (x) and ``j_index`` (y) into coordinate pairs."""
    xs = extract_column(table, i_index)
    if xs is None:
        return None
    ys = extract_column(table, j_index)
    if ys is None:
        return None
    return list(zip(xs, ys))


def raw_table_to_frame(raw: RawTable) -> pd.DataFrame:
    """Convert a RawTable into a DataFrame named by its column headers.

    Columns that parse completely through :func:`extract_column` become
    float columns; the rest keep their strings.

    Args:
        raw (RawTable): Output of :func:`load_raw_data`.

    Returns:
        pd.DataFrame: One row per data record.
    """
    columns = {}
    for position in range(len(raw.column_headers)):
        column = pd.Series([record[position] for record in raw.data], dtype=object)
        if extract_column(raw, position) is not None:
            column = pd.to_numeric(column, errors="coerce")
        columns[position] = column

    # headers may repeat, so build positionally and rename afterwards
    df = pd.DataFrame(columns)
    df.columns = list(raw.column_headers)
    return df
