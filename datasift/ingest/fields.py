"""Split lines of delimited text into records of trimmed string fields.

Comma-separated input goes through the quote-aware :mod:`csv` reader because
quoted values may contain the delimiter. Space and tab input has no escaping
rules, so runs of the separator are collapsed into one split point.
"""

from __future__ import annotations

import csv
import logging
import math
import re
from typing import List, Optional, Tuple

from ..schema import Delimiter, Record

logger = logging.getLogger(__name__)

_RUN_PATTERNS = {
    Delimiter.SPACE: re.compile(r" +"),
    Delimiter.TAB: re.compile(r"\t+"),
}


def _parse_csv_line(line: str) -> Record:
    try:
        row = next(csv.reader([line], strict=True), [])
    except csv.Error as exc:
        logger.debug("CSV parser desync on line %r: %s", line, exc)
        return ()
    return tuple(field.strip() for field in row)


def _parse_run_line(line: str, delimiter: Delimiter) -> Record:
    stripped = line.strip()
    if not stripped:
        return ()
    parts = _RUN_PATTERNS[delimiter].split(stripped)
    return tuple(part.strip() for part in parts)


def parse_line(line: str, delimiter: Delimiter) -> Record:
    """Split one line into a record.

    Args:
        line (str): A single line of text without its line terminator.
        delimiter (Delimiter): Separator chosen for the whole input.

    Returns:
        Record: Trimmed fields in order. Blank lines and lines the CSV
        reader cannot parse become an empty record.
    """
    if delimiter is Delimiter.COMMA:
        return _parse_csv_line(line)
    return _parse_run_line(line, delimiter)


def parse_table(text: str, delimiter: Delimiter) -> Tuple[Record, ...]:
    """Parse every line of ``text`` into a record, dropping nothing.

    Lines are split on line feeds only. A trailing carriage return is
    dropped from each line and a final line feed does not add an empty
    record. Malformed lines
    produce short or irregular records; they are filtered later by the shape
    normalizer.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    records: List[Record] = [
        parse_line(line[:-1] if line.endswith("\r") else line, delimiter)
        for line in lines
    ]
    return tuple(records)


def parse_float(text: str) -> Optional[float]:
    """Parse a field as a finite float, or return ``None``.

    Infinity and NaN spellings are rejected; they are never valid
    measurements.
    """
    s = text.strip()
    if not s:
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
