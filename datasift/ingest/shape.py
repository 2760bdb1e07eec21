"""Filter a raw table down to its dominant record shape.

Real-world exports often carry prose, units or notes above the data. Those
lines rarely have the same number of fields as the data rows, so the most
frequent record length (the mode of the spectrum) identifies the tabular
block and everything else is treated as leading noise.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..schema import Record, Table
from ..stats.descriptive import mode

logger = logging.getLogger(__name__)


def spectrum(table: Table) -> List[int]:
    """Return the record lengths of ``table`` in table order."""
    return [len(record) for record in table]


def spectrum_mode(lengths: List[int]) -> Optional[Tuple[int, int]]:
    """Return the most frequent record length and how often it occurs.

    Ties go to the smallest length: the spectrum is sorted by value before
    counting and the first length reaching the top count wins.
    """
    return mode(sorted(lengths))


def is_well_shaped(table: Table) -> bool:
    """True when every record in ``table`` has the same length."""
    return len(set(spectrum(table))) == 1


def normalize(table: Table) -> Tuple[Tuple[str, ...], Tuple[Record, ...]]:
    """Split ``table`` into metadata candidate lines and a uniform table.

    Args:
        table (Table): Records straight from the field parser.

    Returns:
        tuple: ``(metadata_lines, clean_table)``. ``clean_table`` holds the
        records whose length equals the spectrum mode, in order.
        ``metadata_lines`` holds the first ``len(table) - k`` records, each
        joined with spaces, where ``k`` is the mode's count.

    Note:
        Metadata recombination assumes the well-formed block runs
        uninterrupted to the end of the input. A stray malformed record
        after the data starts shifts the metadata window onto data lines.
    """
    lengths = spectrum(table)
    found = spectrum_mode(lengths)
    if found is None:
        return (), ()

    width, count = found
    clean = tuple(record for record in table if len(record) == width)
    header_lines = len(table) - count
    metadata = tuple(" ".join(record) for record in table[:header_lines])

    if header_lines:
        logger.debug(
            "Kept %d of %d records with %d fields; %d leading lines treated as metadata",
            count,
            len(table),
            width,
            header_lines,
        )
    return metadata, clean
