"""
Shape inference for messy delimited text.

This subpackage turns a raw text blob into a uniform string table and a
header row, using heuristics rather than a fixed schema.

Modules:
    sniffer:
        Delimiter detection from raw space/tab/comma counts.

    fields:
        Line splitting. Quote-aware CSV for commas, run-collapsing splits
        for spaces and tabs. Also the shared float parser.

    shape:
        Spectrum computation and the shape-mode filter that keeps only
        records of the most frequent length.

    header:
        Header/data boundary search over a normalized table.
"""

from .fields import parse_float, parse_line, parse_table
from .header import find_header_boundary, split_header_and_data
from .shape import is_well_shaped, normalize, spectrum, spectrum_mode
from .sniffer import DelimiterProfile, detect_delimiter, profile_delimiters

__all__ = [
    "DelimiterProfile",
    "detect_delimiter",
    "profile_delimiters",
    "parse_float",
    "parse_line",
    "parse_table",
    "is_well_shaped",
    "normalize",
    "spectrum",
    "spectrum_mode",
    "find_header_boundary",
    "split_header_and_data",
]
