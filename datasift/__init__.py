"""
A Python package for reading messy delimited text into numeric columns.

Infers the delimiter, the header row and the leading metadata of a text
export, then computes descriptive statistics and a linear regression over
selected columns.

Modules:
    - schema: Immutable value types (Delimiter, RawTable, Filter, IngestOptions).
    - ingest: Delimiter sniffing, field parsing and shape inference.
    - data_processing: Builds RawTables from text and extracts numeric columns.
    - stats: Descriptive statistics, regression and the statistics summary.
"""

__version__ = "1.0.0"

from .data_processing import (
    extract_column,
    extract_points,
    load_raw_data,
    raw_table_to_frame,
)
from .schema import Delimiter, Filter, IngestOptions, RawTable
from .stats import (
    Statistics,
    describe_frame,
    filter_data,
    linear_regression,
    mean,
    median,
    mode,
    population_stdev,
    sample_stdev,
    standard_deviation,
    statistics,
    variance,
)

__all__ = [
    # Data model
    "Delimiter",
    "Filter",
    "IngestOptions",
    "RawTable",
    "Statistics",
    # Ingestion
    "load_raw_data",
    "extract_column",
    "extract_points",
    "raw_table_to_frame",
    # Statistics
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "population_stdev",
    "sample_stdev",
    "linear_regression",
    "statistics",
    "filter_data",
    "describe_frame",
]
