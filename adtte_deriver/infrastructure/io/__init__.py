"""I/O adapters for source tables and the ADTTE transport file."""

from .csv_reader import CSVReader, CSVReadOptions, parse_date_columns
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    DeriverInfrastructureError,
    XportGenerationError,
)
from .xpt_writer import XPTWriter, write_xpt_file

__all__ = [
    "CSVReadOptions",
    "CSVReader",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DeriverInfrastructureError",
    "XPTWriter",
    "XportGenerationError",
    "parse_date_columns",
    "write_xpt_file",
]
