"""
pafio - reading and writing minimap2 PAF files.

Each PAF line holds twelve required tab-separated columns followed by
optional ``XX:T:value`` columns. Lines are parsed into immutable
:class:`PAFLine` records and written back with optional columns in a fixed
canonical order.

Main Functions
--------------
parse_line
    Parse a single line into a PAFLine.
parse_input_str
    Parse every line of a string.
parse_input_read
    Parse every line of a file-like object or other line iterable.
format_paf_line
    Render a PAFLine as one line of text (also ``str(record)``).

Main Classes
------------
PAFLine
    One parsed line.
PAFReader
    File-level reader with gzip support, tabular export and serialization.
PAFParseError
    Raised for every parsing failure; ``error.kind`` is an ErrorKind.

Examples
--------
>>> import pafio
>>> records = pafio.parse_input_str(open('alignments.paf').read())
>>> str(records[0].cigar_string)
'10M2D5M'
>>> print(records[0])
"""

from .cigar import parse_cigar
from .difference import parse_alignment_difference
from .errors import ErrorKind, PAFParseError
from .parser import (
    iter_input_read,
    parse_input_read,
    parse_input_str,
    parse_line,
)
from .reader import PAFReader
from .records import (
    AlignmentDifference,
    AlignmentType,
    Cigar,
    CigarColumn,
    CigarOperation,
    DifferenceDeletion,
    DifferenceInsertion,
    DifferenceMatch,
    DifferenceMismatch,
    PAFLine,
)
from .table import records_to_dataframe
from .tags import OPTIONAL_COLUMNS
from .writer import format_paf_line, write_paf

__all__ = [
    # Parsing
    "parse_line",
    "parse_input_str",
    "parse_input_read",
    "iter_input_read",
    "parse_cigar",
    "parse_alignment_difference",
    # Writing
    "format_paf_line",
    "write_paf",
    # Records
    "PAFLine",
    "AlignmentType",
    "Cigar",
    "CigarColumn",
    "CigarOperation",
    "AlignmentDifference",
    "DifferenceMatch",
    "DifferenceInsertion",
    "DifferenceDeletion",
    "DifferenceMismatch",
    # Errors
    "PAFParseError",
    "ErrorKind",
    # Files and tables
    "PAFReader",
    "records_to_dataframe",
    "OPTIONAL_COLUMNS",
]

__version__ = "0.1.0"
