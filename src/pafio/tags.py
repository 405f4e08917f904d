"""
Optional column dispatch.

Optional PAF columns have the form ``XX:T:value``. The five character header
``XX:T:`` is looked up in :data:`OPTIONAL_COLUMNS`, which names the
:class:`~pafio.records.PAFLine` attribute the value is stored in and the
decoder that turns the value text into that attribute's type. Supporting a
new tag means adding one entry to the table.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional, Tuple

from . import constants as c
from .cigar import parse_cigar
from .cursor import LineCursor
from .difference import parse_alignment_difference
from .errors import ErrorKind, PAFParseError
from .records import AlignmentType

UnknownColumnPolicy = Literal['collect', 'reject']
UnknownColumnObserver = Callable[[str, str], None]

_UNSIGNED = re.compile(r'[0-9]+')
_FLOAT = re.compile(
    r'[+-]?(?:[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?'
    r'|inf|infinity|nan)',
    re.IGNORECASE,
)
_HEADER = re.compile(r'[A-Za-z][A-Za-z0-9]:[AifZHB]:')


def decode_unsigned(value: str, column: str) -> int:
    """Parse a non-negative decimal integer, or raise ``COLUMN_PARSE_ERROR``."""
    if _UNSIGNED.fullmatch(value) is None:
        raise PAFParseError(ErrorKind.COLUMN_PARSE_ERROR, column_header=column, detail=value)
    return int(value)


def decode_float(value: str, column: str) -> float:
    """Parse a floating point number, or raise ``COLUMN_PARSE_ERROR``."""
    if _FLOAT.fullmatch(value) is None:
        raise PAFParseError(ErrorKind.COLUMN_PARSE_ERROR, column_header=column, detail=value)
    return float(value)


def decode_text(value: str, column: str) -> str:
    return value


def decode_character(value: str, column: str) -> str:
    """Single printable character (type ``A``)."""
    if len(value) != 1:
        raise PAFParseError(ErrorKind.UNEXPECTED_CHARACTER, column_header=column, detail=value)
    return value


def decode_alignment_type(value: str, column: str) -> AlignmentType:
    try:
        return AlignmentType(value)
    except ValueError:
        raise PAFParseError(
            ErrorKind.UNEXPECTED_CHARACTER, column_header=column, detail=value
        ) from None


def _decode_cigar(value: str, column: str):
    return parse_cigar(value)


def _decode_difference(value: str, column: str):
    return parse_alignment_difference(value)


@dataclass(frozen=True)
class OptionalColumn:
    """Where a known optional column is stored and how its value is decoded."""

    attribute: str
    decoder: Callable[[str, str], Any]


OPTIONAL_COLUMNS: Dict[str, OptionalColumn] = {
    c.TAG_ALIGNMENT_TYPE: OptionalColumn('alignment_type', decode_alignment_type),
    c.TAG_NUMBER_OF_MINIMISERS: OptionalColumn('number_of_minimisers', decode_unsigned),
    c.TAG_CHAINING_SCORE: OptionalColumn('chaining_score', decode_unsigned),
    c.TAG_BEST_SECONDARY_CHAINING_SCORE: OptionalColumn(
        'best_secondary_chaining_score', decode_unsigned
    ),
    c.TAG_MISMATCHES_AND_GAPS: OptionalColumn(
        'total_number_of_mismatches_and_gaps', decode_unsigned
    ),
    c.TAG_MD: OptionalColumn('unknown_md', decode_text),
    c.TAG_DP_ALIGNMENT_SCORE: OptionalColumn('dp_alignment_score', decode_unsigned),
    c.TAG_SUPPLEMENTARY_ALIGNMENTS: OptionalColumn('supplementary_alignments', decode_text),
    c.TAG_BEST_SEGMENT_DP_SCORE: OptionalColumn('best_segment_dp_score', decode_unsigned),
    c.TAG_AMBIGUOUS_BASES: OptionalColumn('number_of_ambiguous_bases', decode_unsigned),
    c.TAG_TRANSCRIPT_STRAND: OptionalColumn('transcript_strand', decode_character),
    c.TAG_CIGAR: OptionalColumn('cigar_string', _decode_cigar),
    c.TAG_DIFFERENCE: OptionalColumn('difference_string', _decode_difference),
    c.TAG_APPROXIMATE_DIVERGENCE: OptionalColumn(
        'approximate_per_base_sequence_divergence', decode_float
    ),
    c.TAG_GAP_COMPRESSED_DIVERGENCE: OptionalColumn(
        'gap_compressed_per_base_sequence_divergence', decode_float
    ),
    c.TAG_REPETITIVE_SEED_LENGTH: OptionalColumn(
        'length_of_query_regions_with_repetitive_seeds', decode_unsigned
    ),
}


def parse_optional_columns(
    cursor: LineCursor,
    unknown_columns: UnknownColumnPolicy = 'collect',
    on_unknown_column: Optional[UnknownColumnObserver] = None,
) -> Tuple[Dict[str, Any], Tuple[str, ...]]:
    """
    Decode the optional columns of one line.

    Reads ``XX:T:value`` columns until the end of the record and leaves the
    cursor at the start of the next line (or at the end of the text).

    Parameters
    ----------
    cursor : LineCursor
        Positioned directly after the last required column.
    unknown_columns : {'collect', 'reject'}, default 'collect'
        What to do with a well-formed header that is not in
        :data:`OPTIONAL_COLUMNS`. ``'collect'`` keeps the whole column
        verbatim, ``'reject'`` raises ``UNEXPECTED_OPTIONAL_COLUMN``.
    on_unknown_column : callable, optional
        Called with ``(header, value)`` for every collected unknown column.

    Returns
    -------
    values : dict
        Decoded values keyed by :class:`~pafio.records.PAFLine` attribute.
    unknown_fields : tuple of str
        Collected unknown columns (header and value), in input order.

    Raises
    ------
    PAFParseError
        On malformed headers or values, duplicate known headers and, under
        ``'reject'``, unknown headers.
    """
    if unknown_columns not in ('collect', 'reject'):
        raise ValueError(f"Unknown unknown_columns policy: {unknown_columns}")

    values: Dict[str, Any] = {}
    unknown_fields: List[str] = []

    while True:
        if cursor.peek() == '\n':
            cursor.skip_newline()
            break

        remaining = cursor.peek(c.HEADER_LENGTH)
        if not remaining:
            break
        if len(remaining) < c.HEADER_LENGTH:
            raise PAFParseError(ErrorKind.UNEXPECTED_CHARACTER, detail=remaining)

        # a header at the very end of the text has an empty value
        header = cursor.take(c.HEADER_LENGTH)
        if _HEADER.fullmatch(header) is None:
            raise PAFParseError(ErrorKind.UNEXPECTED_CHARACTER, detail=header)

        column = OPTIONAL_COLUMNS.get(header)
        if column is None:
            if unknown_columns == 'reject':
                raise PAFParseError(ErrorKind.UNEXPECTED_OPTIONAL_COLUMN, column_header=header)
            value = cursor.take_raw_value()
            if on_unknown_column is not None:
                on_unknown_column(header, value)
            unknown_fields.append(header + value)
            continue

        if column.attribute in values:
            raise PAFParseError(ErrorKind.DUPLICATE_OPTIONAL_COLUMN, column_header=header)
        values[column.attribute] = column.decoder(cursor.take_raw_value(), header)

    return values, tuple(unknown_fields)
