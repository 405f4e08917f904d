"""
Parsing of PAF lines into :class:`~pafio.records.PAFLine` objects.

Three entry points are provided:

- :func:`parse_line` for a single line of text,
- :func:`parse_input_str` for a whole file already held in memory,
- :func:`parse_input_read` / :func:`iter_input_read` for anything that yields
  lines (open files, ``sys.stdin``, ``gzip.open`` handles).

The first malformed line aborts parsing; there is no skip-and-continue mode.
"""

from typing import IO, Iterable, Iterator, List, Optional, Union

from .constants import (
    MAX_MAPPING_QUALITY,
    REQUIRED_COLUMN_NAMES,
    STRAND_FORWARD,
    STRAND_REVERSE,
)
from .cursor import LineCursor
from .errors import ErrorKind, PAFParseError
from .records import PAFLine
from .tags import (
    UnknownColumnObserver,
    UnknownColumnPolicy,
    decode_unsigned,
    parse_optional_columns,
)

(
    QUERY_NAME,
    QUERY_LENGTH,
    QUERY_START,
    QUERY_END,
    STRAND,
    TARGET_NAME,
    TARGET_LENGTH,
    TARGET_START,
    TARGET_END,
    MATCHING_BASES,
    BASES_AND_GAPS,
    MAPPING_QUALITY,
) = REQUIRED_COLUMN_NAMES


def _parse_strand(value: str) -> bool:
    if value == STRAND_FORWARD:
        return True
    if value == STRAND_REVERSE:
        return False
    raise PAFParseError(ErrorKind.UNEXPECTED_CHARACTER, column_header=STRAND, detail=value)


def _parse_mapping_quality(value: str) -> int:
    mapping_quality = decode_unsigned(value, MAPPING_QUALITY)
    if mapping_quality > MAX_MAPPING_QUALITY:
        raise PAFParseError(
            ErrorKind.COLUMN_PARSE_ERROR, column_header=MAPPING_QUALITY, detail=value
        )
    return mapping_quality


def parse_record(
    cursor: LineCursor,
    unknown_columns: UnknownColumnPolicy = 'collect',
    on_unknown_column: Optional[UnknownColumnObserver] = None,
) -> PAFLine:
    """
    Parse one record starting at the cursor.

    The cursor is advanced past the record's terminating newline, if any.
    See :func:`parse_line` for the parameters.
    """
    take = cursor.take_field

    # required fields
    query_sequence_name = take(False)
    query_sequence_length = decode_unsigned(take(False), QUERY_LENGTH)
    query_start_coordinate = decode_unsigned(take(False), QUERY_START)
    query_end_coordinate = decode_unsigned(take(False), QUERY_END)
    strand = _parse_strand(take(False))
    target_sequence_name = take(False)
    target_sequence_length = decode_unsigned(take(False), TARGET_LENGTH)
    target_start = decode_unsigned(take(False), TARGET_START)
    target_end = decode_unsigned(take(False), TARGET_END)
    number_of_matching_bases = decode_unsigned(take(False), MATCHING_BASES)
    number_of_bases_and_gaps = decode_unsigned(take(False), BASES_AND_GAPS)
    mapping_quality = _parse_mapping_quality(take(True))

    # optional fields
    optional_values, unknown_fields = parse_optional_columns(
        cursor,
        unknown_columns=unknown_columns,
        on_unknown_column=on_unknown_column,
    )

    return PAFLine(
        query_sequence_name=query_sequence_name,
        query_sequence_length=query_sequence_length,
        query_start_coordinate=query_start_coordinate,
        query_end_coordinate=query_end_coordinate,
        strand=strand,
        target_sequence_name=target_sequence_name,
        target_sequence_length=target_sequence_length,
        target_start_coordinate_on_original_strand=target_start,
        target_end_coordinate_on_original_strand=target_end,
        number_of_matching_bases=number_of_matching_bases,
        number_of_bases_and_gaps=number_of_bases_and_gaps,
        mapping_quality=mapping_quality,
        unknown_fields=unknown_fields,
        **optional_values,
    )


def parse_line(
    line: str,
    unknown_columns: UnknownColumnPolicy = 'collect',
    on_unknown_column: Optional[UnknownColumnObserver] = None,
) -> PAFLine:
    """
    Parse a single PAF line.

    Parameters
    ----------
    line : str
        One line, with or without its terminating newline.
    unknown_columns : {'collect', 'reject'}, default 'collect'
        Handling of optional columns with unknown headers. ``'collect'``
        keeps them in ``PAFLine.unknown_fields``, ``'reject'`` raises.
    on_unknown_column : callable, optional
        Called with ``(header, value)`` for every collected unknown column.

    Returns
    -------
    PAFLine

    Raises
    ------
    PAFParseError
        If the line is malformed, or if text follows its newline.

    Examples
    --------
    >>> record = parse_line('q1\\t100\\t0\\t100\\t+\\tt1\\t500\\t10\\t110\\t95\\t100\\t60')
    >>> record.target_sequence_name, record.strand
    ('t1', True)
    """
    cursor = LineCursor(line)
    record = parse_record(cursor, unknown_columns, on_unknown_column)
    if not cursor.exhausted:
        raise PAFParseError(ErrorKind.UNEXPECTED_CHARACTER, detail=cursor.remaining)
    return record


def parse_input_str(
    text: str,
    unknown_columns: UnknownColumnPolicy = 'collect',
    on_unknown_column: Optional[UnknownColumnObserver] = None,
) -> List[PAFLine]:
    """
    Parse all lines of a string.

    The final line does not need a terminating newline. Lines may end in
    ``\\n`` or ``\\r\\n``. An empty string yields an empty list.
    """
    if '\r\n' in text:
        text = text.replace('\r\n', '\n')
    cursor = LineCursor(text)
    records = []
    while not cursor.exhausted:
        records.append(parse_record(cursor, unknown_columns, on_unknown_column))
    return records


def _strip_line_terminator(line: str) -> str:
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith('\n'):
        return line[:-1]
    return line


def iter_input_read(
    stream: Union[IO[str], IO[bytes], Iterable[Union[str, bytes]]],
    unknown_columns: UnknownColumnPolicy = 'collect',
    on_unknown_column: Optional[UnknownColumnObserver] = None,
) -> Iterator[PAFLine]:
    """
    Lazily parse the lines of a stream.

    Parameters
    ----------
    stream : file-like or iterable of str or bytes
        Source of lines. Byte lines are decoded as UTF-8.
    unknown_columns, on_unknown_column
        See :func:`parse_line`.

    Yields
    ------
    PAFLine
        One record per line, in input order.

    Raises
    ------
    PAFParseError
        ``IO_ERROR`` wrapping the original exception if reading or decoding
        the stream fails, otherwise the error of the first malformed line.
    """
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
            if isinstance(line, bytes):
                line = line.decode('utf-8')
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise PAFParseError.from_io_error(e) from e

        yield parse_line(_strip_line_terminator(line), unknown_columns, on_unknown_column)


def parse_input_read(
    stream: Union[IO[str], IO[bytes], Iterable[Union[str, bytes]]],
    unknown_columns: UnknownColumnPolicy = 'collect',
    on_unknown_column: Optional[UnknownColumnObserver] = None,
) -> List[PAFLine]:
    """Parse all lines of a stream. See :func:`iter_input_read`."""
    return list(iter_input_read(stream, unknown_columns, on_unknown_column))
