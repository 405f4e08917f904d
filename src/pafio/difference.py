"""
Decoding of cs:Z: difference strings.

Each entry starts with a marker character:

- ``:`` followed by the length of an identical run,
- ``-`` followed by bases missing from the query (deletion),
- ``+`` followed by bases present only in the query (insertion),
- ``*`` followed by the reference base and the query base of a substitution.

The long form of the cs tag (``=ACGT``) and intron markers (``~``) are not
supported and are rejected.
"""

from .constants import (
    DIFFERENCE_DELETION,
    DIFFERENCE_INSERTION,
    DIFFERENCE_MARKERS,
    DIFFERENCE_MATCH,
    DIFFERENCE_MISMATCH,
)
from .errors import ErrorKind, PAFParseError
from .records import (
    AlignmentDifference,
    DifferenceColumn,
    DifferenceDeletion,
    DifferenceInsertion,
    DifferenceMatch,
    DifferenceMismatch,
)


def _next_marker(value: str, start: int) -> int:
    """Index of the next marker at or after ``start``, or ``len(value)``."""
    for idx in range(start, len(value)):
        if value[idx] in DIFFERENCE_MARKERS:
            return idx
    return len(value)


def _decode_entry(marker: str, payload: str, value: str) -> DifferenceColumn:
    if marker == DIFFERENCE_MATCH:
        if not (payload.isascii() and payload.isdigit()) or int(payload) == 0:
            raise PAFParseError(ErrorKind.MALFORMED_ALIGNMENT_DIFFERENCE, detail=value)
        return DifferenceMatch(int(payload))

    if marker == DIFFERENCE_MISMATCH:
        if len(payload) != 2:
            raise PAFParseError(ErrorKind.MALFORMED_ALIGNMENT_DIFFERENCE, detail=value)
        return DifferenceMismatch(reference=payload[0], query=payload[1])

    # insertions and deletions carry a non-empty literal run
    if not payload:
        raise PAFParseError(ErrorKind.MALFORMED_ALIGNMENT_DIFFERENCE, detail=value)
    if marker == DIFFERENCE_DELETION:
        return DifferenceDeletion(missing_query_characters=payload)
    return DifferenceInsertion(superfluous_query_characters=payload)


def parse_alignment_difference(value: str) -> AlignmentDifference:
    """
    Parse the value of a cs:Z: column.

    Parameters
    ----------
    value : str
        Column value without header, e.g. ``':5-ac+gt*ag'``. May be empty.

    Returns
    -------
    AlignmentDifference
        The entries in input order.

    Raises
    ------
    PAFParseError
        ``MALFORMED_ALIGNMENT_DIFFERENCE`` if an entry does not start with a
        marker, a match length is not a positive integer, a substitution does
        not carry exactly two characters or an insertion/deletion is empty.

    Examples
    --------
    >>> str(parse_alignment_difference(':5-ac+gt*ag'))
    ':5-ac+gt*ag'
    """
    columns = []
    position = 0

    while position < len(value):
        marker = value[position]
        if marker not in DIFFERENCE_MARKERS:
            raise PAFParseError(ErrorKind.MALFORMED_ALIGNMENT_DIFFERENCE, detail=value)

        limit = _next_marker(value, position + 1)
        columns.append(_decode_entry(marker, value[position + 1:limit], value))
        position = limit

    return AlignmentDifference(tuple(columns))
