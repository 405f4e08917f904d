"""
Decoding of cg:Z: CIGAR strings.

minimap2 writes CIGAR strings with the four operations ``M``, ``I``, ``D``
and ``X``, each preceded by a positive run length (``10M2D5M``).
"""

from .constants import CIGAR_OPERATIONS
from .errors import ErrorKind, PAFParseError
from .records import Cigar, CigarColumn, CigarOperation


def _next_operation(value: str, start: int) -> int:
    """Index of the next operation letter at or after ``start``, or -1."""
    for idx in range(start, len(value)):
        if value[idx] in CIGAR_OPERATIONS:
            return idx
    return -1


def parse_cigar(value: str) -> Cigar:
    """
    Parse the value of a cg:Z: column.

    Parameters
    ----------
    value : str
        Column value without header, e.g. ``'10M2D5M'``. May be empty.

    Returns
    -------
    Cigar
        The runs in input order.

    Raises
    ------
    PAFParseError
        ``MALFORMED_CIGAR`` if a run has no operation letter or its length is
        not a positive integer.

    Examples
    --------
    >>> [str(column) for column in parse_cigar('10M2D5M')]
    ['10M', '2D', '5M']
    """
    columns = []
    position = 0

    while position < len(value):
        limit = _next_operation(value, position)
        if limit == -1:
            raise PAFParseError(ErrorKind.MALFORMED_CIGAR, detail=value)

        length = value[position:limit]
        if not (length.isascii() and length.isdigit()) or int(length) == 0:
            raise PAFParseError(ErrorKind.MALFORMED_CIGAR, detail=value)

        columns.append(CigarColumn(int(length), CigarOperation(value[limit])))
        position = limit + 1

    return Cigar(tuple(columns))
