"""
Errors raised while reading PAF lines.

All parsing failures are reported as a single exception type,
:class:`PAFParseError`, whose :attr:`~PAFParseError.kind` tells callers what
went wrong without having to inspect the message.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failure a PAF parse can report."""

    #: Reading the underlying input failed.
    IO_ERROR = 'io_error'
    #: A column could not be parsed into its declared type.
    COLUMN_PARSE_ERROR = 'column_parse_error'
    #: The line ended while further columns were expected.
    UNEXPECTED_END_OF_LINE = 'unexpected_end_of_line'
    #: The input ended while further columns were expected.
    UNEXPECTED_END_OF_FILE = 'unexpected_end_of_file'
    #: An invalid character was found (strand, fixed-choice codes, trailing garbage).
    UNEXPECTED_CHARACTER = 'unexpected_character'
    #: An optional column with an unknown header was found and unknown columns are rejected.
    UNEXPECTED_OPTIONAL_COLUMN = 'unexpected_optional_column'
    #: The same known optional column appeared twice in one line.
    DUPLICATE_OPTIONAL_COLUMN = 'duplicate_optional_column'
    #: A cg:Z: CIGAR string could not be parsed.
    MALFORMED_CIGAR = 'malformed_cigar'
    #: A cs:Z: difference string could not be parsed.
    MALFORMED_ALIGNMENT_DIFFERENCE = 'malformed_alignment_difference'


_DESCRIPTIONS = {
    ErrorKind.IO_ERROR: 'I/O error',
    ErrorKind.COLUMN_PARSE_ERROR: 'could not parse column',
    ErrorKind.UNEXPECTED_END_OF_LINE: 'unexpected end of line',
    ErrorKind.UNEXPECTED_END_OF_FILE: 'unexpected end of file',
    ErrorKind.UNEXPECTED_CHARACTER: 'unexpected character',
    ErrorKind.UNEXPECTED_OPTIONAL_COLUMN: 'unexpected optional column',
    ErrorKind.DUPLICATE_OPTIONAL_COLUMN: 'duplicate optional column',
    ErrorKind.MALFORMED_CIGAR: 'malformed cigar string',
    ErrorKind.MALFORMED_ALIGNMENT_DIFFERENCE: 'malformed alignment difference string',
}


class PAFParseError(Exception):
    """
    Raised when a PAF line cannot be parsed.

    Parameters
    ----------
    kind : ErrorKind
        What went wrong.
    column_header : str, optional
        Header of the optional column (e.g. ``'NM:i:'``) or name of the
        required column the failure belongs to.
    detail : str, optional
        Offending text, for the message only.
    io_error : Exception, optional
        The wrapped read failure for ``ErrorKind.IO_ERROR``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        column_header: Optional[str] = None,
        detail: Optional[str] = None,
        io_error: Optional[Exception] = None,
    ):
        self.kind = kind
        self.column_header = column_header
        self.detail = detail
        self.io_error = io_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        message = _DESCRIPTIONS[self.kind]
        if self.column_header is not None:
            message += f" '{self.column_header}'"
        if self.detail is not None:
            message += f': {self.detail!r}'
        if self.io_error is not None:
            message += f': {self.io_error}'
        return message

    @classmethod
    def from_io_error(cls, error: Exception) -> 'PAFParseError':
        """Wrap a failure of the underlying reader."""
        return cls(ErrorKind.IO_ERROR, io_error=error)
