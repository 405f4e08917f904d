"""
Cursor over the text of PAF lines.

A :class:`LineCursor` walks a string left to right, handing out
tab- or newline-delimited columns. It never copies more than the column it
returns and never moves backwards.
"""

from typing import Tuple

from .errors import ErrorKind, PAFParseError

TAB = '\t'
NEWLINE = '\n'


class LineCursor:
    """
    Read position into the text of one or more PAF lines.

    Parameters
    ----------
    text : str
        Text to read. May hold a single line without terminator or many
        newline-terminated lines.
    position : int, default 0
        Index to start reading at.

    Examples
    --------
    >>> cursor = LineCursor('read1\\t1200\\n')
    >>> cursor.take_field(allow_end_of_line=False)
    'read1'
    >>> cursor.take_field(allow_end_of_line=True)
    '1200'
    >>> cursor.at_record_end()
    True
    """

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    def __repr__(self) -> str:
        return f'LineCursor(position={self.position}, remaining={self.remaining!r})'

    @property
    def remaining(self) -> str:
        """Text not yet consumed."""
        return self.text[self.position:]

    @property
    def exhausted(self) -> bool:
        """True once every character has been consumed."""
        return self.position >= len(self.text)

    def _find_delimiter(self) -> Tuple[int, str]:
        """Index and character of the next tab or newline, or ``(len(text), '')``."""
        tab = self.text.find(TAB, self.position)
        newline = self.text.find(NEWLINE, self.position)
        if tab == -1 and newline == -1:
            return len(self.text), ''
        if newline == -1 or (tab != -1 and tab < newline):
            return tab, TAB
        return newline, NEWLINE

    def take_field(self, allow_end_of_line: bool) -> str:
        """
        Take one required column.

        Parameters
        ----------
        allow_end_of_line : bool
            Whether the column may be the last one of its line. If False, the
            column must be followed by a tab.

        Returns
        -------
        str
            The column text without its delimiter. A following tab is
            consumed; a following newline is left in place so that the end of
            the record can be detected.

        Raises
        ------
        PAFParseError
            ``UNEXPECTED_END_OF_LINE`` if a newline ends the column and
            ``allow_end_of_line`` is False, ``UNEXPECTED_END_OF_FILE`` if the
            text ends without any delimiter and ``allow_end_of_line`` is False.
        """
        limit, delimiter = self._find_delimiter()
        if not allow_end_of_line:
            if delimiter == NEWLINE:
                raise PAFParseError(ErrorKind.UNEXPECTED_END_OF_LINE)
            if delimiter == '':
                raise PAFParseError(ErrorKind.UNEXPECTED_END_OF_FILE)

        column = self.text[self.position:limit]
        self.position = limit + 1 if delimiter == TAB else limit
        return column

    def take_raw_value(self) -> str:
        """
        Take the value of an optional column.

        The value runs up to the next tab, newline or the end of the text. A
        following tab is consumed, a following newline is not.
        """
        limit, delimiter = self._find_delimiter()
        value = self.text[self.position:limit]
        self.position = limit + 1 if delimiter == TAB else limit
        return value

    def take(self, n_chars: int) -> str:
        """Take exactly ``n_chars`` characters (fewer if the text ends)."""
        chunk = self.text[self.position:self.position + n_chars]
        self.position += len(chunk)
        return chunk

    def peek(self, n_chars: int = 1) -> str:
        """Look at the next ``n_chars`` characters without consuming them."""
        return self.text[self.position:self.position + n_chars]

    def at_record_end(self) -> bool:
        """True at a newline or at the end of the text."""
        return self.exhausted or self.text[self.position] == NEWLINE

    def skip_newline(self) -> None:
        """Consume the newline under the cursor, if there is one."""
        if not self.exhausted and self.text[self.position] == NEWLINE:
            self.position += 1
