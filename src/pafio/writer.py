"""
Writing :class:`~pafio.records.PAFLine` objects back to PAF text.

Optional columns are always written in the fixed order of
:data:`~pafio.constants.OUTPUT_TAG_ORDER`, whatever order they were read in,
followed by collected unknown columns in their input order. Text values are
written verbatim; they must not contain tabs or newlines.
"""

from typing import IO, Iterable

from .constants import OUTPUT_TAG_ORDER
from .records import PAFLine
from .tags import OPTIONAL_COLUMNS


def _format_value(value) -> str:
    if isinstance(value, float):
        # repr round-trips exactly
        return repr(value)
    return str(value)


def format_paf_line(record: PAFLine) -> str:
    """
    Render a record as one PAF line, without the trailing newline.

    Parameters
    ----------
    record : PAFLine
        Record to render.

    Returns
    -------
    str
        The twelve required columns followed by every present optional column.
    """
    columns = [
        record.query_sequence_name,
        str(record.query_sequence_length),
        str(record.query_start_coordinate),
        str(record.query_end_coordinate),
        record.strand_symbol,
        record.target_sequence_name,
        str(record.target_sequence_length),
        str(record.target_start_coordinate_on_original_strand),
        str(record.target_end_coordinate_on_original_strand),
        str(record.number_of_matching_bases),
        str(record.number_of_bases_and_gaps),
        str(record.mapping_quality),
    ]

    for header in OUTPUT_TAG_ORDER:
        value = getattr(record, OPTIONAL_COLUMNS[header].attribute)
        if value is not None:
            columns.append(header + _format_value(value))

    columns.extend(record.unknown_fields)
    return '\t'.join(columns)


def write_paf(records: Iterable[PAFLine], stream: IO[str]) -> int:
    """
    Write records to a text stream, one newline-terminated line each.

    Returns
    -------
    int
        Number of records written.
    """
    n_written = 0
    for record in records:
        stream.write(format_paf_line(record))
        stream.write('\n')
        n_written += 1
    return n_written
