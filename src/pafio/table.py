"""
Tabular export of parsed PAF records.

Converts a sequence of :class:`~pafio.records.PAFLine` objects into a
:class:`pandas.DataFrame` for downstream filtering and aggregation.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Iterable

import numpy as np
import pandas as pd

from .constants import REQUIRED_COLUMN_NAMES
from .records import PAFLine
from .tags import OPTIONAL_COLUMNS, decode_float, decode_unsigned

# Optional attributes stored as nullable integers / floats in the table
_INTEGER_ATTRIBUTES = [
    column.attribute for column in OPTIONAL_COLUMNS.values()
    if column.decoder is decode_unsigned
]
_FLOAT_ATTRIBUTES = [
    column.attribute for column in OPTIONAL_COLUMNS.values()
    if column.decoder is decode_float
]

_TEXT_REQUIRED = {'query_sequence_name', 'target_sequence_name', 'strand'}

# Structured values written as their PAF text
_STRINGIFIED = {'alignment_type', 'cigar_string', 'difference_string'}


def _record_row(record: PAFLine) -> dict:
    row = {}
    for field in fields(PAFLine):
        value = getattr(record, field.name)
        if field.name == 'strand':
            value = record.strand_symbol
        elif field.name == 'unknown_fields':
            value = '\t'.join(value)
        elif value is not None and field.name in _STRINGIFIED:
            value = str(value)
        row[field.name] = value
    return row


def records_to_dataframe(records: Iterable[PAFLine]) -> pd.DataFrame:
    """
    Export records as a DataFrame.

    Parameters
    ----------
    records : iterable of PAFLine
        Parsed records.

    Returns
    -------
    pd.DataFrame
        One row per record, one column per :class:`PAFLine` attribute plus a
        derived ``identity`` column (matching bases / bases and gaps, 0.0 for
        empty alignment blocks). Required integer columns are ``int64``,
        optional integer columns nullable ``Int64``, optional floats ``float64``
        with NaN for absent values, and the strand is written as ``'+'``/``'-'``.

    Examples
    --------
    >>> import pafio
    >>> df = pafio.records_to_dataframe(pafio.parse_input_str(text))
    >>> df.loc[df['mapping_quality'] >= 60, 'target_sequence_name'].value_counts()
    """
    columns = [field.name for field in fields(PAFLine)] + ['identity']
    rows = [_record_row(record) for record in records]
    if not rows:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame(rows, columns=columns[:-1], dtype=object)

    for name in REQUIRED_COLUMN_NAMES:
        if name not in _TEXT_REQUIRED:
            df[name] = df[name].astype(np.int64)
    for name in _INTEGER_ATTRIBUTES:
        df[name] = df[name].astype('Int64')
    for name in _FLOAT_ATTRIBUTES:
        df[name] = pd.to_numeric(df[name], errors='coerce').astype(np.float64)

    matching = df['number_of_matching_bases'].to_numpy(dtype=np.float64)
    block = df['number_of_bases_and_gaps'].to_numpy(dtype=np.float64)
    df['identity'] = np.divide(
        matching, block, out=np.zeros_like(matching), where=block > 0
    )

    return df
