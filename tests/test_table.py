"""Tests for DataFrame export."""
import numpy as np
import pandas as pd
import pytest

from pafio.parser import parse_input_str
from pafio.table import records_to_dataframe

from paf_lines import FULL_LINE, MINIMAL_LINE


def test_records_to_dataframe():
    records = parse_input_str(FULL_LINE + '\n' + MINIMAL_LINE.replace('read1', 'read2') + '\n')
    df = records_to_dataframe(records)

    assert df.shape[0] == 2
    assert list(df['query_sequence_name']) == ['read1', 'read2']
    assert list(df['strand']) == ['+', '+']
    assert df['query_sequence_length'].dtype == np.int64
    assert df['mapping_quality'].tolist() == [60, 60]

    nm = df['total_number_of_mismatches_and_gaps']
    assert str(nm.dtype) == 'Int64'
    assert nm.iloc[0] == 85
    assert pd.isna(nm.iloc[1])

    dv = df['approximate_per_base_sequence_divergence']
    assert dv.dtype == np.float64
    assert dv.iloc[0] == pytest.approx(0.0045)
    assert np.isnan(dv.iloc[1])

    assert df.loc[0, 'alignment_type'] == 'P'
    assert df.loc[0, 'cigar_string'] == '10M2D5M'
    assert df.loc[0, 'difference_string'] == ':5-ac+gt*ag'
    assert pd.isna(df.loc[1, 'cigar_string'])
    assert df.loc[0, 'unknown_fields'] == ''

    assert df['identity'].iloc[0] == pytest.approx(1100 / 1185)


def test_identity_of_empty_block():
    line = MINIMAL_LINE.replace('\t1100\t1185\t', '\t0\t0\t')
    df = records_to_dataframe(parse_input_str(line))
    assert df['identity'].iloc[0] == 0.0


def test_unknown_fields_joined():
    df = records_to_dataframe(parse_input_str(MINIMAL_LINE + '\tzd:i:1\txx:Z:a'))
    assert df.loc[0, 'unknown_fields'] == 'zd:i:1\txx:Z:a'


def test_empty_records():
    df = records_to_dataframe([])
    assert df.empty
    assert 'identity' in df.columns
    assert 'query_sequence_name' in df.columns
