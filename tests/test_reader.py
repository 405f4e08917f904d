"""Tests for the file-level reader and command-line interface."""
import gzip
import logging

import pandas as pd
import pytest

from pafio.errors import ErrorKind, PAFParseError
from pafio.parser import parse_input_str
from pafio.reader import PAFReader, main

from paf_lines import FULL_LINE, MINIMAL_LINE, REQUIRED

REORDERED_LINE = '\t'.join(REQUIRED + ['cg:Z:10M', 'zd:i:3', 'NM:i:1'])


@pytest.fixture
def paf_file(tmp_path):
    path = tmp_path / 'alignments.paf'
    path.write_text(FULL_LINE + '\n' + REORDERED_LINE + '\n', encoding='utf-8')
    return path


@pytest.fixture
def gz_file(tmp_path):
    path = tmp_path / 'alignments.paf.gz'
    with gzip.open(path, 'wt', encoding='utf-8') as f:
        f.write(FULL_LINE + '\n' + MINIMAL_LINE + '\n')
    return path


def test_read_plain(paf_file, caplog):
    reader = PAFReader(paf_file)
    with caplog.at_level(logging.WARNING, logger='pafio.reader'):
        reader.read()

    assert len(reader.records) == 2
    assert reader.records[1].unknown_fields == ('zd:i:3',)
    assert 'Found unknown field: zd:i:3' in caplog.text


def test_read_gzip(gz_file):
    reader = PAFReader(gz_file)
    reader.read()
    assert reader.records == parse_input_str(FULL_LINE + '\n' + MINIMAL_LINE + '\n')


def test_read_reject_unknown(paf_file):
    reader = PAFReader(paf_file, unknown_columns='reject')
    with pytest.raises(PAFParseError) as excinfo:
        reader.read()
    assert excinfo.value.kind == ErrorKind.UNEXPECTED_OPTIONAL_COLUMN
    assert reader.records == []


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PAFReader(tmp_path / 'missing.paf')


def test_invalid_policy(paf_file):
    with pytest.raises(ValueError):
        PAFReader(paf_file, unknown_columns='skip')


def test_serialize_paf(paf_file, tmp_path):
    reader = PAFReader(paf_file)
    reader.read()
    out_fn = reader.serialize(tmp_path / 'results', format='paf')

    assert out_fn.name == 'alignments.paf'
    lines = out_fn.read_text(encoding='utf-8').splitlines()
    assert lines[0] == FULL_LINE
    assert lines[1] == '\t'.join(REQUIRED + ['NM:i:1', 'cg:Z:10M', 'zd:i:3'])


def test_serialize_csv(paf_file, tmp_path):
    reader = PAFReader(paf_file)
    reader.read()
    out_fn = reader.serialize(tmp_path / 'results', format='csv')

    df = pd.read_csv(out_fn)
    assert out_fn.name == 'alignments.csv'
    assert df.shape[0] == 2
    assert list(df['cigar_string']) == ['10M2D5M', '10M']


def test_serialize_unknown_format(paf_file, tmp_path):
    reader = PAFReader(paf_file)
    with pytest.raises(ValueError):
        reader.serialize(tmp_path, format='excel')


def test_print_summary(paf_file, capsys):
    reader = PAFReader(paf_file)
    reader.read()
    reader.print_summary()
    out = capsys.readouterr().out
    assert 'Records: 2' in out
    assert 'Queries: 1' in out
    assert 'Targets: 1' in out
    assert 'Unknown optional columns: 1' in out


def test_main_paf_to_file(gz_file, tmp_path):
    out_fn = tmp_path / 'out.paf'
    assert main([str(gz_file), '-o', str(out_fn)]) == 0
    assert out_fn.read_text(encoding='utf-8') == FULL_LINE + '\n' + MINIMAL_LINE + '\n'


def test_main_csv_to_stdout(paf_file, capsys):
    assert main([str(paf_file), '--format', 'csv']) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith('query_sequence_name,')
    assert len(out.splitlines()) == 3


def test_main_reject_unknown(paf_file):
    assert main([str(paf_file), '--unknown_columns', 'reject']) == 2


def test_main_malformed(tmp_path):
    path = tmp_path / 'bad.paf'
    path.write_text(MINIMAL_LINE.replace('\t+\t', '\tx\t') + '\n', encoding='utf-8')
    assert main([str(path)]) == 2


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / 'missing.paf')]) == 2
