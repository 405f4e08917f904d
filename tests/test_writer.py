"""Tests for writing PAF lines."""
import io

import pytest

from pafio.parser import parse_input_str, parse_line
from pafio.writer import format_paf_line, write_paf

from paf_lines import FULL_LINE, MINIMAL_LINE, REQUIRED


def test_minimal_line_round_trip():
    record = parse_line(MINIMAL_LINE)
    assert format_paf_line(record) == MINIMAL_LINE
    assert format_paf_line(record).split('\t') == REQUIRED


def test_canonical_line_round_trip():
    assert format_paf_line(parse_line(FULL_LINE)) == FULL_LINE


def test_str_matches_format():
    record = parse_line(FULL_LINE)
    assert str(record) == format_paf_line(record)


def test_reordered_line_round_trip():
    optional = FULL_LINE.split('\t')[12:]
    reordered = '\t'.join(REQUIRED + optional[::-1])
    record = parse_line(reordered)

    written = format_paf_line(record)
    assert written != reordered
    assert written == FULL_LINE
    assert parse_line(written) == record


def test_reverse_strand_written():
    fields = list(REQUIRED)
    fields[4] = '-'
    line = '\t'.join(fields)
    assert format_paf_line(parse_line(line)).split('\t')[4] == '-'


def test_unknown_fields_written_last():
    line = '\t'.join(REQUIRED + ['zd:i:17', 'NM:i:2', 'xx:Z:abc'])
    record = parse_line(line)
    written = format_paf_line(record)
    assert written.split('\t')[12:] == ['NM:i:2', 'zd:i:17', 'xx:Z:abc']
    assert parse_line(written) == record


def test_float_round_trip():
    record = parse_line(MINIMAL_LINE + '\tdv:f:1e-05\tde:f:0.1')
    assert parse_line(format_paf_line(record)) == record


def test_write_paf():
    records = parse_input_str(FULL_LINE + '\n' + MINIMAL_LINE + '\n')
    out = io.StringIO()
    assert write_paf(records, out) == 2
    assert out.getvalue() == FULL_LINE + '\n' + MINIMAL_LINE + '\n'
    assert parse_input_str(out.getvalue()) == records


@pytest.mark.parametrize('column', ['cg:Z:', 'MD:Z:', 'zz:Z:'])
def test_empty_value_round_trip(column):
    record = parse_line(MINIMAL_LINE + '\t' + column + '\tNM:i:1')
    written = format_paf_line(record)
    assert written.split('\t')[-1] == column
    assert parse_line(written) == record
