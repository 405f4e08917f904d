"""Tests for cg:Z: CIGAR decoding."""
import pytest

from pafio.cigar import parse_cigar
from pafio.errors import ErrorKind, PAFParseError
from pafio.records import Cigar, CigarColumn, CigarOperation


def test_parse_cigar():
    cigar = parse_cigar('10M2D5M')
    assert cigar == Cigar((
        CigarColumn(10, CigarOperation.MATCH),
        CigarColumn(2, CigarOperation.DELETION),
        CigarColumn(5, CigarOperation.MATCH),
    ))
    assert str(cigar) == '10M2D5M'


def test_parse_cigar_all_operations():
    cigar = parse_cigar('3M1I12D7X')
    assert [column.operation for column in cigar] == [
        CigarOperation.MATCH,
        CigarOperation.INSERTION,
        CigarOperation.DELETION,
        CigarOperation.MISMATCH,
    ]
    assert [column.length for column in cigar] == [3, 1, 12, 7]


def test_parse_cigar_empty():
    cigar = parse_cigar('')
    assert len(cigar) == 0
    assert str(cigar) == ''


@pytest.mark.parametrize('value', ['10M2', 'M', '0M', '5S10M', '-3M', '3MM', '1.5M'])
def test_parse_cigar_malformed(value):
    with pytest.raises(PAFParseError) as excinfo:
        parse_cigar(value)
    assert excinfo.value.kind == ErrorKind.MALFORMED_CIGAR
