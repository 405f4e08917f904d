"""Tests for the line cursor."""
import pytest

from pafio.cursor import LineCursor
from pafio.errors import ErrorKind, PAFParseError


def test_take_field_consumes_tab():
    cursor = LineCursor('read1\t1200\t')
    assert cursor.take_field(False) == 'read1'
    assert cursor.remaining == '1200\t'
    assert cursor.take_field(False) == '1200'
    assert cursor.exhausted


def test_take_field_newline_not_allowed():
    cursor = LineCursor('read1\nread2\t')
    with pytest.raises(PAFParseError) as excinfo:
        cursor.take_field(False)
    assert excinfo.value.kind == ErrorKind.UNEXPECTED_END_OF_LINE


def test_take_field_end_of_text_not_allowed():
    cursor = LineCursor('read1')
    with pytest.raises(PAFParseError) as excinfo:
        cursor.take_field(False)
    assert excinfo.value.kind == ErrorKind.UNEXPECTED_END_OF_FILE


def test_take_field_end_of_line_allowed_leaves_newline():
    cursor = LineCursor('60\nnext')
    assert cursor.take_field(True) == '60'
    assert cursor.at_record_end()
    cursor.skip_newline()
    assert cursor.remaining == 'next'


def test_take_field_end_of_text_allowed():
    cursor = LineCursor('60')
    assert cursor.take_field(True) == '60'
    assert cursor.exhausted
    assert cursor.at_record_end()


def test_take_raw_value():
    cursor = LineCursor('NM:i:5\tAS:i:3\n')
    assert cursor.take(5) == 'NM:i:'
    assert cursor.take_raw_value() == '5'
    assert cursor.peek(5) == 'AS:i:'
    cursor.take(5)
    assert cursor.take_raw_value() == '3'
    assert cursor.peek() == '\n'


def test_take_raw_value_empty_and_last():
    cursor = LineCursor('\tx')
    assert cursor.take_raw_value() == ''
    assert cursor.take_raw_value() == 'x'
    assert cursor.exhausted
    assert cursor.take_raw_value() == ''
