import pytest

from aocsolve.textio import read_lines, split_records


def test_split_on_comma():
    assert split_records("a,b,c", ",") == ["a", "b", "c"]


def test_empty_record_in_middle_is_kept():
    assert split_records("a,,b", ",") == ["a", "", "b"]


def test_trailing_delimiter_opens_no_record():
    assert split_records("a,b,", ",") == ["a", "b"]


def test_empty_text_has_no_records():
    assert split_records("", ",") == []


def test_last_record_keeps_other_whitespace():
    assert split_records("0,3,6\n", ",") == ["0", "3", "6\n"]


def test_empty_delimiter_is_rejected():
    with pytest.raises(ValueError):
        split_records("abc", "")


def test_read_lines_strips_carriage_returns():
    assert read_lines("x\r\ny\n") == ["x", "y"]


def test_read_lines_keeps_blank_separators():
    assert read_lines("a\n\nb") == ["a", "", "b"]