import pytest

from services.csv_parser import CSVParseError, EmptyFileError, NoRecordsError, parse_csv


def test_parses_header_and_rows_in_order():
    parsed = parse_csv(b"name,age\nAna,30\nLuis,25")
    assert parsed.header == ["name", "age"]
    assert parsed.records == [{"name": "Ana", "age": "30"}, {"name": "Luis", "age": "25"}]
    assert list(parsed.records[0].keys()) == ["name", "age"]


def test_handles_crlf_quotes_and_bom():
    content = '\ufeffname,note\r\n"Ana","likes, commas"\r\n"Luis","say ""hi"""\r\n'.encode("utf-8")
    parsed = parse_csv(content)
    assert parsed.header == ["name", "note"]
    assert parsed.records[0]["note"] == "likes, commas"
    assert parsed.records[1]["note"] == 'say "hi"'


def test_skips_blank_lines():
    parsed = parse_csv(b"\nname\n\nAna\n\n")
    assert parsed.records == [{"name": "Ana"}]


def test_empty_file():
    with pytest.raises(EmptyFileError):
        parse_csv(b"")


def test_blank_lines_only_count_as_empty():
    with pytest.raises(EmptyFileError):
        parse_csv(b"\n\n")


def test_header_only():
    with pytest.raises(NoRecordsError):
        parse_csv(b"name,age\n")


@pytest.mark.parametrize("content", [b"name,age\nAna\n", b"name,age\nAna,30,extra\n"])
def test_row_length_must_match_header(content):
    with pytest.raises(CSVParseError):
        parse_csv(content)


def test_invalid_utf8():
    with pytest.raises(CSVParseError):
        parse_csv(b"name\n\xff\xfe\n")


def test_broken_quoting():
    with pytest.raises(CSVParseError):
        parse_csv(b'name,age\n"Ana"x,30\n')
