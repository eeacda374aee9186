# backend/services/csv_parser.py

import csv
from io import StringIO
from typing import Dict, List, NamedTuple


class CSVUploadError(Exception):
    """Base class for problems with an uploaded CSV."""


class EmptyFileError(CSVUploadError):
    pass


class NoRecordsError(CSVUploadError):
    pass


class CSVParseError(CSVUploadError):
    """The file could not be read as CSV. Not the client's message to see."""


class ParsedCSV(NamedTuple):
    header: List[str]
    records: List[Dict[str, str]]


def _decode(content: bytes) -> str:
    try:
        # utf-8-sig drops the BOM spreadsheet exports like to add
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CSVParseError(f"file is not valid UTF-8: {e}") from e


def parse_csv(content: bytes) -> ParsedCSV:
    """
    Parse raw CSV bytes into the header and one dict per data row.

    The first row is the header. Blank lines are skipped. Every data row must
    have exactly as many fields as the header, otherwise the whole file is
    rejected.
    """
    text = _decode(content)
    reader = csv.reader(StringIO(text, newline=""), strict=True)

    try:
        header = None
        for row in reader:
            if row:
                header = row
                break

        if header is None:
            raise EmptyFileError("no header row")

        records: List[Dict[str, str]] = []
        for row in reader:
            if not row:
                continue
            if len(row) != len(header):
                raise CSVParseError(
                    f"record on line {reader.line_num}: wrong number of fields "
                    f"(expected {len(header)}, got {len(row)})"
                )
            records.append(dict(zip(header, row)))
    except csv.Error as e:
        raise CSVParseError(f"line {reader.line_num}: {e}") from e

    if not records:
        raise NoRecordsError("header only, no data rows")

    return ParsedCSV(header=header, records=records)
