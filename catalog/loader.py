"""Reads ``name,isbn,year-month-day`` lines into an OrderedCatalog.

Malformed lines are logged and skipped; the rest of the file still loads.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from catalog.book import BookRecord, PublicationDate
from catalog.library import OrderedCatalog

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
BYTE_ORDER_MARK = "\ufeff"


class RecordFormatError(ValueError):
    """A data line could not be turned into a BookRecord."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None) -> None:
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}{message}")


@dataclass
class LoadReport:
    catalog: OrderedCatalog
    inserted: int = 0
    duplicates: int = 0
    skipped: List[RecordFormatError] = field(default_factory=list)


def parse_record_line(line: str, line_number: Optional[int] = None) -> BookRecord:
    text = line.rstrip("\r\n")
    fields = text.split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise RecordFormatError(f"expected 3 fields, got {len(fields)}", text, line_number)

    name, isbn, raw_date = fields
    try:
        date = PublicationDate.parse(raw_date)
        return BookRecord(name=name, isbn=isbn, date=date)
    except ValueError as e:
        raise RecordFormatError(str(e), text, line_number) from e


def _decode_line(raw: Union[str, bytes], line_number: int) -> str:
    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            shown = raw.decode("utf-8", errors="replace").rstrip("\r\n")
            raise RecordFormatError(f"not valid UTF-8 ({e.reason})", shown, line_number) from e
    else:
        text = raw
    # A byte order mark only ever leads the first line
    if line_number == 1 and text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]
    return text


def load_lines(lines: Iterable[Union[str, bytes]], catalog: Optional[OrderedCatalog] = None) -> LoadReport:
    """Insert every well-formed line into ``catalog`` (a new one if omitted).

    Lines may be text or raw bytes; bytes are decoded one line at a time so an
    undecodable line is skipped like any other malformed one.
    """
    report = LoadReport(catalog=catalog if catalog is not None else OrderedCatalog())

    for line_number, raw in enumerate(lines, 1):
        try:
            line = _decode_line(raw, line_number)
            if not line.strip():
                continue
            record = parse_record_line(line, line_number)
        except RecordFormatError as e:
            logger.warning(f"Skipping malformed record: {e}")
            report.skipped.append(e)
            continue

        if report.catalog.insert(record):
            report.inserted += 1
        else:
            report.duplicates += 1
            logger.info(f"Duplicate book name ignored on line {line_number}: {record.name!r}")

    logger.info(
        f"Load finished: inserted={report.inserted}, duplicates={report.duplicates}, "
        f"skipped={len(report.skipped)}"
    )
    return report


def load_catalog(path: str, catalog: Optional[OrderedCatalog] = None) -> LoadReport:
    """Load a UTF-8 data file. FileNotFoundError propagates to the caller."""
    with open(path, "rb") as f:
        return load_lines(f, catalog)
