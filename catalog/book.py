from __future__ import annotations

import re
from dataclasses import dataclass

_DATE_PART = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class PublicationDate:
    """Publication date stored verbatim; no calendar validation is done."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"

    @staticmethod
    def parse(text: str) -> "PublicationDate":
        parts = text.split("-")
        if len(parts) != 3:
            raise ValueError(f"Expected year-month-day, got {text!r}")
        # Plain ASCII digits only; int() alone would also take spaces and underscores
        if not all(_DATE_PART.fullmatch(part) for part in parts):
            raise ValueError(f"Non-integer date component in {text!r}")
        year, month, day = (int(part) for part in parts)
        return PublicationDate(year, month, day)


@dataclass(frozen=True)
class BookRecord:
    """A single book in the catalog. The name is the ordering key."""

    name: str
    isbn: str
    date: PublicationDate

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Book name must be a non-empty string.")

    def __str__(self) -> str:
        return f"Book Name: {self.name}\nISBN: {self.isbn}\nDate: {self.date}"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "isbn": self.isbn,
            "date": str(self.date),
        }
