import dataclasses

import pytest

from catalog.book import BookRecord, PublicationDate


def test_record_rendering_has_no_zero_padding():
    book = BookRecord("Animal Farm", "978-1", PublicationDate(1945, 8, 7))
    assert str(book) == "Book Name: Animal Farm\nISBN: 978-1\nDate: 1945-8-7"


def test_record_is_immutable():
    book = BookRecord("Dune", "1", PublicationDate(1965, 8, 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        book.name = "Other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        book.date.year = 2000


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        BookRecord("", "1", PublicationDate(2000, 1, 1))


def test_values_stored_verbatim():
    book = BookRecord(" Dune ", " 1 ", PublicationDate(2023, 13, 45))
    assert book.name == " Dune "
    assert book.isbn == " 1 "
    assert str(book.date) == "2023-13-45"


def test_to_dict():
    book = BookRecord("1984", "978-3", PublicationDate(1949, 6, 8))
    assert book.to_dict() == {"name": "1984", "isbn": "978-3", "date": "1949-6-8"}


def test_parse_date():
    assert PublicationDate.parse("1869-1-1") == PublicationDate(1869, 1, 1)
    assert PublicationDate.parse("1949-06-08") == PublicationDate(1949, 6, 8)


@pytest.mark.parametrize("text", [
    "1949-6", "1949-6-8-1", "1949-June-8", "", "1949--8",
    "1949- 6-8", "1_949-6-8", "1949-6-8\n",
])
def test_parse_date_rejects_malformed(text):
    with pytest.raises(ValueError):
        PublicationDate.parse(text)


def test_parse_date_accepts_leading_plus():
    assert PublicationDate.parse("+1949-6-8") == PublicationDate(1949, 6, 8)
