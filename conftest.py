import pytest

from catalog.book import BookRecord, PublicationDate
from catalog.library import OrderedCatalog
from catalog.ui_helpers import OUTPUT_MODE_ENV

SAMPLE_LINES = [
    "Animal Farm,978-1,1945-8-17",
    "War and Peace,978-2,1869-1-1",
    "1984,978-3,1949-6-8",
]


def make_record(name: str, isbn: str = "000", year: int = 2000, month: int = 1, day: int = 1) -> BookRecord:
    return BookRecord(name, isbn, PublicationDate(year, month, day))


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # The CLI stores the output mode in the environment; start every test in plain mode
    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)


@pytest.fixture
def catalog():
    return OrderedCatalog()


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return str(path)
