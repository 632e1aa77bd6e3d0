import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_titles(raw: str) -> List[str]:
    titles = (title.strip() for title in raw.split(","))
    return [title for title in titles if title]


@dataclass
class Settings:
    # Every field reads the environment when Settings() is created

    # Data file settings
    data_file: str = field(default_factory=lambda: os.getenv("CATALOG_DATA_FILE", "data.txt"))

    # Titles looked up by the `show` command, comma separated
    showcase_titles: List[str] = field(
        default_factory=lambda: _split_titles(os.getenv("CATALOG_SHOWCASE_TITLES", "Animal Farm,War and Peace"))
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    # Application settings
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Book Catalog"))
    app_version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))


settings = Settings()
