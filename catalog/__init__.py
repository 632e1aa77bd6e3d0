"""Book Catalog - Core Application Package

This package contains the core application modules including:
- Book record model (book.py)
- Ordered catalog, the BST keyed by book name (library.py)
- Data file loader (loader.py)
- Output rendering for the CLI (ui_helpers.py)
- Settings (config.py)
"""
from catalog.book import BookRecord, PublicationDate
from catalog.library import OrderedCatalog

__all__ = ["BookRecord", "PublicationDate", "OrderedCatalog"]
