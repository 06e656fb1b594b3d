"""In-memory record loaders for testing.

A :class:`RecordStore` maps paths to pre-built records, so CLI tests can feed
the data commands without writing JSON files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ...domain.models import Product, RatedItem


@dataclass
class RecordStore:
    """Records keyed by path; unknown paths raise FileNotFoundError."""

    rated_items: dict[Path, list[RatedItem]] = field(default_factory=dict)
    products: dict[Path, list[Product]] = field(default_factory=dict)

    def load_rated_items(self, path: Path) -> list[RatedItem]:
        try:
            return list(self.rated_items[path])
        except KeyError:
            raise FileNotFoundError(path) from None

    def load_products(self, path: Path) -> list[Product]:
        try:
            return list(self.products[path])
        except KeyError:
            raise FileNotFoundError(path) from None


__all__ = ["RecordStore"]
