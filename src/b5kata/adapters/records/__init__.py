"""Records adapter - JSON files holding exercise records.

Contents:
    * :mod:`.loader` - Parse rated items and products from JSON arrays
"""

from __future__ import annotations

from .loader import load_products, load_rated_items, parse_records

__all__ = ["load_products", "load_rated_items", "parse_records"]
