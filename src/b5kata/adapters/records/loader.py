"""Load exercise records from JSON files.

Files hold a JSON array of objects, e.g. ``[{"title": "Book", "rating": 4.5}]``.
Parsing goes through orjson; shape and type checks through a pydantic
TypeAdapter over the domain dataclasses, so the domain stays free of both.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

import orjson
from pydantic import TypeAdapter, ValidationError

from b5kata.domain.errors import RecordsError
from b5kata.domain.models import Product, RatedItem

logger = logging.getLogger(__name__)

R = TypeVar("R")

_RATED_ITEMS: TypeAdapter[list[RatedItem]] = TypeAdapter(list[RatedItem])
_PRODUCTS: TypeAdapter[list[Product]] = TypeAdapter(list[Product])


def _reject_booleans(data: list[object], source: str) -> None:
    """Raise RecordsError for any boolean field; ``true`` is not a rating or a price."""
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            continue
        for key, value in record.items():
            if isinstance(value, bool):
                raise RecordsError(f"{source}: record {index}.{key}: booleans are not numbers")


def parse_records(payload: bytes | str, adapter: TypeAdapter[list[R]], *, source: str = "<input>") -> list[R]:
    """Decode a JSON array and validate it into records.

    Args:
        payload: Raw JSON text.
        adapter: TypeAdapter describing the record list.
        source: Name used in error messages.

    Raises:
        RecordsError: If the payload is not valid JSON or does not match the
            record shape.

    Example:
        >>> parse_records('[{"name": "Pen", "price": 10}]', _PRODUCTS)
        [Product(name='Pen', price=10.0)]
    """
    try:
        data = orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise RecordsError(f"{source}: invalid JSON ({exc})") from exc
    if not isinstance(data, list):
        raise RecordsError(f"{source}: expected a JSON array, got {type(data).__name__}")
    _reject_booleans(data, source)
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise RecordsError(f"{source}: record {location}: {first['msg']}") from exc


def _load(path: Path, adapter: TypeAdapter[list[R]]) -> list[R]:
    records = parse_records(path.read_bytes(), adapter, source=path.name)
    logger.debug("Loaded records", extra={"path": str(path), "count": len(records)})
    return records


def load_rated_items(path: Path) -> list[RatedItem]:
    """Read ``[{"title": ..., "rating": ...}, ...]`` from ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        RecordsError: If the content is malformed.
    """
    return _load(path, _RATED_ITEMS)


def load_products(path: Path) -> list[Product]:
    """Read ``[{"name": ..., "price": ...}, ...]`` from ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        RecordsError: If the content is malformed.
    """
    return _load(path, _PRODUCTS)


__all__ = ["load_products", "load_rated_items", "parse_records"]
