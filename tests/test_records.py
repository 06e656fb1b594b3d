"""Loading rated items and products from JSON files."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from b5kata.adapters.memory import RecordStore
from b5kata.adapters.records.loader import load_products, load_rated_items
from b5kata.domain.errors import RecordsError
from b5kata.domain.models import Product, RatedItem


@pytest.mark.os_agnostic
def test_load_rated_items_reads_records_in_order(write_json: Callable[[str, object], Path]) -> None:
    path = write_json("items.json", [{"title": "Book A", "rating": 4.5}, {"title": "Book B", "rating": 3}])

    assert load_rated_items(path) == [RatedItem("Book A", 4.5), RatedItem("Book B", 3.0)]


@pytest.mark.os_agnostic
def test_load_products_accepts_integer_prices(write_json: Callable[[str, object], Path]) -> None:
    path = write_json("products.json", [{"name": "Pen", "price": 10}])

    assert load_products(path) == [Product("Pen", 10.0)]


@pytest.mark.os_agnostic
def test_empty_array_loads_as_no_records(write_json: Callable[[str, object], Path]) -> None:
    assert load_products(write_json("empty.json", [])) == []


@pytest.mark.os_agnostic
def test_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_products(tmp_path / "absent.json")


@pytest.mark.os_agnostic
def test_invalid_json_raises_records_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(RecordsError, match="broken.json: invalid JSON"):
        load_rated_items(path)


@pytest.mark.os_agnostic
def test_non_array_raises_records_error(write_json: Callable[[str, object], Path]) -> None:
    path = write_json("object.json", {"title": "Book", "rating": 5})

    with pytest.raises(RecordsError, match="expected a JSON array, got dict"):
        load_rated_items(path)


@pytest.mark.os_agnostic
def test_missing_field_names_the_record(write_json: Callable[[str, object], Path]) -> None:
    path = write_json("products.json", [{"name": "Pen", "price": 1}, {"name": "Bag"}])

    with pytest.raises(RecordsError, match=r"record 1\.price"):
        load_products(path)


@pytest.mark.os_agnostic
def test_non_numeric_rating_raises_records_error(write_json: Callable[[str, object], Path]) -> None:
    path = write_json("items.json", [{"title": "Book", "rating": "great"}])

    with pytest.raises(RecordsError, match="items.json"):
        load_rated_items(path)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("name", "payload", "location"),
    [
        ("items.json", [{"title": "Book", "rating": True}], r"record 0\.rating"),
        ("products.json", [{"name": "Pen", "price": 1}, {"name": "Bag", "price": False}], r"record 1\.price"),
    ],
)
def test_boolean_numbers_raise_records_error(
    write_json: Callable[[str, object], Path], name: str, payload: list[dict[str, object]], location: str
) -> None:
    path = write_json(name, payload)
    loader = load_rated_items if name == "items.json" else load_products

    with pytest.raises(RecordsError, match=location):
        loader(path)


@pytest.mark.os_agnostic
def test_record_store_serves_copies_by_path() -> None:
    path = Path("items.json")
    store = RecordStore(rated_items={path: [RatedItem("Book", 5)]})

    loaded = store.load_rated_items(path)
    loaded.clear()

    assert store.load_rated_items(path) == [RatedItem("Book", 5)]


@pytest.mark.os_agnostic
def test_record_store_unknown_path_raises_file_not_found() -> None:
    with pytest.raises(FileNotFoundError):
        RecordStore().load_products(Path("nowhere.json"))
