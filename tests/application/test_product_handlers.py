"""Integration tests for the product use cases.

Uses the in-memory fake store — no file I/O.
"""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.remove_product import RemoveProductHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import (
    BadRequestError,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from tests.fakes import InMemoryDocumentStore


def _store(**kwargs) -> InMemoryDocumentStore:
    return InMemoryDocumentStore(
        {
            "products": [
                {"id": 1, "name": "X-Burger", "price": 18.5, "category": "burgers"},
                {"id": 2, "name": "Soda", "price": 6},
            ],
            "orders": [],
        },
        **kwargs,
    )


class TestAddProduct:

    def test_create_then_get_returns_equal_record(self):
        store = _store()
        candidate = {"id": 3, "name": "Fries", "price": 9.9, "size": "large"}

        created = AddProductHandler(store).handle(candidate)

        assert created == candidate
        assert ShowProductHandler(store).handle(3) == candidate

    def test_appends_in_creation_order(self):
        store = _store()
        AddProductHandler(store).handle({"id": 10, "name": "Fries", "price": 9})
        assert [p["id"] for p in ListProductsHandler(store).handle()] == [1, 2, 10]

    def test_duplicate_id_rejected_and_collection_unchanged(self):
        store = _store()
        before = list(store.products)

        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(store).handle({"id": 2, "name": "Other", "price": 1})

        assert store.products == before
        assert store.saves == []

    def test_invalid_candidate_rejected(self):
        store = _store()
        with pytest.raises(ValidationError, match="Invalid product name"):
            AddProductHandler(store).handle({"id": 3, "name": " ", "price": 1})
        assert len(store.products) == 2

    def test_failed_save_raises_persistence_error(self):
        store = _store(fail_saves=True)
        with pytest.raises(PersistenceError, match="Error saving product"):
            AddProductHandler(store).handle({"id": 3, "name": "Fries", "price": 9})
        assert len(store.products) == 2


class TestShowProduct:

    def test_accepts_numeric_string_id(self):
        assert ShowProductHandler(_store()).handle("2")["name"] == "Soda"

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            ShowProductHandler(_store()).handle(99)

    def test_non_integer_id(self):
        with pytest.raises(BadRequestError, match="Invalid id"):
            ShowProductHandler(_store()).handle("abc")


class TestUpdateProduct:

    def test_partial_merge_keeps_absent_fields(self):
        store = _store()

        updated = UpdateProductHandler(store).handle(
            1, {"id": 1, "name": "X-Burger Deluxe", "price": 22}
        )

        assert updated == {
            "id": 1,
            "name": "X-Burger Deluxe",
            "price": 22,
            "category": "burgers",
        }
        assert store.products[0] == updated

    def test_keeps_storage_position(self):
        store = _store()
        UpdateProductHandler(store).handle(1, {"id": 1, "name": "A", "price": 1})
        assert [p["id"] for p in store.products] == [1, 2]

    def test_body_must_be_a_valid_product(self):
        store = _store()
        with pytest.raises(ValidationError, match="Invalid product price"):
            UpdateProductHandler(store).handle(1, {"id": 1, "name": "A", "price": -1})
        assert store.saves == []

    def test_missing_product(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(_store()).handle(42, {"id": 42, "name": "A", "price": 1})

    def test_bad_id_checked_before_body(self):
        with pytest.raises(BadRequestError):
            UpdateProductHandler(_store()).handle("x", None)

    def test_failed_save(self):
        with pytest.raises(PersistenceError, match="Error updating product"):
            UpdateProductHandler(_store(fail_saves=True)).handle(
                1, {"id": 1, "name": "A", "price": 1}
            )


class TestRemoveProduct:

    def test_returns_removed_record_and_shrinks_by_one(self):
        store = _store()

        removed = RemoveProductHandler(store).handle("1")

        assert removed["name"] == "X-Burger"
        assert [p["id"] for p in store.products] == [2]

    def test_missing_product_leaves_collection_unchanged(self):
        store = _store()
        with pytest.raises(EntityNotFoundError):
            RemoveProductHandler(store).handle(99)
        assert len(store.products) == 2
        assert store.saves == []

    def test_failed_save(self):
        store = _store(fail_saves=True)
        with pytest.raises(PersistenceError, match="Error removing product"):
            RemoveProductHandler(store).handle(1)
        assert len(store.products) == 2


class TestListProducts:

    def test_empty_catalog(self):
        assert ListProductsHandler(InMemoryDocumentStore()).handle() == []

    def test_recovered_document_lists_nothing(self):
        assert ListProductsHandler(_store(corrupt="bad json")).handle() == []
