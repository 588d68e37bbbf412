"""Unit tests for the Document aggregate."""

import pytest

from storefront.domain.model.document import Document


class TestFromRaw:

    def test_keeps_both_collections(self):
        doc = Document.from_raw({"products": [{"id": 1}], "orders": [{"id": 2}]})
        assert doc.products == [{"id": 1}]
        assert doc.orders == [{"id": 2}]
        assert doc.defaulted == ()

    def test_missing_field_defaults_alone(self):
        doc = Document.from_raw({"products": [{"id": 1}]})
        assert doc.products == [{"id": 1}]
        assert doc.orders == []
        assert doc.defaulted == ("orders",)

    def test_mistyped_field_defaults_alone(self):
        doc = Document.from_raw({"products": {"id": 1}, "orders": [{"id": 3}]})
        assert doc.products == []
        assert doc.orders == [{"id": 3}]
        assert doc.defaulted == ("products",)

    @pytest.mark.parametrize("raw", [[], "text", 3, None])
    def test_non_object_root_is_malformed(self, raw):
        with pytest.raises(ValueError, match="must be an object"):
            Document.from_raw(raw)


class TestToRaw:

    def test_key_order_is_products_then_orders(self):
        raw = Document(orders=[{"id": 1}], products=[]).to_raw()
        assert list(raw) == ["products", "orders"]

    def test_missing_collections_are_defaulted(self):
        raw = Document(products=None, orders=None).to_raw()  # type: ignore[arg-type]
        assert raw == {"products": [], "orders": []}

    def test_defaulted_marker_is_not_serialized(self):
        doc = Document.from_raw({})
        assert doc.to_raw() == {"products": [], "orders": []}

    def test_unknown_top_level_keys_carried_after_collections(self):
        doc = Document.from_raw({"version": 2, "orders": [], "products": []})
        assert doc.extra == {"version": 2}
        assert list(doc.to_raw()) == ["products", "orders", "version"]

    def test_extra_cannot_shadow_collections(self):
        doc = Document(products=[{"id": 1}], extra={"products": []})
        assert doc.to_raw()["products"] == [{"id": 1}]

    def test_empty_documents_compare_equal(self):
        assert Document.from_raw({}) == Document.empty()
