"""Unit tests for Product records and patches."""

import pytest

from catalog_term_editor.core.product import Product


class TestMerge:
    def test_merge_applies_set_fields_only(self) -> None:
        product = Product(barcode="123", stores="Carrefour", labels_tags=["en:organic"])
        patch = Product(barcode="123", stores="Carrefour,Lidl")

        merged = product.merge(patch)

        assert merged.stores == "Carrefour,Lidl"
        assert merged.labels_tags == ["en:organic"]
        # 元の商品は変更されないこと
        assert product.stores == "Carrefour"

    def test_merge_empty_string_clears_value(self) -> None:
        product = Product(barcode="123", stores="Carrefour")

        merged = product.merge(Product(barcode="123", stores=""))

        assert merged.stores == ""

    def test_merge_barcode_mismatch(self) -> None:
        product = Product(barcode="123")

        with pytest.raises(ValueError, match="Cannot merge patch for 456"):
            product.merge(Product(barcode="456", stores="Lidl"))


class TestFromDict:
    def test_open_food_facts_keys(self) -> None:
        data = {
            "code": "3017620422003",
            "stores": "Carrefour,Lidl",
            "emb_codes": "FR 62.448.034 CE",
            "labels_tags": ["en:organic", "en:fair-trade"],
            "labels_tags_fr": ["Bio", "Commerce équitable"],
            "labels_tags_en": ["Organic", "Fair trade"],
            "categories_tags": ["en:spreads"],
            "categories_tags_hierarchy": ["en:spreads"],
        }

        product = Product.from_dict(data)

        assert product.barcode == "3017620422003"
        assert product.stores == "Carrefour,Lidl"
        assert product.emb_codes == "FR 62.448.034 CE"
        assert product.labels_tags == ["en:organic", "en:fair-trade"]
        assert product.labels_tags_in_languages == {
            "fr": ["Bio", "Commerce équitable"],
            "en": ["Organic", "Fair trade"],
        }
        assert product.categories_tags == ["en:spreads"]
        # "_tags_hierarchy" は言語別表示名として扱わないこと
        assert product.categories_tags_in_languages is None

    def test_numeric_code(self) -> None:
        product = Product.from_dict({"code": 3017620422003})

        assert product.barcode == "3017620422003"

    def test_missing_code(self) -> None:
        with pytest.raises(ValueError, match="has no 'code'"):
            Product.from_dict({"stores": "Lidl"})


class TestToDict:
    def test_patch_serializes_only_changed_fields(self) -> None:
        patch = Product(barcode="123", labels="en:organic,fr:Label Rouge")

        assert patch.to_dict() == {"code": "123", "labels": "en:organic,fr:Label Rouge"}

    def test_in_languages_expanded(self) -> None:
        product = Product(
            barcode="123",
            countries_tags=["en:france"],
            countries_tags_in_languages={"fr": ["France"], "de": ["Frankreich"]},
        )

        data = product.to_dict()

        assert data["countries_tags"] == ["en:france"]
        assert data["countries_tags_fr"] == ["France"]
        assert data["countries_tags_de"] == ["Frankreich"]
        assert Product.from_dict(data) == product
