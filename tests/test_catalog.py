"""Tests for MenuCatalog."""

from decimal import Decimal

import pytest

from tastybites.catalog import MenuCatalog, build_default_catalog
from tastybites.errors import OutOfRangeError, UserInputError
from tastybites.models import MenuItem


class TestMenuCatalog:
    """Tests for MenuCatalog class."""

    def test_default_catalog_keeps_seed_order(self, catalog):
        names = [item.name for item in catalog.list()]

        assert names == ["Espresso", "Cappuccino", "Latte", "Mocha", "Croissant", "Muffin", "Sandwich"]
        assert len(catalog) == 7

    def test_seed_prices_are_exact_decimals(self, catalog):
        assert catalog.get(1).unit_price == Decimal("3.50")
        assert catalog.get(5).unit_price == Decimal("2.75")
        assert catalog.get(7).available_quantity == 7

    def test_list_returns_a_copy(self, catalog):
        items = catalog.list()
        items.clear()

        assert len(catalog.list()) == 7

    def test_get_is_one_based(self, catalog):
        assert catalog.get(1).name == "Espresso"
        assert catalog.get(7).name == "Sandwich"

    @pytest.mark.parametrize("index", [0, -1, 8, 100])
    def test_get_out_of_range_raises(self, catalog, index):
        with pytest.raises(OutOfRangeError) as excinfo:
            catalog.get(index)

        assert excinfo.value.index == index
        assert excinfo.value.size == 7
        assert isinstance(excinfo.value, UserInputError)

    def test_reduce_stock_success(self, catalog):
        espresso = catalog.get(1)

        result = catalog.reduce_stock(espresso, 3)

        assert result.ok
        assert result.available == 7
        assert espresso.available_quantity == 7

    def test_reduce_stock_exact_remaining(self, catalog):
        mocha = catalog.get(4)

        result = catalog.reduce_stock(mocha, 5)

        assert result.ok
        assert mocha.available_quantity == 0
        assert mocha.sold_out

    def test_reduce_stock_shortfall_leaves_stock(self, catalog):
        mocha = catalog.get(4)

        result = catalog.reduce_stock(mocha, 6)

        assert not result.ok
        assert result.available == 5
        assert mocha.available_quantity == 5

    @pytest.mark.parametrize("qty", [0, -5])
    def test_reduce_stock_rejects_non_positive(self, catalog, qty):
        espresso = catalog.get(1)

        with pytest.raises(ValueError):
            catalog.reduce_stock(espresso, qty)

        assert espresso.available_quantity == 10

    def test_fresh_catalogs_do_not_share_stock(self):
        first = build_default_catalog()
        second = build_default_catalog()

        first.reduce_stock(first.get(1), 10)

        assert second.get(1).available_quantity == 10

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            MenuCatalog([MenuItem("Tea", "1.00", 1), MenuItem("Tea", "2.00", 1)])


class TestMenuItem:
    """Tests for MenuItem validation."""

    def test_price_quantized_to_cents(self):
        item = MenuItem("Tea", "1.5", 3)

        assert item.unit_price == Decimal("1.50")
        assert str(item.unit_price) == "1.50"

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            MenuItem("Tea", "-1.00", 3)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValueError):
            MenuItem("Tea", "1.00", -1)
