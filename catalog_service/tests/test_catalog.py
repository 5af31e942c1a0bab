import pytest
from decimal import Decimal

from catalog_service.catalog import Catalog, ItemNotFound, DEFAULT_CATALOG, format_price, to_price

def test_default_catalog_entries():
    assert dict(DEFAULT_CATALOG) == {"shoes": Decimal("50"), "socks": Decimal("4")}

@pytest.mark.parametrize("price, expected", [
    (Decimal("50"), "$50.00"),
    (Decimal("4"), "$4.00"),
    (Decimal("0"), "$0.00"),
    (Decimal("10.5"), "$10.50"),
    (Decimal("199.999"), "$200.00"),
    (Decimal("0.125"), "$0.12"),  # half-even
])
def test_format_price(price, expected):
    assert format_price(price) == expected

def test_to_price_accepts_literals():
    assert to_price(50) == Decimal("50")
    assert to_price("12.34") == Decimal("12.34")
    assert to_price(10.5) == Decimal("10.5")
    assert to_price(Decimal("7.25")) == Decimal("7.25")

@pytest.mark.parametrize("bad", [-1, "-0.01", "ten", "NaN", "Infinity", True])
def test_to_price_rejects_invalid(bad):
    with pytest.raises(ValueError):
        to_price(bad)

def test_catalog_rejects_negative_price_at_construction():
    with pytest.raises(ValueError):
        Catalog({"shoes": 50, "refund": -5})

def test_catalog_rejects_non_string_item():
    with pytest.raises(ValueError):
        Catalog({42: 1})

def test_price_of_known_item():
    assert DEFAULT_CATALOG.price_of("shoes") == Decimal("50")

def test_price_of_unknown_item_raises():
    with pytest.raises(ItemNotFound) as exc_info:
        DEFAULT_CATALOG.price_of("hat")
    assert exc_info.value.item == "hat"
    assert isinstance(exc_info.value, KeyError)
    assert str(exc_info.value) == "No such item: 'hat'"

def test_catalog_mapping_interface():
    catalog = Catalog({"a": 1, "b": "2.50"})
    assert len(catalog) == 2
    assert "a" in catalog and "c" not in catalog
    assert set(catalog) == {"a", "b"}
    assert catalog["b"] == Decimal("2.50")
    assert catalog.get("c") is None

def test_empty_catalog():
    catalog = Catalog()
    assert len(catalog) == 0
    assert list(catalog.items()) == []

def test_catalog_is_read_only():
    catalog = Catalog({"a": 1})
    with pytest.raises(TypeError):
        catalog["b"] = 2
    with pytest.raises(TypeError):
        del catalog["a"]
    assert not hasattr(catalog, "update")

def test_catalog_is_isolated_from_source_mapping():
    source = {"a": 1}
    catalog = Catalog(source)
    source["b"] = 2
    assert "b" not in catalog
