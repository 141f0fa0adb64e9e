from catalog import CITIES, COUNTRIES, PRODUCTS, cities_for
import pytest


def test_ten_products_with_unique_ids():
    assert len(PRODUCTS) == 10
    assert len({p.product_id for p in PRODUCTS}) == 10
    assert [p.product_id for p in PRODUCTS] == list(range(1001, 1011))


def test_every_country_has_cities():
    assert set(CITIES) == set(COUNTRIES)
    assert len(COUNTRIES) == 10
    for country in COUNTRIES:
        assert 4 <= len(cities_for(country)) <= 5


def test_reference_strings_have_no_commas_or_quotes():
    names = list(COUNTRIES) + [city for cities in CITIES.values() for city in cities]
    assert not [n for n in names if "," in n or '"' in n]


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        CITIES["Spain"] = ("Madrid",)


def test_unknown_country():
    with pytest.raises(KeyError):
        cities_for("Atlantis")
