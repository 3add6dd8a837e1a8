# tests/test_resolver.py
# name/code/zone resolution against the bundled vocabulary

import pytest
from placefinder.core.errors import LocationNotFound, PlaceFinderError, UnknownZone
from placefinder.core.normalizer import normalize
from placefinder.core.resolver import (
    describe,
    find_cities,
    find_countries,
    find_locations,
    suggest_anywhere,
    zone_to_timezone,
)
from placefinder.core.vocabulary import load_vocabulary


# -----------------------------------
# cities
# -----------------------------------
@pytest.mark.parametrize(
    "given, want",
    [
        ("Berlin", ["Berlin"]),
        ("Lond", ["London"]),
        ("new york", ["New York"]),
        ("SÃO-PAULO", ["São Paulo"]),
        ("Lo", ["London", "Los Angeles"]),
    ],
)
def test_find_cities(given, want):
    assert find_cities(given) == want


def test_city_not_found_message():
    with pytest.raises(LocationNotFound) as exc:
        find_cities("Xyz")
    assert str(exc.value) == "City 'Xyz' not found!"
    assert isinstance(exc.value, PlaceFinderError)
    assert isinstance(exc.value, LookupError)


def test_city_limit():
    assert len(find_cities("", limit=4)) == 4


# -----------------------------------
# countries
# -----------------------------------
@pytest.mark.parametrize(
    "given, want",
    [
        ("US", ["United States of America"]),
        ("us", ["United States of America"]),
        ("NPL", ["Nepal"]),
        ("Nep", ["Nepal"]),
        ("DE", ["Germany"]),
        (
            "United",
            [
                "United Kingdom",
                "United Arab Emirates",
                "United States of America",
                "United States Minor Outlying Islands",
            ],
        ),
    ],
)
def test_find_countries(given, want):
    assert find_countries(given) == want


def test_prefix_results_are_deterministic():
    first = find_countries("United")
    assert len(first) > 1
    assert all("United" in name for name in first)
    for _ in range(3):
        assert find_countries("United") == first


def test_country_not_found_message():
    with pytest.raises(LocationNotFound, match=r"^Country 'Xyz' not found!$"):
        find_countries("Xyz")


def test_find_locations_dispatch():
    assert find_locations(city="Tokyo") == ["Tokyo"]
    assert find_locations(country="JP") == ["Japan"]
    # city wins when both are given
    assert find_locations(city="Tokyo", country="FR") == ["Tokyo"]


# -----------------------------------
# broken prefix: opt-in full scan
# -----------------------------------
def test_typo_in_prefix_not_found_by_default():
    with pytest.raises(LocationNotFound):
        find_cities("Bxrlin")


def test_typo_in_prefix_with_full_scan():
    assert find_cities("Bxrlin", limit=1, full_scan=True) == ["Berlin"]
    assert find_countries("Nrpal", limit=1, full_scan=True) == ["Nepal"]


def test_full_scan_does_not_change_prefix_hits():
    assert find_cities("Lond", full_scan=True) == ["London"]


def test_suggest_anywhere():
    names = ["Paris", "Perth", "Prague"]
    assert suggest_anywhere("perht", names, 1) == ["Perth"]
    assert suggest_anywhere("!!", names) == []
    assert suggest_anywhere("paris", names, 0) == []
    assert len(suggest_anywhere("p", names)) == 3


# -----------------------------------
# describe + zones
# -----------------------------------
def test_describe_city():
    info = describe("Kathmandu")
    assert info.kind == "city"
    assert info.country == "Nepal"
    assert info.timezone == "Asia/Kathmandu"
    assert not info.ambiguous


def test_describe_country():
    single = describe("Nepal")
    assert single.kind == "country"
    assert single.timezones == ("Asia/Kathmandu",)

    multi = describe("Australia")
    assert multi.ambiguous
    assert "Australia/Perth" in multi.timezones


def test_describe_unknown():
    with pytest.raises(LocationNotFound):
        describe("Atlantis")


@pytest.mark.parametrize(
    "given, want",
    [
        ("pst", "America/Los_Angeles"),
        ("PST", "America/Los_Angeles"),
        ("npt", "Asia/Kathmandu"),
        ("utc", "UTC"),
        ("Asia/Kathmandu", "Asia/Kathmandu"),
    ],
)
def test_zone_to_timezone(given, want):
    assert zone_to_timezone(given) == want


def test_unknown_zone_abbreviation():
    with pytest.raises(UnknownZone, match="Zone abbreviation 'xyz' not found."):
        zone_to_timezone("xyz")


# -----------------------------------
# bundled data sanity
# -----------------------------------
def test_vocabulary_is_consistent():
    vocab = load_vocabulary()
    for name, rec in vocab.cities.items():
        assert rec["country"] in vocab.countries, name
    for table in (vocab.alpha2, vocab.alpha3):
        for code, country in table.items():
            assert country in vocab.countries, code
    assert all(len(code) == 2 for code in vocab.alpha2)
    assert all(len(code) == 3 for code in vocab.alpha3)


def test_vocabulary_has_no_normalized_collisions():
    vocab = load_vocabulary()
    for names in (vocab.cities, vocab.countries):
        keys = [normalize(n) for n in names]
        assert len(keys) == len(set(keys))


def test_vocabulary_is_read_only():
    vocab = load_vocabulary()
    with pytest.raises(TypeError):
        vocab.cities["Atlantis"] = {"tz": "UTC", "country": "Nowhere"}
    assert load_vocabulary() is vocab
