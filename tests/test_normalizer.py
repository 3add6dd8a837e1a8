# tests/test_normalizer.py

import pytest
from placefinder.core.normalizer import normalize


@pytest.mark.parametrize(
    "given, want",
    [
        ("!abc2", "abc2"),
        ("123@abc$def", "123abcdef"),
        ("Hello, World!", "helloworld"),
        ("kritib", "kritib"),
        ("New York", "newyork"),
        ("new-york", "newyork"),
        ("Zürich", "zürich"),
        ("", ""),
        ("  --  ", ""),
    ],
)
def test_normalize_examples(given, want):
    assert normalize(given) == want


def test_insert_and_query_forms_agree():
    assert normalize("Los Angeles") == normalize("los-angeles") == normalize("LOS.ANGELES")


def test_capital_dotted_i_leaves_no_combining_mark():
    # "İ".lower() is "i" + U+0307; the mark is not a letter and must go
    assert normalize("İstanbul") == "istanbul"


@pytest.mark.parametrize(
    "s",
    ["São Paulo", "Reykjavík!!", "St. John's", "Area 51", "ǅemal", "Ελλάδα", "東京 2020", "\t\n"],
)
def test_only_lowercase_letters_and_digits_and_idempotent(s):
    out = normalize(s)
    assert all(ch.isalpha() or ch.isdecimal() for ch in out)
    assert out == out.lower()
    assert normalize(out) == out
