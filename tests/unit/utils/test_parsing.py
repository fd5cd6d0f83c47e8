"""
Tests des fonctions de parsing des champs heterogenes.
"""

from datetime import date

import pytest

from dynamic_library.utils.parsing import (
    build_image_url,
    normalize_imdb_id,
    parse_date,
    parse_rating,
    parse_runtime_minutes,
    parse_year,
    string_or_list,
    strip_manifest_suffix,
)


class TestParseRuntimeMinutes:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2h 28min", 148),
            ("148 min", 148),
            ("148", 148),
            ("1h", 60),
            ("45min", 45),
            ("unknown", None),
            ("", None),
            (None, None),
            ("0", None),
        ],
    )
    def test_values(self, value, expected):
        assert parse_runtime_minutes(value) == expected


class TestParseYear:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2019", 2019),
            ("2019-2023", 2019),
            ("2019-", 2019),
            ("2008–2013", 2008),
            ("2010-07-15", 2010),
            (1999, 1999),
            ("", None),
            ("TBA", None),
            (None, None),
        ],
    )
    def test_values(self, value, expected):
        assert parse_year(value) == expected


class TestParseRating:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("8.7", 8.7), (9.5, 9.5), ("7,4", 7.4), ("0", None), (0, None), ("n/a", None), (None, None)],
    )
    def test_values(self, value, expected):
        assert parse_rating(value) == expected


class TestStringOrList:
    def test_string_and_single_item_list_are_equivalent(self):
        assert string_or_list("Jane Doe") == string_or_list(["Jane Doe"]) == ["Jane Doe"]

    def test_none_and_blank(self):
        assert string_or_list(None) == []
        assert string_or_list("  ") == []

    def test_list_keeps_order_and_skips_blanks(self):
        assert string_or_list(["B", "", "A", None]) == ["B", "A"]


def test_parse_date():
    assert parse_date("2008-01-20T00:00:00.000Z") == date(2008, 1, 20)
    assert parse_date("2008-01-20") == date(2008, 1, 20)
    assert parse_date("not a date") is None
    assert parse_date(None) is None


def test_strip_manifest_suffix():
    assert strip_manifest_suffix("https://addon.example/abc/manifest.json") == (
        "https://addon.example/abc"
    )
    assert strip_manifest_suffix("https://addon.example/abc/") == "https://addon.example/abc"
    assert strip_manifest_suffix(None) == ""


def test_build_image_url():
    assert build_image_url("https://image.tmdb.org/t/p/", "w500", "/a.jpg") == (
        "https://image.tmdb.org/t/p/w500/a.jpg"
    )
    assert build_image_url("https://image.tmdb.org/t/p/", "w500", None) is None


def test_normalize_imdb_id():
    assert normalize_imdb_id("0133093") == "tt0133093"
    assert normalize_imdb_id("tt0133093") == "tt0133093"
