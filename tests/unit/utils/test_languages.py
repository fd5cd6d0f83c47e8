"""
Tests des conversions de codes de langue.
"""

import pytest

from dynamic_library.utils.languages import language_display_name, normalize_language_code


@pytest.mark.parametrize(
    ("code", "expected"),
    [("fra", "fr"), ("fre", "fr"), ("ENG", "en"), ("de", "de"), ("xyz", "xy"), ("", "en")],
)
def test_normalize_language_code(code, expected):
    assert normalize_language_code(code) == expected


def test_language_display_name():
    assert language_display_name("en") == "English"
    assert language_display_name("FR") == "French"
    assert language_display_name("xx") == "XX"
    assert language_display_name("") == "Unknown"
