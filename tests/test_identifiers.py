"""
Tests for identifier formatting.
"""

import pytest

from user_directory_api.app.core.identifiers import format_id


@pytest.mark.parametrize(
    "prefix, value, expected",
    [
        ("usr", 42, "usr-42"),
        ("usr", "abc", "usr-abc"),
        ("", 0, "-0"),
        ("a-b", "c", "a-b-c"),
        ("usr", -7, "usr--7"),
    ],
)
def test_format_id(prefix, value, expected):
    assert format_id(prefix, value) == expected
