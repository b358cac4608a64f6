import pytest

from utils import is_valid_base32, sanitize_filename


@pytest.mark.parametrize("raw,expected", [
    ("My App!", "MyApp"),
    ("a/b c", "abc"),
    ("alice@example.com", "aliceexamplecom"),
    ("under_score-dash", "under_score-dash"),
    ("Ünïcode", "ncode"),
    ("!!!", ""),
])
def test_sanitize_filename(raw, expected):
    assert sanitize_filename(raw) == expected


@pytest.mark.parametrize("secret,min_length,expected", [
    ("JBSWY3DPEHPK3PXP", 16, True),
    ("JBSW Y3DP EHPK 3PXP", 16, True),
    ("MZXW6YTB", 16, False),
    ("MZXW6YTB", 0, True),
    ("MZXW6===", 0, True),
    ("JBSWY3DP!", 0, False),
])
def test_is_valid_base32(secret, min_length, expected):
    assert is_valid_base32(secret, min_length) is expected
