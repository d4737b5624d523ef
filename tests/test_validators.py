"""
Tests for input validation helpers.
"""

import pytest

from zipweather.utils.validators import is_valid_email, is_valid_us_zip_code


@pytest.mark.parametrize("zip_code", ["12345", "12345-6789", "12345 6789", "00501"])
def test_valid_us_zip_codes(zip_code):
    assert is_valid_us_zip_code(zip_code) is True


@pytest.mark.parametrize(
    "zip_code",
    [
        "1234", "123456", "abcde", "", "12345-678", "12345-67890", "12345_6789", " 12345", "12345\n", None,
        # Non-ASCII digits and spaces
        "\u0661\u0662\u0663\u0664\u0665", "12345\u00a06789", "\uff11\uff12\uff13\uff14\uff15",
    ],
)
def test_invalid_us_zip_codes(zip_code):
    assert is_valid_us_zip_code(zip_code) is False


def test_email_only_requires_at_sign():
    """Email validation is deliberately permissive."""
    assert is_valid_email("user@example.com") is True
    assert is_valid_email("a@b") is True
    assert is_valid_email("@") is True


@pytest.mark.parametrize("email", ["userexample.com", "", None])
def test_invalid_emails(email):
    assert is_valid_email(email) is False
