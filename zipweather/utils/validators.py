"""
Input validation helpers.

Pure predicates used by the users router before touching the database
or the weather provider.
"""

import re
from typing import Optional

US_ZIP_CODE_PATTERN = re.compile(r"^\d{5}(?:[-\s]\d{4})?$", re.ASCII)


def is_valid_email(value: Optional[str]) -> bool:
    """
    Check that an email address looks usable.

    Only the presence of ``@`` is checked; full RFC 5322 validation is
    intentionally not applied.
    """
    return isinstance(value, str) and "@" in value


def is_valid_us_zip_code(value: Optional[str]) -> bool:
    """
    Check for a US ZIP code: five digits, optionally followed by a dash
    or whitespace and four more digits (ZIP+4).

    Args:
        value: Candidate ZIP code

    Returns:
        True if the value is a well-formed US ZIP code
    """
    if not isinstance(value, str):
        return False
    return US_ZIP_CODE_PATTERN.fullmatch(value) is not None
