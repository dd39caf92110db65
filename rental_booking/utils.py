"""Shared utilities used by the booking form layer."""

import re

PH_COUNTRY_CODE = "+63"


def normalize_gcash_number(value: str) -> str:
    """Normalize a Philippine mobile number to the +63 form GCash expects.

    Separators are stripped. The local ``09XXXXXXXXX`` form and a bare
    ``63`` prefix are rewritten to ``+63``. Anything else is returned with
    only the separators removed, so the validator still gets to reject it.

    Examples:
        >>> normalize_gcash_number("0917 123 4567")
        '+639171234567'
        >>> normalize_gcash_number("+63 (917) 123-4567")
        '+639171234567'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    digits = re.sub(r"[^\d]", "", value)
    if len(digits) == 11 and digits.startswith("09"):
        return PH_COUNTRY_CODE + digits[1:]
    if len(digits) == 12 and digits.startswith("63"):
        return "+" + digits
    return digits
