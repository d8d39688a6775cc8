import re
from typing import Optional

import phonenumbers


def to_e164(raw: str, default_region: str = "US") -> str:
    """Normalize a raw phone number to E.164 format (e.g., +15551230000).

    Args:
        raw: The raw phone number input from the user.
        default_region: Region to assume if the number is provided without a country code.

    Returns:
        The E.164 formatted phone number string.

    Raises:
        ValueError: If the phone number cannot be parsed or is invalid for the given region.
    """
    try:
        parsed = phonenumbers.parse(raw, default_region)
    except phonenumbers.NumberParseException as exc:
        raise ValueError(str(exc))

    if not phonenumbers.is_valid_number(parsed):
        raise ValueError("Invalid phone number")

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def try_to_e164(raw: str, default_region: str = "US") -> Optional[str]:
    """Best-effort normalization; returns None if invalid instead of raising."""
    try:
        return to_e164(raw, default_region)
    except ValueError:
        return None


_SEPARATORS = re.compile(r"[\s().\-]")


def comparison_key(raw: Optional[str], default_region: str = "US") -> Optional[str]:
    """Key used to decide whether two stored numbers are the same line.

    Vanity and demo numbers such as ``+1800SPAM99`` do not parse, so they fall
    back to an upper-cased copy with separators removed.
    """
    if not raw:
        return None
    normalized = try_to_e164(raw, default_region)
    if normalized:
        return normalized
    return _SEPARATORS.sub("", raw).upper() or None
