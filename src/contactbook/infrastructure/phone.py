"""Phone number formatting for display. The store keeps numbers exactly as typed."""

import phonenumbers


def format_phone(raw: str | None, default_region: str | None = None) -> str | None:
    """Return the number in international format (e.g. "+1 202-555-1234"), or None if invalid.

    default_region applies when the input has no leading + (e.g. "202 555 1234"
    with "US"); a number with its own country code ignores it.
    """
    if not raw or not str(raw).strip():
        return None
    try:
        parsed = phonenumbers.parse(str(raw).strip(), default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(
        parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL
    )
