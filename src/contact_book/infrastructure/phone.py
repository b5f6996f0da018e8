"""Phone number formatting. Recognised numbers are stored as E.164; anything else is kept as entered."""

import phonenumbers


def format_phone(raw: str, default_region: str | None = None) -> str:
    """Return the E.164 form of raw when it is a valid number, else raw stripped.

    default_region (e.g. "US", "IT") is used when the input has no leading +.
    This never rejects input: contact phone numbers are free text.
    """
    text = str(raw).strip()
    region = (default_region or "").strip().upper() or None
    try:
        parsed = phonenumbers.parse(text, region)
    except phonenumbers.NumberParseException:
        return text
    if not phonenumbers.is_valid_number(parsed):
        return text
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
