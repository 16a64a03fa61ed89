import re
from typing import Any


def remove_null_values(d: dict) -> dict:
    return {key: value for key, value in d.items() if value is not None}


def to_e164(phone: str) -> str:
    """Strip formatting from a phone number, keeping a leading '+'.

    Args:
        phone: Number as written for people, e.g. "+91 9310123565"

    Returns:
        The number without spaces, dashes or brackets, e.g. "+919310123565"
    """
    digits = re.sub(r"\D", "", phone or "")
    return f"+{digits}" if (phone or "").strip().startswith("+") else digits


def mask_phone(phone: Any) -> str:
    """Keep only the last 4 digits of a phone number for logging."""
    value = str(phone or "")
    return f"***{value[-4:]}" if len(value) > 4 else "***"
