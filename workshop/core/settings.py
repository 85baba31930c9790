"""Static workshop settings."""
from typing import Dict


DEFAULT_SETTINGS: Dict[str, str] = {
    "base_currency": "PLN",
    "accounts_file_separator": "|",
    "accounts_file_encoding": "utf-8",
    "users_limit": "10",
}


def get_setting(key: str) -> str | None:
    """Get a setting value by key."""
    return DEFAULT_SETTINGS.get(key)


def get_int_setting(key: str) -> int:
    """Get a setting that holds an integer. Raises KeyError if it is missing."""
    value = get_setting(key)
    if value is None:
        raise KeyError(key)
    return int(value)
