"""Keyboard input mapping."""

from typing import Optional

ERASE_KEYS = frozenset({"0", "Delete", "Backspace"})


def key_to_value(key: str) -> Optional[int]:
    """
    Map a key name to the value to place.

    '1'-'9' place that digit; '0', Delete and Backspace erase (0).
    Any other key maps to None and should be ignored.
    """
    if key in ERASE_KEYS:
        return 0
    if len(key) == 1 and "1" <= key <= "9":
        return int(key)
    return None
