"""Lane role enumeration."""
from enum import Enum
from typing import Optional


class Role(Enum):
    """Lane a participant was assigned to (match-v5 ``teamPosition``)."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"  # Support

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional['Role']:
        """Map a ``teamPosition`` to a Role.

        Modes without lanes (ARAM, Arena) report an empty string; those map
        to None rather than a guessed lane, as do unknown values.
        """
        if not value:
            return None
        key = value.strip().upper()
        if key in cls.__members__:
            return cls[key]
        return _ALIASES.get(key)


_ALIASES = {
    "SUPPORT": Role.UTILITY,
    "SUP": Role.UTILITY,
    "ADC": Role.BOTTOM,
    "BOT": Role.BOTTOM,
    "MID": Role.MIDDLE,
    "JG": Role.JUNGLE,
}
