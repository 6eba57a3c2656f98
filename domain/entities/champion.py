"""Champion reference entity."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Champion:
    """Static champion data from the Data Dragon catalog."""

    id: int
    key: str  # e.g. "MonkeyKing"
    name: str  # e.g. "Wukong"
    title: str
    image_url: str


def champion_label(champion_id: int, names: dict[int, str]) -> str:
    """Display name for a champion id, with a synthetic fallback."""
    return names.get(champion_id) or f"Champion {champion_id}"
