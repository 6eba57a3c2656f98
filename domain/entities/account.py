"""Account entity representing a tracked player."""
from dataclasses import dataclass, replace
from typing import Optional
from ..enums import Platform


@dataclass(frozen=True)
class Account:
    """A tracked League of Legends account.

    ``slug`` is the stable handle used in URLs and as the storage key;
    ``puuid`` stays None until the Riot ID has been resolved once.
    """

    slug: str
    game_name: str
    tag_line: str
    platform: Platform
    puuid: Optional[str] = None

    @property
    def riot_id(self) -> str:
        """Human-readable Riot ID (``GameName#TAG``)."""
        return f"{self.game_name}#{self.tag_line}"

    @property
    def is_resolved(self) -> bool:
        return bool(self.puuid)

    def with_puuid(self, puuid: str) -> 'Account':
        return replace(self, puuid=puuid)
