"""Static list of tracked accounts.

Accounts come from ``TRACKED_ACCOUNTS`` in ``config/.env``, a comma
separated list of ``slug=GameName#TAG@platform`` entries, e.g.::

    TRACKED_ACCOUNTS=gamingmaster=GamingMaster#0000@euw1,gazura=Gazura#EUW@euw1

A PUUID may be pinned with a trailing ``!puuid`` to skip resolution.
"""
import os
from typing import List, Optional

from domain.entities import Account
from domain.enums import Platform

from .settings import ENV_PATH  # noqa: F401  loads config/.env before TRACKED_ACCOUNTS is read


def parse_account(raw: str) -> Account:
    """Parse one ``slug=GameName#TAG@platform[!puuid]`` entry."""
    try:
        slug, rest = raw.split("=", 1)
        rest, _, puuid = rest.partition("!")
        riot_id, platform = rest.rsplit("@", 1)
        game_name, tag_line = riot_id.rsplit("#", 1)
    except ValueError:
        raise ValueError(f"Malformed account entry: {raw!r}") from None
    return Account(
        slug=slug.strip(),
        game_name=game_name.strip(),
        tag_line=tag_line.strip(),
        platform=Platform.from_string(platform),
        puuid=puuid.strip() or None,
    )


def parse_accounts(raw: str) -> List[Account]:
    accounts = [parse_account(chunk) for chunk in raw.split(",") if chunk.strip()]
    seen: set = set()
    for acc in accounts:
        if acc.slug in seen:
            raise ValueError(f"Duplicate account slug: {acc.slug!r}")
        seen.add(acc.slug)
    return accounts


ACCOUNTS: List[Account] = parse_accounts(os.getenv('TRACKED_ACCOUNTS', ''))


def by_slug(slug: str, accounts: Optional[List[Account]] = None) -> Optional[Account]:
    return next((a for a in (accounts if accounts is not None else ACCOUNTS) if a.slug == slug), None)
