from __future__ import annotations

import json

from .pipeline import Stores, build_get_profile, open_database


class ProfileCommand:
    """Prints the stored profile of one account as JSON."""

    def run(self, slug: str) -> int:
        with open_database() as db:
            profile = build_get_profile(Stores(db)).execute(slug)
        print(json.dumps(profile.to_dict(), indent=2, ensure_ascii=False))
        return 0
