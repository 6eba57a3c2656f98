"""Error taxonomy shared by the ingestion pipeline."""
from typing import Optional


class TrackerError(Exception):
    """Base class for every error raised by the tracker."""


class RiotAPIError(TrackerError):
    """An external ranked-API call did not produce a usable result."""


class HttpError(RiotAPIError):
    """Non-success response; ``status`` is 0 when no response was received."""

    def __init__(self, status: int, body: str = "", url: Optional[str] = None) -> None:
        self.status = status
        self.body = body
        self.url = url
        super().__init__(f"Riot API error ({status}): {body[:200]}")


class RateLimited(HttpError):
    """The API answered 429; nothing is retried automatically."""

    def __init__(
        self,
        status: int = 429,
        body: str = "",
        url: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> None:
        super().__init__(status, body, url)
        self.retry_after = retry_after


class NotFound(RiotAPIError):
    """Identity resolution found no matching Riot ID."""

    def __init__(self, riot_id: str) -> None:
        self.riot_id = riot_id
        super().__init__(f"No account found for {riot_id}")


class NotConfigured(TrackerError):
    """An account slug is missing from static configuration or the store."""

    def __init__(self, slug: str, where: str = "configuration") -> None:
        self.slug = slug
        self.where = where
        super().__init__(f"Account {slug!r} not found in {where}")
