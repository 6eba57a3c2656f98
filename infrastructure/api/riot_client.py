"""Riot Games API client."""
import logging
from typing import Any, Optional, List
from urllib.parse import quote
import httpx

from config import settings
from domain.enums import Platform
from domain.exceptions import HttpError, RateLimited
from .rate_limiter import TokenBucket

logger = logging.getLogger(__name__)


class RiotAPIClient:
    """Asynchronous Riot API client; every call spends one limiter token.

    Failures are never retried here. A 429 raises ``RateLimited``, any other
    non-2xx or transport failure raises ``HttpError``; the caller decides
    whether to skip the item and move on.
    """

    def __init__(
        self,
        api_key: str,
        rate_limiter: Optional[TokenBucket] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.session: Optional[httpx.AsyncClient] = None
        self.timeout = settings.REQUEST_TIMEOUT
        self._transport = transport
        self.rate_limiter = rate_limiter or TokenBucket(
            capacity=settings.RATE_LIMIT_CAPACITY,
            refill_rate=settings.RATE_LIMIT_REFILL_PER_SEC,
            poll_interval=settings.RATE_LIMIT_POLL_INTERVAL,
        )

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def _get_platform_url(self, platform: Platform) -> str:
        return f"https://{platform.platform_route}.api.riotgames.com"

    def _get_regional_url(self, platform: Platform) -> str:
        return f"https://{platform.regional_route}.api.riotgames.com"

    async def call(self, url: str) -> Any:
        """Rate-limited GET returning decoded JSON."""
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        await self.rate_limiter.acquire()

        try:
            response = await self.session.get(url)
        except httpx.HTTPError as exc:
            logger.warning(f"Network error for {url}: {exc}")
            raise HttpError(0, str(exc), url) from exc

        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                logger.warning(f"Undecodable body (HTTP {response.status_code}) for {url}")
                raise HttpError(response.status_code, response.text, url) from exc

        body = response.text
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            logger.warning(f"429 rate-limited (Retry-After={retry_after}) for {url}")
            raise RateLimited(
                429, body, url,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )

        if response.status_code == 401 or response.status_code == 403:
            logger.error(f"{response.status_code}: check RIOT_API_KEY")
        else:
            logger.warning(f"HTTP {response.status_code} for {url}")
        raise HttpError(response.status_code, body, url)

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, platform: Platform, game_name: str, tag_line: str) -> dict:
        base = self._get_regional_url(platform)
        url = (
            f"{base}/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )
        return await self.call(url)

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries(self, platform: Platform, puuid: str) -> List[dict]:
        base = self._get_platform_url(platform)
        result = await self.call(f"{base}/lol/league/v4/entries/by-puuid/{puuid}")
        return result if isinstance(result, list) else []

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids(self, platform: Platform, puuid: str, count: int = 10) -> List[str]:
        base = self._get_regional_url(platform)
        url = f"{base}/lol/match/v5/matches/by-puuid/{puuid}/ids?start=0&count={min(count, 100)}"
        result = await self.call(url)
        return result if isinstance(result, list) else []

    async def get_match(self, platform: Platform, match_id: str) -> dict:
        base = self._get_regional_url(platform)
        return await self.call(f"{base}/lol/match/v5/matches/{match_id}")
