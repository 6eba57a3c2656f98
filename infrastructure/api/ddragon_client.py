"""Data Dragon static-data client (champion catalog)."""
import logging
from typing import List, Optional
import httpx

from config import settings
from domain.entities import Champion
from domain.exceptions import HttpError

logger = logging.getLogger(__name__)


class DataDragonClient:
    """Fetches the champion list of the latest published game version.

    Data Dragon is a static CDN outside the Riot API quota, so calls are
    not routed through the token bucket.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        locale: str = "en_US",
    ):
        self.base_url = (base_url or settings.DDRAGON_BASE_URL).rstrip("/")
        self.locale = locale
        self._transport = transport

    async def _get_json(self, client: httpx.AsyncClient, url: str):
        try:
            response = await client.get(url)
        except httpx.HTTPError as exc:
            raise HttpError(0, str(exc), url) from exc
        if not response.is_success:
            raise HttpError(response.status_code, response.text, url)
        try:
            return response.json()
        except ValueError as exc:
            raise HttpError(response.status_code, response.text, url) from exc

    async def get_latest_version(self, client: httpx.AsyncClient) -> str:
        versions = await self._get_json(client, f"{self.base_url}/api/versions.json")
        if not versions:
            raise HttpError(200, "empty version list", f"{self.base_url}/api/versions.json")
        return versions[0]

    async def get_champions(self) -> List[Champion]:
        async with httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT, transport=self._transport) as client:
            version = await self.get_latest_version(client)
            logger.info(f"Using Data Dragon version {version}")
            url = f"{self.base_url}/cdn/{version}/data/{self.locale}/champion.json"
            data = (await self._get_json(client, url)).get("data", {})

        champions: List[Champion] = []
        for champ in data.values():
            try:
                champion_id = int(champ["key"])
            except (KeyError, TypeError, ValueError):
                logger.warning(f"Skipping champion without numeric key: {champ.get('id')}")
                continue
            image = champ.get("image", {}).get("full", f"{champ.get('id', '')}.png")
            champions.append(Champion(
                id=champion_id,
                key=champ.get("id", ""),
                name=champ.get("name", ""),
                title=champ.get("title", ""),
                image_url=f"{self.base_url}/cdn/{version}/img/champion/{image}",
            ))
        return champions
