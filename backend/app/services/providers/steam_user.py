import httpx, logging
from typing import Callable, List, Optional

from ...core.config import Settings
from ...models.player_summary import PlayerRecord, PlayerSummariesResponse

logger = logging.getLogger(__name__)

TransportFactory = Callable[[Optional[str]], Optional[httpx.AsyncBaseTransport]]


def build_proxy_transport(proxy_server: Optional[str]) -> Optional[httpx.AsyncBaseTransport]:
    """Return a transport routed through `proxy_server`, or None to dispatch directly."""
    if not proxy_server:
        return None
    return httpx.AsyncHTTPTransport(proxy=proxy_server)


class SteamUserProvider:
    PLAYER_SUMMARIES_URL = "https://api.steampowered.com/ISteamUser/GetPlayerSummaries/v2"

    def __init__(
            self,
            api_key: str,
            proxy_server: Optional[str] = None,
            timeout: Optional[float] = None,
            transport_factory: TransportFactory = build_proxy_transport,
    ):
        self.api_key = api_key
        self.proxy_server = proxy_server or None
        self.timeout = timeout
        self.transport_factory = transport_factory

    @classmethod
    def from_settings(cls, settings: Settings) -> "SteamUserProvider":
        return cls(
            api_key=settings.STEAM_API_KEY,
            proxy_server=settings.PROXY_SERVER,
            timeout=settings.STEAM_TIMEOUT,
        )

    def _client(self) -> httpx.AsyncClient:
        # Fresh transport per call; nothing is pooled across requests.
        kwargs = {"transport": self.transport_factory(self.proxy_server)}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return httpx.AsyncClient(**kwargs)

    async def get_player_summaries(self, steam_ids: Optional[str]) -> Optional[List[PlayerRecord]]:
        """
        Fetch player summaries for a comma-separated list of SteamID64s.

        Returns the upstream `response.players` list unchanged, or None when the
        call fails or the payload is not the expected object.
        """
        params = {"key": self.api_key, "steamids": steam_ids}
        try:
            async with self._client() as client:
                resp = await client.get(self.PLAYER_SUMMARIES_URL, params=params)
                resp.raise_for_status()
                result = resp.json()

            logger.info("GetPlayerSummaries result: %s", result)
            if isinstance(result, list):
                return None
            return PlayerSummariesResponse.model_validate(result).response.players

        except httpx.HTTPStatusError as e:
            # Exception text carries the request URL, key included
            logger.error(
                "Steam GetPlayerSummaries returned HTTP %s for steamids=%s",
                e.response.status_code, steam_ids,
            )
            return None
        except httpx.HTTPError as e:
            logger.error(
                "Error fetching Steam player data from %s for steamids=%s: %s",
                self.PLAYER_SUMMARIES_URL, steam_ids, type(e).__name__,
            )
            return None
        except Exception:
            logger.exception("Error fetching Steam player data for steamids=%s", steam_ids)
            return None

    async def check_health(self) -> bool:
        return bool(self.api_key)
