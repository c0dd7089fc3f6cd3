from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from ..core.config import Settings, get_settings
from ..models.player_summary import PlayerRecord
from ..services.providers.steam_user import SteamUserProvider

router = APIRouter()


def get_steam_user_provider(request: Request, settings: Settings = Depends(get_settings)) -> SteamUserProvider:
    provider = getattr(request.app.state, "steam_user", None)
    if provider is None:
        provider = SteamUserProvider.from_settings(settings)
    return provider


@router.get("", response_model=Optional[List[PlayerRecord]])
async def get_player_summaries(
        steam_ids: Optional[str] = Query(None, alias="steamIds", description="Comma-separated SteamID64 list"),
        provider: SteamUserProvider = Depends(get_steam_user_provider)):
    """
    Proxy to ISteamUser/GetPlayerSummaries/v2.
    Returns the upstream `players` list, or null when Steam gave nothing usable.
    """
    return await provider.get_player_summaries(steam_ids)
