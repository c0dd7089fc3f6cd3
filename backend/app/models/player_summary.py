from typing import Any, Dict, List
from pydantic import BaseModel

# Open mapping: Steam adds and drops profile fields over time.
PlayerRecord = Dict[str, Any]


class PlayerList(BaseModel):
    players: List[PlayerRecord]

    class Config:
        extra = "allow"


class PlayerSummariesResponse(BaseModel):
    """Envelope returned by ISteamUser/GetPlayerSummaries/v2"""
    response: PlayerList

    class Config:
        extra = "allow"
