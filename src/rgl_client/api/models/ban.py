from __future__ import annotations

from datetime import datetime

from .base import RglModel, SteamID


class Ban(RglModel):
    steam_id: SteamID
    alias: str = ""
    expires_at: datetime | None = None
    created_at: datetime | None = None
    reason: str = ""
