"""キャラクター関連のエンドポイント"""

from __future__ import annotations

from dataclasses import dataclass

from .endpoint import Endpoint
from .timestamp import Timestamp


@dataclass
class CharacterPublicInfo:
    """キャラクターの公開情報。"""

    alliance_id: int | None = None
    ancestry_id: int | None = None
    birthday: Timestamp | None = None
    bloodline_id: int | None = None
    corporation_id: int | None = None
    description: str | None = None
    faction_id: int | None = None
    gender: str | None = None
    name: str | None = None
    race_id: int | None = None
    security_status: float | None = None


class CharactersEndpoint(Endpoint):
    """ESI API のキャラクター関連メソッド。"""

    async def get_character(self, character_id: int) -> CharacterPublicInfo:
        return await self._fetch(
            "GET", f"v4/characters/{character_id}/", CharacterPublicInfo
        )
