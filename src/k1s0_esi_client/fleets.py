"""フリート関連のエンドポイント"""

from __future__ import annotations

from dataclasses import dataclass

from .endpoint import Endpoint
from .options import I18NOptions, add_options
from .timestamp import Timestamp


@dataclass
class CharacterFleetResponse:
    """キャラクターが所属するフリート。"""

    fleet_id: int | None = None
    role: str | None = None
    squad_id: int | None = None
    wing_id: int | None = None


@dataclass
class FleetResponse:
    """フリートの詳細。"""

    is_free_move: bool | None = None
    is_registered: bool | None = None
    is_voice_enabled: bool | None = None
    motd: str | None = None


@dataclass
class FleetSettings:
    """更新するフリート設定。None のフィールドは変更しない。"""

    is_free_move: bool | None = None
    motd: str | None = None


@dataclass
class FleetMember:
    character_id: int | None = None
    join_time: Timestamp | None = None
    role: str | None = None
    role_name: str | None = None
    ship_type_id: int | None = None
    solar_system_id: int | None = None
    squad_id: int | None = None
    station_id: int | None = None
    takes_fleet_warp: bool | None = None
    wing_id: int | None = None


@dataclass
class FleetInvitation:
    character_id: int
    role: str
    squad_id: int | None = None
    wing_id: int | None = None


@dataclass
class FleetMemberMovement:
    role: str
    squad_id: int | None = None
    wing_id: int | None = None


@dataclass
class FleetSquad:
    id: int | None = None
    name: str | None = None


@dataclass
class FleetWing:
    id: int | None = None
    name: str | None = None
    squads: list[FleetSquad] | None = None


@dataclass
class _NewWing:
    wing_id: int | None = None


@dataclass
class _NewSquad:
    squad_id: int | None = None


@dataclass
class _Name:
    name: str


class FleetsEndpoint(Endpoint):
    """ESI API のフリート関連メソッド。"""

    async def get_character_fleet(self, character_id: int) -> CharacterFleetResponse:
        """キャラクターが所属しているフリートを返す。"""
        return await self._fetch(
            "GET", f"v1/characters/{character_id}/fleet/", CharacterFleetResponse
        )

    async def get(self, fleet_id: int) -> FleetResponse:
        return await self._fetch("GET", f"v1/fleets/{fleet_id}/", FleetResponse)

    async def update(self, fleet_id: int, settings: FleetSettings) -> None:
        await self._send("PUT", f"v1/fleets/{fleet_id}/", settings)

    async def get_members(
        self, fleet_id: int, opt: I18NOptions | None = None
    ) -> list[FleetMember]:
        url = add_options(f"v1/fleets/{fleet_id}/members/", opt)
        return await self._fetch("GET", url, list[FleetMember])

    async def invite(self, fleet_id: int, invitation: FleetInvitation) -> None:
        """キャラクターをフリートに招待する。

        CSPA チャージを設定しているキャラクターは ESI から招待できない。
        """
        await self._send("POST", f"v1/fleets/{fleet_id}/members/", invitation)

    async def kick(self, fleet_id: int, character_id: int) -> None:
        await self._send("DELETE", f"v1/fleets/{fleet_id}/members/{character_id}/")

    async def move(
        self, fleet_id: int, character_id: int, movement: FleetMemberMovement
    ) -> None:
        """フリートメンバーをスクワッド・ウィング間で移動する。"""
        await self._send(
            "PUT", f"v1/fleets/{fleet_id}/members/{character_id}/", movement
        )

    async def delete_squad(self, fleet_id: int, squad_id: int) -> None:
        """スクワッドを削除する。空のスクワッドのみ削除できる。"""
        await self._send("DELETE", f"v1/fleets/{fleet_id}/squads/{squad_id}/")

    async def rename_squad(self, fleet_id: int, squad_id: int, name: str) -> None:
        await self._send("PUT", f"v1/fleets/{fleet_id}/squads/{squad_id}/", _Name(name))

    async def get_wings(
        self, fleet_id: int, opt: I18NOptions | None = None
    ) -> list[FleetWing]:
        url = add_options(f"v1/fleets/{fleet_id}/wings/", opt)
        return await self._fetch("GET", url, list[FleetWing])

    async def create_wing(self, fleet_id: int) -> int | None:
        """ウィングを作成し、その ID を返す。"""
        created = await self._fetch("POST", f"v1/fleets/{fleet_id}/wings/", _NewWing)
        return created.wing_id

    async def delete_wing(self, fleet_id: int, wing_id: int) -> None:
        """ウィングを削除する。配下のスクワッドは空でなければならない。"""
        await self._send("DELETE", f"v1/fleets/{fleet_id}/wings/{wing_id}/")

    async def rename_wing(self, fleet_id: int, wing_id: int, name: str) -> None:
        await self._send("PUT", f"v1/fleets/{fleet_id}/wings/{wing_id}/", _Name(name))

    async def create_squad(self, fleet_id: int, wing_id: int) -> int | None:
        """ウィングにスクワッドを作成し、その ID を返す。"""
        created = await self._fetch(
            "POST", f"v1/fleets/{fleet_id}/wings/{wing_id}/squads/", _NewSquad
        )
        return created.squad_id
