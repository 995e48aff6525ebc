"""Endpoint 基底クラス"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import EsiClient


class Endpoint:
    """EsiClient への参照だけを持つ API エンドポイント。"""

    def __init__(self, api: EsiClient) -> None:
        self._api = api

    async def _fetch(self, method: str, url: str, target: Any, body: Any = None) -> Any:
        """ボディを target 型にデコードして返す。空ボディなら target()。"""
        req = self._api.new_request(method, url, body)
        resp = await self._api.do(req, target)
        if resp.data is None:
            return target()
        return resp.data

    async def _send(self, method: str, url: str, body: Any = None) -> None:
        req = self._api.new_request(method, url, body)
        await self._api.do(req)
