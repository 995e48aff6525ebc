"""ESI API クライアント"""

from __future__ import annotations

import asyncio
import inspect
import threading
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

import httpx

from .characters import CharactersEndpoint
from .config import EsiClientConfig
from .exceptions import InvalidURLError
from .fleets import FleetsEndpoint
from .logger import default_logger
from .rate import Rate, utcnow
from .request import build_request
from .response import (
    HEADER_WARNING,
    EsiResponse,
    decode_body,
    is_byte_sink,
    is_success,
    make_error,
)


class EsiClient:
    """EVE Online Swagger Interface (ESI) API クライアント。

    http_client を渡した場合は全てのリクエストでそれを使い、クローズはしない
    （複数のクライアントで共有してよい）。認証が必要な API を使う場合は認証を
    行う transport を持つ httpx.AsyncClient を渡すこと。省略した場合は
    リクエストごとに httpx.AsyncClient を作成する。

    base_url, user_agent, logger は複数タスクから共有した後に変更しないこと。
    """

    def __init__(
        self,
        config: EsiClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        *,
        logger: Any = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config or EsiClientConfig()
        self._http_client = http_client
        self._logger = logger if logger is not None else default_logger()
        self._clock = clock or utcnow
        self.base_url = self._config.base_url
        self.user_agent = self._config.user_agent

        self._rate_lock = threading.Lock()
        self._rate = Rate()

        self.characters = CharactersEndpoint(self)
        self.fleets = FleetsEndpoint(self)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str | httpx.URL) -> None:
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise InvalidURLError(f"invalid base URL {value!r}: {e}", cause=e) from e
        if not url.is_absolute_url:
            raise InvalidURLError(f"base URL must be absolute: {value!r}")
        if not url.path.endswith("/"):
            url = url.copy_with(path=url.path + "/")
        self._base_url = url

    @property
    def rate(self) -> Rate:
        """最後に記録されたエラーレート制限のスナップショット。"""
        with self._rate_lock:
            return self._rate

    def _set_rate(self, rate: Rate) -> None:
        with self._rate_lock:
            self._rate = rate

    def new_request(self, method: str, url: str, body: Any = None) -> httpx.Request:
        """base_url からの相対 URL に対する API リクエストを作成する。"""
        return build_request(self._base_url, method, url, body, self.user_agent)

    @asynccontextmanager
    async def _transport(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=self._config.timeout_seconds) as client:
            yield client

    async def do(
        self,
        request: httpx.Request,
        dest: Any = None,
        *,
        timeout: float | None = None,
    ) -> EsiResponse:
        """リクエストを実行し、結果を dest に格納する。

        dest が write() を持つオブジェクトならボディをそのまま書き込み
        （write がコルーチンを返す場合は await する）、
        型であればボディをその型にデコードして EsiResponse.data に格納する。
        2xx 以外は EsiApiError を送出し、エラーレート制限を記録する。
        transport のエラーとキャンセル（timeout 秒経過時の TimeoutError を含む）は
        そのまま送出する。
        """
        async with asyncio.timeout(timeout):
            return await self._exchange(request, dest)

    async def _exchange(self, request: httpx.Request, dest: Any) -> EsiResponse:
        async with self._transport() as client:
            resp = await client.send(request, stream=True)
            try:
                response = EsiResponse(http_response=resp)

                if not is_success(resp.status_code):
                    body = await self._read_error_body(resp)
                    err = make_error(resp, body, self._clock(), response)
                    self._set_rate(err.rate)
                    raise err

                self._log_warning(request, resp)

                if dest is None:
                    return response
                if is_byte_sink(dest):
                    async for chunk in resp.aiter_bytes():
                        written = dest.write(chunk)
                        if inspect.isawaitable(written):
                            await written
                    return response

                response.data = decode_body(await resp.aread(), dest)
                return response
            finally:
                await resp.aclose()

    async def _read_error_body(self, resp: httpx.Response) -> bytes | None:
        try:
            return await resp.aread()
        except (httpx.HTTPError, httpx.StreamError):
            return None

    def _log_warning(self, request: httpx.Request, resp: httpx.Response) -> None:
        warning = resp.headers.get(HEADER_WARNING)
        if warning:
            self._logger.warning(
                "warning header received",
                method=request.method,
                path=request.url.path,
                warning=warning,
            )
