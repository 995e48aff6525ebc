"""ESI レスポンスの判定とデコード"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodeError, EsiApiError
from .rate import parse_rate

HEADER_WARNING = "warning"


@dataclass
class EsiResponse:
    """ESI API レスポンス。

    httpx.Response をラップし、デコード済みの値と非推奨警告へのアクセスを提供する。
    """

    http_response: httpx.Response
    data: Any = None

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def warning(self) -> str | None:
        return self.http_response.headers.get(HEADER_WARNING) or None


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def _error_message(body: bytes | None) -> str:
    # {"error": "..."} 以外の形は空メッセージ
    if not body:
        return ""
    try:
        data = json.loads(body)
    except ValueError:
        return ""
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return ""


def make_error(
    http_response: httpx.Response,
    body: bytes | None,
    now: datetime,
    response: EsiResponse | None = None,
) -> EsiApiError:
    """2xx 以外のレスポンスから EsiApiError を組み立てる。

    body は読み取りに失敗した場合 None。
    """
    return EsiApiError(
        status_code=http_response.status_code,
        message=_error_message(body),
        rate=parse_rate(http_response.headers, now),
        response=response,
    )


def is_byte_sink(dest: Any) -> bool:
    """dest が生のバイト列を受け取れるか。"""
    return not isinstance(dest, type) and callable(getattr(dest, "write", None))


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode_body(body: bytes, target: Any) -> Any:
    """成功レスポンスのボディを target 型にデコードする。空ボディは None。"""
    if not body.strip():
        return None
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Failed to decode response body: {e}", cause=e) from e
    try:
        return _adapter(target).validate_python(data)
    except ValidationError as e:
        raise DecodeError(
            f"Response body does not match {getattr(target, '__name__', target)}: {e}",
            cause=e,
        ) from e
