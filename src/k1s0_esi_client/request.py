"""API リクエストの組み立て"""

from __future__ import annotations

import dataclasses
import json
import re
from datetime import datetime
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter

from .exceptions import EncodingError, InvalidMethodError, InvalidURLError
from .timestamp import format_timestamp

# RFC 7230 token
_METHOD_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def validate_method(method: str) -> str:
    """HTTP メソッドを検証する。空文字列は GET とみなす。"""
    if method == "":
        return "GET"
    if not _METHOD_TOKEN.match(method):
        raise InvalidMethodError(f"invalid method {method!r}")
    return method


def resolve_url(base_url: httpx.URL, url: str) -> httpx.URL:
    """ベース URL に対して相対参照を解決する。

    解決後の URL がベースと異なるスキーム・ホストを指す場合や、
    ベースのパスの外に出る場合は InvalidURLError。
    """
    try:
        resolved = base_url.join(url)
    except httpx.InvalidURL as e:
        raise InvalidURLError(f"cannot resolve {url!r}: {e}", cause=e) from e
    if resolved.scheme != base_url.scheme or resolved.netloc != base_url.netloc:
        raise InvalidURLError(
            f"{url!r} resolves to {resolved} which is outside of {base_url}"
        )
    if not resolved.path.startswith(base_url.path):
        raise InvalidURLError(
            f"{url!r} resolves to {resolved} which escapes base path {base_url.path}"
        )
    return resolved


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_timestamp(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _to_json_value(body: Any) -> Any:
    # None のフィールドは送らない。list / dict の中のモデルも同様
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return TypeAdapter(type(body)).dump_python(body, mode="json", exclude_none=True)
    if isinstance(body, dict):
        return {key: _to_json_value(value) for key, value in body.items()}
    if isinstance(body, (list, tuple)):
        return [_to_json_value(value) for value in body]
    return body


def encode_body(body: Any) -> bytes:
    """ボディをコンパクトな UTF-8 JSON にエンコードする。"""
    try:
        text = json.dumps(
            _to_json_value(body),
            default=_json_default,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Failed to encode request body: {e}", cause=e) from e
    return text.encode("utf-8")


def build_request(
    base_url: httpx.URL,
    method: str,
    url: str,
    body: Any = None,
    user_agent: str = "",
) -> httpx.Request:
    """ベース URL からの相対 url に対するリクエストを作成する。

    body が None でなければ JSON にエンコードしてボディに含める。
    """
    method = validate_method(method)
    resolved = resolve_url(base_url, url)

    headers: dict[str, str] = {"Accept": "application/json"}
    content: bytes | None = None
    if body is not None:
        content = encode_body(body)
        headers["Content-Type"] = "application/json"
    if user_agent:
        headers["User-Agent"] = user_agent

    return httpx.Request(method, resolved, headers=headers, content=content)
