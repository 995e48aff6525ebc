"""RFC 3339 タイムスタンプのエンコード・デコード"""

from __future__ import annotations

import json
import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from .exceptions import TimestampParseError

_RFC3339 = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)


def format_timestamp(dt: datetime) -> str:
    """datetime を秒精度の RFC 3339 文字列にする。naive な値は UTC とみなす。"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    text = dt.isoformat(timespec="seconds")
    if dt.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_timestamp(text: str) -> datetime:
    """RFC 3339 文字列のみを受け付けて datetime を返す。"""
    if not _RFC3339.match(text):
        raise TimestampParseError(text)
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise TimestampParseError(text) from e


def encode_timestamp(dt: datetime) -> str:
    """JSON 文字列表現（引用符付き）を返す。"""
    return json.dumps(format_timestamp(dt))


def decode_timestamp(raw: str | bytes) -> datetime:
    """JSON 文字列表現からデコードする。

    JSON として不正なら json.JSONDecodeError、形式が違えば TimestampParseError。
    """
    value = json.loads(raw)
    if not isinstance(value, str):
        raise TimestampParseError(repr(value))
    return parse_timestamp(value)


def _validate(value: Any) -> Any:
    if isinstance(value, str):
        return parse_timestamp(value)
    return value


Timestamp = Annotated[
    datetime,
    BeforeValidator(_validate),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]
