"""エラーレート制限の状態"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

HEADER_ERROR_LIMIT_REMAIN = "X-ESI-Error-Limit-Remain"
HEADER_ERROR_LIMIT_RESET = "X-ESI-Error-Limit-Reset"

_DECIMAL = re.compile(r"^[+-]?[0-9]+$")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Rate:
    """ESI が返すエラーレート制限の情報。

    reset はサーバーがリセットまでの秒数を返すまで None。
    """

    remaining: int = 0
    reset: datetime | None = None

    def describe(self, now: datetime | None = None) -> str:
        """now を基準に文字列化する。リセットまでの秒数は負にもなる。"""
        if now is None:
            now = utcnow()
        seconds = (self.reset - now).total_seconds() if self.reset is not None else 0.0
        return (
            f"error rate limit: {self.remaining} remaining calls; "
            f"reset in {seconds:.0f}s"
        )

    def __str__(self) -> str:
        return self.describe()


def _header_int(headers: Mapping[str, str], name: str) -> int:
    # 符号付きの十進数のみ。空白や "_" を含む値はゼロ値
    value = headers.get(name)
    if not value or not _DECIMAL.match(value):
        return 0
    return int(value)


def parse_rate(headers: Mapping[str, str], now: datetime) -> Rate:
    """now に完了した交換のエラーレート制限ヘッダーを読み取る。

    表現できない範囲のリセット秒数は無視して reset を None のままにする。
    """
    remaining = _header_int(headers, HEADER_ERROR_LIMIT_REMAIN)
    delay = _header_int(headers, HEADER_ERROR_LIMIT_RESET)
    reset = None
    if delay != 0:
        try:
            reset = now + timedelta(seconds=delay)
        except OverflowError:
            reset = None
    return Rate(remaining=remaining, reset=reset)
