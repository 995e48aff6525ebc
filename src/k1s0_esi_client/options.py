"""クエリパラメータのオプション"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

import httpx

from .exceptions import EncodingError, InvalidURLError


@dataclass
class I18NOptions:
    """多言語対応のメソッドに渡すオプション。"""

    language: str | None = None


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def add_options(url: str, opt: Any) -> str:
    """dataclass opt の None でないフィールドを url のクエリパラメータに追加する。"""
    if opt is None:
        return url
    if not dataclasses.is_dataclass(opt) or isinstance(opt, type):
        raise EncodingError(
            f"options must be a dataclass instance, got {type(opt).__name__}"
        )

    params = {
        f.name: _query_value(value)
        for f in dataclasses.fields(opt)
        if (value := getattr(opt, f.name)) is not None
    }
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidURLError(f"cannot parse {url!r}: {e}", cause=e) from e
    if not params:
        return url
    return str(parsed.copy_merge_params(params))
