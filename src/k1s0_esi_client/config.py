"""ESI クライアント設定"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import EsiClientError, EsiClientErrorCodes

DEFAULT_BASE_URL = "https://esi.evetech.net/"
DEFAULT_USER_AGENT = "k1s0-esi-client"


class EsiClientConfig(BaseModel):
    """ESI クライアント設定。"""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=10.0, gt=0)


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise EsiClientError(
            code=EsiClientErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise EsiClientError(
            code=EsiClientErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_config(base_path: Path, env_path: Path | None = None) -> EsiClientConfig:
    """設定ファイルを読み込んで EsiClientConfig を返す。

    env_path が存在する場合はその値で base_path の値を上書きする。
    """
    data = _read_yaml(base_path)
    if env_path is not None and env_path.exists():
        data = {**data, **_read_yaml(env_path)}
    try:
        return EsiClientConfig.model_validate(data)
    except ValidationError as e:
        raise EsiClientError(
            code=EsiClientErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
