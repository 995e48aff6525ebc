"""設定ローダーのユニットテスト"""

from pathlib import Path

import pytest
from k1s0_esi_client.client import EsiClient
from k1s0_esi_client.config import DEFAULT_BASE_URL, EsiClientConfig, load_config
from k1s0_esi_client.exceptions import EsiClientError, EsiClientErrorCodes


def test_default_config() -> None:
    config = EsiClientConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout_seconds == 10.0


def test_load_minimal_config(tmp_path: Path) -> None:
    """最小設定ファイルの読み込み。"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("base_url: http://esi-server:8080/esi/\n")
    config = load_config(config_file)
    assert config.base_url == "http://esi-server:8080/esi/"
    assert config.user_agent == "k1s0-esi-client"


def test_load_empty_file(tmp_path: Path) -> None:
    """空ファイルはデフォルト値になること。"""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    assert load_config(config_file) == EsiClientConfig()


def test_load_with_env_override(tmp_path: Path) -> None:
    """環境別設定のマージ確認。"""
    base_file = tmp_path / "base.yaml"
    base_file.write_text("user_agent: fleet-bot\ntimeout_seconds: 5\n")
    env_file = tmp_path / "prod.yaml"
    env_file.write_text("timeout_seconds: 30\n")
    config = load_config(base_file, env_file)
    assert config.user_agent == "fleet-bot"
    assert config.timeout_seconds == 30


def test_load_env_not_exists(tmp_path: Path) -> None:
    """env_path が存在しない場合は base のみ使用。"""
    base_file = tmp_path / "base.yaml"
    base_file.write_text("user_agent: fallback\n")
    config = load_config(base_file, tmp_path / "nonexistent.yaml")
    assert config.user_agent == "fallback"


def test_load_file_not_found(tmp_path: Path) -> None:
    """存在しないファイルで EsiClientError(READ_FILE_ERROR) が発生すること。"""
    with pytest.raises(EsiClientError) as exc_info:
        load_config(tmp_path / "missing.yaml")
    assert exc_info.value.code == EsiClientErrorCodes.READ_FILE


def test_load_invalid_yaml(tmp_path: Path) -> None:
    """不正 YAML で EsiClientError(PARSE_YAML_ERROR) が発生すること。"""
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("base_url: {invalid: yaml: content:\n")
    with pytest.raises(EsiClientError) as exc_info:
        load_config(bad_file)
    assert exc_info.value.code == EsiClientErrorCodes.PARSE_YAML


def test_load_validation_error(tmp_path: Path) -> None:
    """バリデーション失敗で EsiClientError(VALIDATION_ERROR) が発生すること。"""
    bad_config = tmp_path / "bad_config.yaml"
    bad_config.write_text("timeout_seconds: -1\n")
    with pytest.raises(EsiClientError) as exc_info:
        load_config(bad_config)
    assert exc_info.value.code == EsiClientErrorCodes.VALIDATION
    assert str(exc_info.value).startswith("VALIDATION_ERROR: ")


def test_client_from_loaded_config(tmp_path: Path) -> None:
    """読み込んだ設定でクライアントを構築できること。"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("base_url: http://esi-server:8080/esi\nuser_agent: fleet-bot\n")
    client = EsiClient(load_config(config_file))
    assert str(client.base_url) == "http://esi-server:8080/esi/"
    assert client.user_agent == "fleet-bot"
