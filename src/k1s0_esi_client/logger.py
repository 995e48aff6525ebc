"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOGGER_NAME = "k1s0_esi_client"


def default_logger() -> Any:
    """ロガーが注入されていない場合に使うロガー。

    structlog が未設定なら標準エラー出力に書き出す。
    """
    if structlog.is_configured():
        return structlog.get_logger(LOGGER_NAME)
    return structlog.wrap_logger(structlog.PrintLogger(sys.stderr))


def new_logger(level: str = "INFO", format: str = "json") -> structlog.stdlib.BoundLogger:
    """設定済みの structlog ロガーを返す。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    renderer: structlog.typing.Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.get_logger(LOGGER_NAME)
