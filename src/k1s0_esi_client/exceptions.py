"""esi_client ライブラリの例外型定義"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rate import Rate
    from .response import EsiResponse


class EsiClientErrorCodes:
    """EsiClientError のエラーコード定数。"""

    INVALID_URL: str = "INVALID_URL"
    INVALID_METHOD: str = "INVALID_METHOD"
    ENCODING_ERROR: str = "ENCODING_ERROR"
    DECODE_ERROR: str = "DECODE_ERROR"
    API_ERROR: str = "API_ERROR"
    TIMESTAMP_PARSE_ERROR: str = "TIMESTAMP_PARSE_ERROR"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class EsiClientError(Exception):
    """esi_client ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InvalidURLError(EsiClientError):
    """URL を解決できない、またはベース URL の外を指している。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(EsiClientErrorCodes.INVALID_URL, message, cause)


class InvalidMethodError(EsiClientError):
    """HTTP メソッドのトークンが不正。"""

    def __init__(self, message: str) -> None:
        super().__init__(EsiClientErrorCodes.INVALID_METHOD, message)


class EncodingError(EsiClientError):
    """リクエストボディ（またはクエリオプション）をエンコードできない。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(EsiClientErrorCodes.ENCODING_ERROR, message, cause)


class DecodeError(EsiClientError):
    """2xx レスポンスのボディを宛先の型にデコードできない。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(EsiClientErrorCodes.DECODE_ERROR, message, cause)


class TimestampParseError(EsiClientError, ValueError):
    """RFC 3339 形式ではないタイムスタンプ。"""

    def __init__(self, value: str) -> None:
        super().__init__(
            EsiClientErrorCodes.TIMESTAMP_PARSE_ERROR,
            f"cannot parse {value!r} as RFC 3339 timestamp",
        )
        self.value = value


class EsiApiError(EsiClientError):
    """2xx 以外のレスポンスを表す ESI API エラー。

    str() は API が返した error メッセージそのもの（無ければ空文字列）。
    rate はエラー発生時点のエラーレート制限のスナップショット。
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        rate: Rate,
        response: EsiResponse | None = None,
    ) -> None:
        super().__init__(EsiClientErrorCodes.API_ERROR, message)
        self.status_code = status_code
        self.rate = rate
        self.response = response

    def __str__(self) -> str:
        return self.message
