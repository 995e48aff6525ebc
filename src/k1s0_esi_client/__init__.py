"""k1s0 ESI クライアントライブラリ"""

from .characters import CharacterPublicInfo, CharactersEndpoint
from .client import EsiClient
from .config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, EsiClientConfig, load_config
from .exceptions import (
    DecodeError,
    EncodingError,
    EsiApiError,
    EsiClientError,
    EsiClientErrorCodes,
    InvalidMethodError,
    InvalidURLError,
    TimestampParseError,
)
from .fleets import (
    CharacterFleetResponse,
    FleetInvitation,
    FleetMember,
    FleetMemberMovement,
    FleetResponse,
    FleetSettings,
    FleetsEndpoint,
    FleetSquad,
    FleetWing,
)
from .logger import new_logger
from .options import I18NOptions, add_options
from .rate import Rate
from .response import EsiResponse
from .timestamp import (
    Timestamp,
    decode_timestamp,
    encode_timestamp,
    format_timestamp,
    parse_timestamp,
)

__all__ = [
    "EsiClient",
    "EsiClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "load_config",
    "EsiResponse",
    "Rate",
    "EsiClientError",
    "EsiClientErrorCodes",
    "EsiApiError",
    "InvalidURLError",
    "InvalidMethodError",
    "EncodingError",
    "DecodeError",
    "TimestampParseError",
    "I18NOptions",
    "add_options",
    "Timestamp",
    "format_timestamp",
    "parse_timestamp",
    "encode_timestamp",
    "decode_timestamp",
    "new_logger",
    "CharactersEndpoint",
    "CharacterPublicInfo",
    "FleetsEndpoint",
    "CharacterFleetResponse",
    "FleetResponse",
    "FleetSettings",
    "FleetMember",
    "FleetInvitation",
    "FleetMemberMovement",
    "FleetSquad",
    "FleetWing",
]
