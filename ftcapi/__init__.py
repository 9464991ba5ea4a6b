"""
Typed client for the FIRST Tech Challenge Events API.
"""
from ftcapi.client import FtcClient
from ftcapi.config import ClientConfig
from ftcapi.errors import (
    DecodeError,
    FtcApiError,
    HTTPStatusError,
    ParseError,
    TransportError,
)
from ftcapi.matches import TournamentLevel
from ftcapi.records import to_dict
from ftcapi.timefmt import format_time, parse_time

__all__ = [
    "ClientConfig",
    "DecodeError",
    "FtcApiError",
    "FtcClient",
    "HTTPStatusError",
    "ParseError",
    "TournamentLevel",
    "TransportError",
    "format_time",
    "parse_time",
    "to_dict",
]
