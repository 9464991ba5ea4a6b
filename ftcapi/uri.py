"""
URL construction for FTC Events API endpoints.

    build_url("https://host/v2.0", 2024, "matches", "USNCCMP", params={"tournamentLevel": "qual"})
    -> "https://host/v2.0/2024/matches/USNCCMP?tournamentLevel=qual"
"""
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from urllib.parse import quote, urlencode

Params = Union[Dict[str, Any], Iterable[Tuple[str, Any]]]


def build_url(server: str, *segments: Any, params: Optional[Params] = None) -> str:
    """
    Join `server` and the path segments with "/", then append the query.

    Every query entry is kept in the order given; entries whose value is
    None are skipped.
    """
    url = server.rstrip("/")
    for seg in segments:
        url += "/" + quote(_to_str(seg), safe="")

    query = encode_query(params)
    if query:
        url += "?" + query
    return url


def encode_query(params: Optional[Params]) -> str:
    if not params:
        return ""
    items = params.items() if isinstance(params, Mapping) else params

    pairs: List[Tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        pairs.append((key, _to_str(value)))
    return urlencode(pairs)


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
