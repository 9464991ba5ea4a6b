"""
Leagues and league membership.
"""
from dataclasses import dataclass
from typing import Any, List, Optional

from ftcapi.errors import DecodeError
from ftcapi.records import (
    expect_dict,
    expect_list,
    get_bool,
    get_list,
    get_opt_str,
    get_str,
)


@dataclass
class League:
    region: str = ""
    code: str = ""
    name: str = ""
    remote: bool = False
    parent_league_code: Optional[str] = None
    parent_league_name: Optional[str] = None
    location: str = ""


def parse_league(data: Any) -> League:
    d = expect_dict(data, "league")
    return League(
        region=get_str(d, "region"),
        code=get_str(d, "code"),
        name=get_str(d, "name"),
        remote=get_bool(d, "remote"),
        parent_league_code=get_opt_str(d, "parentLeagueCode"),
        parent_league_name=get_opt_str(d, "parentLeagueName"),
        location=get_str(d, "location"),
    )


def parse_leagues(data: Any) -> List[League]:
    return get_list(expect_dict(data, "league listing"), "leagues", parse_league)


def parse_league_members(data: Any) -> List[int]:
    """{"members": [1234, 5678, ...]} -> team numbers."""
    d = expect_dict(data, "league members")
    members = d.get("members")
    if members is None:
        return []
    out: List[int] = []
    for m in expect_list(members, "members"):
        if isinstance(m, bool) or not isinstance(m, int):
            raise DecodeError(f"league member: expected integer team number, got {m!r}")
        out.append(m)
    return out
