"""
Playoff alliances and the alliance selection picks that formed them.
"""
from dataclasses import dataclass
from typing import Any, List, Optional

from ftcapi.records import (
    expect_dict,
    get_int,
    get_list,
    get_opt_int,
    get_opt_str,
    get_str,
)


@dataclass
class Alliance:
    number: int = 0
    name: str = ""
    captain: int = 0
    captain_display: str = ""
    round1: int = 0
    round1_display: str = ""
    round2: int = 0
    round2_display: str = ""
    round3: Optional[int] = None
    backup: Optional[str] = None
    backup_replaced: Optional[str] = None


@dataclass
class AllianceSelection:
    index: int = 0
    team: int = 0
    result: str = ""             # e.g. "Accepted", "Declined"


def parse_alliance(data: Any) -> Alliance:
    d = expect_dict(data, "alliance")
    return Alliance(
        number=get_int(d, "number"),
        name=get_str(d, "name"),
        captain=get_int(d, "captain"),
        captain_display=get_str(d, "captainDisplay"),
        round1=get_int(d, "round1"),
        round1_display=get_str(d, "round1Display"),
        round2=get_int(d, "round2"),
        round2_display=get_str(d, "round2Display"),
        round3=get_opt_int(d, "round3"),
        backup=get_opt_str(d, "backup"),
        backup_replaced=get_opt_str(d, "backupReplaced"),
    )


def parse_alliance_selection(data: Any) -> AllianceSelection:
    d = expect_dict(data, "alliance selection")
    return AllianceSelection(
        index=get_int(d, "index"),
        team=get_int(d, "team"),
        result=get_str(d, "result"),
    )


def parse_alliances(data: Any) -> List[Alliance]:
    return get_list(expect_dict(data, "alliance listing"), "alliances", parse_alliance)


def parse_alliance_selections(data: Any) -> List[AllianceSelection]:
    return get_list(expect_dict(data, "alliance selections"), "selections", parse_alliance_selection)
