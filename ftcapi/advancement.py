"""
Advancement: which teams move on from an event, and where an event's
teams came from.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ftcapi.records import (
    expect_dict,
    expect_list,
    get_int,
    get_list,
    get_opt_str,
    get_str,
)


@dataclass
class Advancement:
    team: int = 0
    display_team: str = ""
    slot: int = 0
    criteria: str = ""
    status: str = ""


@dataclass
class AdvancementsTo:
    advances_to: str = ""        # event code of the next tournament
    slots: int = 0
    advancement: List[Advancement] = field(default_factory=list)


@dataclass
class AdvancementsFrom:
    advanced_from: str = ""
    advanced_from_region: Optional[str] = None
    slots: int = 0
    advancement: List[Advancement] = field(default_factory=list)


def parse_advancement(data: Any) -> Advancement:
    d = expect_dict(data, "advancement")
    return Advancement(
        team=get_int(d, "team"),
        display_team=get_str(d, "displayTeam"),
        slot=get_int(d, "slot"),
        criteria=get_str(d, "criteria"),
        status=get_str(d, "status"),
    )


def parse_advancements_to(data: Any) -> AdvancementsTo:
    d = expect_dict(data, "advancement listing")
    return AdvancementsTo(
        advances_to=get_str(d, "advancesTo"),
        slots=get_int(d, "slots"),
        advancement=get_list(d, "advancement", parse_advancement),
    )


def parse_advancements_from(data: Any) -> AdvancementsFrom:
    d = expect_dict(data, "advancement source")
    return AdvancementsFrom(
        advanced_from=get_str(d, "advancedFrom"),
        advanced_from_region=get_opt_str(d, "advancedFromRegion"),
        slots=get_int(d, "slots"),
        advancement=get_list(d, "advancement", parse_advancement),
    )


def parse_advancement_sources(data: Any) -> List[AdvancementsFrom]:
    return [parse_advancements_from(a) for a in expect_list(data, "advancement sources")]
