"""
Season summary: the game name, team/event counts and championships.
"""
from dataclasses import dataclass, field
from typing import Any, List

from ftcapi.records import expect_dict, get_int, get_list, get_str


@dataclass
class Championship:
    name: str = ""
    start_date: str = ""
    location: str = ""


@dataclass
class SeasonSummary:
    event_count: int = 0
    game_name: str = ""
    kickoff: str = ""
    rookie_start: int = 0
    team_count: int = 0
    championships: List[Championship] = field(
        default_factory=list, metadata={"json": "fRCChampionships"}
    )


def parse_championship(data: Any) -> Championship:
    d = expect_dict(data, "championship")
    return Championship(
        name=get_str(d, "name"),
        start_date=get_str(d, "startDate"),
        location=get_str(d, "location"),
    )


def parse_season_summary(data: Any) -> SeasonSummary:
    d = expect_dict(data, "season summary")
    return SeasonSummary(
        event_count=get_int(d, "eventCount"),
        game_name=get_str(d, "gameName"),
        kickoff=get_str(d, "kickoff"),
        rookie_start=get_int(d, "rookieStart"),
        team_count=get_int(d, "teamCount"),
        championships=get_list(d, "fRCChampionships", parse_championship),
    )
