"""
Match results for an event.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from ftcapi.records import (
    expect_dict,
    get_bool,
    get_int,
    get_list,
    get_str,
)


class TournamentLevel(str, Enum):
    QUALIFIER = "qual"
    PLAYOFF = "playoff"


@dataclass
class MatchTeam:
    team_number: int = 0
    station: str = ""            # e.g. "Red1", "Blue2"
    dq: bool = False
    on_field: bool = False


@dataclass
class Match:
    actual_start_time: str = ""
    description: str = ""
    tournament_level: str = ""
    series: int = 0
    match_number: int = 0
    score_red_final: int = 0
    score_red_foul: int = 0
    score_red_auto: int = 0
    score_blue_final: int = 0
    score_blue_foul: int = 0
    score_blue_auto: int = 0
    post_result_time: str = ""
    teams: List[MatchTeam] = field(default_factory=list)
    modified_on: str = ""


def parse_match_team(data: Any) -> MatchTeam:
    d = expect_dict(data, "match team")
    return MatchTeam(
        team_number=get_int(d, "teamNumber"),
        station=get_str(d, "station"),
        dq=get_bool(d, "dq"),
        on_field=get_bool(d, "onField"),
    )


def parse_match(data: Any) -> Match:
    d = expect_dict(data, "match")
    return Match(
        actual_start_time=get_str(d, "actualStartTime"),
        description=get_str(d, "description"),
        tournament_level=get_str(d, "tournamentLevel"),
        series=get_int(d, "series"),
        match_number=get_int(d, "matchNumber"),
        score_red_final=get_int(d, "scoreRedFinal"),
        score_red_foul=get_int(d, "scoreRedFoul"),
        score_red_auto=get_int(d, "scoreRedAuto"),
        score_blue_final=get_int(d, "scoreBlueFinal"),
        score_blue_foul=get_int(d, "scoreBlueFoul"),
        score_blue_auto=get_int(d, "scoreBlueAuto"),
        post_result_time=get_str(d, "postResultTime"),
        teams=get_list(d, "teams", parse_match_team),
        modified_on=get_str(d, "modifiedOn"),
    )


def parse_matches(data: Any) -> List[Match]:
    return get_list(expect_dict(data, "match listing"), "matches", parse_match)
