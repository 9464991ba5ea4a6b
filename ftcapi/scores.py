"""
Detailed match scores. Only the fields reported in every season are kept;
game-specific scoring breakdowns are ignored.
"""
from dataclasses import dataclass, field
from typing import Any, List

from ftcapi.records import (
    expect_dict,
    get_bool,
    get_int,
    get_list,
    get_str,
)


@dataclass
class MatchAlliance:
    alliance: str = ""           # "Red" or "Blue"
    team: int = 0
    robot1_auto: bool = False
    robot2_auto: bool = False
    robot1_teleop: str = ""
    robot2_teleop: str = ""
    auto_points: int = 0
    teleop_points: int = 0
    foul_points_committed: int = 0
    pre_foul_total: int = 0
    total_points: int = 0
    major_fouls: int = 0
    minor_fouls: int = 0


@dataclass
class MatchScores:
    match_level: str = ""
    match_series: int = 0
    match_number: int = 0
    randomization: int = 0
    alliances: List[MatchAlliance] = field(default_factory=list)


def parse_match_alliance(data: Any) -> MatchAlliance:
    d = expect_dict(data, "alliance score")
    return MatchAlliance(
        alliance=get_str(d, "alliance"),
        team=get_int(d, "team"),
        robot1_auto=get_bool(d, "robot1Auto"),
        robot2_auto=get_bool(d, "robot2Auto"),
        robot1_teleop=get_str(d, "robot1Teleop"),
        robot2_teleop=get_str(d, "robot2Teleop"),
        auto_points=get_int(d, "autoPoints"),
        teleop_points=get_int(d, "teleopPoints"),
        foul_points_committed=get_int(d, "foulPointsCommitted"),
        pre_foul_total=get_int(d, "preFoulTotal"),
        total_points=get_int(d, "totalPoints"),
        major_fouls=get_int(d, "majorFouls"),
        minor_fouls=get_int(d, "minorFouls"),
    )


def parse_match_scores(data: Any) -> MatchScores:
    d = expect_dict(data, "match scores")
    return MatchScores(
        match_level=get_str(d, "matchLevel"),
        match_series=get_int(d, "matchSeries"),
        match_number=get_int(d, "matchNumber"),
        randomization=get_int(d, "randomization"),
        alliances=get_list(d, "alliances", parse_match_alliance),
    )


def parse_scores(data: Any) -> List[MatchScores]:
    return get_list(expect_dict(data, "score listing"), "matchScores", parse_match_scores)
