"""
Awards: the season's award catalogue and the awards handed out to teams.
"""
from dataclasses import dataclass
from typing import Any, List, Optional

from ftcapi.records import (
    expect_dict,
    get_bool,
    get_int,
    get_list,
    get_opt_str,
    get_str,
)


@dataclass
class Award:
    award_id: int = 0
    name: str = ""
    description: str = ""
    for_person: bool = False     # e.g. Dean's List goes to a student, not a team


@dataclass
class TeamAward:
    award_id: int = 0
    event_code: str = ""
    name: str = ""
    series: int = 0              # 1 = winner, 2 = finalist, ...
    team_number: int = 0
    school_name: Optional[str] = None
    full_team_name: str = ""
    person: Optional[str] = None


def parse_award(data: Any) -> Award:
    d = expect_dict(data, "award")
    return Award(
        award_id=get_int(d, "awardId"),
        name=get_str(d, "name"),
        description=get_str(d, "description"),
        for_person=get_bool(d, "forPerson"),
    )


def parse_team_award(data: Any) -> TeamAward:
    d = expect_dict(data, "team award")
    return TeamAward(
        award_id=get_int(d, "awardId"),
        event_code=get_str(d, "eventCode"),
        name=get_str(d, "name"),
        series=get_int(d, "series"),
        team_number=get_int(d, "teamNumber"),
        school_name=get_opt_str(d, "schoolName"),
        full_team_name=get_str(d, "fullTeamName"),
        person=get_opt_str(d, "person"),
    )


def parse_awards(data: Any) -> List[Award]:
    return get_list(expect_dict(data, "award listing"), "awards", parse_award)


def parse_team_awards(data: Any) -> List[TeamAward]:
    """Accepts either {"awards": [...]} or a bare array of awards."""
    if isinstance(data, list):
        return [parse_team_award(a) for a in data]
    return get_list(expect_dict(data, "team awards"), "awards", parse_team_award)
