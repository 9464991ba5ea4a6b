"""
FTC teams. The /teams endpoint is paged; TeamPage is one page of it.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ftcapi.records import (
    expect_dict,
    get_int,
    get_list,
    get_opt_str,
    get_str,
)


@dataclass
class Team:
    team_number: int = 0
    display_team_number: str = ""
    name_full: str = ""          # sponsors + school, often very long
    name_short: str = ""         # e.g. "Gear Grinders"
    school_name: Optional[str] = None
    city: str = ""
    state_prov: str = ""
    country: str = ""
    website: Optional[str] = None
    rookie_year: int = 0
    robot_name: Optional[str] = None
    district_code: Optional[str] = None
    home_cmp: Optional[str] = field(default=None, metadata={"json": "homeCMP"})
    home_region: Optional[str] = None  # e.g. "USNC"


@dataclass
class TeamPage:
    teams: List[Team] = field(default_factory=list)
    team_count_total: int = 0
    team_count_page: int = 0
    page_current: int = 0
    page_total: int = 0


def parse_team(data: Any) -> Team:
    d = expect_dict(data, "team")
    return Team(
        team_number=get_int(d, "teamNumber"),
        display_team_number=get_str(d, "displayTeamNumber"),
        name_full=get_str(d, "nameFull"),
        name_short=get_str(d, "nameShort"),
        school_name=get_opt_str(d, "schoolName"),
        city=get_str(d, "city"),
        state_prov=get_str(d, "stateProv"),
        country=get_str(d, "country"),
        website=get_opt_str(d, "website"),
        rookie_year=get_int(d, "rookieYear"),
        robot_name=get_opt_str(d, "robotName"),
        district_code=get_opt_str(d, "districtCode"),
        home_cmp=get_opt_str(d, "homeCMP"),
        home_region=get_opt_str(d, "homeRegion"),
    )


def parse_team_page(data: Any) -> TeamPage:
    d = expect_dict(data, "team listing")
    return TeamPage(
        teams=get_list(d, "teams", parse_team),
        team_count_total=get_int(d, "teamCountTotal"),
        team_count_page=get_int(d, "teamCountPage"),
        page_current=get_int(d, "pageCurrent"),
        page_total=get_int(d, "pageTotal"),
    )
