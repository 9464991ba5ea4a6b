"""
Qualification rankings at an event.
"""
from dataclasses import dataclass
from typing import Any, List, Optional

from ftcapi.records import (
    expect_dict,
    get_float,
    get_int,
    get_list,
    get_opt_str,
    get_str,
)


@dataclass
class Ranking:
    rank: int = 0
    team_number: int = 0
    display_team_number: str = ""
    team_name: Optional[str] = None
    # Tie-breakers; their meaning changes from season to season.
    sort_order1: float = 0.0
    sort_order2: float = 0.0
    sort_order3: float = 0.0
    sort_order4: float = 0.0
    sort_order5: float = 0.0
    sort_order6: float = 0.0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    qual_average: int = 0
    dq: int = 0
    matches_played: int = 0
    matches_counted: int = 0


def parse_ranking(data: Any) -> Ranking:
    d = expect_dict(data, "ranking")
    return Ranking(
        rank=get_int(d, "rank"),
        team_number=get_int(d, "teamNumber"),
        display_team_number=get_str(d, "displayTeamNumber"),
        team_name=get_opt_str(d, "teamName"),
        sort_order1=get_float(d, "sortOrder1"),
        sort_order2=get_float(d, "sortOrder2"),
        sort_order3=get_float(d, "sortOrder3"),
        sort_order4=get_float(d, "sortOrder4"),
        sort_order5=get_float(d, "sortOrder5"),
        sort_order6=get_float(d, "sortOrder6"),
        wins=get_int(d, "wins"),
        losses=get_int(d, "losses"),
        ties=get_int(d, "ties"),
        qual_average=get_int(d, "qualAverage"),
        dq=get_int(d, "dq"),
        matches_played=get_int(d, "matchesPlayed"),
        matches_counted=get_int(d, "matchesCounted"),
    )


def parse_rankings(data: Any) -> List[Ranking]:
    return get_list(expect_dict(data, "ranking listing"), "rankings", parse_ranking)
