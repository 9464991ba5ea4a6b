"""
Event schedules. The hybrid view merges the schedule with posted results,
for events that mix remote and in-person play.
"""
import dataclasses
from dataclasses import dataclass
from typing import Any, List, Optional

from ftcapi.records import (
    expect_dict,
    get_bool,
    get_int,
    get_list,
    get_opt_bool,
    get_opt_int,
    get_str,
)


@dataclass
class ScheduledTeam:
    team_number: int = 0
    display_team_number: str = ""
    station: str = ""
    team: str = ""
    team_name: str = ""
    surrogate: bool = False
    no_show: bool = False
    dq: Optional[bool] = None
    on_field: Optional[bool] = None


@dataclass
class EventSchedule:
    description: str = ""
    field: str = ""
    tournament_level: str = ""
    start_time: str = ""
    series: int = 0
    match_number: int = 0
    teams: List[ScheduledTeam] = dataclasses.field(default_factory=list)
    modified_on: str = ""


@dataclass
class HybridSchedule:
    description: str = ""
    tournament_level: str = ""
    series: int = 0
    match_number: int = 0
    start_time: str = ""
    actual_start_time: str = ""
    post_result_time: str = ""
    score_red_final: int = 0
    score_red_foul: int = 0
    score_red_auto: int = 0
    score_blue_final: int = 0
    score_blue_foul: int = 0
    score_blue_auto: int = 0
    score_blue_drive_controlled: Optional[int] = None
    score_blue_endgame: Optional[int] = None
    red_wins: bool = False
    blue_wins: bool = False
    teams: List[ScheduledTeam] = dataclasses.field(default_factory=list)


def parse_scheduled_team(data: Any) -> ScheduledTeam:
    d = expect_dict(data, "scheduled team")
    return ScheduledTeam(
        team_number=get_int(d, "teamNumber"),
        display_team_number=get_str(d, "displayTeamNumber"),
        station=get_str(d, "station"),
        team=get_str(d, "team"),
        team_name=get_str(d, "teamName"),
        surrogate=get_bool(d, "surrogate"),
        no_show=get_bool(d, "noShow"),
        dq=get_opt_bool(d, "dq"),
        on_field=get_opt_bool(d, "onField"),
    )


def parse_event_schedule(data: Any) -> EventSchedule:
    d = expect_dict(data, "scheduled match")
    return EventSchedule(
        description=get_str(d, "description"),
        field=get_str(d, "field"),
        tournament_level=get_str(d, "tournamentLevel"),
        start_time=get_str(d, "startTime"),
        series=get_int(d, "series"),
        match_number=get_int(d, "matchNumber"),
        teams=get_list(d, "teams", parse_scheduled_team),
        modified_on=get_str(d, "modifiedOn"),
    )


def parse_hybrid_schedule(data: Any) -> HybridSchedule:
    d = expect_dict(data, "hybrid schedule entry")
    return HybridSchedule(
        description=get_str(d, "description"),
        tournament_level=get_str(d, "tournamentLevel"),
        series=get_int(d, "series"),
        match_number=get_int(d, "matchNumber"),
        start_time=get_str(d, "startTime"),
        actual_start_time=get_str(d, "actualStartTime"),
        post_result_time=get_str(d, "postResultTime"),
        score_red_final=get_int(d, "scoreRedFinal"),
        score_red_foul=get_int(d, "scoreRedFoul"),
        score_red_auto=get_int(d, "scoreRedAuto"),
        score_blue_final=get_int(d, "scoreBlueFinal"),
        score_blue_foul=get_int(d, "scoreBlueFoul"),
        score_blue_auto=get_int(d, "scoreBlueAuto"),
        score_blue_drive_controlled=get_opt_int(d, "scoreBlueDriveControlled"),
        score_blue_endgame=get_opt_int(d, "scoreBlueEndgame"),
        red_wins=get_bool(d, "redWins"),
        blue_wins=get_bool(d, "blueWins"),
        teams=get_list(d, "teams", parse_scheduled_team),
    )


def parse_event_schedules(data: Any) -> List[EventSchedule]:
    return get_list(expect_dict(data, "schedule"), "schedule", parse_event_schedule)


def parse_hybrid_schedules(data: Any) -> List[HybridSchedule]:
    return get_list(expect_dict(data, "hybrid schedule"), "schedule", parse_hybrid_schedule)
