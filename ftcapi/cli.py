#!/usr/bin/env python3
"""
Command line front end for the FTC Events API.

Examples:
  ftcapi --season 2024 teams --state NC
  ftcapi --season 2024 matches USNCCMP --level playoff
  ftcapi --season 2024 --json rankings USNCCMP --top 10
  ftcapi index

Credentials come from FTC_USERNAME / FTC_AUTHORIZATION_KEY (a .env file
works too). FTC_SEASON sets the default season, LOG_LEVEL the log level.
"""
import argparse
import json
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional

import pandas as pd
from dotenv import find_dotenv, load_dotenv

from ftcapi.client import FtcClient
from ftcapi.config import ClientConfig
from ftcapi.errors import FtcApiError
from ftcapi.matches import TournamentLevel
from ftcapi.records import to_dict

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(level_name: Optional[str] = None):
    level = LOG_LEVELS.get((level_name or "").lower(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def render_table(rows: List[Dict[str, Any]], columns: Optional[List[str]] = None) -> str:
    """Render dict rows as a plain-text table; only `columns` are shown if given."""
    if not rows:
        return "No results."
    df = pd.DataFrame(rows)
    if columns:
        df = df[[c for c in columns if c in df.columns]]
    return df.to_string(index=False)


def _stations(teams, prefix: str) -> str:
    return " ".join(str(t.team_number) for t in teams if t.station.startswith(prefix))


# ---------------------------------------------------------------------------
# Subcommands. Each returns (raw result, rendered table).
# ---------------------------------------------------------------------------

def cmd_index(client: FtcClient, args):
    index = client.get_api_index()
    return index, pd.Series(to_dict(index)).to_string()


def cmd_summary(client: FtcClient, args):
    summary = client.get_season_summary(args.season)
    header = (
        f"{summary.game_name} ({args.season}): "
        f"{summary.team_count} teams, {summary.event_count} events, kickoff {summary.kickoff}"
    )
    rows = [to_dict(c) for c in summary.championships]
    return summary, header + "\n\n" + render_table(rows, ["name", "startDate", "location"])


def cmd_teams(client: FtcClient, args):
    teams = client.get_teams(args.season, team_number=args.team, event_code=args.event, state=args.state)
    rows = [to_dict(t) for t in teams]
    table = render_table(rows, ["teamNumber", "nameShort", "city", "stateProv", "country", "homeRegion", "rookieYear"])
    return teams, table


def cmd_events(client: FtcClient, args):
    events = client.get_events(args.season, event_code=args.event, team_number=args.team)
    rows = [to_dict(e) for e in events]
    table = render_table(rows, ["code", "name", "typeName", "regionCode", "city", "stateprov", "dateStart", "dateEnd"])
    return events, table


def cmd_matches(client: FtcClient, args):
    matches = client.get_match_results(args.season, args.event_code, args.level, team_number=args.team)
    rows = [
        {
            "match": m.description,
            "red": _stations(m.teams, "Red"),
            "blue": _stations(m.teams, "Blue"),
            "redScore": m.score_red_final,
            "blueScore": m.score_blue_final,
        }
        for m in matches
    ]
    return matches, render_table(rows)


def cmd_schedule(client: FtcClient, args):
    schedule = client.get_event_schedule(args.season, args.event_code, args.level, team_number=args.team)
    rows = [
        {
            "match": s.description,
            "field": s.field,
            "start": s.start_time,
            "red": _stations(s.teams, "Red"),
            "blue": _stations(s.teams, "Blue"),
        }
        for s in schedule
    ]
    return schedule, render_table(rows)


def cmd_hybrid(client: FtcClient, args):
    schedule = client.get_hybrid_schedule(args.season, args.event_code, args.level)
    rows = [
        {
            "match": s.description,
            "red": _stations(s.teams, "Red"),
            "blue": _stations(s.teams, "Blue"),
            "redScore": s.score_red_final,
            "blueScore": s.score_blue_final,
            "winner": "Red" if s.red_wins else "Blue" if s.blue_wins else "",
        }
        for s in schedule
    ]
    return schedule, render_table(rows)


def cmd_scores(client: FtcClient, args):
    scores = client.get_event_scores(args.season, args.event_code, args.level, team_number=args.team)
    rows = []
    for ms in scores:
        for a in ms.alliances:
            rows.append({
                "match": ms.match_number,
                "alliance": a.alliance,
                "auto": a.auto_points,
                "teleop": a.teleop_points,
                "fouls": a.foul_points_committed,
                "total": a.total_points,
            })
    return scores, render_table(rows)


def cmd_awards(client: FtcClient, args):
    awards = client.get_award_listing(args.season)
    rows = [to_dict(a) for a in awards]
    return awards, render_table(rows, ["awardId", "name", "forPerson"])


def cmd_event_awards(client: FtcClient, args):
    awards = client.get_event_awards(args.season, args.event_code, team_number=args.team)
    rows = [to_dict(a) for a in awards]
    return awards, render_table(rows, ["name", "series", "teamNumber", "person"])


def cmd_team_awards(client: FtcClient, args):
    awards = client.get_team_awards(args.season, args.team_number, event_code=args.event)
    rows = [to_dict(a) for a in awards]
    return awards, render_table(rows, ["eventCode", "name", "series", "teamNumber"])


def cmd_rankings(client: FtcClient, args):
    rankings = client.get_rankings(args.season, args.event_code, team_number=args.team, top=args.top)
    rows = [to_dict(r) for r in rankings]
    table = render_table(rows, ["rank", "teamNumber", "teamName", "wins", "losses", "ties", "sortOrder1", "matchesPlayed"])
    return rankings, table


def cmd_alliances(client: FtcClient, args):
    alliances = client.get_event_alliances(args.season, args.event_code)
    rows = [to_dict(a) for a in alliances]
    return alliances, render_table(rows, ["number", "name", "captain", "round1", "round2", "round3", "backup"])


def cmd_selections(client: FtcClient, args):
    selections = client.get_alliance_selections(args.season, args.event_code)
    rows = [to_dict(s) for s in selections]
    return selections, render_table(rows, ["index", "team", "result"])


def cmd_advancement(client: FtcClient, args):
    adv = client.get_advancements_to(args.season, args.event_code, exclude_skipped=args.exclude_skipped)
    header = f"Advancing to {adv.advances_to or '?'} ({adv.slots} slots)"
    rows = [to_dict(a) for a in adv.advancement]
    return adv, header + "\n\n" + render_table(rows, ["slot", "team", "criteria", "status"])


def cmd_advancement_source(client: FtcClient, args):
    sources = client.get_advancements_from(args.season, args.event_code)
    rows = [
        {"from": s.advanced_from, "region": s.advanced_from_region or "", "slots": s.slots,
         "teams": " ".join(str(a.team) for a in s.advancement)}
        for s in sources
    ]
    return sources, render_table(rows)


def cmd_leagues(client: FtcClient, args):
    leagues = client.get_leagues(args.season, region_code=args.region, league_code=args.league)
    rows = [to_dict(lg) for lg in leagues]
    return leagues, render_table(rows, ["region", "code", "name", "remote", "location"])


def cmd_league_members(client: FtcClient, args):
    members = client.get_league_members(args.season, args.region_code, args.league_code)
    return members, render_table([{"teamNumber": m} for m in members])


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _level(value: str) -> TournamentLevel:
    try:
        return TournamentLevel(value.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(f"tournament level must be 'qual' or 'playoff', not {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ftcapi", description="Query the FTC Events API.")
    parser.add_argument("--season", default=os.environ.get("FTC_SEASON"),
                        help="Season year (defaults to FTC_SEASON)")
    parser.add_argument("--server", help="Override the API base URL (FTC_SERVER)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    sub = parser.add_subparsers(dest="command", required=True)

    def add(name: str, func: Callable, help_text: str, seasonal: bool = True) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=help_text)
        p.set_defaults(func=func, seasonal=seasonal)
        return p

    def add_level(p: argparse.ArgumentParser):
        p.add_argument("--level", type=_level, default=TournamentLevel.QUALIFIER,
                       help="qual (default) or playoff")

    add("index", cmd_index, "API version and current season", seasonal=False)
    add("summary", cmd_summary, "Season summary")

    p = add("teams", cmd_teams, "List teams (all pages)")
    p.add_argument("--team", type=int)
    p.add_argument("--event")
    p.add_argument("--state")

    p = add("events", cmd_events, "List events")
    p.add_argument("--event")
    p.add_argument("--team", type=int)

    for name, func, help_text in [
        ("matches", cmd_matches, "Match results for an event"),
        ("schedule", cmd_schedule, "Match schedule for an event"),
        ("scores", cmd_scores, "Detailed match scores for an event"),
    ]:
        p = add(name, func, help_text)
        p.add_argument("event_code")
        add_level(p)
        p.add_argument("--team", type=int)

    p = add("hybrid", cmd_hybrid, "Hybrid schedule (schedule + results) for an event")
    p.add_argument("event_code")
    add_level(p)

    add("awards", cmd_awards, "Award catalogue for the season")

    p = add("event-awards", cmd_event_awards, "Awards given at an event")
    p.add_argument("event_code")
    p.add_argument("--team", type=int)

    p = add("team-awards", cmd_team_awards, "Awards won by a team")
    p.add_argument("team_number", type=int)
    p.add_argument("--event")

    p = add("rankings", cmd_rankings, "Qualification rankings for an event")
    p.add_argument("event_code")
    p.add_argument("--team", type=int)
    p.add_argument("--top", type=int)

    p = add("alliances", cmd_alliances, "Playoff alliances for an event")
    p.add_argument("event_code")

    p = add("selections", cmd_selections, "Alliance selection picks for an event")
    p.add_argument("event_code")

    p = add("advancement", cmd_advancement, "Teams advancing from an event")
    p.add_argument("event_code")
    p.add_argument("--exclude-skipped", action="store_true", default=None)

    p = add("advancement-source", cmd_advancement_source, "Events feeding teams into an event")
    p.add_argument("event_code")

    p = add("leagues", cmd_leagues, "List leagues")
    p.add_argument("--region")
    p.add_argument("--league")

    p = add("league-members", cmd_league_members, "Team numbers in a league")
    p.add_argument("region_code")
    p.add_argument("league_code")

    return parser


def main(argv: Optional[List[str]] = None, client: Optional[FtcClient] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(os.environ.get("LOG_LEVEL"))

    if args.seasonal and not args.season:
        parser.error("season not specified; use --season or set FTC_SEASON")

    if client is None:
        try:
            client = FtcClient(ClientConfig.from_env())
        except ValueError as e:
            parser.error(str(e))
    if args.server:
        client.set_server_url(args.server)

    try:
        result, table = args.func(client, args)
    except FtcApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(to_dict(result), indent=2))
    else:
        print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
