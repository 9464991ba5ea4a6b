"""
FTC Events API client.

    client = FtcClient(ClientConfig.from_env())
    teams = client.get_teams(2024)
    matches = client.get_match_results(2024, "USNCCMP", TournamentLevel.QUALIFIER)

Every method builds the URL, does one authenticated GET (get_teams does one
per page) and decodes the JSON body into the records in this package.
Nothing is retried or cached.
"""
import json
import logging
from typing import Any, Callable, List, Optional, TypeVar, Union

from ftcapi.advancement import (
    AdvancementsFrom,
    AdvancementsTo,
    parse_advancement_sources,
    parse_advancements_to,
)
from ftcapi.alliances import (
    Alliance,
    AllianceSelection,
    parse_alliance_selections,
    parse_alliances,
)
from ftcapi.api_index import ApiIndex, parse_api_index
from ftcapi.awards import Award, TeamAward, parse_awards, parse_team_awards
from ftcapi.config import ClientConfig
from ftcapi.errors import DecodeError, ParseError
from ftcapi.events import Event, parse_events
from ftcapi.leagues import League, parse_league_members, parse_leagues
from ftcapi.matches import Match, TournamentLevel, parse_matches
from ftcapi.rankings import Ranking, parse_rankings
from ftcapi.schedule import (
    EventSchedule,
    HybridSchedule,
    parse_event_schedules,
    parse_hybrid_schedules,
)
from ftcapi.scores import MatchScores, parse_scores
from ftcapi.summary import SeasonSummary, parse_season_summary
from ftcapi.teams import Team, parse_team_page
from ftcapi.transport import get_url
from ftcapi.uri import Params, build_url

logger = logging.getLogger(__name__)

T = TypeVar("T")
Season = Union[int, str]
Level = Union[TournamentLevel, str]


class FtcClient:
    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config if config is not None else ClientConfig.from_env()

    @property
    def server_url(self) -> str:
        return self.config.server

    def set_server_url(self, url: str):
        """Point subsequent requests at a different server."""
        self.config = self.config.with_server(url)

    def set_auth_credentials(self, username: str, authorization_key: str):
        self.config = self.config.with_credentials(username, authorization_key)

    # ------------------------------------------------------------------
    # plumbing
    # ------------------------------------------------------------------

    def url(self, *segments: Any, params: Optional[Params] = None) -> str:
        return build_url(self.config.server, *segments, params=params)

    def _fetch(self, url: str, parse: Callable[[Any], T]) -> T:
        body = get_url(url, self.config)
        try:
            data = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"invalid JSON from {url}: {e}") from e
        try:
            return parse(data)
        except (DecodeError, ParseError) as e:
            raise DecodeError(f"unexpected response from {url}: {e}") from e

    # ------------------------------------------------------------------
    # general
    # ------------------------------------------------------------------

    def get_api_index(self) -> ApiIndex:
        return self._fetch(self.url(), parse_api_index)

    def get_season_summary(self, season: Season) -> SeasonSummary:
        return self._fetch(self.url(season), parse_season_summary)

    # ------------------------------------------------------------------
    # teams and events
    # ------------------------------------------------------------------

    def get_teams(
        self,
        season: Season,
        team_number: Optional[int] = None,
        event_code: Optional[str] = None,
        state: Optional[str] = None,
    ) -> List[Team]:
        """
        All teams matching the filters, across every page.

        Pages are fetched one after another; if any page fails the error is
        raised and nothing is returned.
        """
        filters = {"teamNumber": team_number, "eventCode": event_code, "state": state}

        first = self._fetch(self.url(season, "teams", params=filters), parse_team_page)
        teams = list(first.teams)

        for page in range(2, first.page_total + 1):
            url = self.url(season, "teams", params={**filters, "page": page})
            teams.extend(self._fetch(url, parse_team_page).teams)

        logger.debug("Fetched %d teams over %d pages", len(teams), max(first.page_total, 1))
        return teams

    def get_events(
        self,
        season: Season,
        event_code: Optional[str] = None,
        team_number: Optional[int] = None,
    ) -> List[Event]:
        """Events in a season, optionally narrowed to one event or one team's events."""
        params = {"eventCode": event_code, "teamNumber": team_number}
        return self._fetch(self.url(season, "events", params=params), parse_events)

    # ------------------------------------------------------------------
    # matches, schedules, scores
    # ------------------------------------------------------------------

    def get_match_results(
        self,
        season: Season,
        event_code: str,
        tournament_level: Level,
        team_number: Optional[int] = None,
    ) -> List[Match]:
        params = {"tournamentLevel": tournament_level, "teamNumber": team_number}
        return self._fetch(self.url(season, "matches", event_code, params=params), parse_matches)

    def get_event_schedule(
        self,
        season: Season,
        event_code: str,
        tournament_level: Level,
        team_number: Optional[int] = None,
    ) -> List[EventSchedule]:
        params = {"tournamentLevel": tournament_level, "teamNumber": team_number}
        url = self.url(season, "schedule", event_code, params=params)
        return self._fetch(url, parse_event_schedules)

    def get_hybrid_schedule(
        self, season: Season, event_code: str, tournament_level: Level
    ) -> List[HybridSchedule]:
        url = self.url(season, "schedule", event_code, tournament_level, "hybrid")
        return self._fetch(url, parse_hybrid_schedules)

    def get_event_scores(
        self,
        season: Season,
        event_code: str,
        tournament_level: Level,
        team_number: Optional[int] = None,
    ) -> List[MatchScores]:
        url = self.url(
            season, "scores", event_code, tournament_level,
            params={"teamNumber": team_number},
        )
        return self._fetch(url, parse_scores)

    # ------------------------------------------------------------------
    # awards
    # ------------------------------------------------------------------

    def get_award_listing(self, season: Season) -> List[Award]:
        return self._fetch(self.url(season, "awards", "list"), parse_awards)

    def get_event_awards(
        self, season: Season, event_code: str, team_number: Optional[int] = None
    ) -> List[TeamAward]:
        url = self.url(season, "awards", event_code, params={"teamNumber": team_number})
        return self._fetch(url, parse_team_awards)

    def get_team_awards(
        self, season: Season, team_number: int, event_code: Optional[str] = None
    ) -> List[TeamAward]:
        url = self.url(season, "awards", team_number, params={"eventCode": event_code})
        return self._fetch(url, parse_team_awards)

    # ------------------------------------------------------------------
    # rankings, alliances, advancement
    # ------------------------------------------------------------------

    def get_rankings(
        self,
        season: Season,
        event_code: str,
        team_number: Optional[int] = None,
        top: Optional[int] = None,
    ) -> List[Ranking]:
        params = {"teamNumber": team_number, "top": top}
        return self._fetch(self.url(season, "rankings", event_code, params=params), parse_rankings)

    def get_event_alliances(self, season: Season, event_code: str) -> List[Alliance]:
        return self._fetch(self.url(season, "alliances", event_code), parse_alliances)

    def get_alliance_selections(self, season: Season, event_code: str) -> List[AllianceSelection]:
        url = self.url(season, "alliances", event_code, "selection")
        return self._fetch(url, parse_alliance_selections)

    def get_advancements_to(
        self, season: Season, event_code: str, exclude_skipped: Optional[bool] = None
    ) -> AdvancementsTo:
        """Teams advancing out of `event_code`, and the event they advance to."""
        url = self.url(season, "advancement", event_code, params={"excludeSkipped": exclude_skipped})
        return self._fetch(url, parse_advancements_to)

    def get_advancements_from(self, season: Season, event_code: str) -> List[AdvancementsFrom]:
        """Events whose teams advanced into `event_code`."""
        url = self.url(season, "advancement", event_code, "source")
        return self._fetch(url, parse_advancement_sources)

    # ------------------------------------------------------------------
    # leagues
    # ------------------------------------------------------------------

    def get_leagues(
        self,
        season: Season,
        region_code: Optional[str] = None,
        league_code: Optional[str] = None,
    ) -> List[League]:
        params = {"regionCode": region_code, "leagueCode": league_code}
        return self._fetch(self.url(season, "leagues", params=params), parse_leagues)

    def get_league_members(self, season: Season, region_code: str, league_code: str) -> List[int]:
        url = self.url(season, "leagues", "members", region_code, league_code)
        return self._fetch(url, parse_league_members)
