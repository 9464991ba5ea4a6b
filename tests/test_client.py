import datetime as dt

import pytest

from ftcapi.client import FtcClient
from ftcapi.errors import DecodeError, HTTPStatusError, ParseError, TransportError
from ftcapi.matches import TournamentLevel
from ftcapi.teams import Team

from tests.helpers import SERVER


def team_page(numbers, page, total):
    return {
        "teams": [{"teamNumber": n, "nameShort": f"Team {n}"} for n in numbers],
        "teamCountTotal": 3 * total,
        "teamCountPage": len(numbers),
        "pageCurrent": page,
        "pageTotal": total,
    }


# ---------------------------------------------------------------------------
# general
# ---------------------------------------------------------------------------

def test_api_index(fake_http, client):
    fake_http.add(SERVER, {
        "name": "FTC Events API",
        "apiVersion": "2.0",
        "serviceMainifestName": None,
        "codePackageName": "FTCEventsAPI",
        "codePackageVersion": "1.2.3",
        "status": "normal",
        "currentSeason": 2024,
        "maxSeason": 2025,
    })
    index = client.get_api_index()
    assert fake_http.urls == [SERVER]
    assert index.api_version == "2.0"
    assert index.service_mainifest_name is None
    assert index.current_season == 2024
    assert index.max_season == 2025


def test_season_summary(fake_http, client):
    fake_http.add(f"{SERVER}/2024", {
        "eventCount": 700,
        "gameName": "INTO THE DEEP",
        "kickoff": "2024-09-07T00:00:00",
        "rookieStart": 27000,
        "teamCount": 7000,
        "fRCChampionships": [{"name": "FIRST Championship", "startDate": "2025-04-16T00:00:00", "location": "Houston"}],
    })
    summary = client.get_season_summary(2024)
    assert summary.game_name == "INTO THE DEEP"
    assert summary.team_count == 7000
    assert [c.location for c in summary.championships] == ["Houston"]


# ---------------------------------------------------------------------------
# teams
# ---------------------------------------------------------------------------

def test_team_decodes_literal_values(fake_http, client):
    fake_http.add(f"{SERVER}/2024/teams", {"teams": [{"teamNumber": 12345, "nameShort": "X"}], "pageTotal": 1})
    teams = client.get_teams(2024)
    assert teams == [Team(team_number=12345, name_short="X")]
    assert teams[0].website is None


def test_single_page_makes_one_request(fake_http, client):
    fake_http.add(f"{SERVER}/2024/teams", team_page([1, 2], 1, 1))
    assert [t.team_number for t in client.get_teams(2024)] == [1, 2]
    assert len(fake_http.calls) == 1


def test_zero_page_total_still_returns_first_page(fake_http, client):
    fake_http.add(f"{SERVER}/2024/teams", {"teams": [{"teamNumber": 7}]})
    assert [t.team_number for t in client.get_teams(2024)] == [7]
    assert len(fake_http.calls) == 1


def test_three_pages_are_concatenated_in_order(fake_http, client):
    base = f"{SERVER}/2024/teams"
    fake_http.add(base, team_page([1, 2, 3], 1, 3))
    fake_http.add(f"{base}?page=2", team_page([4, 5, 6], 2, 3))
    fake_http.add(f"{base}?page=3", team_page([7, 8], 3, 3))

    teams = client.get_teams(2024)

    assert [t.team_number for t in teams] == [1, 2, 3, 4, 5, 6, 7, 8]
    assert fake_http.urls == [base, f"{base}?page=2", f"{base}?page=3"]


def test_filters_are_kept_on_every_page(fake_http, client):
    base = f"{SERVER}/2024/teams?state=NC"
    fake_http.add(base, team_page([1], 1, 2))
    fake_http.add(f"{base}&page=2", team_page([2], 2, 2))

    assert [t.team_number for t in client.get_teams(2024, state="NC")] == [1, 2]
    assert fake_http.urls == [base, f"{base}&page=2"]


def test_team_number_and_event_filters(fake_http, client):
    url = f"{SERVER}/2024/teams?teamNumber=8393&eventCode=USNCCMP"
    fake_http.add(url, team_page([8393], 1, 1))
    assert client.get_teams(2024, team_number=8393, event_code="USNCCMP")[0].team_number == 8393


def test_failing_later_page_discards_everything(fake_http, client):
    base = f"{SERVER}/2024/teams"
    fake_http.add(base, team_page([1, 2, 3], 1, 3))
    fake_http.add(f"{base}?page=2", {}, status=500)
    fake_http.add(f"{base}?page=3", team_page([7], 3, 3))

    with pytest.raises(HTTPStatusError) as exc:
        client.get_teams(2024)
    assert exc.value.code == 500
    # fail fast: page 3 is never requested
    assert len(fake_http.calls) == 2


def test_bad_json_on_later_page_is_decode_error(fake_http, client):
    base = f"{SERVER}/2024/teams"
    fake_http.add(base, team_page([1], 1, 2))
    fake_http.add(f"{base}?page=2", body=b"<html>oops</html>")
    with pytest.raises(DecodeError):
        client.get_teams(2024)


# ---------------------------------------------------------------------------
# events
# ---------------------------------------------------------------------------

def test_events(fake_http, client):
    fake_http.add(f"{SERVER}/2024/events?eventCode=USNCCMP", {
        "events": [{
            "code": "USNCCMP",
            "name": "North Carolina Championship",
            "leagueCode": None,
            "remote": False,
            "fieldCount": 2,
            "stateprov": "NC",
            "timezone": "America/New_York",
            "dateStart": "2025-02-22T00:00:00",
            "dateEnd": "2025-02-23T00:00:00Z",
        }],
        "eventCount": 1,
    })
    event, = client.get_events(2024, event_code="USNCCMP")
    assert event.code == "USNCCMP"
    assert event.field_count == 2
    assert event.league_code is None
    assert event.date_start == dt.datetime(2025, 2, 22)
    assert event.date_end == dt.datetime(2025, 2, 23)


def test_events_for_team(fake_http, client):
    fake_http.add(f"{SERVER}/2024/events?teamNumber=8393", {"events": []})
    assert client.get_events(2024, team_number=8393) == []


def test_event_with_missing_dates(fake_http, client):
    fake_http.add(f"{SERVER}/2024/events", {"events": [{"code": "X"}]})
    event, = client.get_events(2024)
    assert event.date_start is None


def test_bad_event_date_is_decode_error(fake_http, client):
    fake_http.add(f"{SERVER}/2024/events", {"events": [{"code": "X", "dateStart": "Feb 22 2025"}]})
    with pytest.raises(DecodeError) as exc:
        client.get_events(2024)
    assert isinstance(exc.value.__cause__, ParseError)


# ---------------------------------------------------------------------------
# matches, schedules, scores
# ---------------------------------------------------------------------------

def test_match_results(fake_http, client):
    fake_http.add(f"{SERVER}/2024/matches/USNCCMP?tournamentLevel=qual", {
        "matches": [{
            "description": "Qualification 1",
            "tournamentLevel": "QUALIFICATION",
            "matchNumber": 1,
            "scoreRedFinal": 120,
            "scoreBlueFinal": 95,
            "teams": [
                {"teamNumber": 1, "station": "Red1", "dq": False, "onField": True},
                {"teamNumber": 2, "station": "Blue1", "dq": True, "onField": True},
            ],
        }]
    })
    match, = client.get_match_results(2024, "USNCCMP", TournamentLevel.QUALIFIER)
    assert match.score_red_final == 120
    assert match.score_blue_final == 95
    assert [(t.team_number, t.dq) for t in match.teams] == [(1, False), (2, True)]


def test_match_results_for_team_accepts_plain_level_string(fake_http, client):
    fake_http.add(f"{SERVER}/2024/matches/USNCCMP?tournamentLevel=playoff&teamNumber=8393", {"matches": []})
    assert client.get_match_results(2024, "USNCCMP", "playoff", team_number=8393) == []


def test_event_schedule(fake_http, client):
    fake_http.add(f"{SERVER}/2024/schedule/USNCCMP?tournamentLevel=qual", {
        "schedule": [{
            "description": "Qualification 1",
            "field": "1",
            "startTime": "2025-02-22T09:00:00",
            "matchNumber": 1,
            "teams": [{"teamNumber": 1, "station": "Red1", "surrogate": True}],
        }]
    })
    entry, = client.get_event_schedule(2024, "USNCCMP", TournamentLevel.QUALIFIER)
    assert entry.field == "1"
    assert entry.teams[0].surrogate is True
    assert entry.teams[0].dq is None


def test_hybrid_schedule(fake_http, client):
    fake_http.add(f"{SERVER}/2024/schedule/USNCCMP/playoff/hybrid", {
        "schedule": [{
            "description": "Final 1",
            "scoreRedFinal": 200,
            "scoreBlueFinal": 150,
            "scoreBlueEndgame": 30,
            "redWins": True,
            "teams": [],
        }]
    })
    entry, = client.get_hybrid_schedule(2024, "USNCCMP", TournamentLevel.PLAYOFF)
    assert entry.red_wins is True
    assert entry.score_blue_endgame == 30
    assert entry.score_blue_drive_controlled is None


def test_event_scores(fake_http, client):
    fake_http.add(f"{SERVER}/2024/scores/USNCCMP/qual?teamNumber=8393", {
        "matchScores": [{
            "matchLevel": "QUALIFICATION",
            "matchNumber": 4,
            "alliances": [
                {"alliance": "Red", "autoPoints": 40, "teleopPoints": 60, "totalPoints": 100, "gameSpecific": 3},
            ],
        }]
    })
    scores, = client.get_event_scores(2024, "USNCCMP", TournamentLevel.QUALIFIER, team_number=8393)
    assert scores.match_number == 4
    assert scores.alliances[0].total_points == 100


# ---------------------------------------------------------------------------
# awards
# ---------------------------------------------------------------------------

def test_award_listing(fake_http, client):
    fake_http.add(f"{SERVER}/2024/awards/list", {
        "awards": [{"awardId": 1, "name": "Inspire Award", "description": "...", "forPerson": False}]
    })
    award, = client.get_award_listing(2024)
    assert award.name == "Inspire Award"


def test_event_awards(fake_http, client):
    fake_http.add(f"{SERVER}/2024/awards/USNCCMP?teamNumber=8393", {
        "awards": [{"awardId": 1, "eventCode": "USNCCMP", "name": "Inspire Award", "series": 1, "teamNumber": 8393}]
    })
    award, = client.get_event_awards(2024, "USNCCMP", team_number=8393)
    assert (award.team_number, award.series, award.person) == (8393, 1, None)


def test_team_awards_bare_list(fake_http, client):
    fake_http.add(f"{SERVER}/2024/awards/8393?eventCode=USNCCMP", [
        {"awardId": 5, "eventCode": "USNCCMP", "name": "Think Award", "teamNumber": 8393},
    ])
    award, = client.get_team_awards(2024, 8393, event_code="USNCCMP")
    assert award.name == "Think Award"


def test_team_awards_wrapped(fake_http, client):
    fake_http.add(f"{SERVER}/2024/awards/8393", {"awards": []})
    assert client.get_team_awards(2024, 8393) == []


# ---------------------------------------------------------------------------
# rankings, alliances, advancement
# ---------------------------------------------------------------------------

def test_rankings(fake_http, client):
    fake_http.add(f"{SERVER}/2024/rankings/USNCCMP?top=2", {
        "rankings": [
            {"rank": 1, "teamNumber": 1, "sortOrder1": 2.5, "wins": 5, "matchesPlayed": 5},
            {"rank": 2, "teamNumber": 2, "sortOrder1": 2, "teamName": "Two"},
        ]
    })
    first, second = client.get_rankings(2024, "USNCCMP", top=2)
    assert first.sort_order1 == 2.5
    assert second.sort_order1 == 2.0
    assert second.team_name == "Two"
    assert first.team_name is None


def test_event_alliances(fake_http, client):
    fake_http.add(f"{SERVER}/2024/alliances/USNCCMP", {
        "alliances": [{"number": 1, "name": "Alliance 1", "captain": 1, "round1": 2, "round2": None, "round3": 3}],
        "count": 1,
    })
    alliance, = client.get_event_alliances(2024, "USNCCMP")
    assert alliance.round1 == 2
    assert alliance.round2 == 0
    assert alliance.round3 == 3
    assert alliance.backup is None


def test_alliance_selections(fake_http, client):
    fake_http.add(f"{SERVER}/2024/alliances/USNCCMP/selection", {
        "selections": [{"index": 1, "team": 2, "result": "Accepted"}],
        "count": 1,
    })
    selection, = client.get_alliance_selections(2024, "USNCCMP")
    assert selection.result == "Accepted"


def test_advancements_to(fake_http, client):
    fake_http.add(f"{SERVER}/2024/advancement/USNCCMP?excludeSkipped=false", {
        "advancesTo": "CMPH",
        "slots": 2,
        "advancement": [{"team": 1, "displayTeam": "1", "slot": 1, "criteria": "Inspire", "status": "Accepted"}],
    })
    adv = client.get_advancements_to(2024, "USNCCMP", exclude_skipped=False)
    assert adv.advances_to == "CMPH"
    assert adv.advancement[0].criteria == "Inspire"


def test_advancements_to_without_flag(fake_http, client):
    fake_http.add(f"{SERVER}/2024/advancement/USNCCMP", {"advancesTo": "CMPH"})
    assert client.get_advancements_to(2024, "USNCCMP").advancement == []


def test_advancements_from(fake_http, client):
    fake_http.add(f"{SERVER}/2024/advancement/USNCCMP/source", [
        {"advancedFrom": "USNCRAQ", "advancedFromRegion": None, "slots": 3, "advancement": [{"team": 9}]},
    ])
    source, = client.get_advancements_from(2024, "USNCCMP")
    assert source.advanced_from == "USNCRAQ"
    assert source.advancement[0].team == 9


def test_advancements_from_expects_array(fake_http, client):
    fake_http.add(f"{SERVER}/2024/advancement/USNCCMP/source", {"advancedFrom": "USNCRAQ"})
    with pytest.raises(DecodeError):
        client.get_advancements_from(2024, "USNCCMP")


# ---------------------------------------------------------------------------
# leagues
# ---------------------------------------------------------------------------

def test_leagues_keep_every_filter(fake_http, client):
    fake_http.add(f"{SERVER}/2024/leagues?regionCode=USNC&leagueCode=TRI", {
        "leagues": [{"region": "USNC", "code": "TRI", "name": "Triangle", "parentLeagueCode": None}],
        "leagueCount": 1,
    })
    league, = client.get_leagues(2024, region_code="USNC", league_code="TRI")
    assert league.name == "Triangle"
    assert league.parent_league_code is None


def test_league_members(fake_http, client):
    fake_http.add(f"{SERVER}/2024/leagues/members/USNC/TRI", {"members": [1, 2, 3]})
    assert client.get_league_members(2024, "USNC", "TRI") == [1, 2, 3]


def test_league_members_must_be_numbers(fake_http, client):
    fake_http.add(f"{SERVER}/2024/leagues/members/USNC/TRI", {"members": ["1"]})
    with pytest.raises(DecodeError):
        client.get_league_members(2024, "USNC", "TRI")


# ---------------------------------------------------------------------------
# errors and configuration
# ---------------------------------------------------------------------------

def test_not_found_is_http_status_error(fake_http, client):
    with pytest.raises(HTTPStatusError) as exc:
        client.get_rankings(2024, "NOPE")
    assert exc.value.code == 404


def test_malformed_json_is_decode_error(fake_http, client):
    fake_http.add(f"{SERVER}/2024/rankings/USNCCMP", body=b'{"rankings": [')
    with pytest.raises(DecodeError) as exc:
        client.get_rankings(2024, "USNCCMP")
    assert isinstance(exc.value.__cause__, ValueError)


def test_deeply_nested_json_is_decode_error(fake_http, client):
    fake_http.add(f"{SERVER}/2024/rankings/USNCCMP", body=b"[" * 1_000_000)
    with pytest.raises(DecodeError) as exc:
        client.get_rankings(2024, "USNCCMP")
    assert isinstance(exc.value.__cause__, RecursionError)


@pytest.mark.parametrize("payload", [
    [],
    {"rankings": {"rank": 1}},
    {"rankings": [{"rank": "first"}]},
    {"rankings": [{"rank": 1, "wins": True}]},
    {"rankings": ["not an object"]},
])
def test_unexpected_shape_is_decode_error(fake_http, client, payload):
    fake_http.add(f"{SERVER}/2024/rankings/USNCCMP", payload)
    with pytest.raises(DecodeError):
        client.get_rankings(2024, "USNCCMP")


def test_unknown_fields_are_ignored(fake_http, client):
    fake_http.add(f"{SERVER}/2024/awards/list", {"awards": [{"awardId": 1, "brandNew": {"x": 1}}], "extra": 1})
    assert client.get_award_listing(2024)[0].award_id == 1


def test_transport_errors_propagate(fake_http, client):
    import requests

    fake_http.add(f"{SERVER}/2024/awards/list", error=requests.Timeout("slow"))
    with pytest.raises(TransportError):
        client.get_award_listing(2024)


def test_set_server_url_changes_prefix(fake_http, client):
    client.set_server_url("https://other.test/api")
    fake_http.add("https://other.test/api/2024/awards/list", {"awards": []})

    assert client.server_url == "https://other.test/api"
    assert client.get_award_listing(2024) == []
    assert fake_http.urls == ["https://other.test/api/2024/awards/list"]


def test_set_auth_credentials(fake_http, client):
    client.set_auth_credentials("carol", "k2")
    fake_http.add(f"{SERVER}/2024/awards/list", {"awards": []})
    client.get_award_listing(2024)
    assert fake_http.calls[0][1]["auth"] == ("carol", "k2")


def test_clients_do_not_share_server(config):
    a = FtcClient(config)
    b = FtcClient(config)
    a.set_server_url("https://a.test")
    assert b.server_url == SERVER
