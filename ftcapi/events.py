"""
FTC events (qualifiers, league meets, championships, ...).
"""
import datetime as dt
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
from ftcapi.timefmt import parse_optional_time


@dataclass
class Event:
    event_id: str = ""
    code: str = ""               # e.g. "USNCCMP"
    division_code: Optional[str] = None
    name: str = ""
    remote: bool = False
    hybrid: bool = False
    field_count: int = 0
    published: bool = False
    type: str = ""
    type_name: str = ""          # e.g. "Qualifier", "Championship"
    region_code: str = ""
    league_code: Optional[str] = None
    district_code: str = ""
    venue: str = ""
    address: str = ""
    city: str = ""
    stateprov: str = ""
    country: str = ""
    website: str = ""
    live_stream_url: str = ""
    coordinates: Optional[str] = None
    webcasts: Optional[str] = None
    timezone: str = ""           # IANA name, e.g. "America/New_York"
    date_start: Optional[dt.datetime] = None
    date_end: Optional[dt.datetime] = None


def parse_event(data: Any) -> Event:
    d = expect_dict(data, "event")
    return Event(
        event_id=get_str(d, "eventId"),
        code=get_str(d, "code"),
        division_code=get_opt_str(d, "divisionCode"),
        name=get_str(d, "name"),
        remote=get_bool(d, "remote"),
        hybrid=get_bool(d, "hybrid"),
        field_count=get_int(d, "fieldCount"),
        published=get_bool(d, "published"),
        type=get_str(d, "type"),
        type_name=get_str(d, "typeName"),
        region_code=get_str(d, "regionCode"),
        league_code=get_opt_str(d, "leagueCode"),
        district_code=get_str(d, "districtCode"),
        venue=get_str(d, "venue"),
        address=get_str(d, "address"),
        city=get_str(d, "city"),
        stateprov=get_str(d, "stateprov"),
        country=get_str(d, "country"),
        website=get_str(d, "website"),
        live_stream_url=get_str(d, "liveStreamUrl"),
        coordinates=get_opt_str(d, "coordinates"),
        webcasts=get_opt_str(d, "webcasts"),
        timezone=get_str(d, "timezone"),
        date_start=parse_optional_time(d.get("dateStart")),
        date_end=parse_optional_time(d.get("dateEnd")),
    )


def parse_events(data: Any) -> List[Event]:
    return get_list(expect_dict(data, "event listing"), "events", parse_event)
