import datetime as dt
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

# Navitia returns "YYYYMMDDTHHMMSS" format
NAVITIA_DATETIME_FORMAT = "%Y%m%dT%H%M%S"


def parse_navitia_datetime(value: Any) -> Any:
    if isinstance(value, str):
        return dt.datetime.strptime(value, NAVITIA_DATETIME_FORMAT)
    return value


def format_navitia_datetime(value: dt.datetime) -> str:
    return value.strftime(NAVITIA_DATETIME_FORMAT)


NavitiaDateTime = Annotated[
    dt.datetime,
    BeforeValidator(parse_navitia_datetime),
    PlainSerializer(format_navitia_datetime, return_type=str),
]

# Durations are sent as a number of seconds
Seconds = Annotated[
    dt.timedelta,
    PlainSerializer(lambda value: int(value.total_seconds()), return_type=int),
]
