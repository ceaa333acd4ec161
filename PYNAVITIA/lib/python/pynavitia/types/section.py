import datetime as dt
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    WithJsonSchema,
    model_validator,
)
from shapely.errors import ShapelyError
from shapely.geometry import LineString, mapping, shape

from pynavitia.types.base import NavitiaModel
from pynavitia.types.id import ID
from pynavitia.types.navitia_time import NavitiaDateTime, Seconds
from pynavitia.types.place import EquipmentValue, PlaceContainer, StopPoint


class SectionType(str, Enum):
    """The types of sections that can be returned by the API."""
    PUBLIC_TRANSPORT = "public_transport"
    STREET_NETWORK = "street_network"
    WAITING = "waiting"
    STAY_IN = "stay_in"
    TRANSFER = "transfer"
    # No path nor geo in this case
    CROW_FLY = "crow_fly"
    ON_DEMAND_TRANSPORT = "on_demand_transport"
    BIKE_SHARE_RENT = "bss_rent"
    BIKE_SHARE_PUT_BACK = "bss_put_back"
    BOARDING = "boarding"
    LANDING = "landing"

    @property
    def description(self) -> str:
        return SECTION_TYPES[self]


SECTION_TYPES = {
    SectionType.PUBLIC_TRANSPORT: "Public transport section",
    SectionType.STREET_NETWORK: "Street section",
    SectionType.WAITING: "Waiting section between transport",
    SectionType.STAY_IN: "This “stay in the vehicle” section occurs when the traveller has to stay in the vehicle "
                         "when the bus change its routing.",
    SectionType.TRANSFER: "Transfer section",
    SectionType.CROW_FLY: "Teleportation section. Used when starting or arriving to a city or a stoparea "
                          "(“potato shaped” objects) Useful to make navitia idempotent",
    SectionType.ON_DEMAND_TRANSPORT: "Vehicle may not drive along: traveler will have to call agency to confirm journey",
    SectionType.BIKE_SHARE_RENT: "Taking a bike from a bike sharing system (bss)",
    SectionType.BIKE_SHARE_PUT_BACK: "Putting back a bike from a bike sharing system (bss)",
    SectionType.BOARDING: "Boarding on plane",
    SectionType.LANDING: "Landing off the plane",
}


class PTMethod(str, Enum):
    """
    A Public Transportation method: regular, estimated times or on-demand transport (ODT).
    """
    # Line does not contain any estimated stop times, nor zonal stop point location. No need to call.
    REGULAR = "regular"
    # No on-demand transport, but the line has at least one estimated date time.
    DATE_TIME_ESTIMATED = "had_date_time_estimated"
    # No estimated stop times nor zonal stop point location, but you will have to call to take it.
    ODT_STOP_TIME = "odt_with_stop_time"
    # Some estimated stop times, no zonal stop point location, and you will have to call to take it.
    ODT_STOP_POINT = "odt_with_stop_point"
    # Estimated stop times and zonal stop point location, you will have to call. More a cab than a line.
    ODT_ZONE = "odt_with_zone"


# Values unknown to this library are kept as plain strings
SectionTypeValue = Annotated[SectionType | str, Field(union_mode="left_to_right")]
PTMethodValue = Annotated[PTMethod | str, Field(union_mode="left_to_right")]


def _parse_geojson(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    try:
        # A line needs at least two positions
        if len(value.get("coordinates") or []) < 2:
            return None
        return shape(value)
    except (ShapelyError, TypeError, KeyError) as e:
        raise ValueError(f"invalid geojson: {e}") from e


def _dump_geojson(line: LineString | None) -> dict | None:
    if line is None:
        return None
    return mapping(line)


# GeoJSON LineString, decoded into a shapely geometry
GeoLineString = Annotated[
    LineString | None,
    BeforeValidator(_parse_geojson),
    PlainSerializer(_dump_geojson),
    WithJsonSchema({"type": "object"}),
]


class PTDateTime(NavitiaModel):
    departure: NavitiaDateTime | None = Field(default=None, alias="departure_date_time")
    arrival: NavitiaDateTime | None = Field(default=None, alias="arrival_date_time")
    additional_informations: list[PTMethodValue] = []


class StopTime(NavitiaModel):
    """
    A stop in a route: when the vehicle comes in, when it comes out, and what stop it is.
    """
    # Arrival and departure, taken from the date time fields of the same object
    pt_date_time: PTDateTime = Field(default_factory=PTDateTime)
    stop_point: StopPoint = Field(default_factory=StopPoint)
    utc_departure_time: str = ""
    headsign: str = ""
    utc_arrival_time: str = ""
    departure_time: str = ""
    pickup_allowed: bool = False
    drop_off_allowed: bool = False

    @model_validator(mode="before")
    @classmethod
    def _lift_pt_date_time(cls, data: Any) -> Any:
        if isinstance(data, dict) and "pt_date_time" not in data:
            data = {**data, "pt_date_time": {
                key: data[key]
                for key in ("departure_date_time", "arrival_date_time", "additional_informations")
                if key in data
            }}
        return data


class PathSegment(NavitiaModel):
    length: int = 0
    name: str = ""
    duration: int = 0
    direction: int = 0


class Display(NavitiaModel):
    """Information to display to the traveler about a public transport section."""
    network: str = ""
    direction: str = ""
    commercial_mode: str = ""
    physical_mode: str = ""
    label: str = ""
    color: str = ""
    code: str = ""
    headsign: str = ""
    text_color: str = ""
    description: str = ""
    name: str = ""
    trip_short_name: str = ""
    equipments: list[EquipmentValue] = []


class Section(NavitiaModel):
    """One leg of a journey."""
    type: SectionTypeValue = ""
    id: ID = ID()
    mode: str = ""

    from_: PlaceContainer = Field(default_factory=PlaceContainer, alias="from")
    to: PlaceContainer = Field(default_factory=PlaceContainer)

    departure: NavitiaDateTime | None = Field(default=None, alias="departure_date_time")
    arrival: NavitiaDateTime | None = Field(default=None, alias="arrival_date_time")

    # Duration of travel, sent in seconds
    duration: Seconds = dt.timedelta()

    path: list[PathSegment] = []
    geo: GeoLineString = Field(default=None, alias="geojson")

    stop_times: list[StopTime] = Field(default=[], alias="stop_date_times")
    display: Display = Field(default_factory=Display, alias="display_informations")

    # From what can be seen this is always a list of PTMethod
    additional: list[PTMethodValue] = Field(default=[], alias="additional_informations")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def is_public_transport(self) -> bool:
        return self.type == SectionType.PUBLIC_TRANSPORT
