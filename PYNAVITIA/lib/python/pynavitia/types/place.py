from enum import Enum
from typing import Annotated, Protocol, runtime_checkable

from pydantic import AliasChoices, Field

from pynavitia.types.base import NavitiaModel
from pynavitia.types.coordinates import Coordinates
from pynavitia.types.errors import UnknownEmbeddedTypeError
from pynavitia.types.id import ID


@runtime_checkable
class Place(Protocol):
    """
    A Place isn't something the Navitia API sends as such, it's the common face of
    StopArea, POI, Address, StopPoint and AdministrativeRegion.
    If you want the raw container, see PlaceContainer.
    """

    def place_id(self) -> ID:
        ...

    def place_name(self) -> str:
        ...

    def place_type(self) -> str:
        ...


class Equipment(str, Enum):
    """Equipment flags of a stop point or a vehicle."""
    WHEELCHAIR_ACCESSIBILITY = "has_wheelchair_accessibility"
    BIKE_ACCEPTED = "has_bike_accepted"
    AIR_CONDITIONED = "has_air_conditioned"
    VISUAL_ANNOUNCEMENT = "has_visual_announcement"
    AUDIBLE_ANNOUNCEMENT = "has_audible_announcement"
    APPROPRIATE_ESCORT = "has_appropriate_escort"
    APPROPRIATE_SIGNAGE = "has_appropriate_signage"
    SCHOOL_VEHICLE = "has_school_vehicle"
    WHEELCHAIR_BOARDING = "has_wheelchair_boarding"
    SHELTERED = "has_sheltered"
    ELEVATOR = "has_elevator"
    ESCALATOR = "has_escalator"
    BIKE_DEPOT = "has_bike_depot"


# Unknown equipment flags are kept as plain strings
EquipmentValue = Annotated[Equipment | str, Field(union_mode="left_to_right")]


class AdministrativeRegion(NavitiaModel):
    """A region under the control of a specific organisation (city, department...)."""
    id: ID = ID()
    name: str = ""
    # The name comes from the data, the label is computed by navitia for traveler information.
    # If you don't know what to display, display the label
    label: str = ""
    coord: Coordinates = Field(default_factory=Coordinates.zero)
    level: int = 0
    zip_code: str = Field(default="", validation_alias=AliasChoices("zip_code", "ZipCode"))

    def place_id(self) -> ID:
        return self.id

    def place_name(self) -> str:
        return self.name

    def place_type(self) -> str:
        return "administrative_region"


class StopArea(NavitiaModel):
    """A place where a public transportation method may stop for a traveller."""
    id: ID = ID()
    name: str = ""
    label: str = ""
    coord: Coordinates = Field(default_factory=Coordinates.zero)
    administrative_regions: list[AdministrativeRegion] = []
    stop_points: list["StopPoint"] = []

    def place_id(self) -> ID:
        return self.id

    def place_name(self) -> str:
        return self.name

    def place_type(self) -> str:
        return "stop_area"


class POIType(NavitiaModel):
    id: ID = ID()
    name: str = ""


class POI(NavitiaModel):
    """A Point Of Interest. A loosely-defined place."""
    id: ID = ID()
    name: str = ""
    label: str = ""
    poi_type: POIType = Field(default_factory=POIType)

    def place_id(self) -> ID:
        return self.id

    def place_name(self) -> str:
        return self.name

    def place_type(self) -> str:
        return "poi"


class Address(NavitiaModel):
    """A real-world address."""
    id: ID = ID()
    name: str = ""
    label: str = ""
    coord: Coordinates = Field(default_factory=Coordinates.zero)
    house_number: int = 0
    administrative_regions: list[AdministrativeRegion] = []

    def place_id(self) -> ID:
        return self.id

    def place_name(self) -> str:
        return self.name

    def place_type(self) -> str:
        return "address"


class StopPoint(NavitiaModel):
    """A stop point in a line."""
    id: ID = ID()
    name: str = ""
    coord: Coordinates = Field(default_factory=Coordinates.zero)
    administrative_regions: list[AdministrativeRegion] = []
    equipments: list[EquipmentValue] = Field(
        default=[],
        validation_alias=AliasChoices("equipments", "equipment"),
    )
    # Stop area containing the stop point
    stop_area: StopArea | None = None

    def place_id(self) -> ID:
        return self.id

    def place_name(self) -> str:
        return self.name

    def place_type(self) -> str:
        return "stop_point"


StopArea.model_rebuild()


class PlaceContainer(NavitiaModel):
    """
    The container Navitia wraps every place into: a few common fields, an embedded_type
    discriminant and one slot per possible kind of place.
    Use place() to get the actual Place out of it.
    """
    id: ID = ID()
    name: str = ""
    quality: int = 0
    embedded_type: str = ""

    stop_area: StopArea | None = None
    poi: POI | None = Field(default=None, validation_alias=AliasChoices("poi", "POI"))
    address: Address | None = None
    stop_point: StopPoint | None = None
    administrative_region: AdministrativeRegion | None = None

    def is_empty(self) -> bool:
        return not any((
            self.id, self.name, self.quality, self.embedded_type,
            self.stop_area, self.poi, self.address, self.stop_point, self.administrative_region,
        ))

    def place(self) -> Place | None:
        """
        Returns the Place held by the container.

        Returns None for an empty container.
        Raises UnknownEmbeddedTypeError if the container isn't empty but embedded_type names no known place.
        """
        if self.is_empty():
            return None

        places = {
            "stop_area": self.stop_area,
            "poi": self.poi,
            "address": self.address,
            "stop_point": self.stop_point,
            "administrative_region": self.administrative_region,
        }
        if self.embedded_type not in places:
            raise UnknownEmbeddedTypeError(
                f'No known embedded type indicated (we have "{self.embedded_type}"), can\'t return a place'
            )
        return places[self.embedded_type]
