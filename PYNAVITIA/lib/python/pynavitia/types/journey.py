from pydantic import Field

from pynavitia.timing import RequestTiming
from pynavitia.types.base import NavitiaModel
from pynavitia.types.navitia_time import NavitiaDateTime, Seconds
from pynavitia.types.place import Place
from pynavitia.types.section import Section


class CO2Emission(NavitiaModel):
    value: float = 0.0
    unit: str = ""


class Journey(NavitiaModel):
    """A journey computed by Navitia, made of consecutive sections."""
    duration: Seconds
    nb_transfers: int = 0

    departure: NavitiaDateTime = Field(alias="departure_date_time")
    arrival: NavitiaDateTime = Field(alias="arrival_date_time")
    requested: NavitiaDateTime | None = Field(default=None, alias="requested_date_time")

    # Qualification of the journey by navitia, e.g. "best", "rapid", "comfort"
    type: str = ""
    status: str = ""
    tags: list[str] = []

    sections: list[Section] = []
    co2_emission: CO2Emission | None = None

    def origin(self) -> Place | None:
        if not self.sections:
            return None
        return self.sections[0].from_.place()

    def destination(self) -> Place | None:
        if not self.sections:
            return None
        return self.sections[-1].to.place()


class JourneyResults(NavitiaModel):
    journeys: list[Journey] = []
    timing: RequestTiming | None = Field(default=None, exclude=True)

    def __len__(self) -> int:
        return len(self.journeys)
