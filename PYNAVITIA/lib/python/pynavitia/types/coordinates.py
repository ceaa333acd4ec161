from typing import Any

from geopy.distance import geodesic
from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from pynavitia.types.errors import UnmarshalErrorMaker


def _parse_float(gen: UnmarshalErrorMaker, field: str, json_key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise gen.err(field, json_key, value, "could not parse float")
    # float() is more lenient than the API's number format
    if isinstance(value, str) and (value != value.strip() or "_" in value):
        raise gen.err(field, json_key, value, "could not parse float")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise gen.err(field, json_key, value, "could not parse float") from e


class Coordinates(BaseModel):
    """
    A WGS84 position.
    Navitia sends both members as strings ({"lat": "48.84", "lon": "2.37"}), they are parsed into floats here.
    """
    latitude: float = 0.0
    longitude: float = 0.0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def zero(cls) -> "Coordinates":
        """The position of a place sent without coord."""
        return cls(latitude=0.0, longitude=0.0)

    @model_validator(mode="before")
    @classmethod
    def _from_string_pair(cls, data: Any) -> Any:
        # Already built from field names
        if not isinstance(data, dict) or "latitude" in data or "longitude" in data:
            return data

        gen = UnmarshalErrorMaker("Coordinates", data)
        longitude = _parse_float(gen, "longitude", "lon", data.get("lon", ""))
        latitude = _parse_float(gen, "latitude", "lat", data.get("lat", ""))
        return {"latitude": latitude, "longitude": longitude}

    @model_serializer
    def _to_string_pair(self) -> dict[str, str]:
        return {"lat": repr(self.latitude), "lon": repr(self.longitude)}

    @classmethod
    def from_json(cls, raw: str | bytes) -> "Coordinates":
        return cls.model_validate_json(raw)

    def to_json(self) -> str:
        return self.model_dump_json()

    def distance_to(self, other: "Coordinates") -> float:
        """Geodesic distance to another position, in meters."""
        return geodesic((self.latitude, self.longitude), (other.latitude, other.longitude)).meters
