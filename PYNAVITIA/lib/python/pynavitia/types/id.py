from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from pynavitia.types.errors import InvalidIDError

# Navitia-side names of the types that may appear as an ID prefix.
TYPE_NAMES = frozenset({
    "network",
    "line",
    "route",
    "stop_area",
    "commercial_mode",
    "physical_mode",
    "company",
    "admin",
    "stop_point",
})


class ID(str):
    """
    An identifier handed out by the Navitia API, e.g. "stop_area:SNCF:87391003".
    Behaves as a plain string and can be used directly as a pydantic field type.
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    def check(self) -> None:
        """Raises InvalidIDError if the ID can't be valid."""
        if len(self) == 0:
            raise InvalidIDError('ID invalid: an empty string "" is not a valid ID')

    def type(self) -> str:
        """
        Guesses the type of object this ID refers to from its prefix.

        Possible types: network, line, route, stop_area, commercial_mode, physical_mode,
        company, admin, stop_point. Returns an empty string if no known type matches.
        """
        prefix = self.split(":", 1)[0]
        if prefix in TYPE_NAMES:
            return prefix
        return ""
