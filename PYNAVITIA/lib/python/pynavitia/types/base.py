from pydantic import BaseModel, ConfigDict


class NavitiaModel(BaseModel):
    """Base for every object decoded from a Navitia response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_api_dict(self) -> dict:
        """Dumps the object back using the JSON keys of the API."""
        return self.model_dump(by_alias=True, exclude_none=True)
