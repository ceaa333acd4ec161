import logging
from datetime import datetime

import requests

from pynavitia.config import NavitiaSettings
from pynavitia.timing import RequestTiming
from pynavitia.types.id import ID
from pynavitia.types.journey import JourneyResults
from pynavitia.types.navitia_time import format_navitia_datetime
from pynavitia.types.place import PlaceContainer


class NavitiaAPIClient:
    """
    A thin wrapper around the Navitia HTTP API.
    Fetches raw responses and hands them to the typed models, HTTP errors are raised as requests exceptions.
    """

    def __init__(self, settings: NavitiaSettings | None = None, session: requests.Session | None = None):
        self.settings = settings if settings else NavitiaSettings()
        self.session = session if session else requests.Session()
        self.session.auth = (self.settings.require_api_key(), "")
        self.base_url = self.settings.coverage_url

    def journeys(self, origin: str, destination: str, from_datetime: datetime, **params) -> JourneyResults:
        """
        Asks Navitia for journeys between two places.
        origin and destination are Navitia IDs or "lon;lat" strings, extra params are passed as-is.
        """
        timing = RequestTiming()
        timing.creating()

        query = {
            "from": origin,
            "to": destination,
            "datetime": format_navitia_datetime(from_datetime),
            **params,
        }
        payload = self._get("journeys", query, timing)
        timing.parsing()

        results = JourneyResults.model_validate({"journeys": payload.get("journeys", [])})
        results.timing = timing
        return results

    def places(self, query: str, **params) -> list[PlaceContainer]:
        payload = self._get("places", {"q": query, **params})
        return [PlaceContainer.model_validate(item) for item in payload.get("places", [])]

    def find_place_id(self, query: str) -> ID:
        """Returns the ID of the best match for query."""
        places = self.places(query)
        if not places:
            raise ValueError(f"Place '{query}' not found.")
        return places[0].id

    def _get(self, endpoint: str, params: dict, timing: RequestTiming | None = None) -> dict:
        url = f"{self.base_url}/{endpoint}"
        logging.debug("Requesting %s with %s", url, params)
        if timing:
            timing.sending()

        response = self.session.get(url, params=params, timeout=self.settings.navitia_timeout)
        response.raise_for_status()
        return response.json()
