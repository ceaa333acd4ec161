import datetime
import logging
from dataclasses import dataclass


@dataclass
class RequestTiming:
    """Stores when a request was created, sent to Navitia, and when its response was parsed."""
    created: datetime.datetime | None = None
    sent: datetime.datetime | None = None
    received: datetime.datetime | None = None

    def creating(self) -> None:
        self.created = datetime.datetime.now()

    def sending(self) -> None:
        self.sent = datetime.datetime.now()

    def parsing(self) -> None:
        self.received = datetime.datetime.now()
        logging.debug("Navitia answered in %s", self.elapsed())

    def elapsed(self) -> datetime.timedelta | None:
        """Time between sending the request and receiving the answer, None until both happened."""
        if self.sent is None or self.received is None:
            return None
        return self.received - self.sent
