import logging
from datetime import datetime

from dotenv import load_dotenv

load_dotenv()


from pynavitia.client import NavitiaAPIClient
from pynavitia.config import NavitiaSettings

logging.basicConfig(level=logging.DEBUG)


if __name__ == '__main__':

    settings = NavitiaSettings()
    client = NavitiaAPIClient(settings)

    origin_id = client.find_place_id("Paris")
    destination_id = client.find_place_id("Bayonne")
    results = client.journeys(origin_id, destination_id, datetime.now(), count=5)

    for journey in results.journeys:
        print(f"{journey.departure:%H:%M} -> {journey.arrival:%H:%M} ({journey.duration}, "
              f"{journey.nb_transfers} transfers)")
        for section in journey.sections:
            place_from = section.from_.place()
            place_to = section.to.place()
            print(f"    {section.type}: {place_from.place_name() if place_from else '?'} "
                  f"-> {place_to.place_name() if place_to else '?'}")
    print(f"Answered in {results.timing.elapsed()}")
