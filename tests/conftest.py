"""Shared fixtures: payloads shaped like real Navitia responses."""

from typing import Any

import pytest


@pytest.fixture
def stop_area_payload() -> dict[str, Any]:
    return {
        "id": "stop_area:SNCF:87391003",
        "name": "Paris Montparnasse",
        "label": "Paris Montparnasse (Paris)",
        "coord": {"lat": "48.84122", "lon": "2.32087"},
        "administrative_regions": [
            {
                "id": "admin:fr:75056",
                "name": "Paris",
                "label": "Paris (75000-75116)",
                "coord": {"lat": "48.8566969", "lon": "2.3514616"},
                "level": 8,
                "zip_code": "75000;75116",
            }
        ],
    }


@pytest.fixture
def stop_point_payload(stop_area_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": "stop_point:SNCF:87391003:Train",
        "name": "Paris Montparnasse",
        "coord": {"lat": "48.84122", "lon": "2.32087"},
        "equipments": ["has_wheelchair_boarding", "has_bike_teleporter"],
        "stop_area": stop_area_payload,
    }


@pytest.fixture
def public_transport_section_payload(stop_point_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "public_transport",
        "id": "section_1_0",
        "from": {
            "id": "stop_point:SNCF:87391003:Train",
            "name": "Paris Montparnasse",
            "quality": 0,
            "embedded_type": "stop_point",
            "stop_point": stop_point_payload,
        },
        "to": {
            "id": "stop_area:SNCF:87673004",
            "name": "Bayonne",
            "embedded_type": "stop_area",
            "stop_area": {
                "id": "stop_area:SNCF:87673004",
                "name": "Bayonne",
                "label": "Bayonne (Bayonne)",
                "coord": {"lat": "43.49669", "lon": "-1.47066"},
            },
        },
        "departure_date_time": "20251216T083000",
        "arrival_date_time": "20251216T123500",
        "duration": 14700,
        "geojson": {
            "type": "LineString",
            "coordinates": [[2.32087, 48.84122], [-0.55662, 44.82587], [-1.47066, 43.49669]],
            "properties": [{"length": 720000}],
        },
        "stop_date_times": [
            {
                "departure_date_time": "20251216T083000",
                "arrival_date_time": "20251216T083000",
                "additional_informations": [],
                "stop_point": stop_point_payload,
            },
            {
                "departure_date_time": "20251216T123500",
                "arrival_date_time": "20251216T123500",
                "additional_informations": ["had_date_time_estimated"],
                "stop_point": {"id": "stop_point:SNCF:87673004:Train", "name": "Bayonne"},
            },
        ],
        "display_informations": {
            "network": "SNCF",
            "direction": "Hendaye (Hendaye)",
            "commercial_mode": "TGV INOUI",
            "physical_mode": "Train grande vitesse",
            "label": "TGV INOUI",
            "code": "",
            "headsign": "8531",
            "trip_short_name": "8531",
            "equipments": [],
        },
        "additional_informations": ["regular"],
    }


@pytest.fixture
def street_network_section_payload() -> dict[str, Any]:
    return {
        "type": "street_network",
        "id": "section_0_0",
        "mode": "walking",
        "from": {
            "id": "2.3150;48.8430",
            "name": "12 Rue de l'Arrivée (Paris)",
            "embedded_type": "address",
            "address": {
                "id": "2.3150;48.8430",
                "name": "Rue de l'Arrivée",
                "label": "12 Rue de l'Arrivée (Paris)",
                "coord": {"lat": "48.8430", "lon": "2.3150"},
                "house_number": 12,
            },
        },
        "to": {
            "id": "stop_point:SNCF:87391003:Train",
            "name": "Paris Montparnasse",
            "embedded_type": "stop_point",
            "stop_point": {"id": "stop_point:SNCF:87391003:Train", "name": "Paris Montparnasse"},
        },
        "departure_date_time": "20251216T081500",
        "arrival_date_time": "20251216T082200",
        "duration": 420,
        "path": [
            {"length": 180, "name": "Rue de l'Arrivée", "duration": 140, "direction": 0},
            {"length": 320, "name": "Place Raoul Dautry", "duration": 280, "direction": 90},
        ],
    }


@pytest.fixture
def journey_payload(
    street_network_section_payload: dict[str, Any],
    public_transport_section_payload: dict[str, Any],
) -> dict[str, Any]:
    return {
        "duration": 15600,
        "nb_transfers": 0,
        "departure_date_time": "20251216T081500",
        "arrival_date_time": "20251216T123500",
        "requested_date_time": "20251216T080000",
        "type": "best",
        "status": "",
        "tags": ["rail", "walking"],
        "co2_emission": {"value": 1640.5, "unit": "gEC"},
        "sections": [street_network_section_payload, public_transport_section_payload],
    }
