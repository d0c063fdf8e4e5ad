import logging
from typing import List, Optional, Sequence, Tuple

import httpx

from cafechronicles.core.config import settings

logger = logging.getLogger(__name__)

DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"
# Distance Matrix limit per request with a single origin
MAX_DESTINATIONS_PER_REQUEST = 25

Coordinate = Tuple[float, float]


def is_enabled() -> bool:
    return bool(settings.GOOGLE_MAPS_API_KEY)


def _format(point: Coordinate) -> str:
    return f"{point[0]},{point[1]}"


def _request_batch(origin: Coordinate, destinations: Sequence[Coordinate]) -> Optional[List[Optional[dict]]]:
    try:
        response = httpx.get(
            DISTANCE_MATRIX_URL,
            params={
                "origins": _format(origin),
                "destinations": "|".join(_format(d) for d in destinations),
                "units": "metric",
                "mode": "walking",
                "key": settings.GOOGLE_MAPS_API_KEY,
            },
            timeout=settings.GOOGLE_MAPS_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError):
        logger.warning("Google Maps distance lookup failed", exc_info=True)
        return None

    if data.get("status") != "OK":
        logger.warning("Google Maps distance lookup returned status %s", data.get("status"))
        return None

    try:
        elements = data["rows"][0]["elements"]
        if len(elements) != len(destinations):
            logger.warning(
                "Distance Matrix returned %d elements for %d destinations", len(elements), len(destinations)
            )
            return None
        return [
            {
                "distance": el["distance"]["value"],
                "duration": el["duration"]["value"],
                "distance_text": el["distance"]["text"],
                "duration_text": el["duration"]["text"],
            }
            if el.get("status") == "OK" else None
            for el in elements
        ]
    except (KeyError, IndexError, TypeError):
        logger.warning("Unexpected Distance Matrix payload: %r", data)
        return None


def walking_distances(origin: Coordinate, destinations: Sequence[Coordinate]) -> Optional[List[Optional[dict]]]:
    """
    Ask the Distance Matrix API for walking distances from one origin.

    Destinations are sent in batches of MAX_DESTINATIONS_PER_REQUEST.
    Returns one entry per destination (None where Google had no route), or
    None when any batch fails so callers can fall back to the haversine
    distance for every destination.
    """
    if not is_enabled() or not destinations:
        return None

    results: List[Optional[dict]] = []
    for start in range(0, len(destinations), MAX_DESTINATIONS_PER_REQUEST):
        batch = _request_batch(origin, destinations[start:start + MAX_DESTINATIONS_PER_REQUEST])
        if batch is None:
            return None
        results.extend(batch)
    return results


def walking_distance(origin: Coordinate, destination: Coordinate) -> Optional[dict]:
    results = walking_distances(origin, [destination])
    return results[0] if results else None
