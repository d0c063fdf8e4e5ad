from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from cafechronicles.core.config import settings
from cafechronicles.models.cafe_db.cafe_crud import get_all_cafes
from cafechronicles.models.cafe_db.cafe_db import Cafe
from cafechronicles.services import google_maps
from cafechronicles.services.distance import haversine_distance
from cafechronicles.services.store import store_guard


@dataclass
class NearbyCafe:
    id: int
    name: str
    address: str
    lat: float
    lng: float
    distance: float
    fallback_distance: float
    duration: Optional[int] = None
    distance_text: Optional[str] = None
    duration_text: Optional[str] = None


def list_cafes(db: Session) -> List[Cafe]:
    with store_guard(db, "listing cafes"):
        return get_all_cafes(db)


def find_nearby_cafes(
    db: Session,
    lat: float,
    lng: float,
    radius: Optional[float] = None,
    use_google_maps: bool = False,
) -> List[NearbyCafe]:
    """Cafés strictly closer than ``radius`` meters, nearest first.

    With ``use_google_maps`` the walking distance is used where Google has a
    route; every other café keeps its haversine distance.
    """
    radius = settings.NEARBY_RADIUS_METERS if radius is None else radius
    cafes = [cafe for cafe in list_cafes(db) if cafe.has_location]

    walking = None
    if use_google_maps and google_maps.is_enabled():
        walking = google_maps.walking_distances((lat, lng), [(c.lat, c.lng) for c in cafes])

    nearby = []
    for index, cafe in enumerate(cafes):
        straight = haversine_distance(lat, lng, cafe.lat, cafe.lng)
        entry = NearbyCafe(
            id=cafe.id,
            name=cafe.name,
            address=cafe.address,
            lat=cafe.lat,
            lng=cafe.lng,
            distance=straight,
            fallback_distance=straight,
        )
        route = walking[index] if walking else None
        if route:
            entry.distance = float(route["distance"])
            entry.duration = route["duration"]
            entry.distance_text = route["distance_text"]
            entry.duration_text = route["duration_text"]
        if entry.distance < radius:
            nearby.append(entry)

    nearby.sort(key=lambda c: c.distance)
    return nearby
