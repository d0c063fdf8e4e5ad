import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cafechronicles.core.config import settings
from cafechronicles.models.cafe_db.cafe_crud import get_cafe_by_id
from cafechronicles.models.stamp_db.stamp_crud import (
    count_stamps_for_user,
    find_stamp,
    insert_stamp,
    list_stamps_for_user,
)
from cafechronicles.models.user_db.user_db_crud import get_user_by_id
from cafechronicles.services import google_maps
from cafechronicles.services.clock import Clock, day_window, resolve_timezone, to_storage_time
from cafechronicles.services.distance import haversine_distance
from cafechronicles.services.stamp_errors import (
    AlreadyClaimed,
    CafeLocationUnavailable,
    NotFound,
    TooFar,
)
from cafechronicles.services.store import store_guard

logger = logging.getLogger(__name__)

HAVERSINE = "haversine"
GOOGLE_MAPS = "google_maps"


@dataclass
class ClaimResult:
    success: bool
    stamp_count: int
    distance: int
    cafe_name: str
    verification_method: str


@dataclass
class StampHistoryEntry:
    id: int
    cafe_id: int
    created_at: datetime
    cafe_name: str
    cafe_address: str
    verification_distance: Optional[int]
    verification_method: Optional[str]


def measure_distance(
    user_lat: float, user_lng: float, cafe_lat: float, cafe_lng: float, use_google_maps: bool = False
) -> Tuple[float, str]:
    """Distance in meters between user and café, and the method that produced it."""
    if use_google_maps and google_maps.is_enabled():
        walking = google_maps.walking_distance((user_lat, user_lng), (cafe_lat, cafe_lng))
        if walking:
            return float(walking["distance"]), GOOGLE_MAPS
        logger.warning("Falling back to haversine distance for cafe at (%s, %s)", cafe_lat, cafe_lng)
    return haversine_distance(user_lat, user_lng, cafe_lat, cafe_lng), HAVERSINE


def claim_stamp(
    db: Session,
    user_id: int,
    cafe_id: int,
    user_lat: float,
    user_lng: float,
    clock: Clock,
    use_google_maps: bool = False,
) -> ClaimResult:
    with store_guard(db, "loading claim targets"):
        user = get_user_by_id(db, user_id)
        cafe = get_cafe_by_id(db, cafe_id)

    if not user:
        raise NotFound("User not found")
    if not cafe:
        raise NotFound("Cafe not found")
    if not cafe.has_location:
        raise CafeLocationUnavailable("Cafe location is not available")

    cafe_name = cafe.name
    threshold = settings.STAMP_CLAIM_RADIUS_METERS
    distance, method = measure_distance(user_lat, user_lng, cafe.lat, cafe.lng, use_google_maps)
    # NaN fails this comparison as well
    if not distance <= threshold:
        logger.info("Rejected claim user=%s cafe=%s: %.0fm away", user_id, cafe_id, distance)
        raise TooFar(distance, threshold, method)

    now = clock.now()
    claim_day, since = day_window(now, resolve_timezone(settings.STAMP_DAY_TIMEZONE))

    with store_guard(db, "checking for today's stamp"):
        existing = find_stamp(db, user_id, cafe_id, since)
    if existing:
        raise AlreadyClaimed(existing.created_at)

    with store_guard(db, "saving stamp"):
        try:
            insert_stamp(
                db,
                user_id,
                cafe_id,
                created_at=to_storage_time(now),
                claim_day=claim_day,
                verification_distance=round(distance),
                verification_method=method,
            )
        except IntegrityError:
            # a concurrent claim for the same day committed first
            db.rollback()
            winner = find_stamp(db, user_id, cafe_id, since)
            logger.info("Concurrent duplicate claim user=%s cafe=%s", user_id, cafe_id)
            raise AlreadyClaimed(winner.created_at if winner else None)

        stamp_count = count_stamps_for_user(db, user_id)
        db.commit()

    logger.info("Stamp claimed user=%s cafe=%s distance=%.0fm via %s", user_id, cafe_id, distance, method)
    return ClaimResult(
        success=True,
        stamp_count=stamp_count,
        distance=round(distance),
        cafe_name=cafe_name,
        verification_method=method,
    )


def list_stamps(db: Session, user_id: int) -> List[StampHistoryEntry]:
    with store_guard(db, "listing stamps"):
        rows = list_stamps_for_user(db, user_id)

    return [
        StampHistoryEntry(
            id=stamp.id,
            cafe_id=stamp.cafe_id,
            created_at=stamp.created_at,
            cafe_name=cafe.name,
            cafe_address=cafe.address,
            verification_distance=stamp.verification_distance,
            verification_method=stamp.verification_method,
        )
        for stamp, cafe in rows
    ]
