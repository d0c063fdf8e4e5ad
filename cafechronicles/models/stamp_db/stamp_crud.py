from datetime import date, datetime
from typing import List, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session

from cafechronicles.models.cafe_db.cafe_db import Cafe
from cafechronicles.models.stamp_db.stamp_db import Stamp


def find_stamp(db: Session, user_id: int, cafe_id: int, since: datetime):
    return (
        db.query(Stamp)
        .filter(Stamp.user_id == user_id, Stamp.cafe_id == cafe_id, Stamp.created_at >= since)
        .order_by(Stamp.created_at)
        .first()
    )


def insert_stamp(
    db: Session,
    user_id: int,
    cafe_id: int,
    created_at: datetime,
    claim_day: date,
    verification_distance: int | None = None,
    verification_method: str | None = None,
) -> Stamp:
    stamp = Stamp(
        user_id=user_id,
        cafe_id=cafe_id,
        created_at=created_at,
        claim_day=claim_day,
        verification_distance=verification_distance,
        verification_method=verification_method,
    )
    # flushed, not committed: the caller owns the transaction
    db.add(stamp)
    db.flush()
    return stamp


def count_stamps_for_user(db: Session, user_id: int) -> int:
    return db.query(func.count(Stamp.id)).filter(Stamp.user_id == user_id).scalar() or 0


def list_stamps_for_user(db: Session, user_id: int) -> List[Tuple[Stamp, Cafe]]:
    return (
        db.query(Stamp, Cafe)
        .join(Cafe, Stamp.cafe_id == Cafe.id)
        .filter(Stamp.user_id == user_id)
        .order_by(Stamp.created_at.desc(), Stamp.id.desc())
        .all()
    )
