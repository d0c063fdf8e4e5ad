from typing import List
from sqlalchemy.orm import Session
from cafechronicles.models.cafe_db.cafe_db import Cafe


def get_cafe_by_id(db: Session, cafe_id: int):
    return db.query(Cafe).filter(Cafe.id == cafe_id).first()


def get_all_cafes(db: Session) -> List[Cafe]:
    return db.query(Cafe).order_by(Cafe.id).all()


def create_cafe(db: Session, name: str, address: str, lat: float | None = None, lng: float | None = None):
    cafe = Cafe(name=name, address=address, lat=lat, lng=lng)
    db.add(cafe)
    db.commit()
    db.refresh(cafe)
    return cafe
