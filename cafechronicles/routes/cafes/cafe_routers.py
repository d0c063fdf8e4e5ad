from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cafechronicles.core.database import get_db
from cafechronicles.schemas.cafes.cafe_base import CafeOut, NearbyCafeOut, NearbyRequest
from cafechronicles.services.cafes import find_nearby_cafes, list_cafes
from cafechronicles.services.stamp_errors import StoreUnavailable


cafe_router = APIRouter(prefix="/api/locations", tags=["Cafes"])


@cafe_router.get("/cafes", response_model=List[CafeOut])
def get_cafes(db: Session = Depends(get_db)):
    try:
        return list_cafes(db)
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))


@cafe_router.post("/cafes/nearby", response_model=List[NearbyCafeOut])
def get_nearby_cafes(payload: NearbyRequest, db: Session = Depends(get_db)):
    try:
        return find_nearby_cafes(
            db,
            lat=payload.lat,
            lng=payload.lng,
            radius=payload.radius,
            use_google_maps=payload.use_google_maps,
        )
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
