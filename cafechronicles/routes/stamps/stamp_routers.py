from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cafechronicles.core.database import get_db
from cafechronicles.schemas.stamps.stamp_base import ClaimRequest, ClaimResponse, StampOut
from cafechronicles.services.clock import Clock, get_clock
from cafechronicles.services.stamp_errors import AlreadyClaimed, NotFound, StoreUnavailable, TooFar
from cafechronicles.services.stamps import claim_stamp, list_stamps


stamp_router = APIRouter(prefix="/api/locations", tags=["Passport"])


@stamp_router.post("/stamps/claim", response_model=ClaimResponse)
def claim(payload: ClaimRequest, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    try:
        return claim_stamp(
            db,
            user_id=payload.user_id,
            cafe_id=payload.cafe_id,
            user_lat=payload.lat,
            user_lng=payload.lng,
            clock=clock,
            use_google_maps=payload.use_google_maps,
        )
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TooFar as e:
        raise HTTPException(
            status_code=400,
            detail={
                "message": str(e),
                "distance": e.rounded_distance,
                "threshold": e.threshold,
                "verification_method": e.verification_method,
            },
        )
    except AlreadyClaimed as e:
        raise HTTPException(
            status_code=409,
            detail={
                "message": str(e),
                "code": "ALREADY_CLAIMED_TODAY",
                "first_claimed": e.first_claimed.isoformat() if e.first_claimed else None,
            },
        )
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))


@stamp_router.get("/users/{user_id}/stamps", response_model=List[StampOut])
def get_user_stamps(user_id: int, db: Session = Depends(get_db)):
    try:
        return list_stamps(db, user_id)
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
