from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ClaimRequest(BaseModel):
    user_id: int = Field(..., gt=0)
    cafe_id: int = Field(..., gt=0)
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    use_google_maps: bool = False


class ClaimResponse(BaseModel):
    success: bool
    stamp_count: int
    distance: int
    cafe_name: str
    verification_method: str


class StampOut(BaseModel):
    id: int
    cafe_id: int
    created_at: datetime
    cafe_name: str
    cafe_address: str
    verification_distance: Optional[int] = None
    verification_method: Optional[str] = None

    class Config:
        from_attributes = True
