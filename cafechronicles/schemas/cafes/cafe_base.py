from typing import Optional

from pydantic import BaseModel, Field


class CafeOut(BaseModel):
    id: int
    name: str
    address: str
    lat: Optional[float] = None
    lng: Optional[float] = None

    class Config:
        from_attributes = True


class NearbyRequest(BaseModel):
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    radius: Optional[float] = Field(None, gt=0)
    use_google_maps: bool = False


class NearbyCafeOut(CafeOut):
    lat: float
    lng: float
    distance: float
    fallback_distance: float
    duration: Optional[int] = None
    distance_text: Optional[str] = None
    duration_text: Optional[str] = None
