from datetime import datetime
from typing import Optional


class StampError(Exception):
    """Base class for passport failures that callers can show to users."""


class NotFound(StampError):
    pass


class CafeLocationUnavailable(NotFound):
    """The café exists but has no stored coordinate to verify against."""


class TooFar(StampError):
    def __init__(self, distance: float, threshold: float, verification_method: str):
        self.distance = distance
        self.threshold = threshold
        self.verification_method = verification_method
        super().__init__(f"Too far from cafe location. Distance: {self.rounded_distance}m (max: {threshold:g}m)")

    @property
    def rounded_distance(self) -> Optional[int]:
        if self.distance != self.distance:  # NaN
            return None
        return round(self.distance)


class AlreadyClaimed(StampError):
    def __init__(self, first_claimed: Optional[datetime] = None):
        self.first_claimed = first_claimed
        super().__init__("You've already collected a stamp from this cafe today")


class StoreUnavailable(StampError):
    pass
