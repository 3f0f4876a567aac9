from .region import Region
from .region_tracker import (RegionTracker, InsertResult, TrackerEvent, InvalidCapacityError,
                             AllocationError)

__all__ = ["Region", "RegionTracker", "InsertResult", "TrackerEvent", "InvalidCapacityError",
           "AllocationError"]
