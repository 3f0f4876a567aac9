from enum import Enum


class RejectReason(Enum):
    DUPLICATE_ID = "duplicate_id"  # id already tracked
    INVALID_LENGTH = "invalid_length"  # zero or negative length
    OUT_OF_BOUNDS = "out_of_bounds"  # range leaves [0, capacity)
    OVERLAP = "overlap"  # range collides with an occupied region
    NO_SPACE = "no_space"  # allocate found no gap large enough


class TrackerOperation(Enum):
    INSERT = "insert"
    REMOVE = "remove"
    COMPACT = "compact"
