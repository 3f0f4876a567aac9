from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from regiontracker.region_lib.region import Region
from regiontracker.utils.enums import RejectReason, TrackerOperation
from regiontracker.utils.logger import get_logger
from regiontracker.visualization.layout_map import render_layout

'''
RegionTracker - Occupancy bookkeeping for a fixed-capacity address space

The tracker records which id occupies which range of [0, capacity). It never
owns or moves the underlying storage; it only keeps the accounting:
- First-fit search for a free range
- Collision-checked insertion and removal
- Gap-eliminating compaction that preserves relative order

Rejected insertions are reported as values, not exceptions. Every mutation is
announced to an optional event sink, which can never break the tracker.
'''


class InvalidCapacityError(ValueError):
    """Raised when a tracker is constructed with a non-positive capacity"""


class AllocationError(ValueError):
    """Raised by RegionTracker.allocate when no region could be reserved"""

    def __init__(self, message: str, reason: Optional[RejectReason] = None):
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class InsertResult:
    """Outcome of RegionTracker.insert. Truthy when the entry was added."""

    reason: Optional[RejectReason] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True)
class TrackerEvent:
    """A notification emitted after insert, remove and compact"""

    operation: TrackerOperation
    message: str
    id: Optional[int] = None
    region: Optional[Region] = None
    reason: Optional[RejectReason] = None

    @property
    def rejected(self) -> bool:
        return self.reason is not None


EventSink = Callable[[TrackerEvent], Any]


class RegionTracker:
    """
    Tracks id -> region ownership over [0, capacity).

    `entries` maps each id to its Region, `occupied` holds the same regions
    sorted by start for gap search. Both are updated together so that every
    occupied region is backed by exactly one entry.
    """

    def __init__(self, capacity: int, on_event: Optional[EventSink] = None):
        """
        :param capacity: Number of addressable units, must be positive
        :param on_event: Optional callable receiving a TrackerEvent per mutation
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(f"Capacity must be a positive integer, got {capacity!r}")

        self.capacity = capacity
        self.on_event = on_event
        self._entries: Dict[int, Region] = {}
        self._occupied: List[Region] = []
        self._starts: List[int] = []  # parallel to _occupied, for bisect
        self._used = 0

    # Queries

    def find_free(self, length: int) -> Optional[int]:
        """
        Return the lowest start where `length` units fit without overlapping
        any occupied region, or None. Does not reserve anything.
        """
        if length <= 0:
            return None

        last_end = 0
        for region in self._occupied:
            if region.start - last_end >= length:
                return last_end
            last_end = region.end

        if self.capacity - last_end >= length:
            return last_end
        return None

    def lookup(self, id: int) -> Optional[Region]:
        """Return the region owned by `id`, or None"""
        return self._entries.get(id)

    def usage_ratio(self) -> float:
        """Occupied length divided by capacity, in [0, 1]"""
        return self._used / self.capacity

    def get_all_metadata(self) -> Dict[int, Region]:
        """Copy of the id -> region table, ordered by start. Meant for renderers."""
        return {id: self._entries[id] for id in self}

    def free_extents(self) -> List[Tuple[int, int]]:
        """(start, length) of every maximal free run, in ascending order"""
        extents = []
        cursor = 0
        for region in self._occupied:
            if region.start > cursor:
                extents.append((cursor, region.start - cursor))
            cursor = region.end
        if cursor < self.capacity:
            extents.append((cursor, self.capacity - cursor))
        return extents

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the current layout."""
        extents = self.free_extents()
        return {
            "count": len(self._entries),
            "capacity": self.capacity,
            "used": self._used,
            "free": self.capacity - self._used,
            "usage_ratio": self.usage_ratio(),
            "largest_free": max((length for _, length in extents), default=0),
            "free_extent_count": len(extents),
        }

    # Mutations

    def insert(self, id: int, start: int, length: int) -> InsertResult:
        """
        Record that `id` occupies [start, start+length).

        :return: InsertResult, falsy with a RejectReason if nothing was added
        """
        if id in self._entries:
            return self._reject(id, Region(start, length), RejectReason.DUPLICATE_ID,
                                f"ID '{id}' already exists. Use a unique ID.")

        if length <= 0:
            return self._reject(id, Region(start, length), RejectReason.INVALID_LENGTH,
                                f"Length must be positive, got {length}.")

        if start < 0 or start + length > self.capacity:
            return self._reject(id, Region(start, length), RejectReason.OUT_OF_BOUNDS,
                                f"Region start={start}, length={length} exceeds capacity {self.capacity}.")

        collision = self._find_collision(start, length)
        if collision is not None:
            return self._reject(id, Region(start, length), RejectReason.OVERLAP,
                                f"Region start={start}, length={length} collides with {collision}.")

        region = Region(start, length)
        index = bisect_right(self._starts, start)
        self._entries[id] = region
        self._occupied.insert(index, region)
        self._starts.insert(index, start)
        self._used += length

        self._emit(TrackerEvent(TrackerOperation.INSERT,
                                f"Added region: ID={id}, start={start}, length={length}",
                                id=id, region=region))
        return InsertResult()

    def allocate(self, id: int, length: int) -> int:
        """
        Find the first free range of `length` units and insert it for `id`.

        :return: Start of the reserved region
        :raises AllocationError: If no range fits or the insert is rejected
        """
        if id in self._entries:
            reason, message = RejectReason.DUPLICATE_ID, f"ID '{id}' already exists. Use a unique ID."
        elif length <= 0:
            reason, message = RejectReason.INVALID_LENGTH, f"Length must be positive, got {length}."
        else:
            start = self.find_free(length)
            if start is not None:
                result = self.insert(id, start, length)
                if not result:
                    # insert already reported the rejection
                    raise AllocationError(f"Could not insert region of length {length} at {start}",
                                          result.reason)
                return start
            reason, message = RejectReason.NO_SPACE, f"Could not find region of length {length}."

        self._reject(id, None, reason, message)
        raise AllocationError(message, reason)

    def remove(self, id: int) -> bool:
        """
        Forget `id`. Returns False (and changes nothing) if it isn't tracked.
        """
        region = self._entries.pop(id, None)
        if region is None:
            self._emit(TrackerEvent(TrackerOperation.REMOVE, f"ID '{id}' not found.", id=id))
            return False

        index = bisect_right(self._starts, region.start) - 1
        del self._occupied[index]
        del self._starts[index]
        self._used -= region.length

        self._emit(TrackerEvent(TrackerOperation.REMOVE, f"Removed region for ID={id}",
                                id=id, region=region))
        return True

    def compact(self) -> int:
        """
        Slide every region down to close all gaps. Regions keep their length
        and their relative order by start; the first one lands at 0.

        :return: Total length of the regions that changed position
        """
        moved = 0
        offset = 0
        new_entries: Dict[int, Region] = {}
        for id in list(self):
            region = self._entries[id]
            if region.start != offset:
                moved += region.length
                region = region.moved_to(offset)
            new_entries[id] = region
            offset += region.length

        self._entries = new_entries
        self._occupied = list(new_entries.values())
        self._starts = [region.start for region in self._occupied]

        self._emit(TrackerEvent(TrackerOperation.COMPACT,
                                f"Compacted {len(new_entries)} regions, moved {moved} units."))
        return moved

    # Container protocol

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, id: object) -> bool:
        return id in self._entries

    def __iter__(self) -> Iterator[int]:
        """Iterate over ids in ascending start order"""
        ids_by_start = {region.start: id for id, region in self._entries.items()}
        return iter([ids_by_start[start] for start in self._starts])

    def __repr__(self) -> str:
        return f"RegionTracker(capacity={self.capacity}, entries={len(self._entries)}, used={self._used})"

    def __str__(self) -> str:
        return render_layout(self.get_all_metadata(), self.capacity)

    # Private helper methods

    def _find_collision(self, start: int, length: int) -> Optional[Region]:
        """
        Occupied regions are non-empty and disjoint, so only the neighbours
        around `start` can collide with [start, start+length).
        """
        index = bisect_right(self._starts, start)
        if index > 0 and self._occupied[index - 1].overlaps(start, length):
            return self._occupied[index - 1]
        if index < len(self._occupied) and self._occupied[index].overlaps(start, length):
            return self._occupied[index]
        return None

    def _reject(self, id: int, region: Optional[Region], reason: RejectReason, message: str) -> InsertResult:
        self._emit(TrackerEvent(TrackerOperation.INSERT, message, id=id, region=region, reason=reason))
        return InsertResult(reason)

    def _emit(self, event: TrackerEvent):
        if self.on_event is None:
            return
        try:
            self.on_event(event)
        except Exception:
            get_logger().warning(f"Event sink failed on {event.operation.value} event", exc_info=True)
