from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Region:
    """
    A half-open range [start, start+length) inside a tracker's address space.
    Regions are never mutated; compaction replaces them.
    """

    start: int
    length: int

    @property
    def end(self) -> int:
        """End of the region (exclusive)"""
        return self.start + self.length

    def __str__(self) -> str:
        # Show inclusive end (last unit that's actually part of the region)
        return f"[{self.start}-{self.end - 1}] length={self.length}"

    def contains(self, start: int, length: int) -> bool:
        """Check if this region fully contains the given range"""
        return self.start <= start and start + length <= self.end

    def overlaps(self, start: int, length: int) -> bool:
        """Check if this region overlaps with the given range"""
        return not (start + length <= self.start or start >= self.end)

    def moved_to(self, start: int) -> "Region":
        """Same length, new start"""
        return Region(start, self.length)

    def to_tuple(self) -> Tuple[int, int]:
        """Convert to (start, length) tuple"""
        return (self.start, self.length)

    @classmethod
    def from_tuple(cls, region_tuple: Tuple[int, int]) -> "Region":
        """Create a Region from a (start, length) tuple"""
        start, length = region_tuple
        return cls(start, length)
