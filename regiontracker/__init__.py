"""
regiontracker - Region Occupancy Tracker

A lightweight Python library that tracks which ranges of a fixed-capacity
address space are owned by which id, with first-fit search and compaction.
"""

from .region_lib.region import Region
from .region_lib.region_tracker import (RegionTracker, InsertResult, TrackerEvent,
                                        InvalidCapacityError, AllocationError)
from .utils.enums import RejectReason, TrackerOperation
from .utils.logger import setup_logging, get_logger, LogLevel, LoggingSink
from .visualization.layout_map import render_layout, render_map

__version__ = "0.1.0"
__all__ = ["Region", "RegionTracker", "InsertResult", "TrackerEvent", "InvalidCapacityError",
           "AllocationError", "RejectReason", "TrackerOperation", "setup_logging", "get_logger",
           "LogLevel", "LoggingSink", "render_layout", "render_map"]
