"""
regiontracker.utils - Utility modules for the regiontracker library
"""

from .enums import RejectReason, TrackerOperation
from .logger import get_logger, setup_logging, LogLevel, LoggingSink
from .seed_management import set_seed

__all__ = ["RejectReason", "TrackerOperation", "get_logger", "setup_logging", "LogLevel",
           "LoggingSink", "set_seed"]
