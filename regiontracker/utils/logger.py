"""
Simple logging utility for regiontracker

Basic logger with configurable output levels, plus an event sink that turns
tracker events into log records.
"""

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from regiontracker.region_lib.region_tracker import RegionTracker, TrackerEvent


class LogLevel(Enum):
    """Simple log level enumeration"""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class SimpleLogger:
    """
    Simple logger that can replace print statements
    """

    def __init__(self, name: str = "regiontracker"):
        self.logger = logging.getLogger(name)

    def debug(self, message: str):
        """Log debug message"""
        self.logger.debug(message)

    def info(self, message: str):
        """Log info message (default level)"""
        self.logger.info(message)

    def warning(self, message: str, exc_info: bool = False):
        """Log warning message"""
        self.logger.warning(message, exc_info=exc_info)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return self.logger.isEnabledFor(level.value)


def setup_logging(level: LogLevel = LogLevel.INFO, show_timestamp: bool = False) -> SimpleLogger:
    """
    Setup basic logging configuration

    Args:
        level: Logging level to use
        show_timestamp: Whether to show timestamps in output

    Returns:
        SimpleLogger instance
    """
    # Clear any existing handlers
    root_logger = logging.getLogger("regiontracker")
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level.value)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level.value)

    if show_timestamp:
        formatter = logging.Formatter('[%(asctime)s] %(message)s', datefmt='%H:%M:%S')
    else:
        formatter = logging.Formatter('%(message)s')

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Prevent propagation to avoid duplicate messages
    root_logger.propagate = False

    return SimpleLogger("regiontracker")


def get_logger(name: str = "regiontracker") -> SimpleLogger:
    """
    Get a simple logger instance

    Args:
        name: Logger name

    Returns:
        SimpleLogger instance
    """
    return SimpleLogger(name)


class LoggingSink:
    """
    Event sink that logs tracker events.

    Accepted operations are logged at INFO, rejected inserts and removals of
    unknown ids at WARNING. With show_layout, the tracker's text dump follows
    each event at DEBUG.
    """

    def __init__(self, logger: Optional[SimpleLogger] = None, tracker: Optional["RegionTracker"] = None,
                 show_layout: bool = False):
        self.logger = logger or get_logger()
        self.tracker = tracker
        self.show_layout = show_layout

    def __call__(self, event: "TrackerEvent"):
        message = f"[{event.operation.value.upper()}] {event.message}"
        # an id without a region is a remove of an unknown id
        if event.rejected or (event.id is not None and event.region is None):
            self.logger.warning(message)
        else:
            self.logger.info(message)

        if self.show_layout and self.tracker is not None and self.logger.is_enabled_for(LogLevel.DEBUG):
            self.logger.debug(str(self.tracker))
