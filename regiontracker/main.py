#!/usr/bin/env python3
"""
regiontracker - Region Occupancy Tracker Demo

Runs the reference scenario, or a seeded random workload, against a tracker
with logging attached and prints the resulting layout.
"""

import argparse
import random

from regiontracker.region_lib.region_tracker import RegionTracker, AllocationError, InvalidCapacityError
from regiontracker.utils.logger import setup_logging, LogLevel, LoggingSink
from regiontracker.utils.seed_management import set_seed
from regiontracker.visualization.layout_map import render_layout, render_map


def print_separator(title):
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def print_layout(tracker, width, title="Current Layout"):
    print(f"\n--- {title} ---")
    metadata = tracker.get_all_metadata()
    if tracker.capacity <= width:
        print(render_layout(metadata, tracker.capacity))
    else:
        print(render_map(metadata, tracker.capacity, width))


def print_stats(tracker):
    stats = tracker.get_stats()
    print(f"\n--- Final Statistics ---")
    print(f"Capacity: {stats['capacity']}")
    print(f"Regions: {stats['count']}")
    print(f"Used: {stats['used']} ({stats['usage_ratio']:.0%})")
    print(f"Free: {stats['free']} in {stats['free_extent_count']} extents (largest: {stats['largest_free']})")


def demo_reference_scenario(tracker, logger, width):
    """Insert, search, remove and compact on a small tracker"""
    print_separator("REFERENCE SCENARIO")

    tracker.insert(1, 0, 5)
    tracker.insert(2, 5, 3)
    logger.info(f"find_free(10) -> {tracker.find_free(10)}")
    tracker.insert(3, 8, 10)
    logger.info(f"find_free(1) -> {tracker.find_free(1)}")
    print_layout(tracker, width, "Before removal")

    tracker.remove(2)
    logger.info(f"find_free(3) -> {tracker.find_free(3)}")
    tracker.compact()
    print_layout(tracker, width, "After compaction")


def demo_random_workload(tracker, logger, ops, width):
    """Random allocate/remove/compact mix"""
    print_separator(f"RANDOM WORKLOAD ({ops} operations)")

    next_id = 0
    max_length = max(1, tracker.capacity // 8)
    for _ in range(ops):
        roll = random.random()
        if roll < 0.6 or len(tracker) == 0:
            length = random.randint(1, max_length)
            try:
                tracker.allocate(next_id, length)
            except AllocationError as e:
                logger.warning(f"Allocation failed: {e}")
            next_id += 1
        elif roll < 0.95:
            tracker.remove(random.choice(list(tracker)))
        else:
            tracker.compact()

    print_layout(tracker, width)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="regiontracker", description=__doc__.strip().splitlines()[0])
    parser.add_argument('--capacity', type=int, default=20)
    parser.add_argument('--ops', type=int, default=0,
                        help="Number of random operations to run. 0 runs the reference scenario.")
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--log-level', choices=[level.name for level in LogLevel], default=LogLevel.INFO.name)
    parser.add_argument('--timestamps', action='store_true')
    parser.add_argument('--show-layout', action='store_true',
                        help="Log the layout after every event (needs --log-level DEBUG)")
    parser.add_argument('--width', type=int, default=80)
    args = parser.parse_args(argv)

    try:
        tracker = RegionTracker(args.capacity)
    except InvalidCapacityError as e:
        parser.error(str(e))

    logger = setup_logging(level=LogLevel[args.log_level], show_timestamp=args.timestamps)
    tracker.on_event = LoggingSink(logger, tracker=tracker, show_layout=args.show_layout)

    if args.ops > 0:
        seed = set_seed(args.seed)
        logger.info(f"Seed: {seed}")
        demo_random_workload(tracker, logger, args.ops, args.width)
    else:
        demo_reference_scenario(tracker, logger, args.width)

    print_stats(tracker)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
