#!/usr/bin/env python3
"""
Preview an incident CSV before deploying it.

Runs the full load pipeline and prints per-role visibility counts and
the labels that fall back to the city center.
"""

import sys
from collections import Counter
from pathlib import Path

from citywatch.exceptions import LoadFailure
from citywatch.models import Role
from citywatch.services import IncidentStore


def log(msg):
    """Print with flush for immediate output."""
    print(msg, flush=True)


def preview(csv_path: str) -> int:
    store = IncidentStore(source_path=csv_path)
    try:
        total = store.load_from_csv()
    except LoadFailure as e:
        log(f"Error: {e}")
        return 1

    log(f"Loaded {total:,} incidents from {csv_path}")

    log("\nVisible per role:")
    for role in Role:
        log(f"  {role.value:<12} {len(store.visible_to(role)):>6,}")

    statuses = Counter(incident.status.value for incident in store.all())
    log("\nBy status:")
    for status, count in statuses.most_common():
        log(f"  {status:<12} {count:>6,}")

    unknown = Counter(
        incident.location
        for incident in store.all()
        if not store.resolver.is_known(incident.location)
    )
    if unknown:
        log("\nUnknown locations (mapped to city center):")
        for location, count in unknown.most_common():
            log(f"  {location or '<empty>'}: {count:,}")

    missing_time = sum(1 for incident in store.all() if incident.time is None)
    if missing_time:
        log(f"\nRows without a parseable time: {missing_time:,}")

    return 0


if __name__ == "__main__":
    csv_path = sys.argv[1] if len(sys.argv) > 1 else "data/incidents.csv"

    if not Path(csv_path).exists():
        log(f"Error: CSV file not found: {csv_path}")
        sys.exit(1)

    sys.exit(preview(csv_path))
