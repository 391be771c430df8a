import logging
from collections import deque

from multi_catalog.core.graph import LocationT, OrderedLocations
from multi_catalog.core.partition import Partition

logger = logging.getLogger(__name__)


def resolve_dependencies(partition: Partition, default_locations: OrderedLocations) -> list[str]:
    """Pull every location ``partition`` transitively needs from the default partition.

    Only the default partition is searched. A dependency found neither there nor in
    ``partition`` is reported and skipped. Returns the diagnostics emitted.
    """
    diagnostics: list[str] = []
    queue: deque[LocationT] = deque(partition.locations)
    processed: set[int] = set()

    while queue:
        location = queue.popleft()
        if id(location) in processed:
            continue
        processed.add(id(location))
        if not location.dependencies:
            continue

        for key in location.dependencies:
            dependency = default_locations.find(key)
            if dependency is not None:
                queue.append(dependency)
                partition.locations.append_if_missing(dependency)
            elif key not in partition.locations:
                logger.error("Could not find location for dependency ID %s in the default catalog.", key)
                diagnostics.append(f"Could not find location for dependency ID {key} in the default catalog.")

    return diagnostics
