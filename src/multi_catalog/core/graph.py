"""Key-indexed views over the flat location list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from multi_catalog.models import AssetLocation, BundleLocation

LocationT = AssetLocation | BundleLocation


class LocationIndex:
    """Lookup of the owning location for any key, built once per build."""

    def __init__(self, locations: Iterable[LocationT]) -> None:
        self._locations = list(locations)
        self._by_key: dict[str, LocationT] = {}
        for location in self._locations:
            for key in location.keys:
                self._by_key.setdefault(key, location)

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def get(self, key: str) -> LocationT | None:
        return self._by_key.get(key)

    def dangling_dependencies(self) -> list[tuple[LocationT, str]]:
        """Return (location, key) pairs whose dependency key exists nowhere in the universe."""
        missing: list[tuple[LocationT, str]] = []
        for location in self._locations:
            for key in location.dependencies:
                if key not in self._by_key:
                    missing.append((location, key))
        return missing


class OrderedLocations:
    """Append-only location sequence indexed by canonical key.

    Insertion order is preserved for output. Membership and ``find`` are O(1) and
    see the first location appended under a key.
    """

    def __init__(self, locations: Iterable[LocationT] = ()) -> None:
        self._items: list[LocationT] = []
        self._by_canonical: dict[str, LocationT] = {}
        for location in locations:
            self.append(location)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LocationT]:
        return iter(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._by_canonical

    def append(self, location: LocationT) -> None:
        self._items.append(location)
        self._by_canonical.setdefault(location.canonical_key, location)

    def append_if_missing(self, location: LocationT) -> bool:
        """Add ``location`` unless its canonical key is already present; return whether it was added."""
        if location.canonical_key in self._by_canonical:
            return False
        self.append(location)
        return True

    def find(self, canonical_key: str) -> LocationT | None:
        return self._by_canonical.get(canonical_key)

    def to_list(self) -> list[LocationT]:
        return list(self._items)
