"""Decide which partition owns a location.

Partitions are tried in the order they were configured and the first whose
group claims the location wins. That order is the explicit group list when
one is configured, otherwise the order groups appear in the settings; no
stronger priority is implied.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from multi_catalog.core.graph import LocationT
from multi_catalog.core.partition import Partition
from multi_catalog.models import AssetLocation, BundleLocation, ContentEntry, ContentGroup


@dataclass(frozen=True)
class GroupMembership:
    guids: frozenset[str]
    folder_sub_asset_guids: frozenset[str]
    folder_bundle_ids: frozenset[str]

    @classmethod
    def from_group(cls, group: ContentGroup) -> GroupMembership:
        folders = [entry for entry in group.entries if entry.is_folder]
        return cls(
            guids=frozenset(entry.guid for entry in group.entries),
            folder_sub_asset_guids=frozenset(sub.guid for folder in folders for sub in folder.sub_assets),
            folder_bundle_ids=frozenset(folder.bundle_file_id for folder in folders if folder.bundle_file_id),
        )

    def claims_asset(self, location: AssetLocation) -> bool:
        return any(key in self.folder_sub_asset_guids or key in self.guids for key in location.keys)


class AssignmentRule:
    def __init__(self, partitions: Sequence[Partition], asset_entries: Iterable[ContentEntry]) -> None:
        self._candidates = [
            (partition, GroupMembership.from_group(partition.group))
            for partition in partitions
            if partition.group is not None
        ]
        self._entry_by_bundle_id: dict[str, ContentEntry] = {}
        for entry in asset_entries:
            if entry.bundle_file_id:
                self._entry_by_bundle_id.setdefault(entry.bundle_file_id, entry)

    def owner_of(self, location: LocationT) -> Partition | None:
        """Return the first partition claiming ``location``, or None for the default partition."""
        for partition, membership in self._candidates:
            if self._claims(membership, location):
                return partition
        return None

    def _claims(self, membership: GroupMembership, location: LocationT) -> bool:
        if isinstance(location, BundleLocation):
            entry = self._entry_by_bundle_id.get(location.internal_id)
            if entry is not None and entry.guid in membership.guids:
                return True
            # No direct entry: the bundle may have been produced from a folder entry.
            return location.internal_id in membership.folder_bundle_ids
        if isinstance(location, AssetLocation):
            return membership.claims_asset(location)
        raise TypeError(f"Unsupported location type: {type(location).__name__}")
