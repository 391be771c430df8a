from dataclasses import dataclass, field
from pathlib import PurePath

from multi_catalog.core.graph import OrderedLocations
from multi_catalog.models import CatalogBuildDescriptor, ContentGroup


@dataclass
class Partition:
    """One output catalog under construction."""

    group: ContentGroup | None
    identifier: str
    catalog_filename: str
    locations: OrderedLocations = field(default_factory=OrderedLocations)
    build_path: str | None = None
    produced_artifact_paths: list[str] = field(default_factory=list)

    @classmethod
    def for_group(cls, group: ContentGroup, identifier: str) -> "Partition":
        return cls(group=group, identifier=identifier, catalog_filename=f"{group.name}.json")

    @classmethod
    def placeholder(cls, identifier: str, catalog_filename: str) -> "Partition":
        return cls(group=None, identifier=identifier, catalog_filename=catalog_filename)

    @property
    def name(self) -> str:
        return self.group.name if self.group is not None else PurePath(self.catalog_filename).stem

    @property
    def empty(self) -> bool:
        return len(self.locations) == 0

    def artifact_prefix(self) -> str | None:
        """Return ``<build path>/<group name>``, the record used to clean this partition's output."""
        if self.build_path is None or self.group is None:
            return None
        return str(PurePath(self.build_path) / self.group.name)

    def to_descriptor(self, is_default: bool = False) -> CatalogBuildDescriptor:
        return CatalogBuildDescriptor(
            identifier=self.identifier,
            catalog_filename=self.catalog_filename,
            locations=self.locations.to_list(),
            is_default=is_default,
        )
