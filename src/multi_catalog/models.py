from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

CATALOG_ADDRESS = "AddressablesMainContentCatalog"
RUNTIME_CATALOG_FILENAME = "catalog.json"


class ContentEntry(BaseModel):
    guid: str
    address: str = ""
    asset_path: str = ""
    bundle_file_id: str = ""
    is_folder: bool = False
    sub_assets: list["ContentEntry"] = Field(default_factory=list)


ContentEntry.model_rebuild()  # necessary for recursive types


class ContentGroup(BaseModel):
    name: str
    entries: list[ContentEntry] = Field(default_factory=list)
    build_path_variable: str = "LocalBuildPath"
    is_default: bool = False


class ContentSettings(BaseModel):
    groups: list[ContentGroup] = Field(default_factory=list)
    profiles: dict[str, dict[str, str]] = Field(default_factory=dict)
    active_profile_id: str = "Default"

    @property
    def default_group(self) -> ContentGroup | None:
        return next((group for group in self.groups if group.is_default), None)

    def find_group(self, name: str) -> ContentGroup | None:
        return next((group for group in self.groups if group.name == name), None)

    def asset_entries(self) -> list[ContentEntry]:
        """Return every top-level entry across all groups, in group order."""
        return [entry for group in self.groups for entry in group.entries]


class _LocationBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    keys: tuple[str, ...]
    internal_id: str
    provider_id: str
    dependencies: tuple[str, ...] = ()
    data: Any = None

    @field_validator("keys")
    @classmethod
    def _keys_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("a location needs at least one key")
        return value

    @property
    def canonical_key(self) -> str:
        return self.keys[0]


class AssetLocation(_LocationBase):
    kind: Literal["asset"] = "asset"
    resource_type: str = "Object"


class BundleLocation(_LocationBase):
    kind: Literal["bundle"] = "bundle"

    def with_internal_id(self, internal_id: str) -> "BundleLocation":
        return self.model_copy(update={"internal_id": internal_id})


Location = Annotated[AssetLocation | BundleLocation, Field(discriminator="kind")]


class BuildContext(BaseModel):
    """Everything the single-catalog base builder hands over for partitioning."""

    settings: ContentSettings
    locations: list[Location] = Field(default_factory=list)
    runtime_catalog_filename: str = RUNTIME_CATALOG_FILENAME
    catalog_address: str = CATALOG_ADDRESS
    build_root: str = "Library/com.unity.addressables/aa"


class CatalogBuildDescriptor(BaseModel):
    identifier: str
    catalog_filename: str
    locations: list[Location] = Field(default_factory=list)
    is_default: bool = False


class BuildResult(BaseModel):
    descriptors: list[CatalogBuildDescriptor] = Field(default_factory=list)
    produced_artifacts: list[str] = Field(default_factory=list)
    artifact_files: dict[str, list[str]] = Field(default_factory=dict)
    diagnostics: list[str] = Field(default_factory=list)

    @property
    def default_descriptor(self) -> CatalogBuildDescriptor | None:
        return next((d for d in self.descriptors if d.is_default), None)
