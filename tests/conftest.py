"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from multi_catalog.core.bundle_paths import RUNTIME_PATH_TOKEN
from multi_catalog.models import (
    AssetLocation,
    BuildContext,
    BundleLocation,
    ContentEntry,
    ContentGroup,
    ContentSettings,
)
from multi_catalog.profiles import InMemoryProfileResolver

_REPO_ROOT = Path(__file__).parent.parent

PLATFORM = "StandaloneLinux64"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Location and settings builders
# ---------------------------------------------------------------------------


def bundle_id(name: str) -> str:
    return f"{RUNTIME_PATH_TOKEN}/{PLATFORM}/{name}.bundle"


def bundle(name: str, *dependencies: str) -> BundleLocation:
    return BundleLocation(
        keys=(name,),
        internal_id=bundle_id(name),
        provider_id="AssetBundleProvider",
        dependencies=dependencies,
    )


def asset(path: str, guid: str, *dependencies: str) -> AssetLocation:
    return AssetLocation(
        keys=(path, guid),
        internal_id=path,
        provider_id="BundledAssetProvider",
        dependencies=dependencies,
        resource_type="GameObject",
    )


def make_settings(root: Path, default_group: bool = True) -> ContentSettings:
    """Three groups: the default one, one claiming a prefab, one claiming a folder."""
    return ContentSettings(
        groups=[
            ContentGroup(
                name="Default Local Group",
                is_default=default_group,
                entries=[
                    ContentEntry(
                        guid="shared-mat",
                        asset_path="Assets/Shared/mat.mat",
                        bundle_file_id=bundle_id("defaultlocalgroup_assets_all"),
                    )
                ],
            ),
            ContentGroup(
                name="Characters",
                build_path_variable="RemoteBuildPath",
                entries=[
                    ContentEntry(
                        guid="hero",
                        address="Hero",
                        asset_path="Assets/Characters/hero.prefab",
                        bundle_file_id=bundle_id("characters_assets_all"),
                    )
                ],
            ),
            ContentGroup(
                name="Levels",
                entries=[
                    ContentEntry(
                        guid="levels-folder",
                        asset_path="Assets/Levels",
                        is_folder=True,
                        bundle_file_id=bundle_id("levels_assets_all"),
                        sub_assets=[ContentEntry(guid="level1", asset_path="Assets/Levels/level1.unity")],
                    )
                ],
            ),
        ],
        profiles={
            "Default": {
                "BuildTarget": PLATFORM,
                "BuildRoot": str(root / "aa"),
                "LocalBuildPath": "[BuildRoot]/[BuildTarget]",
                "RemoteBuildPath": str(root / "ServerData") + "/[BuildTarget]",
            }
        },
    )


def make_locations() -> list[AssetLocation | BundleLocation]:
    return [
        bundle("defaultlocalgroup_assets_all"),
        bundle("characters_assets_all"),
        bundle("levels_assets_all"),
        asset("Assets/Shared/mat.mat", "shared-mat", "defaultlocalgroup_assets_all"),
        asset("Assets/Characters/hero.prefab", "hero", "characters_assets_all", "defaultlocalgroup_assets_all"),
        asset("Assets/Levels/level1.unity", "level1", "levels_assets_all", "Assets/Shared/mat.mat"),
    ]


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings(tmp_path: Path) -> ContentSettings:
    return make_settings(tmp_path)


@pytest.fixture
def build_context(tmp_path: Path, settings: ContentSettings) -> BuildContext:
    return BuildContext(settings=settings, locations=make_locations(), build_root=str(tmp_path / "aa"))


@pytest.fixture
def resolver(settings: ContentSettings) -> InMemoryProfileResolver:
    return InMemoryProfileResolver.from_settings(settings)
