"""Enumerate the files an addressable folder entry contributes to its group.

Asset paths are project-relative, ``/``-separated strings such as
``Assets/Prefabs/hero.prefab``. A file or folder that has its own entry belongs
to that entry's group only, so it never shows up in a parent folder's listing.
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

from multi_catalog.core.errors import PathNotAddressableError, PathNotFoundError
from multi_catalog.models import ContentSettings

_IGNORED_SUFFIXES = (".meta",)


def _normalize(path: str) -> str:
    return path.replace("\\", "/").rstrip("/")


def _is_ignored(name: str) -> bool:
    return name.startswith(".") or name.endswith(_IGNORED_SUFFIXES)


class FileEnumerationCache:
    """Snapshot of the addressable path set and directory listings for repeated enumeration."""

    def __init__(self, settings: ContentSettings, project_root: str | Path) -> None:
        self.project_root = Path(project_root)
        self.entry_paths = _entry_paths(settings)
        self.folder_paths = _folder_paths(settings)
        self._listings: dict[str, list[Path]] = {}

    def __enter__(self) -> FileEnumerationCache:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._listings.clear()

    def list_directory(self, path: str) -> list[Path]:
        listing = self._listings.get(path)
        if listing is None:
            listing = sorted((self.project_root / path).iterdir())
            self._listings[path] = listing
        return listing


def _entry_paths(settings: ContentSettings) -> frozenset[str]:
    return frozenset(_normalize(entry.asset_path) for entry in settings.asset_entries() if entry.asset_path)


def _folder_paths(settings: ContentSettings) -> frozenset[str]:
    return frozenset(
        _normalize(entry.asset_path) for entry in settings.asset_entries() if entry.is_folder and entry.asset_path
    )


def _is_addressable(path: str, entry_paths: frozenset[str], folder_paths: frozenset[str]) -> bool:
    if path in entry_paths:
        return True
    parts = path.split("/")
    return any("/".join(parts[:i]) in folder_paths for i in range(1, len(parts)))


def enumerate_addressable_folder(
    path: str,
    settings: ContentSettings,
    project_root: str | Path,
    recursive: bool = True,
    cache: FileEnumerationCache | None = None,
) -> list[str]:
    """Return the asset paths of the files under ``path`` that belong to its entry.

    Raises ``PathNotFoundError`` when ``path`` does not exist under ``project_root``
    and ``PathNotAddressableError`` when it is neither an entry nor inside a folder
    entry.
    """
    active = cache if cache is not None else FileEnumerationCache(settings, project_root)
    normalized = _normalize(path)
    disk_path = active.project_root / normalized

    if not normalized or not disk_path.exists():
        raise PathNotFoundError(path)
    if not _is_addressable(normalized, active.entry_paths, active.folder_paths):
        raise PathNotAddressableError(path)
    if disk_path.is_file():
        return [normalized]

    found: list[str] = []
    _collect(normalized, active, recursive, found)
    return found


def _collect(directory: str, cache: FileEnumerationCache, recursive: bool, found: list[str]) -> None:
    for child in cache.list_directory(directory):
        if _is_ignored(child.name):
            continue
        child_path = f"{directory}/{child.name}"
        if child_path in cache.entry_paths:
            continue
        if child.is_dir():
            if recursive:
                _collect(child_path, cache, recursive, found)
        else:
            found.append(child_path)
