import logging
import os
from collections.abc import Callable
from pathlib import Path

from multi_catalog.config import BuildConfig
from multi_catalog.core.assignment import AssignmentRule
from multi_catalog.core.bundle_paths import rewrite_bundle_location
from multi_catalog.core.closure import resolve_dependencies
from multi_catalog.core.errors import CatalogBuildError, DefaultPartitionNotFoundError
from multi_catalog.core.graph import LocationIndex
from multi_catalog.core.partition import Partition
from multi_catalog.core.ports.profile import ProfileVariableResolver
from multi_catalog.models import BuildContext, BuildResult, BundleLocation

logger = logging.getLogger(__name__)

BUILDER_NAME = "Packed Mode - Multi-Catalog"


class CatalogAssembler:
    """Split the base builder's single location list into one catalog per group.

    Each call to :meth:`build` is an independent session. The only state carried
    between sessions is ``BuildConfig.produced_artifacts``, which ``build`` replaces
    on success and :meth:`clear_cached_data` consumes.
    """

    name = BUILDER_NAME

    def __init__(
        self,
        resolver: ProfileVariableResolver,
        exists: Callable[[str], bool] = os.path.isfile,
    ) -> None:
        self._resolver = resolver
        self._exists = exists

    def build(self, context: BuildContext, config: BuildConfig) -> BuildResult:
        settings = context.settings
        partitions, default = self._prepare_partitions(context, config)

        for location, key in LocationIndex(context.locations).dangling_dependencies():
            logger.warning("Location %s depends on unknown key %s", location.canonical_key, key)

        rule = AssignmentRule(partitions, settings.asset_entries())
        for location in context.locations:
            owner = rule.owner_of(location)
            if owner is None or owner is default:
                default.locations.append(location)
            elif isinstance(location, BundleLocation):
                assert owner.group is not None
                rewritten = rewrite_bundle_location(
                    location,
                    owner.group,
                    self._resolver,
                    settings.active_profile_id,
                    context.build_root,
                    exists=self._exists,
                )
                owner.build_path = rewritten.build_path
                owner.produced_artifact_paths.append(rewritten.artifact_path)
                owner.locations.append(rewritten.location)
            else:
                owner.locations.append(location)

        result = BuildResult()
        for partition in partitions:
            if partition is not default:
                result.diagnostics.extend(resolve_dependencies(partition, default.locations))

        result.descriptors.append(default.to_descriptor(is_default=True))
        for partition in partitions:
            if partition is default or partition.empty:
                continue
            result.descriptors.append(partition.to_descriptor())
            result.artifact_files[partition.name] = list(partition.produced_artifact_paths)
            prefix = partition.artifact_prefix()
            if prefix is not None:
                result.produced_artifacts.append(prefix)

        logger.info(
            "Built %d catalog(s) from %d location(s) with %d diagnostic(s)",
            len(result.descriptors),
            len(context.locations),
            len(result.diagnostics),
        )
        config.produced_artifacts = list(result.produced_artifacts)
        return result

    def _prepare_partitions(self, context: BuildContext, config: BuildConfig) -> tuple[list[Partition], Partition]:
        settings = context.settings
        partitions: list[Partition] = []
        default: Partition | None = None

        if not config.catalog_groups:
            for group in settings.groups:
                partition = Partition.for_group(group, context.catalog_address)
                partitions.append(partition)
                if group.is_default:
                    default = partition
        else:
            for name in config.catalog_groups:
                group = settings.find_group(name)
                if group is None:
                    raise CatalogBuildError(f"Unknown catalog group '{name}'")
                partition = Partition.for_group(group, context.catalog_address)
                partitions.append(partition)
                if group.is_default:
                    default = partition
            # The default group is not necessarily one of the configured groups.
            if default is None:
                default = Partition.placeholder(context.catalog_address, context.runtime_catalog_filename)

        if default is None:
            logger.error("Default group couldn't be found")
            raise DefaultPartitionNotFoundError()
        return partitions, default

    def clear_cached_data(self, config: BuildConfig) -> list[Path]:
        return clear_cached_data(config)


def clear_cached_data(config: BuildConfig) -> list[Path]:
    """Delete every file left by the previous build and forget the record.

    A file is removed when its name, lower-cased and without extension, starts
    with the recorded group name (also tried with spaces removed). Missing
    directories and failed deletions are skipped.
    """
    removed: list[Path] = []
    for record in config.produced_artifacts:
        directory = Path(os.path.abspath(os.path.dirname(record) or "."))
        prefix = Path(record).stem.lower()
        prefixes = (prefix, prefix.replace(" ", ""))
        try:
            files = sorted(directory.iterdir())
        except OSError:
            logger.debug("Skipping unreadable directory %s", directory, exc_info=True)
            continue
        for file in files:
            if not file.is_file() or not file.stem.lower().startswith(prefixes):
                continue
            try:
                file.unlink()
            except OSError:
                logger.debug("Could not delete %s", file, exc_info=True)
                continue
            removed.append(file)

    config.produced_artifacts = []
    return removed
