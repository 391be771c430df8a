import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from multi_catalog.core.ports.profile import ProfileVariableResolver
from multi_catalog.models import BundleLocation, ContentGroup

logger = logging.getLogger(__name__)

RUNTIME_PATH_TOKEN = "{UnityEngine.AddressableAssets.Addressables.RuntimePath}"
PLATFORM_DIRECTORY = "[BuildTarget]"


@dataclass(frozen=True)
class RewrittenBundle:
    location: BundleLocation
    build_path: str
    artifact_path: str


def _file_name(internal_id: str) -> str:
    return internal_id.replace("\\", "/").rsplit("/", 1)[-1]


def rewrite_bundle_location(
    location: BundleLocation,
    group: ContentGroup,
    resolver: ProfileVariableResolver,
    profile_id: str,
    build_root: str,
    exists: Callable[[str], bool] = os.path.isfile,
) -> RewrittenBundle:
    """Relocate a bundle into ``group``'s build output.

    The artifact is looked up in the group's profile build path first and in the
    platform output folder under ``build_root`` otherwise. Resolution failures from
    ``resolver`` propagate.
    """
    build_path = resolver.get_value_by_name(profile_id, group.build_path_variable)
    build_path = resolver.evaluate_string(profile_id, build_path)

    file_name = _file_name(location.internal_id)
    artifact_path = os.path.abspath(os.path.join(build_path, file_name))
    if not exists(artifact_path):
        fallback = os.path.abspath(os.path.join(f"{build_root}/{PLATFORM_DIRECTORY}", file_name))
        artifact_path = resolver.evaluate_string(profile_id, fallback)
        logger.debug("Bundle %s not found in %s, using %s", file_name, build_path, artifact_path)

    internal_id = location.internal_id
    if RUNTIME_PATH_TOKEN in internal_id:
        internal_id = os.path.abspath(internal_id.replace(RUNTIME_PATH_TOKEN, build_root))

    return RewrittenBundle(
        location=location.with_internal_id(internal_id),
        build_path=build_path,
        artifact_path=artifact_path,
    )
