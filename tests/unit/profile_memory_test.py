"""Tests for the in-memory profile resolver."""

import pytest

from multi_catalog.core.errors import ProfileResolutionError
from multi_catalog.core.ports.profile import ProfileVariableResolver
from multi_catalog.models import ContentSettings
from multi_catalog.profiles import InMemoryProfileResolver


@pytest.fixture
def resolver() -> InMemoryProfileResolver:
    return InMemoryProfileResolver(
        {
            "Default": {
                "BuildTarget": "Android",
                "LocalBuildPath": "Library/aa/[BuildTarget]",
                "Nested": "[LocalBuildPath]/extra",
                "Loop": "[Loop]",
            }
        }
    )


def test_implements_protocol(resolver: InMemoryProfileResolver) -> None:
    port: ProfileVariableResolver = resolver
    assert hasattr(port, "get_value_by_name")
    assert hasattr(port, "evaluate_string")


def test_get_value_by_name_returns_raw_value(resolver: InMemoryProfileResolver) -> None:
    assert resolver.get_value_by_name("Default", "LocalBuildPath") == "Library/aa/[BuildTarget]"


def test_evaluate_expands_tokens(resolver: InMemoryProfileResolver) -> None:
    assert resolver.evaluate_string("Default", "[LocalBuildPath]") == "Library/aa/Android"


def test_evaluate_expands_nested_tokens(resolver: InMemoryProfileResolver) -> None:
    assert resolver.evaluate_string("Default", "[Nested]") == "Library/aa/Android/extra"


def test_evaluate_leaves_runtime_tokens(resolver: InMemoryProfileResolver) -> None:
    value = "{UnityEngine.AddressableAssets.Addressables.RuntimePath}/[BuildTarget]"
    assert resolver.evaluate_string("Default", value) == "{UnityEngine.AddressableAssets.Addressables.RuntimePath}/Android"


def test_evaluate_plain_string(resolver: InMemoryProfileResolver) -> None:
    assert resolver.evaluate_string("Default", "ServerData") == "ServerData"


def test_unknown_variable_raises(resolver: InMemoryProfileResolver) -> None:
    with pytest.raises(ProfileResolutionError) as excinfo:
        resolver.evaluate_string("Default", "[RemoteLoadPath]")
    assert excinfo.value.name == "RemoteLoadPath"
    assert excinfo.value.profile_id == "Default"


def test_unknown_profile_raises(resolver: InMemoryProfileResolver) -> None:
    with pytest.raises(ProfileResolutionError):
        resolver.get_value_by_name("Release", "LocalBuildPath")


def test_self_reference_raises(resolver: InMemoryProfileResolver) -> None:
    with pytest.raises(ProfileResolutionError, match="Loop"):
        resolver.evaluate_string("Default", "[Loop]")


def test_from_settings_copies_profiles() -> None:
    settings = ContentSettings(profiles={"Default": {"BuildTarget": "iOS"}})
    resolver = InMemoryProfileResolver.from_settings(settings)
    settings.profiles["Default"]["BuildTarget"] = "Android"
    assert resolver.evaluate_string("Default", "[BuildTarget]") == "iOS"
