import re

from multi_catalog.core.errors import ProfileResolutionError
from multi_catalog.models import ContentSettings

_TOKEN = re.compile(r"\[([^\[\]]+)\]")
_MAX_DEPTH = 10


class InMemoryProfileResolver:
    """Resolve profile variables from plain ``{profile_id: {name: value}}`` tables.

    Implements the ``ProfileVariableResolver`` protocol. ``[Name]`` tokens are
    expanded recursively; ``{...}`` runtime tokens are left for the player to expand.
    """

    def __init__(self, profiles: dict[str, dict[str, str]]) -> None:
        self.profiles = {profile_id: dict(values) for profile_id, values in profiles.items()}

    @classmethod
    def from_settings(cls, settings: ContentSettings) -> "InMemoryProfileResolver":
        return cls(settings.profiles)

    def get_value_by_name(self, profile_id: str, name: str) -> str:
        values = self.profiles.get(profile_id)
        if values is None or name not in values:
            raise ProfileResolutionError(profile_id, name)
        return values[name]

    def evaluate_string(self, profile_id: str, value: str) -> str:
        for _ in range(_MAX_DEPTH):
            expanded = _TOKEN.sub(lambda m: self.get_value_by_name(profile_id, m.group(1)), value)
            if expanded == value:
                break
            value = expanded
        leftover = _TOKEN.search(value)
        if leftover is not None:
            # Self-referencing variables never settle.
            raise ProfileResolutionError(profile_id, leftover.group(1))
        return value
