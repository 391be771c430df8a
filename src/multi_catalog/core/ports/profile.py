from typing import Protocol


class ProfileVariableResolver(Protocol):
    def get_value_by_name(self, profile_id: str, name: str) -> str: ...

    def evaluate_string(self, profile_id: str, value: str) -> str: ...
