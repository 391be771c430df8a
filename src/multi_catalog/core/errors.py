class CatalogBuildError(Exception):
    """A condition that aborts the whole catalog build."""


class DefaultPartitionNotFoundError(CatalogBuildError):
    def __init__(self) -> None:
        super().__init__("Default group couldn't be found")


class ProfileResolutionError(CatalogBuildError):
    def __init__(self, profile_id: str, name: str) -> None:
        super().__init__(f"Profile variable '{name}' could not be resolved in profile '{profile_id}'")
        self.profile_id = profile_id
        self.name = name


class EnumerationError(Exception):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(EnumerationError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"Path {path} was not in the enumeration tree")


class PathNotAddressableError(EnumerationError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"Path {path} cannot be enumerated because it is not addressable")
