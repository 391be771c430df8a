from multi_catalog.profiles.memory import InMemoryProfileResolver

__all__ = [
    "InMemoryProfileResolver",
]
