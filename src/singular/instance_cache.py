"""Memoised singleton instances, keyed by constructor."""

from typing import Any, Callable

__all__ = ["InstanceCache"]


class InstanceCache:
    """Holds the single instance built for each constructor.

    Constructors are matched by identity, never by equality. Entries are
    written once, after construction returns normally, and are never replaced
    or removed. A failed construction leaves no entry.
    """

    def __init__(self):
        # id(constructor) -> (constructor, instance)
        self._instances: dict[int, tuple[Callable, Any]] = {}

    def store(self, constructor: Callable, instance: Any):
        self._instances[id(constructor)] = (constructor, instance)

    def cached_constructors(self) -> list[Callable]:
        return [constructor for constructor, _ in self._instances.values()]

    def __contains__(self, constructor: Callable) -> bool:
        return id(constructor) in self._instances

    def __getitem__(self, constructor: Callable) -> Any:
        if constructor not in self:
            raise KeyError(constructor)
        return self._instances[id(constructor)][1]

    def __len__(self) -> int:
        return len(self._instances)
