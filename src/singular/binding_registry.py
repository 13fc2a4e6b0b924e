"""Overrides that take precedence over real construction."""

import logging
from typing import Any, Callable

from singular.errors import constructor_name

__all__ = ["BindingRegistry"]

logger = logging.getLogger(__name__)


class BindingRegistry:
    """Registry mapping constructors to substitute instances.

    A binding shadows both the instance cache and construction for its
    constructor until it is removed. Constructors are matched by identity,
    never by equality. Any object may be bound: no check is
    made that the substitute resembles what the constructor would build.

    Example:
        >>> bindings = BindingRegistry()
        >>> bindings.bind(AlertService, recording_alerts)
        >>> bindings[AlertService] is recording_alerts
        True
        >>> bindings.reset()
        >>> AlertService in bindings
        False
    """

    def __init__(self):
        # id(constructor) -> (constructor, instance)
        self._bindings: dict[int, tuple[Callable, Any]] = {}

    def bind(self, constructor: Callable, instance: Any):
        """Bind ``instance`` as the override for ``constructor``, replacing any prior one."""
        logger.debug("Binding %s to %r", constructor_name(constructor), instance)
        self._bindings[id(constructor)] = (constructor, instance)

    def unbind(self, constructor: Callable):
        """Remove the override for ``constructor``, if there is one."""
        if id(constructor) in self._bindings:
            del self._bindings[id(constructor)]
            logger.debug("Unbound %s", constructor_name(constructor))

    def reset(self):
        """Remove every override."""
        logger.debug("Resetting %d binding(s)", len(self._bindings))
        self._bindings.clear()

    def bound_constructors(self) -> list[Callable]:
        return [constructor for constructor, _ in self._bindings.values()]

    def __contains__(self, constructor: Callable) -> bool:
        return id(constructor) in self._bindings

    def __getitem__(self, constructor: Callable) -> Any:
        if constructor not in self:
            raise KeyError(constructor)
        return self._bindings[id(constructor)][1]

    def __len__(self) -> int:
        return len(self._bindings)
