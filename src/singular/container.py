"""The container: singleton resolution with overrides and cycle detection."""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from singular.binding_registry import BindingRegistry
from singular.context import active_context, entered
from singular.domain import ResolutionContext
from singular.errors import CyclicDependencyError, constructor_name
from singular.injector import Injector
from singular.instance_cache import InstanceCache

__all__ = ["Container"]

logger = logging.getLogger(__name__)


class Container:
    """Owns one set of bindings and one cache of singletons.

    Calling the container (or ``get``) with a constructor returns the bound
    substitute if there is one, else the cached singleton, else constructs,
    caches and returns a new instance. Constructors may themselves call
    ``inject`` for their dependencies; while this container is constructing,
    those calls resolve against it, so the dependency graph is built
    depth-first on first use.

    Bindings only shadow the cache. Resetting them exposes whatever singleton
    was cached before, and never discards it.

    Example:
        >>> container = Container()
        >>> container(Database) is container(Database)
        True
        >>> container.bind(Database, fake_database)
        >>> container(Database) is fake_database
        True
    """

    def __init__(self):
        self._bindings = BindingRegistry()
        self._instances = InstanceCache()
        self._resolver = Injector(self)

    def __call__(self, constructor: Callable) -> Any:
        return self.get(constructor)

    def get(self, constructor: Callable) -> Any:
        """Return the instance for ``constructor``.

        Raises:
            CyclicDependencyError: If ``constructor`` is already being
                constructed further up the current resolution.
        """
        if constructor in self._bindings:
            return self._bindings[constructor]
        if constructor in self._instances:
            return self._instances[constructor]

        with self._constructing(constructor):
            instance = self._resolver.resolve(constructor)

        self._instances.store(constructor, instance)
        logger.debug("Cached singleton %s", constructor_name(constructor))
        return instance

    def bind(self, constructor: Callable, instance: Any):
        self._bindings.bind(constructor, instance)

    def unbind(self, constructor: Callable):
        self._bindings.unbind(constructor)

    def reset_bindings(self):
        self._bindings.reset()

    def is_bound(self, constructor: Callable) -> bool:
        return constructor in self._bindings

    def is_cached(self, constructor: Callable) -> bool:
        return constructor in self._instances

    @contextmanager
    def activated(self) -> Iterator["Container"]:
        """Direct module-level ``inject`` calls to this container within the block.

        Any resolution already in progress is carried into the block, so cycle
        detection sees through factory calls and through other containers.
        """
        context = active_context()
        if context is not None and context.container is self:
            yield self
            return
        switched = context.switched_to(self) if context else ResolutionContext(self)
        with entered(switched):
            yield self

    @contextmanager
    def _constructing(self, constructor: Callable) -> Iterator[None]:
        context = active_context()
        if context is None:
            context = ResolutionContext(self)

        if context.is_constructing(self, constructor):
            cycle = context.cycle_through(self, constructor)
            logger.debug("Detected cycle %s", [constructor_name(c) for c in cycle])
            raise CyclicDependencyError(cycle)

        with entered(context.entering(self, constructor)):
            yield
