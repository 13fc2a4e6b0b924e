"""Singular: memoised singleton resolution with test overrides.

Singular hands out one canonical instance per constructor. Constructors
declare their dependencies simply by calling ``inject`` while they run, so the
dependency graph is built depth-first, on demand, with no registration step.

Key Features:
    - Singleton identity: ``inject(C) is inject(C)``
    - Overrides for testing with ``inject.bind`` and ``inject.reset_bindings``
    - Fresh, argument-taking construction through an injectable ``Injector``
    - Detection of cyclic construction
    - Independent containers for isolation

Basic Usage:
    >>> from singular import inject
    >>>
    >>> class AlertService:
    ...     def alert(self, message): ...
    >>>
    >>> class Notifier:
    ...     def __init__(self):
    ...         self.alerts = inject(AlertService)
    ...
    ...     def warn(self, message):
    ...         self.alerts.alert(message)
    >>>
    >>> inject(Notifier) is inject(Notifier)
    True

The library consists of:
    - api: the ``inject`` entry point
    - container: singleton resolution, overrides and cycle detection
    - injector: fresh-instance construction (the factory path)
    - binding_registry, instance_cache: the container's state
    - testing: per-test isolation
    - errors: library exceptions
"""

from singular.api import current_container, inject
from singular.container import Container
from singular.errors import CyclicDependencyError, DependencyError
from singular.injector import Injector

__all__ = [
    "inject",
    "current_container",
    "Container",
    "Injector",
    "DependencyError",
    "CyclicDependencyError",
]
