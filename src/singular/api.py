"""The module-level ``inject`` entry point."""

from typing import Any, Callable

from singular.container import Container
from singular.context import active_context
from singular.injector import Injector

__all__ = ["inject", "current_container"]

_default_container = Container()


def current_container() -> Container:
    """Return the container ``inject`` currently resolves against.

    This is the container constructing or explicitly activated in the current
    context, or the process-wide default container otherwise.
    """
    context = active_context()
    return context.container if context else _default_container


class _Inject:
    """Callable facade over :func:`current_container`.

    Example:
        >>> class Notifier:
        ...     def __init__(self):
        ...         self.alerts = inject(AlertService)
        >>> inject.bind(AlertService, recording_alerts)
        >>> inject(Notifier).alerts is recording_alerts
        True
    """

    Injector = Injector

    def __call__(self, constructor: Callable) -> Any:
        return current_container().get(constructor)

    def bind(self, constructor: Callable, instance: Any):
        current_container().bind(constructor, instance)

    def unbind(self, constructor: Callable):
        current_container().unbind(constructor)

    def reset_bindings(self):
        current_container().reset_bindings()

    def __repr__(self) -> str:
        return "<singular.inject>"


inject = _Inject()
