"""Domain models used throughout the library."""

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class ResolutionRequest:
    """A request to construct a fresh instance.

    Attributes:
        constructor: The class or factory to invoke.
        args: Positional arguments, forwarded in order.
        kwargs: Keyword arguments, forwarded as given.
    """

    constructor: Callable
    args: tuple = ()
    kwargs: dict[str, Any] = field(default_factory=dict)

    def construct(self) -> Any:
        return self.constructor(*self.args, **self.kwargs)


@dataclass(frozen=True)
class ResolutionContext:
    """The container resolving in the current context, and what it is constructing.

    Attributes:
        container: The container that nested ``inject`` calls resolve against.
        constructing: ``(container, constructor)`` pairs currently under
            construction, outermost first, across every container involved.
    """

    container: Any
    constructing: tuple = ()

    def is_constructing(self, container, constructor) -> bool:
        return any(
            owner is container and c is constructor for owner, c in self.constructing
        )

    def cycle_through(self, container, constructor) -> tuple:
        start = next(
            i
            for i, (owner, c) in enumerate(self.constructing)
            if owner is container and c is constructor
        )
        return tuple(c for _, c in self.constructing[start:]) + (constructor,)

    def entering(self, container, constructor) -> "ResolutionContext":
        return ResolutionContext(
            container, self.constructing + ((container, constructor),)
        )

    def switched_to(self, container) -> "ResolutionContext":
        return ResolutionContext(container, self.constructing)
