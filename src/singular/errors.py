__all__ = ["DependencyError", "CyclicDependencyError"]


class DependencyError(Exception):
    """Raised when a dependency cannot be resolved."""

    pass


class CyclicDependencyError(DependencyError):
    """Raised when a constructor is requested again while it is still being constructed.

    Attributes:
        cycle: The constructors on the cycle, starting and ending with the
            constructor that was re-entered.
    """

    def __init__(self, cycle: tuple):
        self.cycle = cycle
        super().__init__(
            "Cyclic dependency: " + " -> ".join(constructor_name(c) for c in cycle)
        )


def constructor_name(constructor) -> str:
    """Readable name for a constructor, falling back to its repr."""
    return getattr(constructor, "__qualname__", None) or repr(constructor)
