"""Tracking of the resolution in progress for the current execution context.

Construction is synchronous and nested ``inject`` calls happen inside the
constructor being run, so the state they need (which container to use and
which constructors are already being built) is held in a context variable
rather than passed as an argument.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from singular.domain import ResolutionContext

__all__ = ["active_context", "entered"]

_active: ContextVar[Optional[ResolutionContext]] = ContextVar(
    "singular_resolution_context", default=None
)


def active_context() -> Optional[ResolutionContext]:
    """Return the resolution context in force, or None outside any container."""
    return _active.get()


@contextmanager
def entered(context: ResolutionContext) -> Iterator[ResolutionContext]:
    """Make ``context`` active for the duration of the block.

    The previous context is restored on exit, including when the block raises.
    """
    token = _active.set(context)
    try:
        yield context
    finally:
        _active.reset(token)
