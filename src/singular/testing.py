"""Helpers for isolating tests from one another."""

from contextlib import contextmanager
from typing import Iterator

from singular.container import Container

__all__ = ["isolated"]


@contextmanager
def isolated() -> Iterator[Container]:
    """Yield a fresh container that ``inject`` resolves against within the block.

    Bindings made and singletons built inside the block are discarded with the
    container when it exits.
    """
    container = Container()
    with container.activated():
        yield container
