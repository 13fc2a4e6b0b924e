"""The resolver: construction of fresh, unmemoised instances.

``Injector`` is the primitive the container uses to build singletons, and it
is itself injectable so that application code needing a new object per call
(a factory) can obtain one through ``inject(inject.Injector)``. Tests can then
bind a substitute ``Injector`` and assert on ``resolve`` calls without
constructing anything real.
"""

import logging
from typing import Any, Callable, Optional

from singular.context import active_context
from singular.domain import ResolutionRequest
from singular.errors import constructor_name

__all__ = ["Injector"]

logger = logging.getLogger(__name__)


class Injector:
    """Constructs fresh instances on behalf of a container.

    Args:
        container: The container whose bindings and singletons nested
            ``inject`` calls should see. Defaults to the container resolving
            in the current context, which is the one constructing this
            injector when it is obtained via ``inject(Injector)``.
    """

    def __init__(self, container: Optional[Any] = None):
        if container is None:
            context = active_context()
            container = context.container if context else None
        self._container = container

    def resolve(self, constructor: Callable, *args, **kwargs) -> Any:
        """Construct and return a new instance of ``constructor``.

        Arguments are forwarded unchanged. Neither bindings nor the instance
        cache are consulted for ``constructor`` itself, so every call returns
        a distinct object. Exceptions raised by the constructor propagate as-is.
        """
        return self.resolve_request(ResolutionRequest(constructor, args, kwargs))

    def resolve_request(self, request: ResolutionRequest) -> Any:
        logger.debug("Constructing %s", constructor_name(request.constructor))
        if self._container is None:
            return request.construct()
        with self._container.activated():
            return request.construct()
