"""Controller base class.

A controller is constructed once with its dependencies, then
dispatched any number of times. Each dispatch binds the inbound
request, the pre-allocated response and the route arguments into a
fresh ``Context`` and calls ``handle``.

Usage::

    @dataclass(frozen=True, slots=True)
    class Deps:
        users: UserRepository

    class ShowUser(Controller[Deps]):
        def handle(self, ctx: Context) -> Response:
            user = self.deps.users.find(ctx.args["id"])
            if user is None:
                return ctx.error({"id": "unknown user"}, 404)
            return ctx.success({"name": user.name})

    response = ShowUser(Deps(users=repo)).dispatch(request, Response(), {"id": "42"})
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType

from starbs.config import DEFAULT_CONFIG, ControllerConfig
from starbs.controllers.context import Context
from starbs.http.protocols import InboundRequest, OutboundResponse

logger = logging.getLogger("starbs.controllers")


class Controller[D](ABC):
    """Abstract controller with explicit, typed dependencies.

    Attributes:
        deps: The dependencies given at construction.
        config: Envelope rendering options for the JSON helpers.
    """

    __slots__ = ("config", "deps")

    def __init__(self, deps: D, *, config: ControllerConfig = DEFAULT_CONFIG) -> None:
        self.deps = deps
        self.config = config

    def dispatch(
        self,
        request: InboundRequest,
        response: OutboundResponse,
        args: Mapping[str, str],
    ) -> OutboundResponse:
        """Bind the inputs and run ``handle``.

        Returns whatever ``handle`` returns, normally *response* after
        mutation. Exceptions from ``handle`` propagate unchanged.
        """
        ctx = Context(
            request=request,
            response=response,
            args=MappingProxyType(dict(args)),
            config=self.config,
        )
        logger.debug(
            "%s %s -> %s",
            getattr(request, "method", "-"),
            getattr(request, "path", "-"),
            type(self).__qualname__,
        )
        return self.handle(ctx)

    @abstractmethod
    def handle(self, ctx: Context) -> OutboundResponse:
        """Decide the response content for one request.

        Implementations usually finish with one of ``ctx.success``,
        ``ctx.error``, ``ctx.redirect`` or ``ctx.raw``.
        """
