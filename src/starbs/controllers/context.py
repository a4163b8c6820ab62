"""The bound inputs of a single dispatch.

A ``Context`` is created by ``Controller.dispatch`` and handed to
``handle``. It lives for exactly one call; nothing about it is stored
on the controller, so one controller instance can serve overlapping
requests.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from starbs.config import DEFAULT_CONFIG, ControllerConfig
from starbs.controllers import shaping
from starbs.http.protocols import InboundRequest, OutboundResponse


@dataclass(frozen=True, slots=True)
class Context:
    """Request, response and route arguments for one handler call.

    The shaping methods write to ``self.response`` and return it::

        def handle(self, ctx: Context) -> Response:
            name = ctx.input("name")
            if name is None:
                return ctx.error({"name": "required"}, 422)
            return ctx.success({"hello": name})
    """

    request: InboundRequest
    response: OutboundResponse
    args: Mapping[str, str]
    config: ControllerConfig = field(default=DEFAULT_CONFIG, repr=False)

    # -- Input --

    def input(self, key: str) -> Any:
        """Return form field *key*, or ``None`` if it was not submitted."""
        return self.request.form_field(key)

    def file(self, key: str) -> Any:
        """Return uploaded file *key*, or ``None`` if none was sent."""
        return self.request.uploaded_file(key)

    # -- Shaping --

    def success(self, data: Mapping[str, Any], code: int = 200) -> OutboundResponse:
        """Fill the response with a success envelope. See ``shaping.success``."""
        return shaping.success(self.response, data, code, config=self.config)

    def error(self, data: Mapping[str, Any], code: int = 500) -> OutboundResponse:
        """Fill the response with an error envelope. See ``shaping.error``."""
        return shaping.error(self.response, data, code, config=self.config)

    def redirect(self, url: str, code: int = 302) -> OutboundResponse:
        """Redirect to *url*. See ``shaping.redirect``."""
        return shaping.redirect(self.response, url, code)

    def raw(self, data: str | bytes, mime: str, code: int = 200) -> OutboundResponse:
        """Send *data* verbatim as *mime*. See ``shaping.raw``."""
        return shaping.raw(self.response, data, mime, code)
