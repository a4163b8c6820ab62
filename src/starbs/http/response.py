"""Mutable HTTP response.

The host allocates one per request and passes it to the controller,
which fills in status, headers and body in place.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from starbs.http.headers import Headers


@dataclass(slots=True)
class Response:
    """An HTTP response populated in place.

    Satisfies ``OutboundResponse``. Construct empty, or with a body,
    and let the shaping helpers fill it::

        response = Response()
        success(response, {"id": 42}, 201)
    """

    body: str | bytes = ""
    status: int = 200
    headers: Headers = field(default_factory=Headers)

    # -- Mutation --

    def set_status(self, code: int) -> None:
        """Replace the status code."""
        self.status = code

    def merge_headers(self, headers: Mapping[str, str]) -> None:
        """Replace each header named in *headers*, keeping all others."""
        for name, value in headers.items():
            self.headers.set(name, value)

    def set_header(self, name: str, value: str) -> None:
        """Overwrite every value for *name* with *value*."""
        self.headers.set(name, value)

    def set_body(self, body: str | bytes) -> None:
        """Replace the body verbatim."""
        self.body = body

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name*, or *default*."""
        return self.headers.get(name, default)

    @property
    def content_type(self) -> str | None:
        """The first Content-Type header value, if any."""
        return self.headers.get("content-type")

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body
