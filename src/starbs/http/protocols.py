"""Structural protocols for the objects a controller consumes.

Controllers never construct requests or responses. Any object with
the right shape works, so hosts can pass their own types or wrap them
in a thin adapter. The bundled ``Request`` and ``Response`` satisfy
these protocols.

Defined with explicit methods rather than ABC inheritance so checks
stay structural (``isinstance`` works via ``runtime_checkable``).
"""

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    Shared by ``Headers`` and ``FormData``.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


@runtime_checkable
class InboundRequest(Protocol):
    """Read side of a request: named form fields and uploaded files.

    Both lookups return ``None`` for absent names instead of raising.
    """

    def form_field(self, name: str) -> Any: ...
    def uploaded_file(self, name: str) -> Any: ...


@runtime_checkable
class OutboundResponse(Protocol):
    """Write side of a response: status, headers and body.

    ``merge_headers`` replaces each named header and leaves the others
    alone. ``set_header`` overwrites every existing value for one name.
    """

    def set_status(self, code: int) -> None: ...
    def merge_headers(self, headers: Mapping[str, str]) -> None: ...
    def set_header(self, name: str, value: str) -> None: ...
    def set_body(self, body: str | bytes) -> None: ...
