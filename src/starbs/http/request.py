"""Immutable HTTP request.

Frozen metadata plus already-parsed form input. The host framework
builds it; controllers only read from it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from starbs.http.forms import FormData, UploadFile
from starbs.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Satisfies ``InboundRequest``: ``form_field`` and ``uploaded_file``
    return ``None`` for names the submission did not include.
    """

    method: str = "GET"
    path: str = "/"
    headers: Headers = field(default_factory=Headers)
    form: FormData = field(default_factory=FormData)

    # -- Computed properties --

    @property
    def files(self) -> Mapping[str, UploadFile]:
        """Uploaded files by field name."""
        return self.form.files

    # -- Input lookups --

    def form_field(self, name: str) -> str | None:
        """Return the submitted value for *name*, or ``None``.

        A repeated field yields its last value, as classic form parsing does.
        """
        values = self.form.get_list(name)
        return values[-1] if values else None

    def uploaded_file(self, name: str) -> UploadFile | None:
        """Return the uploaded file for *name*, or ``None``."""
        return self.form.files.get(name)
