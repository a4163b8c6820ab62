"""Parsed form containers — field values and uploaded files.

Starbs does not parse request bodies. The host framework parses
URL-encoded or multipart input and hands the result over as
``FormData`` (fields plus ``UploadFile`` objects), which implements
``MultiValueMapping`` for consistent access alongside ``Headers``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class UploadFile:
    """An uploaded file from a multipart form submission.

    Immutable metadata with the content held in memory as bytes.
    """

    filename: str
    content_type: str = "application/octet-stream"
    _content: bytes = field(default=b"", repr=False)

    @property
    def size(self) -> int:
        """Content length in bytes."""
        return len(self._content)

    async def read(self) -> bytes:
        """Return the file content as bytes."""
        return self._content

    async def save(self, path: Path) -> None:
        """Write the file content to disk.

        Args:
            path: Destination file path. Parent directories must exist.
        """
        path.write_bytes(self._content)

    def __repr__(self) -> str:
        return f"UploadFile({self.filename!r}, {self.content_type!r}, {self.size} bytes)"


class FormData(Mapping[str, str]):
    """Immutable parsed form data.

    ``__getitem__`` returns the first value for a key (string fields only).
    ``get_list`` returns all values for a key.
    ``files`` provides access to uploaded files by field name.

    Usage::

        form = FormData({"username": ["alice"]}, files={"avatar": upload})
        form.get("username")        # "alice"
        form.files.get("avatar")    # UploadFile or None
    """

    __slots__ = ("_data", "_files")

    def __init__(
        self,
        data: Mapping[str, list[str]] | None = None,
        files: Mapping[str, UploadFile] | None = None,
    ) -> None:
        object.__setattr__(self, "_data", {k: list(v) for k, v in (data or {}).items()})
        object.__setattr__(self, "_files", dict(files or {}))

    @classmethod
    def from_fields(cls, fields: Mapping[str, str], files: Mapping[str, UploadFile] | None = None) -> FormData:
        """Build from single-valued fields, e.g. ``{"name": "alice"}``."""
        return cls({k: [v] for k, v in fields.items()}, files)

    @property
    def files(self) -> Mapping[str, UploadFile]:
        """Uploaded files by field name."""
        return self._files

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"FormData({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (checkboxes, multi-selects)."""
        return list(self._data.get(key, []))
