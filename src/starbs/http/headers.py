"""Mutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
Stores ``(name, value)`` string pairs in insertion order; lookups
ignore case, names keep the case they were added with.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Ordered, case-insensitive header multimap.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    ``add`` appends a value, ``set`` replaces every value of a name.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        self._pairs: list[tuple[str, str]] = [(str(k), str(v)) for k, v in items]

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._pairs:
            if name.lower() == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name.lower() == key_lower for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._pairs:
            key = name.lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        return f"Headers({self._pairs!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (e.g. multiple ``Set-Cookie``)."""
        key_lower = key.lower()
        return [value for name, value in self._pairs if name.lower() == key_lower]

    # -- Mutation --

    def add(self, name: str, value: str) -> None:
        """Append a value for *name*, keeping any existing values."""
        self._pairs.append((name, value))

    def set(self, name: str, value: str) -> None:
        """Replace every value for *name* with a single *value*.

        The new pair takes the position of the first existing one, or is
        appended when the header was absent.
        """
        key_lower = name.lower()
        replaced = False
        pairs: list[tuple[str, str]] = []
        for existing, old in self._pairs:
            if existing.lower() != key_lower:
                pairs.append((existing, old))
            elif not replaced:
                pairs.append((name, value))
                replaced = True
        if not replaced:
            pairs.append((name, value))
        self._pairs = pairs

    @property
    def raw(self) -> tuple[tuple[str, str], ...]:
        """All ``(name, value)`` pairs in insertion order."""
        return tuple(self._pairs)
