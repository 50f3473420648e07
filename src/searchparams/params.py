"""Ordered query string parameters.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
Stores every ``(key, value)`` pair in order, so repeated keys and their
interleaving survive a parse/serialize round trip.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import parse_qsl, urlencode

type ParamsInit = str | bytes | Mapping[str, str] | Iterable[tuple[str, str]] | None


class SearchParams(Mapping[str, str]):
    """Ordered multi-map of query string parameters.

    Attributes:
        _pairs: Every ``(key, value)`` pair, in insertion order.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    Iteration yields each distinct key once, in first-appearance order;
    ``multi_items`` yields every pair.

    Usage::

        params = SearchParams("?tag=a&tag=b&page=2")
        params["page"]            # "2"
        params.get_list("tag")    # ["a", "b"]
        str(params)               # "tag=a&tag=b&page=2"
    """

    _pairs: list[tuple[str, str]]

    __slots__ = ("_pairs",)

    def __init__(self, init: ParamsInit = None) -> None:
        if init is None:
            pairs: list[tuple[str, str]] = []
        elif isinstance(init, SearchParams):
            pairs = init.multi_items()
        elif isinstance(init, bytes):
            pairs = _parse(init.decode("latin-1"))
        elif isinstance(init, str):
            pairs = _parse(init)
        elif isinstance(init, Mapping):
            pairs = [(str(k), str(v)) for k, v in init.items()]
        else:
            pairs = [(str(k), str(v)) for k, v in init]
        self._pairs = pairs

    def __getitem__(self, key: str) -> str:
        for name, value in self._pairs:
            if name == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._pairs:
            if name not in seen:
                seen.add(name)
                yield name

    def __len__(self) -> int:
        return len({name for name, _ in self._pairs})

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SearchParams):
            return self._pairs == other._pairs
        return NotImplemented

    def __repr__(self) -> str:
        return f"SearchParams({self._pairs!r})"

    def __str__(self) -> str:
        return urlencode(self._pairs)

    # -- Lookup --

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in order."""
        return [value for name, value in self._pairs if name == key]

    def has(self, key: str) -> bool:
        """Return True if *key* occurs at least once."""
        return key in self

    def multi_items(self) -> list[tuple[str, str]]:
        """Return every ``(key, value)`` pair, repeated keys included."""
        return list(self._pairs)

    # -- Mutation --

    def append(self, key: str, value: str) -> None:
        """Add a ``key=value`` pair after all existing pairs."""
        self._pairs.append((key, value))

    def set(self, key: str, value: str) -> None:
        """Replace the first occurrence of *key* and drop the rest.

        Appends when *key* is not present yet.
        """
        pairs: list[tuple[str, str]] = []
        found = False
        for name, current in self._pairs:
            if name != key:
                pairs.append((name, current))
            elif not found:
                pairs.append((key, value))
                found = True
        if not found:
            pairs.append((key, value))
        self._pairs = pairs

    def delete(self, key: str) -> None:
        """Remove every occurrence of *key*."""
        self._pairs = [(name, value) for name, value in self._pairs if name != key]

    def copy(self) -> SearchParams:
        """Return an independent instance holding the same pairs."""
        return SearchParams(self)


def _parse(query_string: str) -> list[tuple[str, str]]:
    """Decode a query string into pairs, keeping blank values."""
    if query_string.startswith("?"):
        query_string = query_string[1:]
    return parse_qsl(query_string, keep_blank_values=True)
