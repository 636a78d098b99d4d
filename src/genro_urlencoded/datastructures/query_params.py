# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Read-only multi-value view over a decoded QueryMap.

Purpose
=======
``decode_query()`` and ``decode_body()`` return a plain ``dict[str, list[str]]``.
Handlers usually want "the value" of a parameter and only occasionally all
of them; ``QueryParams`` gives both without touching the lists directly.

Access Schema::

    decode_query(b"name=john&tags=python&tags=web&empty=")
                        ↓
    QueryMap: {
        "name": ["john"],
        "tags": ["python", "web"],
        "empty": [""]
    }
                        ↓
    params = QueryParams(query_map)
    params.get("name")      → "john"
    params.getlist("tags")  → ["python", "web"]
    params.get("empty")     → ""
    params.get("missing")   → None

Example::

    from genro_urlencoded import QueryParams, decode_body

    form = QueryParams(decode_body(body))
    username = form["username"]
    roles = form.getlist("role")

Design Notes
============
- Uses ``__slots__``
- Lists are copied on construction and on ``getlist()``/``to_dict()``,
  so neither the source map nor the caller can mutate the view
- Case-sensitive keys
- ``__bool__`` returns False for an empty map
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from ..types import QueryMap

__all__ = ["QueryParams"]


class QueryParams:
    """
    Decoded URL-encoded parameters with multi-value support.

    Example:
        >>> params = QueryParams({"name": ["john"], "tags": ["python", "web"]})
        >>> params.get("name")
        'john'
        >>> params.getlist("tags")
        ['python', 'web']
        >>> "tags" in params
        True
    """

    __slots__ = ("_params",)

    def __init__(self, query_map: Mapping[str, list[str]] | None = None) -> None:
        """
        Initialize QueryParams from a decoded map.

        Args:
            query_map: Result of a decode call. None gives an empty view.
        """
        self._params: QueryMap = {k: list(v) for k, v in (query_map or {}).items()}

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Get the first value for a parameter.

        Args:
            key: Parameter name (case-sensitive).
            default: Value to return if parameter not found.

        Returns:
            The first value for the parameter, or default if not found.
        """
        values = self._params.get(key)
        if values:
            return values[0]
        return default

    def getlist(self, key: str) -> list[str]:
        """Return a copy of all values for a parameter, [] if missing."""
        return list(self._params.get(key, []))

    def keys(self) -> list[str]:
        """Return all parameter names."""
        return list(self._params.keys())

    def values(self) -> list[str]:
        """Return the first value for each parameter."""
        return [v[0] for v in self._params.values() if v]

    def items(self) -> list[tuple[str, str]]:
        """Return (name, first_value) pairs."""
        return [(k, v[0]) for k, v in self._params.items() if v]

    def multi_items(self) -> list[tuple[str, str]]:
        """
        Return all (name, value) pairs including duplicates.

        Pairs are grouped by name; within a name, values keep source order.

        Example:
            >>> QueryParams({"a": ["1", "2"], "b": ["3"]}).multi_items()
            [('a', '1'), ('a', '2'), ('b', '3')]
        """
        return [(key, value) for key, values in self._params.items() for value in values]

    def to_dict(self) -> QueryMap:
        """Return a copy of the underlying QueryMap."""
        return {k: list(v) for k, v in self._params.items()}

    def __getitem__(self, key: str) -> str:
        """
        Get parameter value by name, raising KeyError if not found.

        Raises:
            KeyError: If parameter is not present.
        """
        values = self._params.get(key)
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        """Check if parameter exists (case-sensitive)."""
        if not isinstance(key, str):
            return False
        return key in self._params

    def __iter__(self) -> Iterator[str]:
        """Iterate over parameter names."""
        return iter(self._params)

    def __len__(self) -> int:
        """Return number of unique parameters."""
        return len(self._params)

    def __bool__(self) -> bool:
        """Return True if there are any parameters."""
        return bool(self._params)

    def __eq__(self, other: object) -> bool:
        """Compare with another QueryParams or a plain mapping."""
        if isinstance(other, QueryParams):
            return self._params == other._params
        if isinstance(other, Mapping):
            return self._params == {k: list(v) for k, v in other.items()}
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"QueryParams({self._params!r})"
