# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
URL-encoded data decoder.

Purpose
=======
Turns a raw ``application/x-www-form-urlencoded`` string (a URL query
component or a request body) into a ``QueryMap``: every parameter name
mapped to the list of values supplied for it, in source order.

Two entry points, one for each source:

- ``decode_query()``: query component of a URL, or ``None`` if absent
- ``decode_body()``: raw body bytes, or the error raised while reading them

Both delegate to ``parse()``. Nothing is cached or attached to a request:
the host decides where the decoded map lives (e.g. request state), and keeps
query-derived and body-derived maps apart.

Parsing Schema::

    b"band=arctic+monkeys&band=temper%20trap&color="
                        ↓
         empty? → EmptyQuery
                        ↓
         percent-decode whole input, strict UTF-8 → MalformedQuery
                        ↓
         split on "&", first "=" per segment, "+" → " ", percent-decode
                        ↓
    [("band", "arctic monkeys"), ("band", "temper trap"), ("color", "")]
                        ↓
                combine_duplicates
                        ↓
    {"band": ["arctic monkeys", "temper trap"], "color": [""]}

The whole input is percent-decoded once before it is split, and each part
is percent-decoded again after splitting. As a consequence ``%26`` acts as
a real separator, ``%2B`` becomes a space, and ``%2526`` is the way to
carry a literal ``&`` inside a value.

Escapes are decoded tolerantly: a ``%`` not followed by two hex digits is
kept literally. Only the first, whole-input pass is strict about UTF-8;
the per-part pass replaces invalid sequences with U+FFFD.

Example::

    from genro_urlencoded import decode_query, EmptyQuery

    try:
        params = decode_query(scope.get("query_string"))
    except EmptyQuery:
        params = {}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from urllib.parse import parse_qsl, unquote_to_bytes

from .config import DecoderConfig
from .exceptions import BodyError, EmptyQuery, MalformedQuery
from .types import QueryMap, RawInput, Scope

__all__ = [
    "UrlEncodedDecoder",
    "combine_duplicates",
    "decode_body",
    "decode_query",
    "decode_query_from_scope",
    "parse",
]

logger = logging.getLogger("genro_urlencoded")


def parse(
    text: RawInput,
    *,
    separator: str = "&",
    max_fields: int | None = None,
) -> QueryMap:
    """
    Decode a URL-encoded string into a QueryMap.

    Args:
        text: Raw input as bytes or text. Text is encoded as UTF-8.
        separator: Pair separator (default: "&").
        max_fields: Maximum number of fields, counted as separators + 1.
                    None means unlimited.

    Returns:
        Mapping of parameter name to its values in source order. An input
        made only of separators gives an empty dict.

    Raises:
        EmptyQuery: If the input is empty.
        MalformedQuery: If the percent-decoded input is not valid UTF-8,
                        or it holds more than ``max_fields`` fields.
        ValueError: If separator is empty.
    """
    if not separator:
        raise ValueError("separator must be a non-empty string")
    if not text:
        raise EmptyQuery()

    try:
        raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        data = unquote_to_bytes(raw).decode("utf-8")
    except UnicodeError as e:
        raise MalformedQuery() from e

    try:
        pairs = parse_qsl(
            data,
            keep_blank_values=True,
            encoding="utf-8",
            errors="replace",
            max_num_fields=max_fields,
            separator=separator,
        )
    except ValueError as e:
        raise MalformedQuery(f"Malformed query string: {e}") from e

    return combine_duplicates(pairs)


def combine_duplicates(pairs: Iterable[tuple[str, str]]) -> QueryMap:
    """
    Group (key, value) pairs into a QueryMap.

    The first occurrence of a key creates a one-element list, later ones
    append to it, so each list keeps the order the pairs came in.

    Example:
        >>> combine_duplicates([("a", "1"), ("b", "2"), ("a", "3")])
        {'a': ['1', '3'], 'b': ['2']}
    """
    result: QueryMap = {}
    for key, value in pairs:
        values = result.get(key)
        if values is None:
            result[key] = [value]
        else:
            values.append(value)
    return result


def decode_query(
    raw: RawInput | None,
    *,
    separator: str = "&",
    max_fields: int | None = None,
) -> QueryMap:
    """
    Decode the query component of a URL.

    Args:
        raw: Query string without the leading "?", or None when the URL
             has no query component.
        separator: Pair separator (default: "&").
        max_fields: Maximum number of fields (default: unlimited).

    Returns:
        Decoded QueryMap.

    Raises:
        EmptyQuery: If raw is None or empty.
        MalformedQuery: See ``parse()``.
    """
    if raw is None:
        raise EmptyQuery()
    result = parse(raw, separator=separator, max_fields=max_fields)
    logger.debug(f"Decoded {len(result)} query parameter(s)")
    return result


def decode_body(
    raw: RawInput | None,
    error: BaseException | None = None,
    *,
    separator: str = "&",
    max_fields: int | None = None,
) -> QueryMap:
    """
    Decode a URL-encoded request body.

    The body is read by the host, which hands over either the bytes or the
    error it got while reading them. A reported error wins over any bytes
    and is raised before decoding starts.

    Args:
        raw: Body bytes, or None when the request has no body.
        error: Error raised by the body reader, if any.
        separator: Pair separator (default: "&").
        max_fields: Maximum number of fields (default: unlimited).

    Returns:
        Decoded QueryMap.

    Raises:
        BodyError: If error is given. Chained from error.
        EmptyQuery: If the body is missing or empty.
        MalformedQuery: See ``parse()``.
    """
    if error is not None:
        raise BodyError(error) from error
    # A missing body decodes like an empty one
    result = parse(raw or b"", separator=separator, max_fields=max_fields)
    logger.debug(f"Decoded {len(result)} body parameter(s)")
    return result


def decode_query_from_scope(
    scope: Scope,
    *,
    separator: str = "&",
    max_fields: int | None = None,
) -> QueryMap:
    """
    Decode the query string of an ASGI scope.

    A scope without "query_string" is treated as a URL without query
    component.

    Example:
        >>> decode_query_from_scope({"type": "http", "query_string": b"page=1"})
        {'page': ['1']}
    """
    return decode_query(scope.get("query_string"), separator=separator, max_fields=max_fields)


class UrlEncodedDecoder:
    """
    Decoder bound to a DecoderConfig.

    Holds no per-call state, so one instance can serve every request of an
    application, from any thread.

    Example:
        >>> decoder = UrlEncodedDecoder(DecoderConfig(max_fields=100))
        >>> decoder.query(b"a=1&a=2")
        {'a': ['1', '2']}
        >>> decoder.body(b"name=john")
        {'name': ['john']}
    """

    __slots__ = ("_config",)

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._config = config if config is not None else DecoderConfig()

    @property
    def config(self) -> DecoderConfig:
        """Decoding options in use."""
        return self._config

    def query(self, raw: RawInput | None) -> QueryMap:
        """Decode a URL query component. See ``decode_query()``."""
        return decode_query(raw, **self._config.as_kwargs())

    def body(self, raw: RawInput | None, error: BaseException | None = None) -> QueryMap:
        """Decode a request body. See ``decode_body()``."""
        return decode_body(raw, error, **self._config.as_kwargs())

    def scope_query(self, scope: Scope) -> QueryMap:
        """Decode the query string of an ASGI scope."""
        return decode_query_from_scope(scope, **self._config.as_kwargs())

    def __repr__(self) -> str:
        return f"UrlEncodedDecoder({self._config!r})"
