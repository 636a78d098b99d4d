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
Exception classes for URL-encoded data decoding.

Decoding either returns a ``QueryMap`` or raises one of the exceptions
defined here. The set is closed: hosts can rely on every decoding failure
being one of the three concrete classes below.

Module Structure
----------------
::

    UrlDecodingError (Exception)
        ├── EmptyQuery       # nothing to decode
        ├── MalformedQuery   # not valid text after percent-decoding
        └── BodyError        # body acquisition failed, wraps the cause

Design Decisions
----------------
- Common base: ``except UrlDecodingError`` catches the whole family, so a
  host can map every decoding failure to a single 400 response.
- No logging: exceptions are raised to the immediate caller. Whether a
  failure is fatal (reject the request) or tolerable (proceed with no
  parameters) is the host's decision.
- BodyError keeps the original error both as ``cause`` and as the chained
  ``__cause__`` (the decoder raises it with ``raise ... from``).

EmptyQuery
----------
The input was empty: no query component in the URL, an empty query string,
or an empty/absent request body. Usually recoverable as "no parameters".

Example:
    >>> try:
    ...     params = decode_query(scope.get("query_string"))
    ... except EmptyQuery:
    ...     params = {}

MalformedQuery
--------------
The input, after percent-decoding, was not valid UTF-8 text, or it held
more fields than the configured limit. Indicates corrupt client data.

BodyError
---------
The collaborator that reads the request body failed before any decoding
could start. ``str(exc)`` is the message of the wrapped error.

Example:
    >>> try:
    ...     form = decode_body(None, error=TimeoutError("client too slow"))
    ... except BodyError as e:
    ...     logger.warning(f"Body read failed: {e.cause!r}")
"""

__all__ = ["UrlDecodingError", "EmptyQuery", "MalformedQuery", "BodyError"]


class UrlDecodingError(Exception):
    """
    Base class for all URL decoding failures.

    Not raised directly: the decoder always raises one of the concrete
    subclasses.

    Attributes:
        detail: Human readable description of the failure
    """

    default_detail = "URL decoding failed"

    def __init__(self, detail: str | None = None) -> None:
        """
        Initialize decoding error.

        Args:
            detail: Error message (default: the class ``default_detail``)
        """
        self.detail = detail if detail is not None else self.default_detail
        super().__init__(self.detail)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}(detail={self.detail!r})"


class EmptyQuery(UrlDecodingError):
    """An empty query string, either in body or url query."""

    default_detail = "Expected query, found empty string."


class MalformedQuery(UrlDecodingError):
    """A malformed query string, either in body or url query."""

    default_detail = "Malformed query string"


class BodyError(UrlDecodingError):
    """
    Failure of the external body-acquisition step.

    Wraps whatever the body reader raised. The message is taken from the
    wrapped error so that surfacing ``str(exc)`` shows the original reason.

    Attributes:
        cause: The original error reported by the body reader
        detail: ``str(cause)``, or the cause class name if that is empty

    Example:
        >>> err = BodyError(OSError("connection reset"))
        >>> str(err)
        'connection reset'
        >>> err.cause
        OSError('connection reset')
    """

    def __init__(self, cause: BaseException) -> None:
        """
        Initialize body error.

        Args:
            cause: The error raised while reading the request body
        """
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"BodyError(cause={self.cause!r})"
