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

"""genro-urlencoded - Decoder for URL-encoded query strings and form bodies.

Main components:
    decode_query: Decode a URL query component (None if absent)
    decode_body: Decode a request body, or wrap the error from reading it
    parse: Shared decoding routine
    UrlEncodedDecoder: Decoder bound to a DecoderConfig

Data structures:
    QueryMap: dict[str, list[str]] returned by every decode call
    QueryParams: Read-only first-value / all-values view of a QueryMap

Exceptions:
    UrlDecodingError: Base of EmptyQuery, MalformedQuery, BodyError

Usage:
    from genro_urlencoded import decode_query

    decode_query(b"band=arctic+monkeys&band=temper_trap")
    # {"band": ["arctic monkeys", "temper_trap"]}
"""

__version__ = "0.1.0"

from .config import ConfigError, DecoderConfig
from .datastructures import QueryParams
from .decoder import (
    UrlEncodedDecoder,
    combine_duplicates,
    decode_body,
    decode_query,
    decode_query_from_scope,
    parse,
)
from .exceptions import BodyError, EmptyQuery, MalformedQuery, UrlDecodingError
from .types import QueryMap

__all__ = [
    # Decoding
    "decode_query",
    "decode_body",
    "decode_query_from_scope",
    "parse",
    "combine_duplicates",
    "UrlEncodedDecoder",
    # Configuration
    "DecoderConfig",
    "ConfigError",
    # Data structures
    "QueryMap",
    "QueryParams",
    # Exceptions
    "UrlDecodingError",
    "EmptyQuery",
    "MalformedQuery",
    "BodyError",
]
