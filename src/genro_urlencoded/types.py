# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Type definitions for genro-urlencoded.

Purpose
=======
Type aliases shared by the decoder, the datastructures and the tests.

Type Definitions
================

QueryMap : dict[str, list[str]]
    Decoded form data. Each parameter name maps to the list of values
    supplied for it, in the order they appeared in the source string.
    Keys are unique; the order of keys among each other is not significant.

    Definition::

        QueryMap = dict[str, list[str]]

RawInput : bytes | bytearray | memoryview | str
    Anything the decoder accepts as undecoded input. Text is encoded as
    UTF-8 before percent-decoding.

Scope : Mapping[str, Any]
    ASGI connection scope. Only ``scope["query_string"]`` is read.

Example::

    from genro_urlencoded.types import QueryMap

    def first(params: QueryMap, name: str) -> str | None:
        values = params.get(name)
        return values[0] if values else None
"""

from collections.abc import Mapping
from typing import Any

__all__ = ["QueryMap", "RawInput", "Scope"]

QueryMap = dict[str, list[str]]

RawInput = bytes | bytearray | memoryview | str

Scope = Mapping[str, Any]
