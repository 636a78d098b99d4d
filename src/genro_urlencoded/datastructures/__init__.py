# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Data structures for decoded URL-encoded data.

Decoding produces plain dicts; this package adds ergonomic wrappers on top
of them::

    decode_query(b"a=1&a=2")   →  {"a": ["1", "2"]}   (QueryMap)
    QueryParams(query_map)     →  get / getlist / multi_items

Public Exports
==============
::

    from genro_urlencoded.datastructures import QueryParams
"""

from .query_params import QueryParams

__all__ = ["QueryParams"]
