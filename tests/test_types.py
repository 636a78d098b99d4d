# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for type definitions.

These tests verify the type aliases defined in genro_urlencoded.types.
"""

from genro_urlencoded import decode_query
from genro_urlencoded.types import QueryMap, RawInput, Scope


class TestTypeImports:
    """Test that all types are importable and correctly defined."""

    def test_all_exports(self):
        """Verify __all__ contains exactly the expected exports."""
        from genro_urlencoded import types

        assert set(types.__all__) == {"QueryMap", "RawInput", "Scope"}

    def test_querymap_from_package(self):
        """QueryMap is re-exported by the package."""
        from genro_urlencoded import QueryMap as PackageQueryMap

        assert PackageQueryMap is QueryMap

    def test_decoded_result_shape(self):
        """A decoded result is a plain dict of lists of strings."""
        result: QueryMap = decode_query("a=1&a=2")
        assert type(result) is dict
        assert all(isinstance(v, list) for v in result.values())
        assert all(isinstance(item, str) for v in result.values() for item in v)

    def test_aliases_defined(self):
        assert RawInput is not None
        assert Scope is not None
