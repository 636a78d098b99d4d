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
Decoder configuration.

Uses genro-toolbox SmartOptions for multi-source config with priority:

    hardcoded defaults < config file ("decoder" section)
        < environment variables / argv < explicit constructor arguments

Options:
    max_fields (int | None): Maximum number of fields per decoded string.
        None (default) means unlimited.
    separator (str): Pair separator. Default: "&".

Environment variables use prefix GENRO_URLENCODED_ (e.g.
GENRO_URLENCODED_MAX_FIELDS=1000).

Example config.yaml::

    decoder:
      max_fields: 1000
      separator: "&"

Example::

    config = DecoderConfig(config_file="config.yaml", max_fields=50)
    params = decode_body(body, **config.as_kwargs())
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

__all__ = ["ConfigError", "DecoderConfig", "DEFAULTS"]

DEFAULTS: dict[str, Any] = {"max_fields": None, "separator": "&"}


class ConfigError(Exception):
    """Configuration error."""


def _decoder_opts_spec(
    max_fields: int,
    separator: str,
) -> None:
    """Reference function for SmartOptions type extraction (no defaults)."""


class DecoderConfig:
    """Validated decoding options."""

    __slots__ = ("_max_fields", "_separator")

    def __init__(
        self,
        max_fields: int | None = None,
        separator: str | None = None,
        config_file: str | Path | None = None,
        argv: list[str] | None = None,
    ) -> None:
        opts = self._build_config(
            max_fields=max_fields,
            separator=separator,
            config_file=config_file,
            argv=argv or [],
        )
        self._max_fields = self._validate_max_fields(opts["max_fields"])
        self._separator = self._validate_separator(opts["separator"])

    def _build_config(
        self,
        max_fields: int | None,
        separator: str | None,
        config_file: str | Path | None,
        argv: list[str],
    ) -> SmartOptions:
        """Merge defaults, config file, environment/argv and caller values."""
        env_argv_opts = SmartOptions(_decoder_opts_spec, env="GENRO_URLENCODED", argv=argv)

        caller_opts = SmartOptions(
            dict(max_fields=max_fields, separator=separator),
            ignore_none=True,
        )

        file_opts = SmartOptions({})
        if config_file is not None:
            path = Path(config_file)
            if not path.exists():
                raise ConfigError(f"Configuration file not found: {path}")
            file_opts = SmartOptions(str(path))["decoder"] or SmartOptions({})

        return SmartOptions(DEFAULTS) + file_opts + env_argv_opts + caller_opts

    @staticmethod
    def _validate_max_fields(value: Any) -> int | None:
        if value is None:
            return None
        if isinstance(value, bool):
            raise ConfigError(f"Invalid max_fields {value!r}: expected a positive integer")
        try:
            result = int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid max_fields {value!r}: expected a positive integer") from e
        if result < 1:
            raise ConfigError(f"Invalid max_fields {value!r}: expected a positive integer")
        return result

    @staticmethod
    def _validate_separator(value: Any) -> str:
        if not isinstance(value, str) or not value:
            raise ConfigError(f"Invalid separator {value!r}: expected a non-empty string")
        return value

    @property
    def max_fields(self) -> int | None:
        """Maximum number of fields, None if unlimited."""
        return self._max_fields

    @property
    def separator(self) -> str:
        """Pair separator."""
        return self._separator

    def as_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for parse(), decode_query() and decode_body()."""
        return {"separator": self._separator, "max_fields": self._max_fields}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecoderConfig):
            return NotImplemented
        return self.as_kwargs() == other.as_kwargs()

    def __hash__(self) -> int:
        return hash((self._separator, self._max_fields))

    def __repr__(self) -> str:
        return f"DecoderConfig(max_fields={self._max_fields!r}, separator={self._separator!r})"


if __name__ == "__main__":
    config = DecoderConfig()
    print(f"Separator: {config.separator!r}")
    print(f"Max fields: {config.max_fields}")
