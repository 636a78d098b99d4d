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
genro-urlencoded CLI entry point.

Usage:
    genro-urlencoded query "a=1&a=2"               # {"a":["1","2"]}
    genro-urlencoded body < request_body.bin       # decode stdin as a body
    genro-urlencoded query "a=1&b=2" --max-fields 1

Prints the decoded map as JSON on stdout. Decoding errors go to stderr
with exit code 1, invalid options exit with code 2.
"""

from __future__ import annotations

import argparse
import logging
import sys

import orjson

from . import __version__
from .config import ConfigError, DecoderConfig
from .decoder import UrlEncodedDecoder
from .exceptions import UrlDecodingError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genro-urlencoded",
        description="Decode URL-encoded query strings and form bodies",
    )
    parser.add_argument("-v", "--version", action="version", version=f"genro-urlencoded {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    query = subparsers.add_parser("query", help="Decode a URL query component")
    query.add_argument("data", help="Query string without the leading '?'")

    body = subparsers.add_parser("body", help="Decode a request body")
    body.add_argument("data", nargs="?", help="Body text (default: read raw bytes from stdin)")

    for sub in (query, body):
        sub.add_argument("--max-fields", type=int, default=None, help="Maximum number of fields")
        sub.add_argument("--separator", default=None, help="Pair separator (default: &)")
        sub.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode args.data (or stdin for body) and print it as JSON."""
    try:
        config = DecoderConfig(max_fields=args.max_fields, separator=args.separator)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    decoder = UrlEncodedDecoder(config)
    try:
        if args.command == "query":
            result = decoder.query(args.data)
        else:
            data = args.data if args.data is not None else sys.stdin.buffer.read()
            result = decoder.body(data)
    except UrlDecodingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(orjson.dumps(result).decode("utf-8"), flush=True)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return cmd_decode(args)


if __name__ == "__main__":
    sys.exit(main())
