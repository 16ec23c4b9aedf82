"""Command-line wrapper for ad hoc entries queries.

Usage:
    # Query by content type, token and space from CONTENTFUL_* env vars
    contentful-data content_type=page

    # Exactly one entry from the preview API
    contentful-data --token TOKEN --space SPACE --preview --one \\
        content_type=page fields.title="Main page"
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from .api import ContentfulClient, SearchParameters
from .core import ContentfulConfig, ContentfulError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contentful-data",
        description="Search entries and print them with references flattened",
    )
    parser.add_argument("--token", type=str, help="Access token (default: $CONTENTFUL_TOKEN)")
    parser.add_argument("--space", type=str, help="Space ID (default: $CONTENTFUL_SPACE_ID)")
    parser.add_argument("--preview", action="store_true", default=None, help="Use the preview API")
    parser.add_argument("--one", action="store_true", help="Expect exactly one entry")
    parser.add_argument("--timeout", type=float, default=30.0, help="Deadline in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("query", nargs="+", help="Query as key=value pairs")
    return parser


def parse_query(pairs: Sequence[str]) -> SearchParameters:
    """Parse ``key=value`` arguments into SearchParameters."""
    params = SearchParameters()
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"could not parse query: {pair}")
        params.add(key, value)
    return params


async def run(args: argparse.Namespace) -> Any:
    config = ContentfulConfig.from_env(token=args.token, space_id=args.space, preview=args.preview)
    params = parse_query(args.query)
    async with ContentfulClient.from_config(config) as cms:
        if args.one:
            return await cms.get_one(params, timeout=args.timeout)
        return await cms.get_many(params, timeout=args.timeout)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        result = asyncio.run(run(args))
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1
    except (ContentfulError, TimeoutError) as e:
        print(f"Client returned an error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
