#!/usr/bin/env python3
"""Flatten a saved search response without touching the network."""

from __future__ import annotations

import argparse
import json
import sys

from contentful_data import flatten_search_results


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Flatten a saved entries search response")
    p.add_argument("path", nargs="?", help="JSON file (default: stdin)")
    p.add_argument("--max-depth", type=int, default=None)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    if args.path:
        with open(args.path, encoding="utf-8") as f:
            response = json.load(f)
    else:
        response = json.load(sys.stdin)

    flattened = flatten_search_results(response, max_depth=args.max_depth)
    print(json.dumps(flattened, indent=2, default=str))


if __name__ == "__main__":
    main()
