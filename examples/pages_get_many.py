#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from pydantic import Field

from contentful_data import Asset, ContentfulClient, ContentfulConfig, Information, SearchParameters


class Page(Information):
    title: str = ""
    banner: Asset | None = None
    sub_pages: list[Page] = Field(default_factory=list, alias="subPages")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch pages with references flattened")
    p.add_argument("content_type", nargs="?", default="page")
    p.add_argument("limit", nargs="?", type=int, default=10)
    p.add_argument("--preview", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    config = ContentfulConfig.from_env(preview=args.preview or None)

    async with ContentfulClient.from_config(config) as cms:
        pages = await cms.get_many(
            SearchParameters().by_content_type(args.content_type).limit(args.limit),
            list[Page],
            timeout=30,
        )

    print("=" * 65)
    print(f"Content type : {args.content_type}")
    print(f"Entries      : {len(pages)}")
    print("=" * 65)
    for page in pages:
        banner = page.banner.file.file_name if page.banner else "-"
        print(f"{page.id:24} | {page.title[:20]:20} | {len(page.sub_pages):>3} sub | {banner}")
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
