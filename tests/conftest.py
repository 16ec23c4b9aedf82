"""Shared fixtures: a small space with pages referencing each other and an asset."""

from __future__ import annotations

import copy
from typing import Any

import pytest

MAIN_PAGE_ID = "2Cbt07njicqO4wSYCQ8CeK"
SUB_PAGE_ID = "FcAxxzogmsOMcc0kac6Iu"
DRAFT_PAGE_ID = "5CVt4s6uvS0cuym4wmWg2k"
ORANGE_ASSET_ID = "3ReVDbQQfmKY60Y6CCwAg6"


def link(link_type: str, link_id: str) -> dict[str, Any]:
    return {"sys": {"type": "Link", "linkType": link_type, "id": link_id}}


def entry(
    entry_id: str,
    fields: dict[str, Any],
    content_type: str = "page",
    revision: int = 1,
) -> dict[str, Any]:
    return {
        "sys": {
            "type": "Entry",
            "id": entry_id,
            "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": content_type}},
            "revision": revision,
            "createdAt": "2018-02-20T18:15:09.146Z",
            "updatedAt": "2018-02-20T18:19:33.036Z",
            "locale": "en-US",
        },
        "fields": fields,
    }


def asset(asset_id: str, fields: dict[str, Any]) -> dict[str, Any]:
    return {
        "sys": {
            "type": "Asset",
            "id": asset_id,
            "revision": 1,
            "createdAt": "2018-02-20T18:15:19.743Z",
            "updatedAt": "2018-02-20T18:16:39.705Z",
            "locale": "en-US",
        },
        "fields": fields,
    }


ORANGE_ASSET = asset(
    ORANGE_ASSET_ID,
    {
        "title": "Orange",
        "description": "Orange image",
        "file": {
            "url": "//images.ctfassets.net/space-id/3ReVDbQQfmKY60Y6CCwAg6/abc/orange.png",
            "details": {"size": 5432, "image": {"width": 100, "height": 100}},
            "fileName": "orange.png",
            "contentType": "image/png",
        },
    },
)

SUB_PAGE = entry(
    SUB_PAGE_ID,
    {"title": "Sub page", "banner": link("Asset", ORANGE_ASSET_ID)},
    revision=1,
)
DRAFT_PAGE = entry(DRAFT_PAGE_ID, {"title": "Not published page"}, revision=2)
MAIN_PAGE = entry(
    MAIN_PAGE_ID,
    {
        "title": "Main page",
        "banner": link("Asset", ORANGE_ASSET_ID),
        "subPages": [link("Entry", SUB_PAGE_ID), link("Entry", DRAFT_PAGE_ID)],
    },
    revision=3,
)


@pytest.fixture
def all_pages_response() -> dict[str, Any]:
    """Search response with three pages; sub pages are only top-level items."""
    return copy.deepcopy(
        {
            "total": 3,
            "skip": 0,
            "limit": 100,
            "items": [SUB_PAGE, DRAFT_PAGE, MAIN_PAGE],
            "includes": {"Asset": [ORANGE_ASSET]},
        }
    )


@pytest.fixture
def main_page_response() -> dict[str, Any]:
    """Search response with the main page and its references in includes."""
    return copy.deepcopy(
        {
            "total": 1,
            "skip": 0,
            "limit": 100,
            "items": [MAIN_PAGE],
            "includes": {"Entry": [SUB_PAGE, DRAFT_PAGE], "Asset": [ORANGE_ASSET]},
        }
    )
