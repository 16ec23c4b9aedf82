"""Caller-facing models for the metadata injected into flattened items.

Content models can inherit from ``Information`` to receive the ID, content
type, revision, timestamps and locale of an entry. ``Asset`` describes the
flattened shape of an asset reference, so a content model can declare e.g.
``banner: Asset`` and have it populated directly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Injected metadata keys, prefixed so they do not clash with content fields
METADATA_PREFIX = "contentful"
ID_KEY = f"{METADATA_PREFIX}_id"
CONTENT_TYPE_KEY = f"{METADATA_PREFIX}_contentType"
REVISION_KEY = f"{METADATA_PREFIX}_revision"
CREATED_AT_KEY = f"{METADATA_PREFIX}_createdAt"
UPDATED_AT_KEY = f"{METADATA_PREFIX}_updatedAt"
LOCALE_KEY = f"{METADATA_PREFIX}_locale"

METADATA_KEYS = (
    ID_KEY,
    CONTENT_TYPE_KEY,
    REVISION_KEY,
    CREATED_AT_KEY,
    UPDATED_AT_KEY,
    LOCALE_KEY,
)


class Information(BaseModel):
    """System information of an entry or asset."""

    id: str = Field("", alias=ID_KEY)
    content_type: str = Field("", alias=CONTENT_TYPE_KEY, description="Empty for assets")
    revision: int = Field(0, alias=REVISION_KEY)
    created_at: datetime | None = Field(None, alias=CREATED_AT_KEY)
    updated_at: datetime | None = Field(None, alias=UPDATED_AT_KEY)
    locale: str = Field("", alias=LOCALE_KEY)

    model_config = ConfigDict(populate_by_name=True)


class AssetFile(BaseModel):
    """File details of an asset."""

    url: str = ""
    file_name: str = Field("", alias="fileName")
    content_type: str = Field("", alias="contentType", description="MIME type")
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


class Asset(Information):
    """Flattened asset reference."""

    title: str = ""
    description: str = ""
    file: AssetFile = Field(default_factory=AssetFile)
