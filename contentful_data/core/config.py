"""Shared Content Delivery API constants and client configuration.

This module centralizes URLs, rate-limit handling defaults and the
environment-driven client configuration so the client facade can stay small.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

# Delivery API serves published content, preview API serves drafts as well
CDN_URL = "https://cdn.contentful.com"
PREVIEW_URL = "https://preview.contentful.com"

# References are returned in ``includes`` up to this many levels deep
DEFAULT_INCLUDE_DEPTH = 10

RATE_LIMIT_RESET_HEADER = "X-Contentful-RateLimit-Reset"
DEFAULT_RETRY_SECONDS = 2

DEFAULT_TIMEOUT = 30.0

ENV_TOKEN = "CONTENTFUL_TOKEN"
ENV_SPACE_ID = "CONTENTFUL_SPACE_ID"
ENV_PREVIEW = "CONTENTFUL_PREVIEW"

_TRUTHY = {"1", "true", "yes", "on"}


def get_base_url(preview: bool = False) -> str:
    """Get the API base URL.

    Examples:
        >>> get_base_url()
        'https://cdn.contentful.com'
        >>> get_base_url(preview=True)
        'https://preview.contentful.com'
    """
    return PREVIEW_URL if preview else CDN_URL


class ContentfulConfig(BaseModel):
    """Credentials and transport settings for one space."""

    token: str = Field(..., min_length=1)
    space_id: str = Field(..., min_length=1)
    preview: bool = False
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def base_url(self) -> str:
        return get_base_url(self.preview)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> ContentfulConfig:
        """Build a config from ``CONTENTFUL_*`` environment variables.

        Keyword overrides that are not None take precedence over the
        environment.
        """
        env = os.environ if environ is None else environ
        values = {
            "token": env.get(ENV_TOKEN, ""),
            "space_id": env.get(ENV_SPACE_ID, ""),
            "preview": env.get(ENV_PREVIEW, "").strip().lower() in _TRUTHY,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
