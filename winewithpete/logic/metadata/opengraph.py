"""Open Graph metadata extraction for essay/link previews.

parse_og_metadata works on raw HTML with regular expressions (no DOM parse);
fetch_og_metadata downloads the page with httpx first.
"""
from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel

from winewithpete.utilities.config import OG_FETCH_TIMEOUT, SITE_USER_AGENT
from winewithpete.utilities.errors import MetadataFetchError

logger = logging.getLogger(__name__)


class OGMetadata(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None


def _meta_patterns(attr: str, value: str):
    # attribute order varies between sites: <meta property=.. content=..> and <meta content=.. property=..>
    return (
        re.compile(rf'<meta\s+{attr}=["\']{re.escape(value)}["\']\s+content=["\']([^"\']+)["\']', re.I),
        re.compile(rf'<meta\s+content=["\']([^"\']+)["\']\s+{attr}=["\']{re.escape(value)}["\']', re.I),
    )


_OG = {name: _meta_patterns('property', f'og:{name}') for name in ('title', 'description', 'image', 'url')}
_META_DESCRIPTION = _meta_patterns('name', 'description')
_TITLE_TAG = re.compile(r'<title[^>]*>([^<]+)</title>', re.I)


def _first_match(html: str, patterns) -> Optional[str]:
    for pattern in patterns:
        m = pattern.search(html)
        if m:
            return m.group(1)
    return None


def _origin(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}"


def validate_url(url: str) -> str:
    """Return the URL if it is absolute http(s), else raise ValueError."""
    parts = urlsplit(url.strip())
    if parts.scheme not in ('http', 'https') or not parts.netloc:
        raise ValueError('Invalid URL format')
    return url.strip()


def parse_og_metadata(html: str, page_url: str) -> OGMetadata:
    metadata = OGMetadata()

    metadata.title = _first_match(html, _OG['title'])
    if metadata.title is None:
        m = _TITLE_TAG.search(html)
        if m:
            metadata.title = m.group(1).strip()

    metadata.description = _first_match(html, _OG['description']) or _first_match(html, _META_DESCRIPTION)

    image = _first_match(html, _OG['image'])
    if image:
        if image.startswith('/'):
            image = f"{_origin(page_url)}{image}"
        elif not image.startswith('http'):
            image = f"{_origin(page_url)}/{image}"
        metadata.image = image

    metadata.url = _first_match(html, _OG['url']) or page_url
    return metadata


async def fetch_og_metadata(url: str, *, client: Optional[httpx.AsyncClient] = None) -> OGMetadata:
    """Download url and parse its Open Graph tags.

    Raises:
        MetadataFetchError: upstream answered non-2xx or could not be reached.
    """
    url = validate_url(url)
    headers = {'User-Agent': SITE_USER_AGENT}
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=OG_FETCH_TIMEOUT, follow_redirects=True) as ac:
                response = await ac.get(url, headers=headers)
        else:
            response = await client.get(url, headers=headers)
    except httpx.HTTPError as e:
        logger.error("OG metadata fetch error for %s: %s", url, e)
        raise MetadataFetchError(f"Failed to fetch metadata: {e}") from e

    if response.status_code >= 400:
        raise MetadataFetchError(f"Failed to fetch URL: {response.status_code}", status_code=response.status_code)
    return parse_og_metadata(response.text, url)


__all__ = ['OGMetadata', 'parse_og_metadata', 'fetch_og_metadata', 'validate_url']
