"""Link preview extraction.

Fetches a page once, within a fixed time and size budget, and pulls a
title/description/image out of its Open Graph, Twitter card and plain HTML
tags. Every network-level problem (unreachable host, timeout, non-2xx status,
non-HTML payload) degrades to a preview carrying only ``domain`` and ``url``.
"""

from __future__ import annotations

import asyncio
import re
from urllib.parse import urljoin, urlsplit

import httpx
import structlog
from bs4 import BeautifulSoup

from datavault.config import Settings
from datavault.schemas.preview import LinkPreview

logger = structlog.get_logger(logger_name=__name__)

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 300


def normalize_url(raw: str) -> str:
    url = raw.strip()
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


def get_domain(url: str) -> str:
    """Return the host of *url* without a leading ``www.``, or *url* itself if unparsable."""
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return url
    if not host:
        return url
    return host.removeprefix("www.")


def resolve_url(base: str, value: str) -> str:
    if value.startswith(("http://", "https://")):
        return value
    if value.startswith("//"):
        return f"https:{value}"
    try:
        return urljoin(base, value)
    except ValueError:
        return value


def _parse(markup: str | BeautifulSoup) -> BeautifulSoup:
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup, "html.parser")


def _find_meta(soup: BeautifulSoup, attribute: str, key: str) -> str | None:
    """Content of the first non-empty ``<meta {attribute}="{key}">``, key matched case-insensitively."""
    matcher = re.compile(rf"^{re.escape(key)}$", re.IGNORECASE)
    for tag in soup.find_all("meta", attrs={attribute: matcher}):
        value = (tag.get("content") or "").strip()
        if value:
            return value
    return None


def extract_meta(markup: str | BeautifulSoup, key: str) -> str | None:
    """Look up *key* as ``og:``, then ``twitter:``, then (descriptions only) a plain meta tag."""
    soup = _parse(markup)
    candidates = [("property", f"og:{key}"), ("name", f"twitter:{key}")]
    if key == "description":
        candidates.append(("name", "description"))
    for attribute, name in candidates:
        value = _find_meta(soup, attribute, name)
        if value:
            return value
    return None


def extract_title(markup: str | BeautifulSoup) -> str | None:
    soup = _parse(markup)
    title = extract_meta(soup, "title")
    if title:
        return title
    if soup.title is not None:
        return soup.title.get_text().strip() or None
    return None


def extract_preview(markup: str, url: str) -> LinkPreview:
    soup = _parse(markup)
    title = extract_title(soup)
    description = extract_meta(soup, "description")
    image = extract_meta(soup, "image")
    return LinkPreview(
        title=title[:MAX_TITLE_LENGTH] if title else None,
        description=description[:MAX_DESCRIPTION_LENGTH] if description else None,
        image=resolve_url(url, image) if image else None,
        domain=get_domain(url),
        url=url,
    )


class LinkPreviewService:
    """Builds :class:`LinkPreview` objects for user-supplied URLs.

    The service holds no per-call state; one instance (and its HTTP client)
    is shared by all requests.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._timeout = settings.preview_timeout_seconds
        self._max_chars = settings.preview_max_chars
        self._headers = {
            "User-Agent": settings.preview_user_agent,
            "Accept": settings.preview_accept,
        }

    @classmethod
    def create_client(cls, settings: Settings) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(settings.preview_timeout_seconds),
            follow_redirects=True,
        )

    async def fetch(self, raw_url: str) -> LinkPreview:
        url = normalize_url(raw_url)
        fallback = LinkPreview(domain=get_domain(url), url=url)
        logger.info("link_preview_fetch", url=url)

        try:
            async with asyncio.timeout(self._timeout):
                markup = await self._fetch_html(url)
        except TimeoutError:
            logger.warning("link_preview_timeout", url=url, timeout=self._timeout)
            return fallback

        if markup is None:
            return fallback

        preview = extract_preview(markup, url)
        logger.info(
            "link_preview_extracted",
            url=url,
            title=preview.title,
            domain=preview.domain,
            has_image=preview.image is not None,
        )
        return preview

    async def _fetch_html(self, url: str) -> str | None:
        try:
            request = self._client.build_request("GET", url, headers=self._headers)
            response = await self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            # UnicodeError: hosts idna cannot encode, e.g. "xn--.com"
            logger.warning("link_preview_fetch_failed", url=url, error=str(exc))
            return None

        try:
            if not response.is_success:
                logger.info(
                    "link_preview_bad_status", url=url, status=response.status_code
                )
                return None

            content_type = response.headers.get("content-type", "")
            if "text/html" not in content_type.lower():
                logger.info(
                    "link_preview_not_html", url=url, content_type=content_type
                )
                return None

            try:
                return await self._read_capped(response)
            except httpx.TransportError as exc:
                logger.warning("link_preview_read_failed", url=url, error=str(exc))
                return None
        finally:
            await response.aclose()

    async def _read_capped(self, response: httpx.Response) -> str:
        """Decoded text up to the configured cap, using the declared charset (utf-8 otherwise)."""
        parts: list[str] = []
        received = 0
        async for text in response.aiter_text():
            parts.append(text)
            received += len(text)
            if received >= self._max_chars:
                break
        return "".join(parts)[: self._max_chars]
