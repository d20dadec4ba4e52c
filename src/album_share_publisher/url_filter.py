"""Outbound URL filtering against server-side request forgery."""

import dataclasses
import ipaddress
import logging
import re
from urllib.parse import urlsplit

from album_share_publisher.models import AlbumShareData

logger = logging.getLogger(__name__)

# Hostnames equal to or starting with any of these are never fetched
BLOCKED_HOST_PREFIXES = (
    "localhost",
    "127.0.0.1",
    "0.0.0.0",
    "::1",
    "169.254.",
    "10.",
    "192.168.",
)

PRIVATE_CLASS_B = re.compile(r"^172\.(1[6-9]|2\d|3[01])\.")


def is_allowed(url: str) -> bool:
    """Check whether a URL may be handed to a social platform.

    Only ``https`` URLs whose host is not loopback, link-local or inside a
    private network are allowed. Unparseable input is rejected.

    Args:
        url: URL to check

    Returns:
        True if the URL is safe to embed in outbound requests
    """
    if not isinstance(url, str) or not url:
        return False

    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        return False

    if parts.scheme != "https" or not hostname:
        return False

    hostname = hostname.lower()
    if hostname.startswith(BLOCKED_HOST_PREFIXES) or PRIVATE_CLASS_B.match(hostname):
        return False

    return not _is_internal_address(hostname)


def _is_internal_address(hostname: str) -> bool:
    try:
        address = ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return (
        address.is_private
        or address.is_loopback
        or address.is_link_local
        or address.is_reserved
        or address.is_multicast
        or address.is_unspecified
    )


def sanitize(data: AlbumShareData) -> AlbumShareData:
    """Return a copy of the share data with every unsafe URL removed.

    The public URL becomes an empty string, the cover photo becomes None and
    unsafe photo URLs are dropped while the order of the others is kept.

    Args:
        data: Share data as supplied by the caller

    Returns:
        Sanitized share data
    """
    public_url = data.public_url
    if public_url and not is_allowed(public_url):
        logger.warning(f"Rejected unsafe public URL: {public_url!r}")
        public_url = ""

    cover_photo_url = data.cover_photo_url
    if cover_photo_url and not is_allowed(cover_photo_url):
        logger.warning(f"Rejected unsafe cover photo URL: {cover_photo_url!r}")
        cover_photo_url = None

    photo_urls = []
    for url in data.photo_urls:
        if is_allowed(url):
            photo_urls.append(url)
        else:
            logger.warning(f"Dropped unsafe photo URL: {url!r}")

    return dataclasses.replace(
        data,
        public_url=public_url,
        cover_photo_url=cover_photo_url or None,
        photo_urls=tuple(photo_urls),
    )
