"""Album Share Publisher - Publish photo albums to social platforms concurrently."""

__version__ = "0.1.0"

from album_share_publisher.config import Settings
from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.publisher import SocialPublisher
from album_share_publisher.url_filter import is_allowed, sanitize

__all__ = [
    "AlbumShareData",
    "Platform",
    "Settings",
    "ShareResult",
    "SocialPublisher",
    "is_allowed",
    "sanitize",
]
