"""TikTok publishing through the Content Posting API."""

import logging
from typing import Any

from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import (
    SocialProvider,
    body_text,
    photo_count_text,
)

logger = logging.getLogger(__name__)

CONTENT_INIT_URL = "https://open.tiktokapis.com/v2/post/publish/content/init/"
MAX_TITLE_LENGTH = 150


class TikTokProvider(SocialProvider):
    """Direct-posts the album cover as a TikTok photo post.

    TikTok pulls the image from its URL, so the album needs a cover or at
    least one photo.
    """

    platform = Platform.TIKTOK
    not_configured_message = "TikTok access token is not configured"

    def is_configured(self) -> bool:
        return bool(self.settings.tiktok_access_token)

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        photo_url = data.first_photo_url
        if not photo_url:
            logger.warning("TikTok needs a photo but the album has no cover")
            return ShareResult.failure(
                self.platform, "Album needs at least one photo to share on TikTok"
            )

        result = await self._post_json(
            CONTENT_INIT_URL,
            {
                "post_info": {
                    "title": self.build_text(data, message)[:MAX_TITLE_LENGTH],
                    "privacy_level": "PUBLIC_TO_EVERYONE",
                },
                "source_info": {
                    "source": "PULL_FROM_URL",
                    "photo_cover_index": 0,
                    "photo_images": [photo_url],
                },
                "post_mode": "DIRECT_POST",
                "media_type": "PHOTO",
            },
            "initializing photo post",
            headers={"Authorization": f"Bearer {self.settings.tiktok_access_token}"},
        )

        return ShareResult.ok(self.platform, (result.get("data") or {}).get("share_url"))

    def _is_ok(self, result: dict[str, Any]) -> bool:
        error = result.get("error")
        if not isinstance(error, dict):
            return True
        return error.get("code", "ok") == "ok"

    @staticmethod
    def build_text(data: AlbumShareData, message: str | None) -> str:
        parts = [f"📸 {data.title}"]
        text = body_text(data, message)
        if text:
            parts.append(text)
        parts.append(f"📷 {photo_count_text(data)}")
        parts.append(data.public_url)
        return " | ".join(parts)
