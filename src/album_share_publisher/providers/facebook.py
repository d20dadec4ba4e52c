"""Facebook Page publishing through the Graph API."""

import logging

from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import ProviderError, SocialProvider

logger = logging.getLogger(__name__)

GRAPH_API_BASE_URL = "https://graph.facebook.com"
# Facebook allows at most 10 photos attached to one feed post
MAX_ATTACHED_PHOTOS = 10


class FacebookProvider(SocialProvider):
    """Publishes a multi-photo or link post to a Facebook Page.

    Each photo is first uploaded unpublished, then all uploaded photo IDs are
    attached to a single feed post. Photos that fail to upload are skipped;
    when none succeed the post falls back to a plain link post.
    """

    platform = Platform.FACEBOOK
    not_configured_message = "Facebook page access token or page ID is not configured"

    def is_configured(self) -> bool:
        return bool(
            self.settings.facebook_page_access_token and self.settings.facebook_page_id
        )

    @property
    def base_url(self) -> str:
        return f"{GRAPH_API_BASE_URL}/{self.settings.graph_api_version}"

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        post_message = self.build_message(data, message)

        if data.photo_urls:
            return await self._publish_with_photos(data, post_message)
        return await self._publish_link(data, post_message)

    async def _publish_with_photos(
        self, data: AlbumShareData, message: str
    ) -> ShareResult:
        photo_ids: list[str] = []
        for url in data.photo_urls[:MAX_ATTACHED_PHOTOS]:
            photo_id = await self._upload_unpublished_photo(url)
            if photo_id:
                photo_ids.append(photo_id)

        if not photo_ids:
            logger.warning("No photo could be uploaded to Facebook, posting link only")
            return await self._publish_link(data, message)

        result = await self._post_json(
            f"{self.base_url}/{self.settings.facebook_page_id}/feed",
            {
                "message": message,
                "attached_media": [{"media_fbid": photo_id} for photo_id in photo_ids],
                "access_token": self.settings.facebook_page_access_token,
            },
            "creating multi-photo post",
        )
        logger.debug(f"Facebook post with {len(photo_ids)} photo(s) created: {result.get('id')}")
        return ShareResult.ok(self.platform, post_url(result.get("id")))

    async def _upload_unpublished_photo(self, url: str) -> str | None:
        try:
            result = await self._post_json(
                f"{self.base_url}/{self.settings.facebook_page_id}/photos",
                {
                    "url": url,
                    "published": False,
                    "access_token": self.settings.facebook_page_access_token,
                },
                "uploading photo",
            )
        except ProviderError as e:
            logger.warning(f"Facebook photo upload failed for {url}: {e}")
            return None
        return result.get("id")

    async def _publish_link(self, data: AlbumShareData, message: str) -> ShareResult:
        result = await self._post_json(
            f"{self.base_url}/{self.settings.facebook_page_id}/feed",
            {
                "message": message,
                "link": data.public_url,
                "access_token": self.settings.facebook_page_access_token,
            },
            "creating link post",
        )
        return ShareResult.ok(self.platform, post_url(result.get("id")))

    @staticmethod
    def build_message(data: AlbumShareData, message: str | None) -> str:
        if message:
            return f"{message}\n\n{data.public_url}"
        description = f"\n{data.description}" if data.description else ""
        return f"📸 {data.title}{description}\n\n🔗 {data.public_url}"


def post_url(post_id: str | None) -> str | None:
    """Turn a ``<page>_<post>`` ID into a post permalink."""
    if not post_id:
        return None
    return f"https://www.facebook.com/{post_id.replace('_', '/posts/', 1)}"
