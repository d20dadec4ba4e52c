"""Instagram Business publishing through the Content Publishing API."""

import logging

from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import (
    ProviderError,
    SocialProvider,
    photo_count_text,
)
from album_share_publisher.providers.facebook import GRAPH_API_BASE_URL

logger = logging.getLogger(__name__)

# Instagram carousels hold at most 10 items
MAX_CAROUSEL_ITEMS = 10


class InstagramProvider(SocialProvider):
    """Publishes a single image or a carousel to an Instagram Business account.

    Uses the Facebook page token; the account must be a Business or Creator
    account linked to that page. Text-only posts are not possible.
    """

    platform = Platform.INSTAGRAM
    not_configured_message = "Instagram business account is not configured"

    def is_configured(self) -> bool:
        return bool(
            self.settings.facebook_page_access_token
            and self.settings.instagram_business_account_id
        )

    @property
    def account_url(self) -> str:
        return (
            f"{GRAPH_API_BASE_URL}/{self.settings.graph_api_version}/"
            f"{self.settings.instagram_business_account_id}"
        )

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        if not data.photo_urls:
            return ShareResult.failure(
                self.platform, "Album has no photos to publish to Instagram"
            )

        caption = self.build_caption(data, message)
        if len(data.photo_urls) == 1:
            container_id = await self._create_container(
                {"image_url": data.photo_urls[0], "caption": caption},
                "creating media container",
            )
        else:
            container_id = await self._create_carousel(data.photo_urls, caption)

        return await self._publish_container(container_id)

    async def _create_carousel(self, photo_urls: tuple[str, ...], caption: str) -> str:
        children: list[str] = []
        for index, url in enumerate(photo_urls[:MAX_CAROUSEL_ITEMS]):
            try:
                child_id = await self._create_container(
                    {"image_url": url, "is_carousel_item": True},
                    "creating carousel item",
                )
            except ProviderError as e:
                logger.warning(f"Instagram carousel item {index} failed: {e}")
                continue
            children.append(child_id)

        if not children:
            raise ProviderError("Could not upload any photo to Instagram")

        return await self._create_container(
            {"media_type": "CAROUSEL", "caption": caption, "children": children},
            "creating carousel container",
        )

    async def _create_container(self, fields: dict, context: str) -> str:
        result = await self._post_json(
            f"{self.account_url}/media",
            {**fields, "access_token": self.settings.facebook_page_access_token},
            context,
        )
        container_id = result.get("id")
        if not container_id:
            raise ProviderError(f"Instagram returned no container ID while {context}")
        return container_id

    async def _publish_container(self, container_id: str) -> ShareResult:
        result = await self._post_json(
            f"{self.account_url}/media_publish",
            {
                "creation_id": container_id,
                "access_token": self.settings.facebook_page_access_token,
            },
            "publishing media container",
        )
        media_id = result.get("id")
        return ShareResult.ok(
            self.platform, f"https://www.instagram.com/p/{media_id}/" if media_id else None
        )

    @staticmethod
    def build_caption(data: AlbumShareData, message: str | None) -> str:
        if message:
            return f"{message}\n\n📸 {photo_count_text(data)}\n🔗 {data.public_url}"
        description = f"\n{data.description}" if data.description else ""
        return (
            f"📸 {data.title}{description}\n\n"
            f"{photo_count_text(data)}\n🔗 {data.public_url}"
        )
