"""Threads publishing through the Threads Graph API."""

from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import (
    ProviderError,
    SocialProvider,
    body_text,
    photo_count_text,
)

THREADS_API_BASE_URL = "https://graph.threads.net/v1.0"


class ThreadsProvider(SocialProvider):
    """Publishes a text post: create a TEXT container, then publish it."""

    platform = Platform.THREADS
    not_configured_message = "Threads access token or user ID is not configured"

    def is_configured(self) -> bool:
        return bool(self.settings.threads_access_token and self.settings.threads_user_id)

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        user_url = f"{THREADS_API_BASE_URL}/{self.settings.threads_user_id}"

        container = await self._post_json(
            f"{user_url}/threads",
            {
                "media_type": "TEXT",
                "text": self.build_text(data, message),
                "access_token": self.settings.threads_access_token,
            },
            "creating post container",
        )
        creation_id = container.get("id")
        if not creation_id:
            raise ProviderError("Threads returned no container ID")

        result = await self._post_json(
            f"{user_url}/threads_publish",
            {
                "creation_id": creation_id,
                "access_token": self.settings.threads_access_token,
            },
            "publishing post",
        )
        post_id = result.get("id")
        return ShareResult.ok(
            self.platform, f"https://www.threads.net/post/{post_id}" if post_id else None
        )

    @staticmethod
    def build_text(data: AlbumShareData, message: str | None) -> str:
        parts = [f"📸 {data.title}"]
        text = body_text(data, message)
        if text:
            parts.append(text)
        parts.append(f"📷 {photo_count_text(data)}")
        parts.append(data.public_url)
        return "\n\n".join(parts)
