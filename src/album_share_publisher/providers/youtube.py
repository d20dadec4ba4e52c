"""YouTube community post publishing through the Data API v3."""

from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import (
    SocialProvider,
    body_text,
    photo_count_text,
)

ACTIVITIES_URL = "https://www.googleapis.com/youtube/v3/activities"


class YouTubeProvider(SocialProvider):
    """Creates a bulletin activity on the configured channel.

    Channel eligibility for community posts is not checked here; the API
    rejects the request when the channel does not qualify.
    """

    platform = Platform.YOUTUBE
    not_configured_message = "YouTube access token or channel ID is not configured"

    def is_configured(self) -> bool:
        return bool(self.settings.youtube_access_token and self.settings.youtube_channel_id)

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        await self._post_json(
            ACTIVITIES_URL,
            {
                "snippet": {
                    "channelId": self.settings.youtube_channel_id,
                    "description": self.build_text(data, message),
                    "type": "bulletin",
                }
            },
            "creating community post",
            headers={"Authorization": f"Bearer {self.settings.youtube_access_token}"},
            params={"part": "snippet"},
        )
        return ShareResult.ok(
            self.platform,
            f"https://www.youtube.com/channel/{self.settings.youtube_channel_id}/community",
        )

    @staticmethod
    def build_text(data: AlbumShareData, message: str | None) -> str:
        parts = [f"📸 {data.title}"]
        text = body_text(data, message)
        if text:
            parts.append(text)
        parts.append(f"📷 {photo_count_text(data)}")
        parts.append(f"👉 {data.public_url}")
        return "\n".join(parts)
