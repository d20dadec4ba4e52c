"""X (Twitter) publishing through the v2 tweets endpoint."""

from typing import Any

from album_share_publisher import oauth1
from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import SocialProvider

TWEETS_URL = "https://api.twitter.com/2/tweets"
MAX_TWEET_LENGTH = 280
# X shortens every link to a t.co URL of this length
SHORT_URL_LENGTH = 23
ELLIPSIS = "…"


class XProvider(SocialProvider):
    """Posts a tweet signed with OAuth 1.0a user context."""

    platform = Platform.X
    not_configured_message = "X (Twitter) API credentials are not configured"

    def is_configured(self) -> bool:
        return bool(
            self.settings.x_api_key
            and self.settings.x_api_secret
            and self.settings.x_access_token
            and self.settings.x_access_token_secret
        )

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        authorization = oauth1.sign(
            "POST",
            TWEETS_URL,
            self.settings.x_api_key,
            self.settings.x_api_secret,
            self.settings.x_access_token,
            self.settings.x_access_token_secret,
        )
        result = await self._post_json(
            TWEETS_URL,
            {"text": build_tweet(data, message)},
            "posting tweet",
            headers={"Authorization": authorization},
        )

        tweet_id = (result.get("data") or {}).get("id")
        return ShareResult.ok(
            self.platform, f"https://x.com/i/web/status/{tweet_id}" if tweet_id else None
        )

    def _error_message(self, result: dict[str, Any]) -> str | None:
        return result.get("detail") or result.get("title") or None


def build_tweet(data: AlbumShareData, message: str | None) -> str:
    """Build tweet text that fits in one tweet together with the album link.

    A custom message replaces the title and photo count text.
    """
    available = MAX_TWEET_LENGTH - SHORT_URL_LENGTH - 2

    if message:
        text = message
        if len(text) > available:
            text = text[: available - 1] + ELLIPSIS
    else:
        prefix = f"📸 {data.title}"
        text = f"{prefix} ({data.photo_count}張)"
        if len(text) > available:
            text = prefix[: available - 1] + ELLIPSIS

    if not data.public_url:
        return text
    return f"{text}\n\n{data.public_url}"
