"""LINE publishing through the Messaging API broadcast endpoint."""

from typing import Any

from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import (
    VIEW_ALBUM_LABEL,
    SocialProvider,
    body_text,
    photo_count_text,
)

BROADCAST_URL = "https://api.line.me/v2/bot/message/broadcast"


class LineProvider(SocialProvider):
    """Broadcasts an album Flex card to every channel subscriber."""

    platform = Platform.LINE
    not_configured_message = "LINE Messaging API access token is not configured"

    def is_configured(self) -> bool:
        return bool(self.settings.line_messaging_access_token)

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        await self._post_json(
            BROADCAST_URL,
            {"messages": [build_flex_message(data, message)]},
            "broadcasting message",
            headers={
                "Authorization": f"Bearer {self.settings.line_messaging_access_token}"
            },
        )
        return ShareResult.ok(self.platform)

    def _error_message(self, result: dict[str, Any]) -> str | None:
        return result.get("message") or None


def build_flex_message(data: AlbumShareData, message: str | None) -> dict[str, Any]:
    """Build a Flex bubble: hero image, title, text, photo count and a button."""
    body: list[dict[str, Any]] = [
        {"type": "text", "text": data.title, "weight": "bold", "size": "xl", "wrap": True}
    ]
    text = body_text(data, message)
    if text:
        body.append(
            {
                "type": "text",
                "text": text,
                "size": "sm",
                "color": "#999999",
                "margin": "md",
                "wrap": True,
            }
        )
    body.append(
        {
            "type": "box",
            "layout": "baseline",
            "margin": "md",
            "contents": [
                {
                    "type": "text",
                    "text": f"📷 {photo_count_text(data)}",
                    "size": "sm",
                    "color": "#aaaaaa",
                }
            ],
        }
    )

    bubble: dict[str, Any] = {"type": "bubble", "size": "mega"}
    hero_image = data.first_photo_url
    if hero_image:
        bubble["hero"] = {
            "type": "image",
            "url": hero_image,
            "size": "full",
            "aspectRatio": "20:13",
            "aspectMode": "cover",
            "action": {"type": "uri", "uri": data.public_url},
        }
    bubble["body"] = {"type": "box", "layout": "vertical", "contents": body}
    bubble["footer"] = {
        "type": "box",
        "layout": "vertical",
        "spacing": "sm",
        "contents": [
            {
                "type": "button",
                "style": "primary",
                "action": {"type": "uri", "label": VIEW_ALBUM_LABEL, "uri": data.public_url},
            }
        ],
    }

    return {
        "type": "flex",
        "altText": f"📸 {data.title} - {photo_count_text(data)}",
        "contents": bubble,
    }
