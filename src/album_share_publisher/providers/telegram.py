"""Telegram channel publishing through the Bot API."""

import html
from typing import Any

from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import (
    VIEW_ALBUM_LABEL,
    SocialProvider,
    body_text,
    photo_count_text,
)

BOT_API_BASE_URL = "https://api.telegram.org"


class TelegramProvider(SocialProvider):
    """Sends the album cover with an HTML caption, or a text message."""

    platform = Platform.TELEGRAM
    not_configured_message = "Telegram bot token or channel ID is not configured"

    def is_configured(self) -> bool:
        return bool(self.settings.telegram_bot_token and self.settings.telegram_channel_id)

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        bot_url = f"{BOT_API_BASE_URL}/bot{self.settings.telegram_bot_token}"
        caption = self.build_caption(data, message)
        photo_url = data.first_photo_url

        if photo_url:
            method, payload = "sendPhoto", {"photo": photo_url, "caption": caption}
        else:
            method, payload = "sendMessage", {"text": caption}

        result = await self._post_json(
            f"{bot_url}/{method}",
            {"chat_id": self.settings.telegram_channel_id, **payload, "parse_mode": "HTML"},
            f"calling {method}",
        )

        message_id = (result.get("result") or {}).get("message_id")
        return ShareResult.ok(self.platform, self.post_url(message_id))

    def post_url(self, message_id: int | None) -> str | None:
        """Public message link; only ``@handle`` channels have one."""
        channel_id = self.settings.telegram_channel_id or ""
        if message_id is None or not channel_id.startswith("@"):
            return None
        return f"https://t.me/{channel_id[1:]}/{message_id}"

    def _is_ok(self, result: dict[str, Any]) -> bool:
        return result.get("ok", True) is not False

    def _error_message(self, result: dict[str, Any]) -> str | None:
        return result.get("description") or None

    @staticmethod
    def build_caption(data: AlbumShareData, message: str | None) -> str:
        parts = [f"<b>📸 {html.escape(data.title)}</b>"]
        text = body_text(data, message)
        if text:
            parts.append(html.escape(text))
        parts.append(f"📷 {photo_count_text(data)}")
        parts.append(
            f'👉 <a href="{html.escape(data.public_url)}">{VIEW_ALBUM_LABEL}</a>'
        )
        return "\n\n".join(parts)
