"""WhatsApp publishing through the WhatsApp Business Cloud API."""

import logging

from album_share_publisher.models import AlbumShareData, Platform, ShareResult
from album_share_publisher.providers.base import (
    SocialProvider,
    body_text,
    photo_count_text,
)
from album_share_publisher.providers.facebook import GRAPH_API_BASE_URL

logger = logging.getLogger(__name__)


class WhatsAppProvider(SocialProvider):
    """Sends the album as a text message to a broadcast group.

    The broadcast group ID is separate from the phone number ID and is
    checked at publish time rather than in ``is_configured``.
    """

    platform = Platform.WHATSAPP
    not_configured_message = "WhatsApp phone number ID or access token is not configured"

    def is_configured(self) -> bool:
        return bool(
            self.settings.whatsapp_phone_number_id and self.settings.whatsapp_access_token
        )

    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        group_id = self.settings.whatsapp_broadcast_group_id
        if not group_id:
            logger.warning("WHATSAPP_BROADCAST_GROUP_ID is not set, cannot broadcast")
            return ShareResult.failure(
                self.platform,
                "WhatsApp broadcast group ID (WHATSAPP_BROADCAST_GROUP_ID) is not configured",
            )

        result = await self._post_json(
            f"{GRAPH_API_BASE_URL}/{self.settings.graph_api_version}/"
            f"{self.settings.whatsapp_phone_number_id}/messages",
            {
                "messaging_product": "whatsapp",
                "to": group_id,
                "type": "text",
                "text": {"body": self.build_text(data, message)},
            },
            "sending message",
            headers={"Authorization": f"Bearer {self.settings.whatsapp_access_token}"},
        )

        messages = result.get("messages") or [{}]
        logger.debug(f"WhatsApp message sent: {messages[0].get('id')}")
        return ShareResult.ok(self.platform)

    @staticmethod
    def build_text(data: AlbumShareData, message: str | None) -> str:
        parts = [f"📸 *{data.title}*"]
        text = body_text(data, message)
        if text:
            parts.append(text)
        parts.append(f"📷 {photo_count_text(data)}")
        parts.append(f"👉 {data.public_url}")
        return "\n\n".join(parts)
