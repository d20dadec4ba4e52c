"""Platform adapters and the registry that maps platforms to them."""

import httpx

from album_share_publisher.config import Settings
from album_share_publisher.models import Platform
from album_share_publisher.providers.base import (
    ProviderAPIError,
    ProviderError,
    ProviderNetworkError,
    SocialProvider,
)
from album_share_publisher.providers.facebook import FacebookProvider
from album_share_publisher.providers.instagram import InstagramProvider
from album_share_publisher.providers.line import LineProvider
from album_share_publisher.providers.telegram import TelegramProvider
from album_share_publisher.providers.threads import ThreadsProvider
from album_share_publisher.providers.tiktok import TikTokProvider
from album_share_publisher.providers.whatsapp import WhatsAppProvider
from album_share_publisher.providers.x import XProvider
from album_share_publisher.providers.youtube import YouTubeProvider

PROVIDER_CLASSES: dict[Platform, type[SocialProvider]] = {
    Platform.FACEBOOK: FacebookProvider,
    Platform.LINE: LineProvider,
    Platform.X: XProvider,
    Platform.INSTAGRAM: InstagramProvider,
    Platform.THREADS: ThreadsProvider,
    Platform.TIKTOK: TikTokProvider,
    Platform.YOUTUBE: YouTubeProvider,
    Platform.TELEGRAM: TelegramProvider,
    Platform.WHATSAPP: WhatsAppProvider,
}


def build_providers(
    settings: Settings, client: httpx.AsyncClient
) -> dict[Platform, SocialProvider]:
    """Instantiate one adapter per platform.

    Args:
        settings: Provider credentials
        client: HTTP client shared by all adapters

    Returns:
        Mapping of platform to adapter
    """
    return {
        platform: provider_class(settings, client)
        for platform, provider_class in PROVIDER_CLASSES.items()
    }


__all__ = [
    "PROVIDER_CLASSES",
    "ProviderAPIError",
    "ProviderError",
    "ProviderNetworkError",
    "SocialProvider",
    "build_providers",
]
