"""Pytest configuration and shared fixtures."""

import pytest

from album_share_publisher.config import Settings
from album_share_publisher.models import AlbumShareData


@pytest.fixture
def settings() -> Settings:
    """Return settings with every platform fully configured."""
    return Settings(
        facebook_page_access_token="fb_page_token",
        facebook_page_id="page_123",
        instagram_business_account_id="ig_456",
        x_api_key="x_key",
        x_api_secret="x_secret",
        x_access_token="x_token",
        x_access_token_secret="x_token_secret",
        threads_access_token="threads_token",
        threads_user_id="threads_user",
        tiktok_access_token="tiktok_token",
        youtube_access_token="yt_token",
        youtube_channel_id="UC_channel",
        telegram_bot_token="123:bot",
        telegram_channel_id="@campaign_news",
        whatsapp_phone_number_id="wa_phone",
        whatsapp_access_token="wa_token",
        whatsapp_broadcast_group_id="wa_group",
        line_messaging_access_token="line_token",
        publish_timeout=5.0,
    )


@pytest.fixture
def album() -> AlbumShareData:
    """Return share data for an album with three photos.

    The photo count is deliberately larger than the number of URLs.
    """
    return AlbumShareData(
        title="Night Market Rally",
        description="Thanks to everyone who came out",
        public_url="https://albums.example.com/a/rally",
        cover_photo_url="https://cdn.example.com/cover.jpg",
        photo_urls=[
            "https://cdn.example.com/1.jpg",
            "https://cdn.example.com/2.jpg",
            "https://cdn.example.com/3.jpg",
        ],
        photo_count=12,
        campaign_name="Campaign 2026",
    )


@pytest.fixture
def empty_album() -> AlbumShareData:
    """Return share data for an album without photos."""
    return AlbumShareData(
        title="Town Hall",
        public_url="https://albums.example.com/a/town-hall",
        campaign_name="Campaign 2026",
    )
