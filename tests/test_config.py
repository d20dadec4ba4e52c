"""Tests for settings loading."""

import pytest

from album_share_publisher.config import Settings


class TestSettingsFromEnv:
    """Test reading settings from environment variables."""

    def test_empty_environment(self) -> None:
        """Test defaults when nothing is configured."""
        settings = Settings.from_env({})

        assert settings.facebook_page_access_token is None
        assert settings.whatsapp_template_name == "album_share"
        assert settings.graph_api_version == "v19.0"
        assert settings.request_timeout == 30.0
        assert settings.publish_timeout == 60.0

    def test_reads_credentials(self) -> None:
        settings = Settings.from_env(
            {
                "FACEBOOK_PAGE_ACCESS_TOKEN": "token",
                "FACEBOOK_PAGE_ID": "page",
                "TELEGRAM_CHANNEL_ID": "@channel",
                "WHATSAPP_TEMPLATE_NAME": "rally_share",
            }
        )

        assert settings.facebook_page_access_token == "token"
        assert settings.facebook_page_id == "page"
        assert settings.telegram_channel_id == "@channel"
        assert settings.whatsapp_template_name == "rally_share"

    def test_blank_values_are_missing(self) -> None:
        """Test that whitespace-only values count as not set."""
        settings = Settings.from_env({"X_API_KEY": "   ", "GRAPH_API_VERSION": ""})

        assert settings.x_api_key is None
        assert settings.graph_api_version == "v19.0"

    def test_timeouts(self) -> None:
        settings = Settings.from_env(
            {"SOCIAL_REQUEST_TIMEOUT": "5", "SOCIAL_PUBLISH_TIMEOUT": "12.5"}
        )

        assert settings.request_timeout == 5.0
        assert settings.publish_timeout == 12.5

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout(self, value: str) -> None:
        with pytest.raises(ValueError, match="SOCIAL_PUBLISH_TIMEOUT"):
            Settings.from_env({"SOCIAL_PUBLISH_TIMEOUT": value})
