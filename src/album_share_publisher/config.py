"""Provider configuration read from the process environment."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_API_VERSION = "v19.0"
DEFAULT_WHATSAPP_TEMPLATE = "album_share"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_PUBLISH_TIMEOUT = 60.0

# Settings field -> environment variable
ENV_KEYS = {
    "facebook_page_access_token": "FACEBOOK_PAGE_ACCESS_TOKEN",
    "facebook_page_id": "FACEBOOK_PAGE_ID",
    "instagram_business_account_id": "INSTAGRAM_BUSINESS_ACCOUNT_ID",
    "x_api_key": "X_API_KEY",
    "x_api_secret": "X_API_SECRET",
    "x_access_token": "X_ACCESS_TOKEN",
    "x_access_token_secret": "X_ACCESS_TOKEN_SECRET",
    "threads_access_token": "THREADS_ACCESS_TOKEN",
    "threads_user_id": "THREADS_USER_ID",
    "tiktok_access_token": "TIKTOK_ACCESS_TOKEN",
    "youtube_access_token": "YOUTUBE_ACCESS_TOKEN",
    "youtube_channel_id": "YOUTUBE_CHANNEL_ID",
    "telegram_bot_token": "TELEGRAM_BOT_TOKEN",
    "telegram_channel_id": "TELEGRAM_CHANNEL_ID",
    "whatsapp_phone_number_id": "WHATSAPP_PHONE_NUMBER_ID",
    "whatsapp_access_token": "WHATSAPP_ACCESS_TOKEN",
    "whatsapp_broadcast_group_id": "WHATSAPP_BROADCAST_GROUP_ID",
    "line_messaging_access_token": "LINE_MESSAGING_ACCESS_TOKEN",
}


@dataclass(frozen=True)
class Settings:
    """Immutable provider credentials and engine options.

    Every credential is optional; an adapter whose keys are missing reports
    itself as not configured and never reaches the network.
    """

    facebook_page_access_token: str | None = None
    facebook_page_id: str | None = None
    instagram_business_account_id: str | None = None
    x_api_key: str | None = None
    x_api_secret: str | None = None
    x_access_token: str | None = None
    x_access_token_secret: str | None = None
    threads_access_token: str | None = None
    threads_user_id: str | None = None
    tiktok_access_token: str | None = None
    youtube_access_token: str | None = None
    youtube_channel_id: str | None = None
    telegram_bot_token: str | None = None
    telegram_channel_id: str | None = None
    whatsapp_phone_number_id: str | None = None
    whatsapp_access_token: str | None = None
    whatsapp_broadcast_group_id: str | None = None
    whatsapp_template_name: str = DEFAULT_WHATSAPP_TEMPLATE
    line_messaging_access_token: str | None = None
    graph_api_version: str = DEFAULT_GRAPH_API_VERSION
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    publish_timeout: float = DEFAULT_PUBLISH_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings instance

        Raises:
            ValueError: If a timeout variable is not a number
        """
        if environ is None:
            environ = os.environ

        values: dict[str, object] = {
            field: _get(environ, key) for field, key in ENV_KEYS.items()
        }
        values["whatsapp_template_name"] = (
            _get(environ, "WHATSAPP_TEMPLATE_NAME") or DEFAULT_WHATSAPP_TEMPLATE
        )
        values["graph_api_version"] = (
            _get(environ, "GRAPH_API_VERSION") or DEFAULT_GRAPH_API_VERSION
        )
        values["request_timeout"] = _get_float(
            environ, "SOCIAL_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT
        )
        values["publish_timeout"] = _get_float(
            environ, "SOCIAL_PUBLISH_TIMEOUT", DEFAULT_PUBLISH_TIMEOUT
        )

        settings = cls(**values)
        logger.debug(
            f"Loaded settings with {sum(1 for f in ENV_KEYS if getattr(settings, f))} "
            f"credential(s) present"
        )
        return settings


def _get(environ: Mapping[str, str], key: str) -> str | None:
    value = environ.get(key, "").strip()
    return value or None


def _get_float(environ: Mapping[str, str], key: str, default: float) -> float:
    value = _get(environ, key)
    if value is None:
        return default
    try:
        result = float(value)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {value!r}") from None
    if result <= 0:
        raise ValueError(f"{key} must be positive, got {value!r}")
    return result
