"""Data models for the album share publisher."""

from dataclasses import dataclass
from enum import Enum


class Platform(str, Enum):
    """Social platforms an album can be published to."""

    FACEBOOK = "facebook"
    LINE = "line"
    X = "x"
    INSTAGRAM = "instagram"
    THREADS = "threads"
    TIKTOK = "tiktok"
    YOUTUBE = "youtube"
    TELEGRAM = "telegram"
    WHATSAPP = "whatsapp"

    @property
    def label(self) -> str:
        """Human-readable platform name."""
        return _LABELS[self]


_LABELS = {
    Platform.FACEBOOK: "Facebook",
    Platform.LINE: "LINE",
    Platform.X: "X (Twitter)",
    Platform.INSTAGRAM: "Instagram",
    Platform.THREADS: "Threads",
    Platform.TIKTOK: "TikTok",
    Platform.YOUTUBE: "YouTube",
    Platform.TELEGRAM: "Telegram",
    Platform.WHATSAPP: "WhatsApp",
}


@dataclass(frozen=True)
class AlbumShareData:
    """Public share data of one album.

    ``photo_count`` is supplied by the caller and is not required to match
    ``len(photo_urls)``.
    """

    title: str
    public_url: str
    campaign_name: str = ""
    description: str | None = None
    cover_photo_url: str | None = None
    photo_urls: tuple[str, ...] = ()
    photo_count: int = 0

    def __post_init__(self) -> None:
        """Validate share data."""
        if not isinstance(self.photo_urls, tuple):
            object.__setattr__(self, "photo_urls", tuple(self.photo_urls))
        if self.photo_count < 0:
            raise ValueError("Photo count cannot be negative")

    @property
    def first_photo_url(self) -> str | None:
        """Cover photo, or the first album photo when there is no cover."""
        if self.cover_photo_url:
            return self.cover_photo_url
        return self.photo_urls[0] if self.photo_urls else None


@dataclass(frozen=True)
class ShareResult:
    """Result of publishing an album to one platform."""

    platform: str
    success: bool
    post_url: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate share result."""
        if self.success and self.error:
            raise ValueError("Successful share cannot have an error")
        if not self.success and not self.error:
            raise ValueError("Failed share must have an error")

    @classmethod
    def ok(cls, platform: str, post_url: str | None = None) -> "ShareResult":
        return cls(platform=platform_tag(platform), success=True, post_url=post_url)

    @classmethod
    def failure(cls, platform: str, error: str) -> "ShareResult":
        return cls(platform=platform_tag(platform), success=False, error=error)


def platform_tag(platform: "Platform | str") -> str:
    """Plain string tag of a platform."""
    return platform.value if isinstance(platform, Platform) else str(platform)
