"""Black-box tests for CLI entry point."""

import json

from pytest_httpx import HTTPXMock
from typer.testing import CliRunner

from album_share_publisher.cli import app
from album_share_publisher.config import ENV_KEYS

runner = CliRunner()


def make_env(**values: str) -> dict[str, str | None]:
    """Environment with every credential unset except the given ones."""
    env: dict[str, str | None] = {key: None for key in ENV_KEYS.values()}
    env.update(
        {
            "SOCIAL_REQUEST_TIMEOUT": None,
            "SOCIAL_PUBLISH_TIMEOUT": None,
            "GRAPH_API_VERSION": None,
            "WHATSAPP_TEMPLATE_NAME": None,
        }
    )
    env.update(values)
    return env


TELEGRAM_ENV = make_env(TELEGRAM_BOT_TOKEN="123:bot", TELEGRAM_CHANNEL_ID="@news")


class TestCLI:
    """Test command-line interface."""

    def test_cli_help(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Publish photo albums to social platforms" in result.stdout

    def test_status(self) -> None:
        """Test that status lists every platform without network access."""
        result = runner.invoke(app, ["status"], env=TELEGRAM_ENV)

        assert result.exit_code == 0
        for label in ["Facebook", "Instagram", "Telegram", "LINE", "WhatsApp"]:
            assert label in result.stdout
        assert result.stdout.count("yes") == 1

    def test_invalid_timeout(self) -> None:
        env = make_env(SOCIAL_PUBLISH_TIMEOUT="soon")
        result = runner.invoke(app, ["status"], env=env)

        assert result.exit_code == 1
        assert "must be a number" in result.stdout

    def test_publish_requires_platform(self) -> None:
        result = runner.invoke(
            app,
            ["publish", "--title", "Rally", "--public-url", "https://albums.example.com/a"],
            env=TELEGRAM_ENV,
        )

        assert result.exit_code != 0

    def test_publish_success(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            method="POST",
            url="https://api.telegram.org/bot123:bot/sendPhoto",
            json={"ok": True, "result": {"message_id": 9}},
        )

        result = runner.invoke(
            app,
            [
                "publish",
                "-p",
                "telegram",
                "--title",
                "Rally",
                "--public-url",
                "https://albums.example.com/a",
                "--photo-url",
                "https://cdn.example.com/1.jpg",
                "--photo-url",
                "https://cdn.example.com/2.jpg",
            ],
            env=TELEGRAM_ENV,
        )

        assert result.exit_code == 0
        assert "Successful: 1" in result.stdout
        assert "https://t.me/news/9" in result.stdout
        sent = json.loads(httpx_mock.get_request().content)
        assert "2 張照片" in sent["caption"]

    def test_publish_partial_failure(self, httpx_mock: HTTPXMock) -> None:
        """Test that one failed platform gives exit code 1."""
        httpx_mock.add_response(
            method="POST",
            url="https://api.telegram.org/bot123:bot/sendMessage",
            json={"ok": True, "result": {"message_id": 10}},
        )

        result = runner.invoke(
            app,
            [
                "publish",
                "-p",
                "telegram",
                "-p",
                "x",
                "--title",
                "Rally",
                "--public-url",
                "https://albums.example.com/a",
                "--message",
                "See you there",
            ],
            env=TELEGRAM_ENV,
        )

        assert result.exit_code == 1
        assert "Successful: 1" in result.stdout
        assert "Failed: 1" in result.stdout
        assert "not configured" in result.stdout

    def test_publish_dry_run(self, httpx_mock: HTTPXMock) -> None:
        result = runner.invoke(
            app,
            [
                "publish",
                "-p",
                "facebook",
                "--title",
                "Rally",
                "--public-url",
                "https://albums.example.com/a",
                "--photo-url",
                "https://cdn.example.com/1.jpg",
                "--photo-url",
                "http://10.0.0.1/2.jpg",
                "--dry-run",
            ],
            env=TELEGRAM_ENV,
        )

        assert result.exit_code == 0
        assert "DRY RUN" in result.stdout
        assert "Photos: 1 of 2" in result.stdout
        assert httpx_mock.get_requests() == []
