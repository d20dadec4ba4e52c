"""Tests for OAuth 1.0a request signing."""

import re

import pytest

from album_share_publisher.oauth1 import (
    percent_encode,
    sign,
    signature_base_string,
)

# Example request from the OAuth Core 1.0 specification, appendix A.5
PHOTOS_URL = "http://photos.example.net/photos"
PHOTOS_PARAMS = {"file": "vacation.jpg", "size": "original"}
CONSUMER_KEY = "dpf43f3p2l4k3l03"
CONSUMER_SECRET = "kd94hf93k423kf44"
TOKEN = "nnch734d00sl2jdk"
TOKEN_SECRET = "pfkkdhi9sl3r4s00"
NONCE = "kllo9940pd9333jh"
TIMESTAMP = "1191242096"

TWEETS_URL = "https://api.twitter.com/2/tweets"


def sign_tweet(**overrides: str) -> str:
    args = {
        "consumer_key": "key",
        "consumer_secret": "secret",
        "token": "token",
        "token_secret": "token_secret",
        "nonce": "abcdef0123456789abcdef0123456789",
        "timestamp": "1700000000",
    }
    args.update(overrides)
    return sign("POST", TWEETS_URL, **args)


def header_params(header: str) -> dict[str, str]:
    assert header.startswith("OAuth ")
    return dict(re.findall(r'(\w+)="([^"]*)"', header))


class TestPercentEncode:
    """Test RFC 3986 percent-encoding."""

    def test_unreserved_untouched(self) -> None:
        assert percent_encode("AZaz09-._~") == "AZaz09-._~"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (" ", "%20"),
            ("+", "%2B"),
            ("/", "%2F"),
            ("=", "%3D"),
            ("&", "%26"),
            ("*", "%2A"),
            ("!", "%21"),
            ("'", "%27"),
            ("(", "%28"),
        ],
    )
    def test_reserved_encoded(self, value: str, expected: str) -> None:
        assert percent_encode(value) == expected

    def test_utf8(self) -> None:
        assert percent_encode("張") == "%E5%BC%B5"


class TestSignatureBaseString:
    """Test signature base string construction."""

    def test_specification_example(self) -> None:
        params = {
            **PHOTOS_PARAMS,
            "oauth_consumer_key": CONSUMER_KEY,
            "oauth_token": TOKEN,
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_timestamp": TIMESTAMP,
            "oauth_nonce": NONCE,
            "oauth_version": "1.0",
        }

        assert signature_base_string("get", PHOTOS_URL, params) == (
            "GET&http%3A%2F%2Fphotos.example.net%2Fphotos&"
            "file%3Dvacation.jpg%26oauth_consumer_key%3Ddpf43f3p2l4k3l03%26"
            "oauth_nonce%3Dkllo9940pd9333jh%26oauth_signature_method%3DHMAC-SHA1%26"
            "oauth_timestamp%3D1191242096%26oauth_token%3Dnnch734d00sl2jdk%26"
            "oauth_version%3D1.0%26size%3Doriginal"
        )


class TestSign:
    """Test Authorization header generation."""

    def test_specification_signature(self) -> None:
        """Test the known signature of the specification example."""
        header = sign(
            "GET",
            PHOTOS_URL,
            CONSUMER_KEY,
            CONSUMER_SECRET,
            TOKEN,
            TOKEN_SECRET,
            params=PHOTOS_PARAMS,
            nonce=NONCE,
            timestamp=TIMESTAMP,
        )

        params = header_params(header)
        assert params["oauth_signature"] == "tR3%2BTy81lMeYAr%2FFid0kMTYa%2FWM%3D"
        # request parameters are signed but never sent in the header
        assert "file" not in params
        assert "size" not in params

    def test_header_keys_sorted(self) -> None:
        header = sign_tweet()

        keys = list(header_params(header))
        assert keys == sorted(keys)
        assert keys == [
            "oauth_consumer_key",
            "oauth_nonce",
            "oauth_signature",
            "oauth_signature_method",
            "oauth_timestamp",
            "oauth_token",
            "oauth_version",
        ]

    def test_header_values(self) -> None:
        params = header_params(sign_tweet())

        assert params["oauth_consumer_key"] == "key"
        assert params["oauth_signature_method"] == "HMAC-SHA1"
        assert params["oauth_timestamp"] == "1700000000"
        assert params["oauth_version"] == "1.0"

    def test_reproducible(self) -> None:
        """Test that fixed inputs give a byte-identical header."""
        assert sign_tweet() == sign_tweet()

    @pytest.mark.parametrize(
        "override",
        [
            {"consumer_key": "key2"},
            {"consumer_secret": "secret2"},
            {"token": "token2"},
            {"token_secret": "token_secret2"},
            {"nonce": "ffffffffffffffffffffffffffffffff"},
            {"timestamp": "1700000001"},
        ],
    )
    def test_any_input_changes_signature(self, override: dict[str, str]) -> None:
        original = header_params(sign_tweet())["oauth_signature"]
        changed = header_params(sign_tweet(**override))["oauth_signature"]
        assert original != changed

    def test_method_changes_signature(self) -> None:
        args = dict(
            consumer_key="key",
            consumer_secret="secret",
            token="token",
            token_secret="token_secret",
            nonce="n",
            timestamp="1",
        )
        post = sign("POST", TWEETS_URL, **args)
        get = sign("GET", TWEETS_URL, **args)
        assert header_params(post)["oauth_signature"] != header_params(get)["oauth_signature"]

    def test_fresh_nonce_per_call(self) -> None:
        """Test that a new nonce is generated for every request."""
        first = header_params(sign("POST", TWEETS_URL, "k", "s", "t", "ts"))
        second = header_params(sign("POST", TWEETS_URL, "k", "s", "t", "ts"))

        assert first["oauth_nonce"] != second["oauth_nonce"]
        assert re.fullmatch(r"[0-9a-f]{32}", first["oauth_nonce"])
        assert first["oauth_timestamp"].isdigit()
