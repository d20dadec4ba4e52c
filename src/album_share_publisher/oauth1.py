"""OAuth 1.0a request signing with HMAC-SHA1."""

import base64
import hashlib
import hmac
import secrets
import time
from collections.abc import Mapping
from urllib.parse import quote

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"


def percent_encode(value: str) -> str:
    """Percent-encode a value as RFC 3986 requires.

    Letters, digits and ``-._~`` are left alone; everything else, including
    spaces, is encoded from its UTF-8 bytes.
    """
    return quote(str(value), safe="-._~")


def normalize_parameters(params: Mapping[str, str]) -> str:
    """Encode and sort parameters into the ``k=v&k=v`` form."""
    encoded = sorted(
        (percent_encode(key), percent_encode(value)) for key, value in params.items()
    )
    return "&".join(f"{key}={value}" for key, value in encoded)


def signature_base_string(method: str, url: str, params: Mapping[str, str]) -> str:
    """Build the signature base string for a request.

    Args:
        method: HTTP method
        url: Request URL without query string
        params: All OAuth and request parameters

    Returns:
        ``METHOD&encoded-url&encoded-parameters``
    """
    return "&".join(
        [
            method.upper(),
            percent_encode(url),
            percent_encode(normalize_parameters(params)),
        ]
    )


def sign(
    method: str,
    url: str,
    consumer_key: str,
    consumer_secret: str,
    token: str,
    token_secret: str,
    *,
    params: Mapping[str, str] | None = None,
    nonce: str | None = None,
    timestamp: str | None = None,
) -> str:
    """Produce an OAuth 1.0a ``Authorization`` header value.

    A fresh nonce and timestamp are generated on every call unless given.

    Args:
        method: HTTP method
        url: Request URL without query string
        consumer_key: Consumer (API) key
        consumer_secret: Consumer (API) secret
        token: Access token
        token_secret: Access token secret
        params: Query or form parameters to include in the signature
        nonce: Fixed nonce, for reproducible signatures
        timestamp: Fixed epoch timestamp, for reproducible signatures

    Returns:
        Header value starting with ``OAuth ``
    """
    oauth_params = {
        "oauth_consumer_key": consumer_key,
        "oauth_nonce": nonce or secrets.token_hex(16),
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": timestamp or str(int(time.time())),
        "oauth_token": token,
        "oauth_version": OAUTH_VERSION,
    }

    base_string = signature_base_string(method, url, {**(params or {}), **oauth_params})
    signing_key = f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"
    digest = hmac.new(
        signing_key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1
    ).digest()
    oauth_params["oauth_signature"] = base64.b64encode(digest).decode("ascii")

    header = ", ".join(
        f'{percent_encode(key)}="{percent_encode(value)}"'
        for key, value in sorted(oauth_params.items())
    )
    return f"OAuth {header}"
