"""Time-rotating advertisement URLs.

A beacon can advertise a URL whose last path segment changes every interval,
so a URL seen once cannot be replayed later. The token is derived from a
shared secret and the index of the current interval:

    token = base64(hex(sha1(secret + str(timestamp_ms // interval_ms))))[:length]

A server holding the same secret can recompute the token for the current
interval to check that a visitor saw the beacon recently.

Example:
    ```python
    from uribeacon.rotation import RotationConfig, rotating_url
    from uribeacon import UrlFrame

    config = RotationConfig(base_url="http://tiny.cc/C9/", secret="locomoco")
    url = rotating_url(config)
    frame = UrlFrame(url=url).to_service_data()
    ```
"""

from __future__ import annotations

import base64
import hashlib
import logging
import time
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# sha1 hex is 40 chars; base64 of that without padding is 54 chars
MAX_TOKEN_LENGTH = 54


@dataclass
class RotationConfig:
    """Configuration for rotating advertisement URLs.

    Attributes:
        base_url: URL the token is appended to (default "http://tiny.cc/C9/").
            Keep it short: base URL plus token must encode to at most 18 bytes.
        secret: Shared secret mixed into the hash (default "locomoco")
        interval_ms: Rotation interval in milliseconds (default 60000 = 1 minute)
        token_length: Number of base64 characters kept (default 5)

    Examples:
        ```python
        # Rotate every five minutes with a longer token
        config = RotationConfig(secret="s3cret", interval_ms=300_000, token_length=6)
        ```
    """

    base_url: str = "http://tiny.cc/C9/"
    secret: str = "locomoco"
    interval_ms: int = 60_000
    token_length: int = 5

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.base_url:
            raise ValueError("base_url must not be empty")

        if not self.secret:
            raise ValueError("secret must not be empty")

        _check_token_params(self.interval_ms, self.token_length)


def rotating_token(
    secret: str, timestamp_ms: int, interval_ms: int = 60_000, token_length: int = 5
) -> str:
    """Derive the token for the interval containing ``timestamp_ms``.

    Args:
        secret: Shared secret
        timestamp_ms: Unix time in milliseconds
        interval_ms: Rotation interval in milliseconds
        token_length: Number of characters to keep

    Returns:
        Token made of standard base64 characters

    Raises:
        ValueError: If interval_ms is not positive or token_length is not 1-54
    """
    _check_token_params(interval_ms, token_length)

    period = timestamp_ms // interval_ms
    digest = hashlib.sha1(f"{secret}{period}".encode("utf-8")).hexdigest()
    encoded = base64.b64encode(digest.encode("utf-8")).decode("ascii").rstrip("=")
    return encoded[:token_length]


def rotating_url(config: RotationConfig, timestamp_ms: Optional[int] = None) -> str:
    """Build the advertised URL for the current (or given) time.

    Args:
        config: Rotation configuration
        timestamp_ms: Unix time in milliseconds; the wall clock if None

    Returns:
        ``config.base_url`` followed by the token
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    token = rotating_token(config.secret, timestamp_ms, config.interval_ms, config.token_length)
    url = config.base_url + token
    logger.debug("Rotating URL for interval %d: %s", timestamp_ms // config.interval_ms, url)
    return url


def _check_token_params(interval_ms: int, token_length: int) -> None:
    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be > 0, got {interval_ms}")
    if not 1 <= token_length <= MAX_TOKEN_LENGTH:
        raise ValueError(f"token_length must be 1-{MAX_TOKEN_LENGTH}, got {token_length}")
