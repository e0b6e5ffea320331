"""URL advertisement frame model.

This module provides the UrlFrame pydantic model pairing a URL with the
calibrated TX power it is advertised at.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..codec import decode, encode
from ..framing.basic import (
    DEFAULT_TX_POWER,
    MAX_TX_POWER,
    MAX_URL_BYTES,
    MIN_TX_POWER,
    URL_FRAME_TYPE,
    frame_url,
    unframe_url,
)


class UrlFrame(BaseModel):
    """A URL advertisement frame.

    Example:
        >>> frame = UrlFrame(url="http://www.eff.org")
        >>> data = frame.to_service_data()
        >>> data.hex()
        '10ba0065666608'
        >>> UrlFrame.from_service_data(data) == frame
        True

    Attributes:
        url: URL or ``urn:uuid:`` URN being advertised
        tx_power: Calibrated TX power at 0 m in dBm
        frame_type: Service-data frame type byte
        max_url_bytes: Advertisement budget for the encoded URL
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        frozen=True,
    )

    frame_type: ClassVar[int] = URL_FRAME_TYPE
    max_url_bytes: ClassVar[int] = MAX_URL_BYTES

    url: str = Field(min_length=1, description="URL to advertise")
    tx_power: int = Field(
        default=DEFAULT_TX_POWER,
        ge=MIN_TX_POWER,
        le=MAX_TX_POWER,
        description="Calibrated TX power at 0 m (dBm)",
    )

    def encoded_url(self) -> bytes:
        """Return the compact encoding of the URL.

        Raises:
            EncodeError: If the URL cannot be encoded
        """
        return encode(self.url)

    def to_service_data(self) -> bytes:
        """Encode and frame the URL as advertisement service data.

        Raises:
            EncodeError: If the URL cannot be encoded
            FramingError: If the encoded URL exceeds the advertisement budget
        """
        return frame_url(self.encoded_url(), tx_power=self.tx_power, max_bytes=self.max_url_bytes)

    @classmethod
    def from_service_data(cls, data: bytes) -> UrlFrame:
        """Unframe and decode advertisement service data.

        Raises:
            FramingError: If the frame is malformed
            DecodeError: If the URL payload cannot be decoded
        """
        tx_power, payload = unframe_url(data, max_bytes=cls.max_url_bytes)
        return cls(url=decode(payload), tx_power=tx_power)
