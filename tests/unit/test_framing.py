"""Unit tests for service-data framing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from uribeacon import EncodeError, UrlFrame
from uribeacon.exceptions import FramingError
from uribeacon.framing import (
    DEFAULT_TX_POWER,
    MAX_URL_BYTES,
    SERVICE_UUID,
    SERVICE_UUID_128,
    URL_FRAME_TYPE,
    frame_url,
    unframe_url,
)


class TestFrameUrl:
    """Test framing an encoded URL."""

    def test_header(self, sample_payload: bytes) -> None:
        """Test frame type and default TX power lead the frame."""
        framed = frame_url(sample_payload)

        assert framed[0] == URL_FRAME_TYPE == 0x10
        assert framed[1] == 0xBA
        assert framed[2:] == sample_payload

    def test_custom_tx_power(self, sample_payload: bytes) -> None:
        """Test TX power is written as a signed byte."""
        assert frame_url(sample_payload, tx_power=0)[1] == 0x00
        assert frame_url(sample_payload, tx_power=20)[1] == 0x14
        assert frame_url(sample_payload, tx_power=-100)[1] == 0x9C

    def test_service_uuid(self) -> None:
        """Test the 16-bit UUID inside its 128-bit form."""
        assert SERVICE_UUID == 0xFEAA
        assert SERVICE_UUID_128.startswith(f"0000{SERVICE_UUID:04x}-")

    def test_max_size_payload(self) -> None:
        """Test a payload exactly at the budget."""
        payload = b"\x02" + b"a" * (MAX_URL_BYTES - 1)
        assert len(frame_url(payload)) == MAX_URL_BYTES + 2


class TestFramingErrors:
    """Test framing error handling."""

    def test_empty_payload(self) -> None:
        """Test error on empty payload."""
        with pytest.raises(FramingError, match="empty"):
            frame_url(b"")

    def test_oversized_payload(self) -> None:
        """Test error on payload over the budget."""
        with pytest.raises(FramingError, match="at most 18"):
            frame_url(b"\x02" + b"a" * MAX_URL_BYTES)

    def test_custom_budget(self) -> None:
        """Test max_bytes override."""
        assert frame_url(b"\x02" + b"a" * 20, max_bytes=31)

    @pytest.mark.parametrize("tx_power", [-101, 21, 186])
    def test_tx_power_range(self, sample_payload: bytes, tx_power: int) -> None:
        """Test TX power bounds."""
        with pytest.raises(ValueError, match="tx_power"):
            frame_url(sample_payload, tx_power=tx_power)

    def test_unframe_truncated(self) -> None:
        """Test error on frame without URL bytes."""
        with pytest.raises(FramingError, match="too short"):
            unframe_url(b"\x10\xba")

    def test_unframe_wrong_type(self) -> None:
        """Test error on non-URL frame type."""
        with pytest.raises(FramingError, match="frame type 0x00"):
            unframe_url(b"\x00\xba\x00eff\x08")

    def test_unframe_oversized(self) -> None:
        """Test error on frame carrying too many URL bytes."""
        with pytest.raises(FramingError, match="at most 18"):
            unframe_url(b"\x10\xba\x02" + b"a" * MAX_URL_BYTES)


class TestUnframeUrl:
    """Test unframing received service data."""

    def test_roundtrip(self, sample_payload: bytes) -> None:
        """Test unframe recovers TX power and payload."""
        tx_power, payload = unframe_url(frame_url(sample_payload, tx_power=-12))

        assert tx_power == -12
        assert payload == sample_payload

    def test_default_tx_power(self, sample_payload: bytes) -> None:
        """Test 0xBA reads back as -70 dBm."""
        tx_power, _ = unframe_url(b"\x10\xba" + sample_payload)
        assert tx_power == DEFAULT_TX_POWER == -70

    def test_bytearray(self, sample_payload: bytes) -> None:
        """Test bytes-like frames."""
        _, payload = unframe_url(bytearray(b"\x10\x00" + sample_payload))
        assert isinstance(payload, bytes)
        assert payload == sample_payload


class TestUrlFrame:
    """Test the UrlFrame model."""

    def test_to_service_data(self, sample_url: str) -> None:
        """Test encoding and framing together."""
        frame = UrlFrame(url=sample_url)
        assert frame.to_service_data() == bytes.fromhex("10ba0065666608")

    def test_from_service_data(self, sample_url: str) -> None:
        """Test unframing and decoding together."""
        frame = UrlFrame.from_service_data(bytes.fromhex("10f60065666608"))

        assert frame.url == sample_url
        assert frame.tx_power == -10

    def test_equality_roundtrip(self) -> None:
        """Test a frame survives the round trip."""
        frame = UrlFrame(url="https://www.example.net/", tx_power=-40)
        assert UrlFrame.from_service_data(frame.to_service_data()) == frame

    def test_tx_power_validation(self, sample_url: str) -> None:
        """Test pydantic bounds on TX power."""
        with pytest.raises(ValidationError):
            UrlFrame(url=sample_url, tx_power=21)

        with pytest.raises(ValidationError):
            UrlFrame(url=sample_url, tx_power=-101)

    def test_empty_url_rejected(self) -> None:
        """Test pydantic rejects an empty URL."""
        with pytest.raises(ValidationError):
            UrlFrame(url="")

    def test_extra_fields_forbidden(self, sample_url: str) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            UrlFrame(url=sample_url, power=-70)

    def test_codec_errors_propagate(self) -> None:
        """Test encode errors surface from the model."""
        with pytest.raises(EncodeError):
            UrlFrame(url="ftp://example.com").to_service_data()

    def test_oversized_url(self) -> None:
        """Test URLs over the advertisement budget."""
        frame = UrlFrame(url="https://www.a-very-long-host-name.example.com/")
        with pytest.raises(FramingError):
            frame.to_service_data()

    def test_frozen(self, sample_url: str) -> None:
        """Test frames are immutable."""
        frame = UrlFrame(url=sample_url)
        with pytest.raises(ValidationError):
            frame.tx_power = 0
