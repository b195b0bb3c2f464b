"""Unit tests for adapters."""

import io
import pytest
from PIL import Image
from totp_setup.adapters import Base32Adapter, QRCodeAdapter, StdoutAdapter
from totp_setup import config
from totp_setup.errors import InvalidArgumentError, TotpSetupError

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


def test_qr_code_adapter_generates_bytes():
    """QR adapter returns PNG bytes."""
    adapter = QRCodeAdapter()
    result = adapter.generate("otpauth://totp/bob?secret=KNCUGUSFKQ&issuer=Acme")

    assert isinstance(result, bytes)
    assert result[:8] == PNG_SIGNATURE


def test_qr_code_adapter_different_inputs():
    """QR adapter handles different inputs."""
    adapter = QRCodeAdapter()

    qr1 = adapter.generate("short")
    qr2 = adapter.generate("long data" * 20)

    assert len(qr1) > 0
    assert len(qr2) > 0
    assert qr1 != qr2  # Different data = different QR


def test_qr_code_adapter_box_size_scales_image():
    """Larger box size gives a larger image for the same data."""
    adapter = QRCodeAdapter(border=4)
    small = Image.open(io.BytesIO(adapter.generate("same", box_size=2)))
    large = Image.open(io.BytesIO(adapter.generate("same", box_size=10)))

    assert large.size[0] == small.size[0] * 5
    assert small.size[0] == small.size[1]  # square


def test_qr_code_adapter_rejects_unknown_level():
    """Unknown error correction level is an argument error."""
    with pytest.raises(InvalidArgumentError):
        QRCodeAdapter().generate("data", error_correction="X")


@pytest.mark.parametrize("secret,expected", [
    ("SECRET", "KNCUGUSFKQ"),
    ("", ""),
    (b"\x00\x01\x02\x03\x04", "AAAQEAYE"),
])
def test_base32_adapter_encodes_without_padding(secret, expected):
    """Base32 adapter uses RFC 4648 alphabet and drops padding."""
    assert Base32Adapter().encode(secret) == expected


def test_base32_adapter_utf8_text():
    """Text secrets are encoded as UTF-8."""
    adapter = Base32Adapter()
    assert adapter.encode("é") == adapter.encode("é".encode('utf-8'))


def test_stdout_adapter_filters_by_level(capsys):
    """Entries below the threshold are dropped."""
    logger = StdoutAdapter(min_level="info")

    logger.log("debug", "hidden")
    logger.log("warn", "shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "WARN: shown" in out


def test_stdout_adapter_unknown_threshold_defaults_to_warn(capsys):
    """Bad threshold falls back to warn."""
    logger = StdoutAdapter(min_level="loud")

    logger.log("info", "quiet")
    logger.log("error", "broken")

    out = capsys.readouterr().out
    assert "quiet" not in out
    assert "ERROR: broken" in out


def test_config_rejects_non_integer_env(monkeypatch):
    """Bad integer settings raise a package error naming the variable."""
    monkeypatch.setenv("TOTP_QR_PIXELS_PER_MODULE", "abc")

    with pytest.raises(TotpSetupError, match="TOTP_QR_PIXELS_PER_MODULE"):
        config._int_env("TOTP_QR_PIXELS_PER_MODULE", "5")


def test_config_reads_integer_env(monkeypatch):
    """Integer settings fall back to the default when unset."""
    monkeypatch.setenv("TOTP_QR_BORDER", "2")
    monkeypatch.delenv("TOTP_QR_PIXELS_PER_MODULE", raising=False)

    assert config._int_env("TOTP_QR_BORDER", "4") == 2
    assert config._int_env("TOTP_QR_PIXELS_PER_MODULE", "5") == 5
