"""Test verification channels and channel selection from settings."""

import pytest

from kiosk.core.config import Settings
from kiosk.models.enums import ContactChannel
from kiosk.services.verification_channel import (
    ConsoleVerificationChannel,
    FixedCodeVerificationChannel,
    channel_from_settings,
)


@pytest.mark.asyncio
async def test_console_channel_generates_numeric_codes():
    channel = ConsoleVerificationChannel(code_length=6)
    ack = await channel.send(ContactChannel.EMAIL, "a@b.edu")
    code = ack.code.get_secret_value()
    assert len(code) == 6
    assert code.isdigit()
    assert code not in repr(ack)


@pytest.mark.asyncio
async def test_fixed_channel_records_deliveries():
    channel = FixedCodeVerificationChannel("654321")
    ack = await channel.send(ContactChannel.MOBILE, "+1 555 0100")
    assert ack.code.get_secret_value() == "654321"
    assert channel.deliveries == [(ContactChannel.MOBILE, "+1 555 0100")]


def test_channel_from_settings():
    assert isinstance(channel_from_settings(Settings(VERIFICATION_CHANNEL="console")), ConsoleVerificationChannel)
    channel = channel_from_settings(
        Settings(VERIFICATION_CHANNEL="fixed", FIXED_VERIFICATION_CODE="123456")
    )
    assert isinstance(channel, FixedCodeVerificationChannel)
    assert channel.code == "123456"


@pytest.mark.parametrize("code", [None, "12345", "1234567", "12a456"])
def test_fixed_code_must_match_code_length(code):
    settings = Settings(VERIFICATION_CHANNEL="fixed", FIXED_VERIFICATION_CODE=code, CODE_LENGTH=6)
    with pytest.raises(ValueError):
        channel_from_settings(settings)


def test_fixed_code_follows_configured_length():
    settings = Settings(VERIFICATION_CHANNEL="fixed", FIXED_VERIFICATION_CODE="1234", CODE_LENGTH=4)
    assert channel_from_settings(settings).code == "1234"


def test_unknown_channel_rejected():
    with pytest.raises(ValueError):
        channel_from_settings(Settings(VERIFICATION_CHANNEL="carrier-pigeon"))
