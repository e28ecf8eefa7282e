"""
Encoder configuration.

Responsibilities:
- Describe one output stream (rate, channels, application, framing)
- Read environment variables
- Provide a typed, immutable config object
- Validate before any codec resource is acquired

Non-responsibilities:
- No wire format constants (see constants.py)
- No runtime mutation
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from errors import ConfigurationError, FramingModeError
from constants import (
    DEFAULT_CHANNELS,
    DEFAULT_SAMPLE_RATE_HZ,
    OPUS_APPLICATION_AUDIO,
    OPUS_APPLICATION_RESTRICTED_LOWDELAY,
    OPUS_APPLICATION_VOIP,
    OPUS_CHANNEL_COUNTS,
    OPUS_SAMPLE_RATES_HZ,
)


class Application(str, Enum):
    """
    Codec application mode.

    VOIP:
        General low-latency voice.

    AUDIO:
        General audio (music, mixed content).

    RESTRICTED_LOWDELAY:
        Ultra-low-latency; disables the speech-optimized modes.
    """

    VOIP = "voip"
    AUDIO = "audio"
    RESTRICTED_LOWDELAY = "restricted_lowdelay"

    @property
    def opus_id(self) -> int:
        return _OPUS_APPLICATION_IDS[self]


_OPUS_APPLICATION_IDS: dict[Application, int] = {
    Application.VOIP: OPUS_APPLICATION_VOIP,
    Application.AUDIO: OPUS_APPLICATION_AUDIO,
    Application.RESTRICTED_LOWDELAY: OPUS_APPLICATION_RESTRICTED_LOWDELAY,
}


class Framing(str, Enum):
    """
    NONE:
        Encode calls return bare codec packets.

    OGG:
        Encode calls return checksummed Ogg pages.
    """

    NONE = "none"
    OGG = "ogg"


@dataclass(frozen=True)
class EncoderConfig:
    """
    Immutable encoder configuration.

    Constructed once per output stream and handed to EncoderSession.
    """

    sample_rate_hz: int = DEFAULT_SAMPLE_RATE_HZ
    channels: int = DEFAULT_CHANNELS
    application: Application = Application.AUDIO
    framing: Framing = Framing.OGG

    def __post_init__(self) -> None:
        # Plain strings ("audio", "ogg") are accepted for the enum fields;
        # unknown values are left as-is for validate() to reject.
        for name, enum_type in (("application", Application), ("framing", Framing)):
            value = getattr(self, name)
            if not isinstance(value, enum_type) and value in tuple(m.value for m in enum_type):
                object.__setattr__(self, name, enum_type(value))

    def validate(self) -> None:
        """
        Reject invalid combinations.

        Raises:
            ConfigurationError for rate / channels / application.
            FramingModeError for an unknown framing mode.
        """
        if self.sample_rate_hz not in OPUS_SAMPLE_RATES_HZ:
            raise ConfigurationError(
                f"Unsupported sample rate {self.sample_rate_hz} Hz "
                f"(expected one of {OPUS_SAMPLE_RATES_HZ})"
            )
        if self.channels not in OPUS_CHANNEL_COUNTS:
            raise ConfigurationError(f"Unsupported channel count {self.channels}")
        if not isinstance(self.application, Application):
            raise ConfigurationError(f"Unknown application mode {self.application!r}")
        if not isinstance(self.framing, Framing):
            raise FramingModeError(f"Unknown framing mode {self.framing!r}")

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @staticmethod
    def load_from_env() -> EncoderConfig:
        """
        Load configuration from environment variables.

        Raises:
            ConfigurationError if a variable cannot be parsed.
        """
        try:
            return EncoderConfig(
                sample_rate_hz=int(
                    os.environ.get("OGGFRAME_SAMPLE_RATE_HZ", DEFAULT_SAMPLE_RATE_HZ)
                ),
                channels=int(os.environ.get("OGGFRAME_CHANNELS", DEFAULT_CHANNELS)),
                application=Application(
                    os.environ.get("OGGFRAME_APPLICATION", Application.AUDIO.value)
                ),
                framing=Framing(os.environ.get("OGGFRAME_FRAMING", Framing.OGG.value)),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid encoder environment: {e}") from e


DEFAULT_CONFIG = EncoderConfig()
