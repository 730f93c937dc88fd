"""Audio formats and the playback interface for remote desktop sound."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any

__all__ = ["AudioFormatType", "AudioFormat", "Audio"]


class AudioFormatType(IntEnum):
    """Raw sample encodings a server may send."""

    RAW_U8 = 0
    RAW_S8 = 1
    RAW_U16 = 2
    RAW_S16 = 3
    RAW_U32 = 4
    RAW_S32 = 5


def _check_range(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must fit in {bits} unsigned bits, got {value}")


@dataclass
class AudioFormat:
    """Sample format, channel count and frequency of an audio stream."""

    format: int = 0
    nchannels: int = 0
    frequency: int = 0

    def __post_init__(self) -> None:
        _check_range("format", self.format, 8)
        _check_range("nchannels", self.nchannels, 8)
        _check_range("frequency", self.frequency, 32)

    def copy(self) -> AudioFormat:
        """Return an independent copy of this format."""
        return replace(self)


class Audio(ABC):
    """Receiver of audio playback requests from a remote desktop."""

    @abstractmethod
    def playback_start(self, format: AudioFormat) -> bool:
        """Prepare to play audio in ``format``."""

    @abstractmethod
    def playback_stop(self) -> bool:
        """Finish the current playback."""

    @abstractmethod
    def playback_data(self, sample: Any) -> bool:
        """Play one audio sample."""