import pytest

from vnckit.audio import Audio, AudioFormat, AudioFormatType


class RecordingAudio(Audio):
    def __init__(self):
        self.events = []
        self.active = False

    def playback_start(self, format):
        if self.active:
            return False
        self.active = True
        self.events.append(("start", format))
        return True

    def playback_stop(self):
        if not self.active:
            return False
        self.active = False
        self.events.append(("stop",))
        return True

    def playback_data(self, sample):
        if not self.active:
            return False
        self.events.append(("data", sample))
        return True


@pytest.mark.parametrize(
    "kind, value",
    [
        (AudioFormatType.RAW_U8, 0),
        (AudioFormatType.RAW_S8, 1),
        (AudioFormatType.RAW_U16, 2),
        (AudioFormatType.RAW_S16, 3),
        (AudioFormatType.RAW_U32, 4),
        (AudioFormatType.RAW_S32, 5),
    ],
)
def test_format_carries_type_value(kind, value):
    fmt = AudioFormat(kind, 2, 44100)
    assert fmt.format == value
    assert AudioFormatType(fmt.format) is kind


def test_new_format_is_zeroed():
    fmt = AudioFormat()
    assert (fmt.format, fmt.nchannels, fmt.frequency) == (0, 0, 0)


def test_copy_is_equal_and_independent():
    fmt = AudioFormat(AudioFormatType.RAW_S32, 2, 44100)
    dup = fmt.copy()
    assert dup == fmt
    assert dup is not fmt
    dup.nchannels = 1
    assert fmt.nchannels == 2


@pytest.mark.parametrize(
    "kwargs",
    [{"format": 256}, {"nchannels": -1}, {"frequency": 1 << 32}],
)
def test_format_out_of_range_raises(kwargs):
    with pytest.raises(ValueError):
        AudioFormat(**kwargs)


def test_audio_interface_is_abstract():
    with pytest.raises(TypeError):
        Audio()


def test_playback_sequence():
    audio = RecordingAudio()
    fmt = AudioFormat(AudioFormatType.RAW_S16, 2, 44100)
    assert audio.playback_data(b"early") is False
    assert audio.playback_start(fmt) is True
    assert audio.playback_start(fmt) is False
    assert audio.playback_data(b"\x00\x01") is True
    assert audio.playback_stop() is True
    assert audio.events == [("start", fmt), ("data", b"\x00\x01"), ("stop",)]