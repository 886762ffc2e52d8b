"""Tests for the tone sonifier using a fake sounddevice module."""

from __future__ import annotations

import numpy as np
import pytest

from sort_sonic import sonifier
from sort_sonic.errors import AudioUnavailableError, SonifyError


class FakeSoundDevice:
    def __init__(self) -> None:
        self.played: list[tuple[np.ndarray, int]] = []
        self.stopped = 0

    def query_devices(self, kind: str | None = None) -> dict[str, str]:
        assert kind == "output"
        return {"name": "fake speakers"}

    def play(self, data: np.ndarray, samplerate: int) -> None:
        self.played.append((data, samplerate))

    def stop(self) -> None:
        self.stopped += 1


@pytest.fixture
def fake_sd(monkeypatch: pytest.MonkeyPatch) -> FakeSoundDevice:
    fake = FakeSoundDevice()
    monkeypatch.setattr(sonifier, "sd", fake)
    monkeypatch.setattr(sonifier, "_SD_IMPORT_ERROR", None)
    return fake


def test_tone_frequency_is_linear() -> None:
    assert sonifier.tone_frequency(1, 10.0) == 10.0
    assert sonifier.tone_frequency(100, 10.0) == 1000.0


def test_sine_tone_shape_and_pitch() -> None:
    samples = sonifier.sine_tone(500.0, 0.1, sample_rate=8000, volume=0.5)
    assert samples.dtype == np.float32
    assert samples.shape == (800,)
    assert float(np.max(np.abs(samples))) <= 0.5 + 1e-6
    spectrum = np.abs(np.fft.rfft(samples))
    peak_hz = np.argmax(spectrum) * 8000 / len(samples)
    assert peak_hz == pytest.approx(500.0)


def test_sine_tone_fades_in_and_out() -> None:
    samples = sonifier.sine_tone(440.0, 0.05, sample_rate=8000)
    assert samples[0] == 0.0
    assert abs(samples[-1]) < 0.05


def test_sine_tone_never_empty() -> None:
    assert len(sonifier.sine_tone(440.0, 0.0, sample_rate=8000)) == 1


def test_sonify_plays_without_waiting(fake_sd: FakeSoundDevice) -> None:
    player = sonifier.ToneSonifier(scale_hz=10.0, duration=0.01, sample_rate=8000)
    player.sonify(42)
    assert len(fake_sd.played) == 1
    data, rate = fake_sd.played[0]
    assert rate == 8000
    assert len(data) == 80


def test_close_stops_playback(fake_sd: FakeSoundDevice) -> None:
    player = sonifier.ToneSonifier()
    player.close()
    assert fake_sd.stopped == 1


def test_missing_backend_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sonifier, "sd", None)
    monkeypatch.setattr(
        sonifier, "_SD_IMPORT_ERROR", OSError("PortAudio library not found")
    )
    with pytest.raises(AudioUnavailableError):
        sonifier.ToneSonifier()


def test_missing_output_device_raises(
    monkeypatch: pytest.MonkeyPatch, fake_sd: FakeSoundDevice
) -> None:
    def no_device(kind: str | None = None) -> dict[str, str]:
        raise ValueError("No output device matching 'output'")

    monkeypatch.setattr(fake_sd, "query_devices", no_device)
    with pytest.raises(AudioUnavailableError):
        sonifier.ToneSonifier()


def test_playback_failure_is_fatal(
    monkeypatch: pytest.MonkeyPatch, fake_sd: FakeSoundDevice
) -> None:
    def broken(data, samplerate) -> None:
        raise RuntimeError("stream died")

    player = sonifier.ToneSonifier()
    monkeypatch.setattr(fake_sd, "play", broken)
    with pytest.raises(SonifyError):
        player.sonify(3)


def test_load_sounddevice_import_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    import builtins

    original_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name == "sounddevice":
            raise OSError("PortAudio library not found")
        return original_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    monkeypatch.setattr(sonifier, "sd", None)
    monkeypatch.setattr(sonifier, "_SD_IMPORT_ERROR", None)
    sonifier._load_sounddevice()
    assert sonifier.sd is None
    assert isinstance(sonifier._SD_IMPORT_ERROR, OSError)


def test_load_sounddevice_success(monkeypatch: pytest.MonkeyPatch) -> None:
    import sys

    class DummySd:
        pass

    monkeypatch.setitem(sys.modules, "sounddevice", DummySd)
    monkeypatch.setattr(sonifier, "sd", None)
    monkeypatch.setattr(sonifier, "_SD_IMPORT_ERROR", None)
    sonifier._load_sounddevice()
    assert sonifier.sd is DummySd
    assert sonifier._SD_IMPORT_ERROR is None


@pytest.mark.audio
def test_real_device_plays_tone() -> None:
    sonifier.ToneSonifier().sonify(44)
