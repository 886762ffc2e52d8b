"""Tone playback backed by sounddevice."""

from __future__ import annotations

import logging
from typing import Any, Optional, cast

import numpy as np
from numpy.typing import NDArray

from sort_sonic.errors import AudioUnavailableError, SonifyError

logger = logging.getLogger(__name__)

sd: Any | None = None
_SD_IMPORT_ERROR: Optional[Exception] = None

_FADE_SECONDS = 0.002


def _load_sounddevice() -> None:
    global sd
    global _SD_IMPORT_ERROR
    if sd is not None or _SD_IMPORT_ERROR is not None:
        return
    try:
        import sounddevice as sd_module  # type: ignore[import]
    except Exception as exc:  # pragma: no cover - PortAudio missing raises OSError
        sd = None
        _SD_IMPORT_ERROR = exc
    else:
        sd = cast(Any, sd_module)
        _SD_IMPORT_ERROR = None


def tone_frequency(value: int, scale_hz: float) -> float:
    return value * scale_hz


def sine_tone(
    frequency: float,
    duration: float,
    *,
    sample_rate: int = 44100,
    volume: float = 0.2,
) -> NDArray[np.float32]:
    """Render a mono sine wave with short linear fades at both ends."""
    count = max(1, int(round(duration * sample_rate)))
    t = np.arange(count, dtype=np.float64) / sample_rate
    wave = volume * np.sin(2.0 * np.pi * frequency * t)
    fade = min(count // 2, int(_FADE_SECONDS * sample_rate))
    if fade > 0:
        ramp = np.linspace(0.0, 1.0, fade, endpoint=False)
        wave[:fade] *= ramp
        wave[-fade:] *= ramp[::-1]
    return wave.astype(np.float32)


class ToneSonifier:
    """Play a short tone whose pitch follows an element's value.

    Playback is handed to PortAudio and returns immediately; a new tone
    replaces one still sounding.
    """

    def __init__(
        self,
        *,
        scale_hz: float = 10.0,
        duration: float = 0.01,
        sample_rate: int = 44100,
        volume: float = 0.2,
    ) -> None:
        _load_sounddevice()
        if sd is None:
            raise AudioUnavailableError(
                "Audio backend is unavailable. Install PortAudio and the "
                "sounddevice package."
            ) from _SD_IMPORT_ERROR
        self._sd = cast(Any, sd)
        try:
            device = self._sd.query_devices(kind="output")
        except Exception as exc:
            raise AudioUnavailableError("No audio output device found") from exc
        logger.info("Audio output device: %s", _device_name(device))
        self._scale_hz = scale_hz
        self._duration = duration
        self._sample_rate = sample_rate
        self._volume = volume

    def tone_for(self, value: int) -> NDArray[np.float32]:
        return sine_tone(
            tone_frequency(value, self._scale_hz),
            self._duration,
            sample_rate=self._sample_rate,
            volume=self._volume,
        )

    def sonify(self, value: int) -> None:
        samples = self.tone_for(value)
        try:
            self._sd.play(samples, self._sample_rate)
        except Exception as exc:
            logger.exception("Failed playing tone for value %s", value)
            raise SonifyError(f"Failed playing audio: {exc}") from exc

    def close(self) -> None:
        try:
            self._sd.stop()
        except Exception:
            logger.debug("Audio stop failed", exc_info=True)


def _device_name(device: Any) -> str:
    if isinstance(device, dict):
        return str(device.get("name", "unknown"))
    return "unknown"
