"""Feed recorded audio to a callback in fixed-size chunks, like a live input stream."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Sequence, TypeVar

T = TypeVar("T")

AudioCallback = Callable[[Sequence[T], int, bool], None]


class AudioPlayerSim(Generic[T]):
    """Deliver ``num_frames`` samples to ``callback`` every ``num_frames / sample_rate`` seconds.

    The callback receives ``(chunk, frame_count, finished)``; the last call carries the
    remaining samples (possibly none) with ``finished`` set.
    """

    def __init__(self, sample_rate: int, num_frames: int, callback: AudioCallback) -> None:
        self.sample_rate = sample_rate
        self.num_frames = num_frames
        self.callback = callback
        self._data: list[T] = []
        self._data_available = False
        self._position = 0
        self._stop = threading.Event()

    @property
    def loop_time_ms(self) -> float:
        """Time between two chunks, in milliseconds."""
        return self.num_frames / self.sample_rate * 1000.0

    def set_data_buffer(self, audio_data: Sequence[T]) -> None:
        self._data = list(audio_data)
        self._data_available = True

    def set_sample_rate(self, sample_rate: int) -> None:
        self.sample_rate = sample_rate

    def set_num_frames(self, num_frames: int) -> None:
        self.num_frames = num_frames

    def loop(self) -> None:
        """Run until the data is exhausted or :meth:`stop_loop` is called."""
        while not self._stop.is_set():
            if self._data_available and self._data:
                start = self._position
                if start + self.num_frames <= len(self._data):
                    self.callback(self._data[start:start + self.num_frames], self.num_frames, False)
                else:
                    excess = len(self._data) - start
                    self.callback(self._data[start:], excess, True)
                    break
                self._position += self.num_frames
            delay_ms = int(self.loop_time_ms)
            if delay_ms > 0:
                self._stop.wait(delay_ms / 1000.0)

    def stop_loop(self) -> None:
        self._stop.set()