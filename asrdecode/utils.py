"""Audio file reading and numeric helpers used by the decoders."""

from __future__ import annotations

import math
import string
import struct
import sys
from os import PathLike
from typing import Sequence

import numpy as np

FLT_MIN = 1.1754943508222875e-38
_DOUBLE_MAX = sys.float_info.max
_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class WavFormatError(ValueError):
    """Raised when a file is not a WAV file this reader understands."""


def read_wav(path: str | PathLike) -> np.ndarray:
    """Read the data chunk of a RIFF/WAVE file as 32-bit float samples."""
    with open(path, "rb") as handle:
        data = handle.read()

    try:
        riff, _, wave = struct.unpack_from("<4sI4s", data, 0)
        if riff != b"RIFF" or wave != b"WAVE":
            raise WavFormatError("Invalid RIFF/WAVE format")

        fmt_id, fmt_size = struct.unpack_from("<4sI", data, 12)
        if fmt_id != b"fmt ":
            raise WavFormatError("Expected fmt chunk")
        _, _, _, _, _, bits_per_sample = struct.unpack_from("<HHIIHH", data, 20)
        offset = 36 + max(fmt_size - 16, 0)

        chunk_id, chunk_size = struct.unpack_from("<4sI", data, offset)
        if chunk_id == b"fact":
            offset += 8 + chunk_size
            chunk_id, chunk_size = struct.unpack_from("<4sI", data, offset)
        if chunk_id != b"data":
            raise WavFormatError("Expected data chunk")
        offset += 8
    except struct.error as exc:
        raise WavFormatError("truncated WAV file") from exc

    bytes_per_sample = bits_per_sample // 8
    if bytes_per_sample == 0:
        raise WavFormatError(f"unsupported bits per sample: {bits_per_sample}")

    num_samples = chunk_size // bytes_per_sample
    buffer = bytearray(num_samples * 4)
    payload = data[offset:offset + chunk_size]
    count = min(len(payload), len(buffer))
    buffer[:count] = payload[:count]
    return np.frombuffer(bytes(buffer), dtype="<f4").astype(np.float32)


def map_to_range(val: float, min_val: float, max_val: float,
                 min_range: float, max_range: float) -> float:
    """Linearly map ``val`` from [min_val, max_val] onto [min_range, max_range]."""
    return ((val - min_val) / (max_val - min_val)) * (max_range - min_range) + min_range


def log_sum_exp(x: float, y: float) -> float:
    """Return log(exp(x) + exp(y)) computed stably; -max float acts as log(0)."""
    num_min = -_DOUBLE_MAX
    if x <= num_min:
        return y
    if y <= num_min:
        return x
    xmax = max(x, y)
    return math.log(math.exp(x - xmax) + math.exp(y - xmax)) + xmax


def _safe_log(value: float) -> float:
    return math.log(value) if value > 0 else -math.inf


def get_pruned_log_probs(prob_step: Sequence[float], cutoff_prob: float,
                         cutoff_top_n: int, log_input: bool | int) -> list[tuple[int, float]]:
    """Keep the most likely tokens of one time step as (index, log prob) pairs."""
    prob_idx = list(enumerate(float(p) for p in prob_step))
    log_cutoff_prob = _safe_log(cutoff_prob)
    cutoff_len = len(prob_idx)

    if log_cutoff_prob < 0.0 or cutoff_top_n < cutoff_len:
        prob_idx.sort(key=lambda pair: pair[1], reverse=True)
        if log_cutoff_prob < 0.0:
            cum_prob = 0.0
            cutoff_len = 0
            for _, prob in prob_idx:
                cum_prob = log_sum_exp(cum_prob, prob if log_input else _safe_log(prob))
                cutoff_len += 1
                if cum_prob >= cutoff_prob or cutoff_len >= cutoff_top_n:
                    break
        else:
            cutoff_len = cutoff_top_n
        prob_idx = prob_idx[:cutoff_len]

    return [
        (index, prob if log_input else _safe_log(prob + FLT_MIN))
        for index, prob in prob_idx[:cutoff_len]
    ]


def break_to_words(sentence: str, word_delimiter: str = " ") -> list[str]:
    """Split on the delimiter; text after the last delimiter is not a word yet."""
    words: list[str] = []
    word: list[str] = []
    for letter in sentence:
        if letter != word_delimiter:
            word.append(letter)
            continue
        words.append("".join(word))
        word.clear()
    return words


def upper_case(sequence: str) -> str:
    """Upper-case the ASCII letters of ``sequence``."""
    return sequence.translate(_UPPER_TABLE)