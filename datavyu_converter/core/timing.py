"""Millisecond ↔ frame conversion and elapsed-time formatting.

WHY: Datavyu records event times in milliseconds; Supercoder indexes the
same video by frame number. Coders also cross-check trial starts against
Datavyu's own MM:SS.mmm clock, so the elapsed-time rendering has to match
what Datavyu displays.

HOW: Plain functions over integers. Conversions multiply or divide by the
frame rate and round half up, the way Supercoder's own frame counter does.

RULES:
- millis_to_frames(ms) = round_half_up(ms / 1000 * frame_rate)
- frames_to_millis(frames) = round_half_up(frames / frame_rate * 1000)
- A round trip may drift by one unit (1000 ms → 30 frames → 1001 ms at 29.97)
- An offset of 0 is "not recorded" and renders blank, never as frame 0
- Elapsed time is MM:SS.mmm; minutes are not wrapped at 100
"""

from __future__ import annotations

import math

from datavyu_converter.config import FPS_NTSC
from datavyu_converter.core.ir import NO_OFFSET

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves always rounded up.

    Python's round() uses banker's rounding (round(0.5) == 0), which would
    put frame boundaries in different places than Supercoder.
    """
    return int(math.floor(value + 0.5))


def millis_to_frames(ms: int, frame_rate: float = FPS_NTSC) -> int:
    """Convert a millisecond timestamp to a frame number.

    Example:
        >>> millis_to_frames(3000)
        90
    """
    return round_half_up(ms / _MS_PER_SECOND * frame_rate)


def frames_to_millis(frames: int, frame_rate: float = FPS_NTSC) -> int:
    """Convert a frame number back to milliseconds.

    Example:
        >>> frames_to_millis(90)
        3003
    """
    return round_half_up(frames / frame_rate * _MS_PER_SECOND)


def format_offset(ms: int, frame_rate: float = FPS_NTSC) -> str:
    """Render an offset cell: blank when not recorded, else frames."""
    if ms == NO_OFFSET:
        return ""
    return str(millis_to_frames(ms, frame_rate))


def format_elapsed(ms: int) -> str:
    """Render milliseconds as Datavyu's ``MM:SS.mmm`` clock.

    Example:
        >>> format_elapsed(61234)
        '01:01.234'
    """
    minutes = ms // _MS_PER_MINUTE
    seconds = ms // _MS_PER_SECOND % 60
    millis = ms % _MS_PER_SECOND
    return "{:02d}:{:02d}.{:03d}".format(minutes, seconds, millis)
