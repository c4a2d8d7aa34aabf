"""Configuration defaults, frame rate presets, and .env loading.

WHY: The lab's workflow assumes an ``Input/`` and ``Output/`` folder next
to where the converter runs and NTSC video at 29.97 fps. Those defaults
live here instead of being buried in the pipeline, so tests and other
labs can override them without touching conversion logic.

HOW: python-dotenv loads the .env file on import. Module-level defaults
are read from the environment with os.getenv. ConverterConfig is a frozen
pydantic model that is passed explicitly into every pipeline function.

RULES:
- Defaults reproduce the historic behavior: Input/ → Output/OUTPUT_<name>, 29.97 fps
- Frame rate must be positive; start code must be non-empty
- parse_frame_rate() accepts plain numbers or preset names
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Frame rate presets
# ---------------------------------------------------------------------------

FPS_NTSC = 29.97
FPS_PAL = 25.0
FPS_FILM = 24.0

FRAME_RATE_PRESETS: dict[str, float] = {
    "ntsc": FPS_NTSC,
    "29.97": FPS_NTSC,
    "2997": FPS_NTSC,
    "pal": FPS_PAL,
    "25": FPS_PAL,
    "film": FPS_FILM,
    "24": FPS_FILM,
    "30": 30.0,
    "50": 50.0,
    "59.94": 59.94,
    "60": 60.0,
}
"""Preset names accepted by parse_frame_rate(), lowercase.

29.97 is the literal Supercoder rate, not 30000/1001; the two differ
enough to shift frame numbers on long sessions.
"""


def parse_frame_rate(text: str) -> float:
    """Parse a frame rate from a number or preset name.

    Raises:
        ValueError: If the text is neither a preset nor a positive number.

    Examples:
        >>> parse_frame_rate("ntsc")
        29.97
        >>> parse_frame_rate("23.976")
        23.976
    """
    key = text.lower().strip()
    if key in FRAME_RATE_PRESETS:
        return FRAME_RATE_PRESETS[key]

    try:
        fps = float(key)
    except ValueError:
        raise ValueError(
            "Invalid frame rate: {!r}. Use a number or preset name ({})".format(
                text, ", ".join(sorted(FRAME_RATE_PRESETS))
            )
        )
    if not fps > 0:
        raise ValueError("Frame rate must be positive, got {}".format(fps))
    return fps


# ---------------------------------------------------------------------------
# Defaults (environment-overridable)
# ---------------------------------------------------------------------------

DEFAULT_INPUT_DIR = os.getenv("DATAVYU_INPUT_DIR", "Input")
DEFAULT_OUTPUT_DIR = os.getenv("DATAVYU_OUTPUT_DIR", "Output")
DEFAULT_FRAME_RATE = os.getenv("DATAVYU_FRAME_RATE", "29.97")
DEFAULT_START_CODE = os.getenv("DATAVYU_START_CODE", "B")
DEFAULT_OUTPUT_PREFIX = os.getenv("DATAVYU_OUTPUT_PREFIX", "OUTPUT_")


class ConverterConfig(BaseModel):
    """Settings for one conversion run.

    WHY: The input and output folders, the frame rate, and the trial start
    code used to be hard-coded literals. Passing them as one object lets
    tests point the pipeline at temporary directories and other rates.

    RULES:
    - Relative directories resolve against the process working directory
    - output_prefix is prepended to the source file name, e.g. OUTPUT_session1.csv
    - Instances are immutable; use model_copy(update=...) to derive variants
    """

    model_config = ConfigDict(frozen=True)

    input_dir: Path = Field(
        default=Path(DEFAULT_INPUT_DIR),
        description="Directory whose files are converted (not recursive).",
    )
    output_dir: Path = Field(
        default=Path(DEFAULT_OUTPUT_DIR),
        description="Existing directory that receives converted files.",
    )
    frame_rate: float = Field(
        default=parse_frame_rate(DEFAULT_FRAME_RATE),
        gt=0,
        description="Video frame rate used for millisecond/frame conversion.",
    )
    start_code: str = Field(
        default=DEFAULT_START_CODE,
        min_length=1,
        description="Code value that marks the start of a trial.",
    )
    output_prefix: str = Field(
        default=DEFAULT_OUTPUT_PREFIX,
        description="Prefix added to each source file name for the output file.",
    )
