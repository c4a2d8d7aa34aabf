"""Supercoder CSV formatter — event table and trial start table side by side.

WHY: Supercoder reads coded events as frame numbers, and the lab's
reliability workflow also needs each trial's start time in three units
(frames for Supercoder, milliseconds for Datavyu CSVs, and the MM:SS.mmm
clock shown in the Datavyu coding window) to line the two tools up.

HOW: Writes a fixed two-line header, then one row per record. The left
table (code, onset, offset) converts every record to frames. The right
table starts at column 5, after two blank spacer columns, and fills one
row per trial start until the trials run out.

RULES:
- Header lines are fixed literals; Supercoder matches on them
- Offset 0 renders as a blank cell
- Trial milliseconds are recomputed from the frame number, so they are
  the frame-quantized time (3000 ms → 90 frames → 3003 ms)
- Rows past the last trial have blank right-table cells
- Every data row has the full 9 columns; lines end with "\\n"
- Output file name: {prefix}{source file name}
"""

from __future__ import annotations

import csv
import io
from typing import List, Sequence

from datavyu_converter.config import DEFAULT_OUTPUT_PREFIX, FPS_NTSC
from datavyu_converter.core.ir import Record
from datavyu_converter.core.timing import (
    format_elapsed,
    format_offset,
    frames_to_millis,
    millis_to_frames,
)
from datavyu_converter.formatters.base import BaseFormatter, FormatterOutput

TITLE_ROW = ["Reformatted Data (in frames)", "", "", "", "", "Trial Start Times"]

DATA_COLUMNS = ["Code", "Onset", "Offset"]
TRIAL_COLUMNS = [
    "Trial Number",
    "Start Time (in frames - Supercoder)",
    "Start Time (in milliseconds - Datavyu CSVs)",
    "Start Time (in elapsed time - Datavyu coding)",
]
SPACER = ["", ""]

HEADER_ROW = DATA_COLUMNS + SPACER + TRIAL_COLUMNS

_BLANK_TRIAL = [""] * len(TRIAL_COLUMNS)


class SupercoderFormatter(BaseFormatter):
    """Formatter that produces the Supercoder two-table CSV.

    Args:
        frame_rate: Video frame rate for millisecond/frame conversion.
        prefix: Prepended to the source file name to name the output.
    """

    def __init__(
        self,
        frame_rate: float = FPS_NTSC,
        prefix: str = DEFAULT_OUTPUT_PREFIX,
    ) -> None:
        self.frame_rate = frame_rate
        self.prefix = prefix

    @property
    def name(self) -> str:
        return "Supercoder CSV"

    def output_name(self, source_name: str) -> str:
        return "{}{}".format(self.prefix, source_name)

    def event_cells(self, record: Record) -> List[str]:
        """Left-table cells for one record: code, onset frames, offset frames."""
        return [
            record.code,
            str(millis_to_frames(record.onset, self.frame_rate)),
            format_offset(record.offset, self.frame_rate),
        ]

    def trial_cells(self, trial_number: int, start: Record) -> List[str]:
        """Right-table cells for one trial start."""
        frames = millis_to_frames(start.onset, self.frame_rate)
        millis = frames_to_millis(frames, self.frame_rate)
        return [
            str(trial_number),
            str(frames),
            str(millis),
            format_elapsed(millis),
        ]

    def rows(
        self,
        records: Sequence[Record],
        start_times: Sequence[Record],
    ) -> List[List[str]]:
        """Build all output rows, headers included."""
        rows: List[List[str]] = [list(TITLE_ROW), list(HEADER_ROW)]

        for index, record in enumerate(records):
            if index < len(start_times):
                trial = self.trial_cells(index + 1, start_times[index])
            else:
                trial = list(_BLANK_TRIAL)
            rows.append(self.event_cells(record) + SPACER + trial)

        return rows

    def format(
        self,
        records: Sequence[Record],
        start_times: Sequence[Record],
        source_name: str,
    ) -> FormatterOutput:
        """Render the Supercoder CSV for one session.

        Args:
            records: Every parsed record of the session, in file order.
            start_times: The trial start records (a subset of records).
            source_name: File name of the Datavyu export.

        Returns:
            A single FormatterOutput named {prefix}{source_name}.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerows(self.rows(records, start_times))

        return FormatterOutput(
            filename=self.output_name(source_name),
            content=buffer.getvalue(),
        )
