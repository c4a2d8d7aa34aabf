"""Intermediate representation dataclasses for parsed Datavyu exports.

WHY: Datavyu writes one CSV row per coded event. The reader, the trial
extractor, and the Supercoder formatter all need the same typed view of
those rows, and the batch driver needs to report which rows were rejected.

HOW: Three dataclasses:
  Record     — one coded event (ordinal, onset, offset, code)
  RowError   — one quarantined input row with its line number and reason
  ReadResult — everything read from one file, valid and rejected rows

RULES:
- Record is frozen; nothing downstream mutates parsed events
- All times are integer milliseconds, exactly as Datavyu exports them
- offset == 0 means "no offset recorded", not "ends at time zero"
- Record order is file order; ordinals are never re-checked
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

NO_OFFSET = 0
"""Datavyu's sentinel for a cell with no offset recorded."""


@dataclass(frozen=True)
class Record:
    """A single coded event from a Datavyu export.

    RULES:
    - ordinal: Datavyu's row number, kept as-is (not necessarily contiguous)
    - onset / offset: milliseconds from the start of the video
    - offset: NO_OFFSET (0) when the coder did not mark an end point
    - code: the cell value with all double quotes removed
    """

    ordinal: int
    onset: int
    offset: int
    code: str


@dataclass(frozen=True)
class RowError:
    """A row the reader could not turn into a Record.

    line_number is 1-based and counts the header, so it matches what an
    editor shows when the coder opens the file.
    """

    line_number: int
    line: str
    message: str

    def __str__(self) -> str:
        return "line {}: {}".format(self.line_number, self.message)


@dataclass
class ReadResult:
    """Everything read from one Datavyu export.

    WHY: Malformed rows are quarantined instead of aborting the file, so
    the caller needs both the usable records and the rejected rows.
    """

    path: Path
    records: List[Record] = field(default_factory=list)
    row_errors: List[RowError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.row_errors
