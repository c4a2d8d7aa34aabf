"""Datavyu to Supercoder converter — batch CSV reformatter for coded sessions.

WHY: Datavyu exports behavioral-coding sessions as millisecond event logs,
but Supercoder works in video frames and expects its own two-table CSV
layout. Re-keying every session by hand is slow and error-prone.

HOW: Four-stage pipeline per file — read (core.reader), extract trial
start times (core.trials), format (formatters.supercoder), write. The
batch driver (core.batch) runs the pipeline for every file in the input
directory and returns a structured summary.

RULES:
- Files are processed strictly one at a time, in directory-listing order
- One file's failure never stops the batch
- All times are converted at the configured frame rate (29.97 by default)
"""

__version__ = "0.1.0"
