"""Datavyu CSV export reader.

WHY: Datavyu's column export writes one row per coded cell:
``ordinal,onset,offset,"code"`` under a single header line. Hand-edited
exports regularly contain a stray bad row, and one typo should not throw
away a whole session's coding.

HOW: The header line is skipped and each remaining physical line is split
on its own with the csv module (so quoted codes are unwrapped the standard
way), then parsed into a Record. Rows that fail to parse are collected
as RowErrors and reading continues.

RULES:
- Line 1 is always the header and is discarded unread
- One physical line is one row; an unbalanced quote never spans lines
- Each data row must have exactly 4 fields
- ordinal, onset, and offset are plain ASCII integers (optional sign only)
- Every double quote is stripped from the code field
- Blank lines are skipped silently
- I/O and decoding errors propagate; the caller decides how to report them
"""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import List, Sequence, Union

from datavyu_converter.core.ir import ReadResult, Record, RowError

logger = logging.getLogger(__name__)

EXPECTED_FIELDS = 4

_INT_FIELDS = ("ordinal", "onset", "offset")

# Plain ASCII decimal, optionally signed; no spaces, underscores, or other digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(name: str, text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError("{} is not an integer: {!r}".format(name, text))
    return int(text)


def split_line(line: str) -> List[str]:
    """Split one physical line into fields with the csv module.

    Each line is tokenized on its own, so an unbalanced quote can never
    pull the following lines into the same field.

    Example:
        >>> split_line('1,100,0,"A')
        ['1', '100', '0', 'A']
    """
    return next(csv.reader([line]), [])


def parse_row(fields: Sequence[str]) -> Record:
    """Parse one split CSV row into a Record.

    Raises:
        ValueError: If the row has the wrong number of fields or a
            non-integer time/ordinal field.

    Example:
        >>> parse_row(["2", "3000", "0", '"B"'])
        Record(ordinal=2, onset=3000, offset=0, code='B')
    """
    if len(fields) != EXPECTED_FIELDS:
        raise ValueError(
            "expected {} fields, got {}".format(EXPECTED_FIELDS, len(fields))
        )

    ordinal, onset, offset = (
        _parse_int(name, text) for name, text in zip(_INT_FIELDS, fields)
    )
    code = fields[3].replace('"', "")
    return Record(ordinal=ordinal, onset=onset, offset=offset, code=code)


def read_file(path: Union[str, Path]) -> ReadResult:
    """Read a Datavyu export into records, quarantining malformed rows.

    Args:
        path: Path to the Datavyu CSV export.

    Returns:
        ReadResult with the valid records in file order and one RowError
        per rejected row.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    path = Path(path)
    records: List[Record] = []
    row_errors: List[RowError] = []

    with path.open("r", newline="", encoding="utf-8-sig") as f:
        for line_number, raw in enumerate(f, start=1):
            if line_number == 1:
                continue  # header
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            try:
                records.append(parse_row(split_line(line)))
            except (ValueError, csv.Error) as e:
                error = RowError(line_number=line_number, line=line, message=str(e))
                row_errors.append(error)
                logger.warning("Skipping row in %s: %s", path.name, error)

    logger.debug(
        "Read %d records from %s (%d rejected)",
        len(records), path.name, len(row_errors),
    )
    return ReadResult(path=path, records=records, row_errors=row_errors)
