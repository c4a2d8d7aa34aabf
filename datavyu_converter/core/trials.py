"""Trial start extraction.

WHY: Coders mark the beginning of every trial with a dedicated code
(``B`` in the lab's coding scheme). Supercoder needs those start times as
a separate table to line up its own trial numbering.

RULES:
- Matching is exact and case-sensitive on the quote-stripped code
- File order is preserved; the first match is trial 1
- No matches is valid and yields an empty list
"""

from __future__ import annotations

from typing import Iterable, List

from datavyu_converter.config import DEFAULT_START_CODE
from datavyu_converter.core.ir import Record


def extract_start_times(
    records: Iterable[Record],
    start_code: str = DEFAULT_START_CODE,
) -> List[Record]:
    """Return the records whose code marks a trial start, in file order."""
    return [record for record in records if record.code == start_code]
