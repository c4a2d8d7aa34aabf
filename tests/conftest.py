"""Shared test fixtures for the datavyu_converter test suite.

WHY: The reader, formatter, and batch tests all work from the same small
Datavyu session: one ordinary event with an offset and one trial start
without. Centralizing it keeps the expected frame values in one place.

HOW: Fixtures provide the parsed records, the raw export text, a helper
that writes exports into a temporary Input/ directory, and a config that
points at temporary Input/ and Output/ directories.

RULES:
- All file I/O uses tmp_path; nothing touches the real working directory
- Expected values are computed at 29.97 fps
"""

from pathlib import Path
from typing import List

import pytest

from datavyu_converter.config import ConverterConfig
from datavyu_converter.core.ir import Record

SAMPLE_HEADER = "ordinal,onset,offset,code"

SAMPLE_EXPORT = (
    SAMPLE_HEADER + "\n"
    '1,1000,2000,"X"\n'
    '2,3000,0,"B"\n'
)

SAMPLE_RECORDS: List[Record] = [
    Record(ordinal=1, onset=1000, offset=2000, code="X"),
    Record(ordinal=2, onset=3000, offset=0, code="B"),
]


@pytest.fixture
def sample_records():
    """Parsed records of SAMPLE_EXPORT."""
    return list(SAMPLE_RECORDS)


@pytest.fixture
def input_dir(tmp_path) -> Path:
    path = tmp_path / "Input"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path) -> Path:
    path = tmp_path / "Output"
    path.mkdir()
    return path


@pytest.fixture
def config(input_dir, output_dir) -> ConverterConfig:
    """Default settings pointed at temporary Input/ and Output/ directories."""
    return ConverterConfig(
        input_dir=input_dir,
        output_dir=output_dir,
        frame_rate=29.97,
        start_code="B",
        output_prefix="OUTPUT_",
    )


@pytest.fixture
def write_export(input_dir):
    """Write a Datavyu export into the temporary Input/ directory."""

    def _write(name: str, content: str = SAMPLE_EXPORT) -> Path:
        path = input_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
