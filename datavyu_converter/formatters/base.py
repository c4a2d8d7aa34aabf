"""Abstract base formatter and output container.

WHY: The batch driver writes whatever a formatter produces. A small
interface keeps the driver testable with stand-in formatters and leaves
room for other target tools without touching the pipeline.

HOW: BaseFormatter is an ABC with a ``name`` property and a ``format()``
method. FormatterOutput is a plain dataclass bundling the output file
name with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``filename`` is a bare file name; the caller chooses the directory
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from datavyu_converter.core.ir import Record


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        filename: Output file name, e.g. ``"OUTPUT_session1.csv"``.
        content: The complete file content.
    """

    filename: str
    content: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Supercoder CSV'."""

    @abstractmethod
    def format(
        self,
        records: Sequence[Record],
        start_times: Sequence[Record],
        source_name: str,
    ) -> FormatterOutput:
        """Render one session's records into an output file.

        Args:
            records: Every parsed record of the session, in file order.
            start_times: The trial start records, in file order.
            source_name: File name of the Datavyu export being converted.

        Returns:
            A FormatterOutput with the file name and content.
        """
