"""Output formatters for converted Datavyu sessions.

WHY: The batch driver should not know how a Supercoder sheet is laid
out. Formatters turn the parsed records into file content; the driver
only decides where to write it.

RULES:
- Formatters are pure: no file I/O, no logging side effects
- Every formatter returns a FormatterOutput (file name + content)
"""

from datavyu_converter.formatters.base import BaseFormatter, FormatterOutput
from datavyu_converter.formatters.supercoder import SupercoderFormatter

__all__ = ["BaseFormatter", "FormatterOutput", "SupercoderFormatter"]
