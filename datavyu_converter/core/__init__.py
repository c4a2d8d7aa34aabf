"""Core reading, timing, and batch modules.

WHY: The core package holds the pieces every output format shares —
the Record IR, the Datavyu CSV reader, frame/millisecond conversion,
trial start extraction, and the batch driver.

HOW: ir.py defines the data structures, reader.py builds them from
Datavyu exports, timing.py converts units, trials.py picks trial
starts, batch.py runs the per-file pipeline over a directory.

RULES:
- IR dataclasses are the contract between reading and formatting
- Nothing in core writes to stdout; status goes through logging
"""
