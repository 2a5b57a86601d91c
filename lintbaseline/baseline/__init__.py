"""
Baseline loading, parsing and writing.

A baseline records lint findings that are already known, so a run can
suppress them and report only new ones.
"""

from lintbaseline.baseline.loader import load_baseline
from lintbaseline.baseline.parser import (
    BaselineDecodeError,
    ParseOutcome,
    parse_baseline,
    try_parse_baseline,
    iter_file_groups,
    fold_file_groups,
)
from lintbaseline.baseline.writer import render_baseline, write_baseline, findings_by_file

__all__ = [
    "load_baseline",
    "BaselineDecodeError",
    "ParseOutcome",
    "parse_baseline",
    "try_parse_baseline",
    "iter_file_groups",
    "fold_file_groups",
    "render_baseline",
    "write_baseline",
    "findings_by_file",
]
