"""
Lint Baseline

Loads a previously recorded set of known lint findings so that a lint run
can suppress them and report only new ones, and writes baselines back out
when they need to be regenerated.
"""

__version__ = "1.0.0"
__author__ = "Lint Baseline Team"

from lintbaseline.core.findings import Finding, LoadResult, CurrentBaseline
from lintbaseline.baseline import load_baseline, parse_baseline, write_baseline

__all__ = [
    "Finding",
    "LoadResult",
    "CurrentBaseline",
    "load_baseline",
    "parse_baseline",
    "write_baseline",
]
