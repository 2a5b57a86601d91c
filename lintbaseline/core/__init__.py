"""Core data structures and diagnostics."""

from lintbaseline.core.findings import Finding, LoadResult, CurrentBaseline, BaselineIndex
from lintbaseline.core.diagnostics import (
    DiagnosticsSink,
    StderrDiagnostics,
    CollectingDiagnostics,
)

__all__ = [
    "Finding",
    "LoadResult",
    "CurrentBaseline",
    "BaselineIndex",
    "DiagnosticsSink",
    "StderrDiagnostics",
    "CollectingDiagnostics",
]
