"""
Finding data structures for lint baselines.

This module defines the record stored for each known lint finding and
the result object produced when a baseline is loaded.
"""

from dataclasses import dataclass
from typing import Optional, List, Dict, Any
import json


# Mapping of file path (as recorded in the baseline) to its findings
BaselineIndex = Dict[str, List["Finding"]]


@dataclass(frozen=True)
class Finding:
    """
    A single lint finding recorded in a baseline.

    Line and column are 1-based. ``rule_id`` identifies the check that
    produced the finding and ``detail`` is its human-readable message.
    """
    line: int
    column: int
    rule_id: str
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.line}:{self.column} {self.rule_id}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert finding to a dictionary."""
        return {
            "line": self.line,
            "column": self.column,
            "rule_id": self.rule_id,
            "detail": self.detail,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Finding":
        """Create a Finding from a dictionary."""
        return cls(
            line=int(data["line"]),
            column=int(data["column"]),
            rule_id=data["rule_id"],
            detail=data.get("detail", ""),
        )


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of loading a baseline file.

    A baseline is either fully trusted (``index`` is set) or entirely
    discarded. When ``regeneration_needed`` is true the index is always
    ``None``.
    """
    index: Optional[BaselineIndex]
    regeneration_needed: bool

    def __post_init__(self):
        if self.regeneration_needed and self.index is not None:
            raise ValueError("A baseline that needs regeneration cannot carry an index")

    @property
    def file_count(self) -> int:
        return len(self.index) if self.index else 0

    @property
    def finding_count(self) -> int:
        if not self.index:
            return 0
        return sum(len(findings) for findings in self.index.values())

    def findings_for(self, file_path: str) -> List[Finding]:
        """Get the findings recorded for a file, or an empty list."""
        if self.index is None:
            return []
        return list(self.index.get(file_path, []))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "regeneration_needed": self.regeneration_needed,
            "summary": {
                "files": self.file_count,
                "findings": self.finding_count,
            },
            "baseline": None if self.index is None else {
                path: [f.to_dict() for f in findings]
                for path, findings in self.index.items()
            },
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


# Name used by callers that follow the lint tool's terminology
CurrentBaseline = LoadResult
