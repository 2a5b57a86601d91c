"""
Diagnostics sinks.

The baseline loader never raises for an unusable baseline file; it reports
a single human-readable line through one of these sinks instead.
"""

import sys
from typing import List, Optional, Protocol, TextIO


class DiagnosticsSink(Protocol):
    """Anything with a ``report`` method accepting one message."""

    def report(self, message: str) -> None:
        ...


class StderrDiagnostics:
    """Writes each message as one line to standard error."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def report(self, message: str) -> None:
        print(message, file=self.stream or sys.stderr)


class CollectingDiagnostics:
    """Keeps messages in memory, for callers that render them later."""

    def __init__(self):
        self.messages: List[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)

    def __len__(self) -> int:
        return len(self.messages)
