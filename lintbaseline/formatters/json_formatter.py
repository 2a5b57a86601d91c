"""
JSON output formatter for machine-readable results.
"""

from lintbaseline.core.findings import LoadResult


class JSONFormatter:
    """
    Formats a loaded baseline as JSON for machine consumption.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format_result(self, result: LoadResult) -> str:
        """Format a baseline load result as JSON."""
        return result.to_json(indent=self.indent)
