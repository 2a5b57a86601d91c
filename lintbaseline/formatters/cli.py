"""
CLI output formatter for human-readable results.
"""

import sys

from lintbaseline.core.findings import LoadResult


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"


def supports_color() -> bool:
    """Check if the terminal supports color output."""
    if not hasattr(sys.stdout, "isatty"):
        return False
    if not sys.stdout.isatty():
        return False
    return True


class CLIFormatter:
    """
    Formats a loaded baseline for human-readable CLI output.
    """

    def __init__(self, use_color: bool = True, verbose: bool = False):
        self.use_color = use_color and supports_color()
        self.verbose = verbose

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if self.use_color:
            return f"{color}{text}{Colors.RESET}"
        return text

    def _status(self, result: LoadResult) -> str:
        if result.regeneration_needed:
            return self._color("Baseline missing or unusable, regeneration needed", Colors.YELLOW)
        if result.index is None:
            return self._color("No baseline requested", Colors.DIM)
        return self._color("Baseline loaded", Colors.GREEN)

    def format_result(self, result: LoadResult) -> str:
        """Format a baseline load result."""
        lines = []

        lines.append("")
        lines.append(self._color("=" * 70, Colors.DIM))
        lines.append(self._color(" LINT BASELINE ", Colors.BOLD))
        lines.append(self._color("=" * 70, Colors.DIM))
        lines.append("")

        lines.append(f"  Status:            {self._status(result)}")
        lines.append(f"  Files:             {result.file_count}")
        lines.append(f"  Known findings:    {result.finding_count}")
        lines.append("")

        if self.verbose and result.index:
            for file_path, findings in result.index.items():
                lines.append(self._color(file_path, Colors.BOLD))
                if not findings:
                    lines.append(self._color("  (no findings)", Colors.DIM))
                for finding in findings:
                    location = self._color(f"{finding.line}:{finding.column}", Colors.CYAN)
                    detail = f" {finding.detail}" if finding.detail else ""
                    lines.append(f"  {location} {finding.rule_id}{detail}")
                lines.append("")

        return "\n".join(lines)
