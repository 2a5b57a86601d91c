"""
Baseline loading.

Decides whether a baseline was requested, whether it can be trusted, and
whether it has to be regenerated after the run.
"""

from pathlib import Path
from typing import Optional

from lintbaseline.baseline.parser import try_parse_baseline
from lintbaseline.core.diagnostics import DiagnosticsSink, StderrDiagnostics
from lintbaseline.core.findings import LoadResult


def load_baseline(
    baseline_file_path: str,
    diagnostics: Optional[DiagnosticsSink] = None,
) -> LoadResult:
    """
    Load the baseline file if one is provided.

    A blank path means no baseline was requested and nothing needs to be
    regenerated. A missing or unparseable file yields no index and asks for
    regeneration; an unparseable file is also deleted so it is not picked
    up again on the next run.

    Args:
        baseline_file_path: Path to the XML baseline file, possibly blank.
        diagnostics: Where to report an unusable baseline. Defaults to stderr.

    Returns:
        A LoadResult describing the baseline.
    """
    if not baseline_file_path or baseline_file_path.isspace():
        return LoadResult(index=None, regeneration_needed=False)

    if diagnostics is None:
        diagnostics = StderrDiagnostics()

    index = None
    regeneration_needed = True
    baseline_file = Path(baseline_file_path)

    if _exists(baseline_file):
        outcome = try_parse_baseline(baseline_file)
        if outcome.ok:
            index = outcome.index
            regeneration_needed = False
        else:
            diagnostics.report(f"Unable to parse baseline file: {baseline_file_path}")

    # Delete the old file so it gets regenerated
    if regeneration_needed and _exists(baseline_file):
        _delete_quietly(baseline_file)

    return LoadResult(index=index, regeneration_needed=regeneration_needed)


def _exists(path: Path) -> bool:
    # Paths that cannot even be checked (too long, unsearchable parent) count as missing
    try:
        return path.exists()
    except OSError:
        return False


def _delete_quietly(path: Path) -> None:
    try:
        path.unlink()
    except OSError:
        pass
