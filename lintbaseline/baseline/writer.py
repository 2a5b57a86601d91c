"""
Baseline document writer.

Serializes a baseline index into the XML document read by
``lintbaseline.baseline.parser``.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union
from xml.sax.saxutils import escape

from lintbaseline.core.findings import BaselineIndex, Finding
from lintbaseline.utils import relative_path


BASELINE_VERSION = "1.0"

# Characters that must survive attribute-value normalization
_ATTRIBUTE_ENTITIES = {
    '"': "&quot;",
    "\n": "&#10;",
    "\r": "&#13;",
    "\t": "&#9;",
}


def _attr(value: object) -> str:
    return '"' + escape(str(value), _ATTRIBUTE_ENTITIES) + '"'


def render_baseline(index: BaselineIndex) -> str:
    """Render a baseline index as an XML document."""
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        f"<baseline version={_attr(BASELINE_VERSION)}>",
    ]

    for file_name, findings in index.items():
        if not findings:
            lines.append(f"    <file name={_attr(file_name)}/>")
            continue
        lines.append(f"    <file name={_attr(file_name)}>")
        for finding in findings:
            lines.append(
                f"        <error line={_attr(finding.line)} column={_attr(finding.column)}"
                f" source={_attr(finding.rule_id)} message={_attr(finding.detail)}/>"
            )
        lines.append("    </file>")

    lines.append("</baseline>")
    return "\n".join(lines) + "\n"


def write_baseline(path: Union[str, Path], index: BaselineIndex) -> Path:
    """Write a baseline index to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_baseline(index))
    return path


def findings_by_file(
    findings: Iterable[Tuple[str, Finding]],
    base_dir: Optional[str] = None,
) -> BaselineIndex:
    """
    Group ``(file path, finding)`` pairs into a baseline index.

    Paths are recorded relative to ``base_dir`` when they fall under it.
    Files keep the order in which they are first seen.
    """
    index: BaselineIndex = {}
    for file_path, finding in findings:
        key = relative_path(file_path, base_dir)
        group: List[Finding] = index.setdefault(key, [])
        group.append(finding)
    return index
