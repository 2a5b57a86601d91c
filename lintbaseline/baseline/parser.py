"""
Baseline document parser.

Decodes the two-level baseline XML document (``file`` groups holding
``error`` records) into a mapping of file path to findings. Parsing goes
through defusedxml so a baseline cannot expand entities or pull in
external resources.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Optional, Tuple, Union
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, parse

from lintbaseline.core.findings import BaselineIndex, Finding


FILE_TAG = "file"
ERROR_TAG = "error"

# Decimal digits with an optional sign, within the 32-bit range lint tools record
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
MAX_INTEGER = 2 ** 31 - 1
MIN_INTEGER = -(2 ** 31)

BaselineSource = Union[str, Path, BinaryIO]
FileGroup = Tuple[str, List[Finding]]


class BaselineDecodeError(Exception):
    """Raised when a baseline document cannot be read or decoded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


def _source_name(source: BaselineSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "<stream>")


def _decode_int(element: Element, attribute: str) -> int:
    text = element.get(attribute, "")
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"{attribute}={text!r} is not an integer")
    value = int(text)
    if not MIN_INTEGER <= value <= MAX_INTEGER:
        raise ValueError(f"{attribute}={text!r} is out of range")
    return value


def _decode_error(element: Element) -> Finding:
    return Finding(
        line=_decode_int(element, "line"),
        column=_decode_int(element, "column"),
        rule_id=element.get("source", ""),
        detail=element.get("message", ""),
    )


def iter_file_groups(root: Element) -> Iterator[FileGroup]:
    """
    Yield ``(file name, findings)`` pairs in document order.

    Every ``file`` element in the tree is a group; every ``error`` element
    below it is one of its findings. Duplicate names are yielded as-is.
    """
    for file_element in root.iter(FILE_TAG):
        name = file_element.get("name", "")
        findings = [
            _decode_error(error_element)
            for error_element in file_element.iter(ERROR_TAG)
        ]
        yield name, findings


def fold_file_groups(groups: Iterable[FileGroup]) -> BaselineIndex:
    """Fold file groups into an index. A repeated file name replaces the earlier group."""
    index: BaselineIndex = {}
    for name, findings in groups:
        index[name] = findings
    return index


def parse_baseline(source: BaselineSource) -> BaselineIndex:
    """
    Parse a baseline document into a mapping of file path to findings.

    Args:
        source: Path to the baseline file or a binary file object.

    Returns:
        The baseline index. Files without errors map to an empty list.

    Raises:
        BaselineDecodeError: The document could not be read, is not
            well-formed, was rejected as unsafe, or holds a non-numeric
            line or column.
    """
    name = _source_name(source)
    try:
        tree = parse(str(source) if isinstance(source, Path) else source)
        return fold_file_groups(iter_file_groups(tree.getroot()))
    except OSError as e:
        raise BaselineDecodeError(name, f"unable to read file ({e.strerror or e})") from e
    except ParseError as e:
        raise BaselineDecodeError(name, f"malformed document ({e})") from e
    except DefusedXmlException as e:
        raise BaselineDecodeError(name, f"rejected unsafe document ({e})") from e
    except ValueError as e:
        raise BaselineDecodeError(name, f"invalid error record ({e})") from e


@dataclass(frozen=True)
class ParseOutcome:
    """Either a decoded index or the error that prevented decoding."""
    index: Optional[BaselineIndex] = None
    error: Optional[BaselineDecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, index: BaselineIndex) -> "ParseOutcome":
        return cls(index=index)

    @classmethod
    def failure(cls, error: BaselineDecodeError) -> "ParseOutcome":
        return cls(error=error)


def try_parse_baseline(source: BaselineSource) -> ParseOutcome:
    """Parse a baseline, capturing any decode failure in the outcome."""
    try:
        return ParseOutcome.success(parse_baseline(source))
    except BaselineDecodeError as e:
        return ParseOutcome.failure(e)
