from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def location_from_entry(file_path: Optional[Path], entry: Dict[str, Any]) -> SourceLocation:
    """Create a SourceLocation from a LintResult error/warning entry."""
    return SourceLocation(
        file_path=file_path,
        line=entry.get("line"),
        column=entry.get("column"),
    )


def format_source(loc: Optional[SourceLocation]) -> str:
    """Render ``path:line:column``, dropping the parts that are unknown."""
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        parts.append(str(loc.file_path))
    else:
        parts.append("<source>")

    if loc.line is not None:
        parts.append(str(loc.line))
        if loc.column is not None:
            parts.append(str(loc.column))

    return ":".join(parts)
