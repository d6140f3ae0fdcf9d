"""Recursive directory walk that renders the file structure section."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import FrozenSet, List, Mapping

from .extractors import Extractor, registered_extensions
from .ignore import IgnoreRuleSet, is_ignored
from .logging import get_logger
from .models import FileAnalysis

DIRECTORY_MARKER = "📁"
FILE_MARKER = "📄"
INDENT_UNIT = "  "

logger = get_logger("scanner")


def format_analysis(analysis: FileAnalysis, indent: str) -> str:
    """Render the non-empty fields of ``analysis`` as nested bullet lists."""
    lines: List[str] = []
    for label, items in analysis.sections():
        if not items:
            continue
        lines.append(f"{indent}{INDENT_UNIT}- {label}:\n")
        for item in items:
            lines.append(f"{indent}{INDENT_UNIT * 2}- {item}\n")
    return "".join(lines)


class DirectoryScanner:
    """Walks a directory tree and renders it as an indented markdown list.

    Entries are visited in lexicographic order. Ignore rules are tested against
    the entry path relative to the directory being scanned, so ignored
    directories are neither listed nor entered. Read failures are logged and
    only drop the affected entry's detail.
    """

    def __init__(self, extractors: Mapping[str, Extractor] | None = None) -> None:
        self._extractors = dict(extractors) if extractors is not None else None

    def scan(self, dir_path: Path | str, rules: IgnoreRuleSet, depth: int = 0) -> str:
        extractors = self._extractors if self._extractors is not None else registered_extensions()
        return self._scan(Path(dir_path), rules, depth, extractors, frozenset())

    def _scan(
        self,
        directory: Path,
        rules: IgnoreRuleSet,
        depth: int,
        extractors: Mapping[str, Extractor],
        ancestors: FrozenSet[str],
    ) -> str:
        indent = INDENT_UNIT * depth
        try:
            names = sorted(os.listdir(directory))
        except OSError as exc:
            logger.warning("Error scanning directory %s: %s", directory, exc)
            return ""

        ancestors = ancestors | {os.path.realpath(directory)}
        content: List[str] = []
        for name in names:
            full_path = directory / name
            relative_path = full_path.relative_to(directory).as_posix()
            if is_ignored(relative_path, rules):
                continue

            try:
                mode = os.stat(full_path).st_mode
            except OSError as exc:
                logger.warning("Error reading %s: %s", full_path, exc)
                continue

            if stat.S_ISDIR(mode):
                content.append(f"{indent}- {DIRECTORY_MARKER} {name}/\n")
                if os.path.realpath(full_path) in ancestors:
                    logger.warning("Skipping %s: directory cycle detected", full_path)
                    continue
                content.append(
                    self._scan(full_path, rules, depth + 1, extractors, ancestors)
                )
                continue

            content.append(f"{indent}- {FILE_MARKER} {name}\n")
            extractor = extractors.get(os.path.splitext(name)[1])
            if extractor is None or not stat.S_ISREG(mode):
                continue
            try:
                text = full_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Error reading %s: %s", full_path, exc)
                continue
            content.append(format_analysis(extractor.extract(text), indent))

        return "".join(content)


__all__ = ["DIRECTORY_MARKER", "DirectoryScanner", "FILE_MARKER", "format_analysis"]
