"""Regex heuristics for Python sources."""

from __future__ import annotations

import re
from typing import Iterable, List

from .base import Extractor
from ..models import FileAnalysis

_IMPORT = re.compile(
    r"^(?:from\s+([^\s]+)\s+)?import\s+([^\s]+(?:,\s*[^\s]+)*)(?:\s+as\s+([^\s]+))?$",
    re.MULTILINE,
)
_FUNCTION = re.compile(r"^def\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(", re.MULTILINE)
_CLASS = re.compile(r"^class\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*(?:\([^)]*\))?\s*:", re.MULTILINE)
# Methods are recognized only at exactly four spaces of indentation.
_METHOD = re.compile(r"^ {4}def\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\([^)]*\)\s*:", re.MULTILINE)


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


class PythonExtractor(Extractor):
    """Indentation-scripting profile for .py files."""

    extensions = (".py",)

    def extract(self, content: str) -> FileAnalysis:
        content = content.replace("\r\n", "\n")
        return FileAnalysis(
            imports=_unique(self._imports(content)),
            functions=_unique(match.group(1) for match in _FUNCTION.finditer(content)),
            classes=[match.group(1) for match in _CLASS.finditer(content)],
            methods=_unique(match.group(1) for match in _METHOD.finditer(content)),
        )

    @staticmethod
    def _imports(content: str) -> List[str]:
        entries: List[str] = []
        for match in _IMPORT.finditer(content):
            module, names, alias = match.groups()
            prefix = f"{module.strip()}." if module else ""
            suffix = f" as {alias.strip()}" if alias else ""
            for name in names.split(","):
                entries.append(f"import {prefix}{name.strip()}{suffix}")
        return entries


__all__ = ["PythonExtractor"]
