"""Regex heuristics for JavaScript and TypeScript sources.

Patterns are applied to the whole file text. Multi-line imports with nested
braces may be missed, and overlapping patterns can report the same name more
than once; results are not de-duplicated.
"""

from __future__ import annotations

import re
from typing import List

from .base import Extractor
from ..models import FileAnalysis

_IDENT = r"[a-zA-Z_$][a-zA-Z0-9_$]*"

_IMPORT = re.compile(
    r"""^import\s+(?:\{(?:[\s\S](?!from))*\s*\}|\*\s+as\s+\w+)\s+from\s+["'][^"']+["']"""
    r"""|^import\s+\w+\s+from\s+["'][^"']+["']""",
    re.MULTILINE,
)
_FUNCTION = re.compile(
    rf"(?:export\s+)?(?:async\s+)?"
    rf"(?:function\s+({_IDENT})|(?:const|let|var)\s+({_IDENT})\s*=\s*(?:async\s+)?\([^)]*\)\s*=>)"
    rf"|(?:async\s+)?function\s+({_IDENT})\s*\(",
    re.MULTILINE,
)
_CLASS = re.compile(rf"(?:export\s+)?class\s+({_IDENT})", re.MULTILINE)
_METHOD = re.compile(
    rf"(?:public|private|protected)?\s*(?:async\s+)?({_IDENT})\s*\([^)]*\)\s*{{",
    re.MULTILINE,
)
_EXPORT = re.compile(
    rf"^export\s+(?:const|let|var|function|class|interface|type)\s+({_IDENT})",
    re.MULTILINE,
)
_COMPONENT = re.compile(
    r"(?:const|let|var|function)\s+([A-Z][a-zA-Z0-9_$]*)\s*=\s*(?:\([^)]*\)\s*=>|\([^)]*\)\s*\{)",
    re.MULTILINE,
)

_NOT_METHODS = frozenset({"constructor", "if", "for", "while", "switch", "catch"})
_HAS_UPPERCASE = re.compile(r"[A-Z][a-zA-Z0-9]*")


class JavaScriptExtractor(Extractor):
    """C-family scripting profile shared by .js, .ts, .jsx and .tsx files."""

    extensions = (".js", ".ts", ".jsx", ".tsx")

    def extract(self, content: str) -> FileAnalysis:
        return FileAnalysis(
            imports=[match.group(0).strip() for match in _IMPORT.finditer(content)],
            functions=self._functions(content),
            classes=[match.group(1) for match in _CLASS.finditer(content)],
            exports=[match.group(1) for match in _EXPORT.finditer(content)],
            methods=self._methods(content),
            components=[match.group(1) for match in _COMPONENT.finditer(content)],
        )

    @staticmethod
    def _functions(content: str) -> List[str]:
        names: List[str] = []
        for match in _FUNCTION.finditer(content):
            name = match.group(1) or match.group(2) or match.group(3)
            if name:
                names.append(name)
        return names

    @staticmethod
    def _methods(content: str) -> List[str]:
        names: List[str] = []
        for match in _METHOD.finditer(content):
            name = match.group(1)
            if name in _NOT_METHODS or _HAS_UPPERCASE.search(name):
                continue
            names.append(name)
        return names


__all__ = ["JavaScriptExtractor"]
