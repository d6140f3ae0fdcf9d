"""Base classes for structural extractor profiles."""

from abc import ABC, abstractmethod
from typing import ClassVar, Tuple

from ..models import FileAnalysis


class Extractor(ABC):
    """Contract for profiles that recognize declarations in source text."""

    extensions: ClassVar[Tuple[str, ...]] = ()

    @abstractmethod
    def extract(self, content: str) -> FileAnalysis:
        """Return the structural facts found in ``content``."""


class NullExtractor(Extractor):
    """Profile for files that are listed by the scanner but never analyzed."""

    extensions = (".vue",)

    def extract(self, content: str) -> FileAnalysis:
        return FileAnalysis()
