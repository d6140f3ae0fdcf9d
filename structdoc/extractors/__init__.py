"""Extractor profiles and the extension registry used by the scanner."""

from __future__ import annotations

from importlib import metadata
from typing import Dict, Iterable, Mapping

from .base import Extractor, NullExtractor
from .javascript import JavaScriptExtractor
from .python import PythonExtractor
from ..logging import get_logger
from ..models import FileAnalysis

_ENTRY_POINT_GROUP = "structdoc.extractors"

_BUILTIN_EXTRACTORS: tuple[type[Extractor], ...] = (
    JavaScriptExtractor,
    PythonExtractor,
    NullExtractor,
)

logger = get_logger("extractors")

_registry: Dict[str, Extractor] | None = None


def register_extractor(extractor: Extractor, *, replace: bool = False) -> None:
    """Register ``extractor`` for each of its extensions."""
    if not isinstance(extractor, Extractor):
        raise TypeError("Only Extractor instances can be registered")
    if not extractor.extensions:
        raise ValueError(f"{type(extractor).__name__} does not declare any extensions")
    registry = _get_registry()
    for extension in extractor.extensions:
        if extension in registry and not replace:
            raise ValueError(f"An extractor is already registered for '{extension}'")
        registry[extension] = extractor


def registered_extensions() -> Mapping[str, Extractor]:
    """Return a read-only view of the extension registry."""
    return dict(_get_registry())


def get_extractor(extension: str) -> Extractor | None:
    return _get_registry().get(extension)


def extract(content: str, extension: str) -> FileAnalysis:
    """Return the structural facts of ``content`` for a file with ``extension``.

    Unrecognized extensions produce an empty analysis.
    """
    extractor = get_extractor(extension)
    if extractor is None:
        return FileAnalysis()
    return extractor.extract(content)


def reset_registry() -> None:
    """Forget registered extractors so the next lookup rebuilds the registry."""
    global _registry
    _registry = None


def _get_registry() -> Dict[str, Extractor]:
    global _registry
    if _registry is None:
        _registry = _build_registry()
    return _registry


def _build_registry() -> Dict[str, Extractor]:
    registry: Dict[str, Extractor] = {}
    for factory in _BUILTIN_EXTRACTORS:
        instance = factory()
        for extension in instance.extensions:
            registry[extension] = instance

    for entry in _iter_entry_points():
        try:
            instance = _coerce_extractor(entry.load())
        except Exception as exc:
            raise RuntimeError(f"Failed to load extractor entry point '{entry.name}': {exc}") from exc
        for extension in instance.extensions:
            if extension in registry:
                logger.debug("Extractor '%s' overrides %s", entry.name, extension)
            registry[extension] = instance
    return registry


def _coerce_extractor(obj: object) -> Extractor:
    if isinstance(obj, Extractor):
        return obj
    if isinstance(obj, type) and issubclass(obj, Extractor):
        return obj()
    raise TypeError("Extractor entry point must be an Extractor subclass or instance")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "Extractor",
    "JavaScriptExtractor",
    "NullExtractor",
    "PythonExtractor",
    "extract",
    "get_extractor",
    "register_extractor",
    "registered_extensions",
    "reset_registry",
]
