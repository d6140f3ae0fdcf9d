"""Core data models shared across structdoc components."""

from dataclasses import dataclass, field
from typing import List, Tuple

SECTION_LABELS: Tuple[Tuple[str, str], ...] = (
    ("imports", "Imports"),
    ("exports", "Exports"),
    ("functions", "Functions"),
    ("classes", "Classes"),
    ("methods", "Methods"),
    ("components", "Components"),
)


@dataclass
class FileAnalysis:
    """Structural facts recognized in a single source file."""

    imports: List[str] = field(default_factory=list)
    functions: List[str] = field(default_factory=list)
    classes: List[str] = field(default_factory=list)
    exports: List[str] = field(default_factory=list)
    methods: List[str] = field(default_factory=list)
    components: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name, _ in SECTION_LABELS)

    def sections(self) -> List[Tuple[str, List[str]]]:
        """Return `(label, items)` pairs in document emission order."""
        return [(label, getattr(self, name)) for name, label in SECTION_LABELS]
