"""Generate markdown structure summaries of source trees."""

from .assembler import StructureGenerator, generate
from .extractors import extract
from .ignore import IgnoreRuleSet, is_ignored, load_rules
from .models import FileAnalysis
from .scanner import DirectoryScanner

__version__ = "0.1.0"

__all__ = [
    "DirectoryScanner",
    "FileAnalysis",
    "IgnoreRuleSet",
    "StructureGenerator",
    "extract",
    "generate",
    "is_ignored",
    "load_rules",
]
