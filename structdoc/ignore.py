"""Ignore rules parsed from .gitignore and translated to regular expressions.

Only a subset of gitignore semantics is emulated. Each pattern becomes a
regular expression that may match a path in full, as a directory prefix, as a
trailing component anywhere in the tree, or as a directory anywhere in the
tree. Negated patterns (``!pattern``) are dropped, so an excluded path can
never be re-included.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Pattern, Tuple

from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import get_logger

IGNORE_FILENAME = ".gitignore"

# Applied whether or not the workspace has an ignore file.
DEFAULT_PATTERNS: Tuple[str, ...] = (
    "node_modules",
    ".git",
    "__pycache__",
    "*.pyc",
    "*.pyo",
    "*.pyd",
    ".Python",
    "*.so",
    "env",
    "venv",
    ".env",
    ".venv",
    "ENV",
    "env.bak",
    "venv.bak",
)

# Added only when the workspace has no ignore file.
DOTFILE_PATTERN = ".*"

logger = get_logger("ignore")


def normalize_pattern(pattern: str) -> str:
    """Return the pattern with separators normalized and one leading/trailing slash removed."""
    normalized = pattern.strip().replace("\\", "/")
    if normalized.startswith("/"):
        normalized = normalized[1:]
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized


def translate_pattern(pattern: str) -> str:
    """Translate a normalized glob pattern into a regular expression fragment."""
    parts: List[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "*":
            if pattern.startswith("**", index):
                parts.append(".*")
                index += 2
                continue
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == "[":
            end = pattern.find("]", index + 1)
            if end in (-1, index + 1):
                parts.append(re.escape(char))
            else:
                body = pattern[index + 1 : end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                parts.append(f"[{body}]")
                index = end + 1
                continue
        else:
            parts.append(re.escape(char))
        index += 1
    return "".join(parts)


def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile a normalized pattern against the four supported anchor forms."""
    try:
        return _compile_anchored(translate_pattern(pattern))
    except re.error:
        logger.debug("Pattern %r is not a valid glob; matching it literally", pattern)
        return _compile_anchored(re.escape(pattern))


def _compile_anchored(fragment: str) -> Pattern[str]:
    body = f"(?:{fragment})"
    return re.compile(
        f"^{body}$"
        f"|^{body}/"
        f"|^.*?/{body}$"
        f"|^.*?/{body}/.*$"
    )


@dataclass(frozen=True)
class IgnoreRuleSet:
    """Immutable, ordered set of ignore patterns with their compiled matchers."""

    patterns: Tuple[str, ...]
    has_ignore_file: bool = False
    _matchers: Tuple[Pattern[str], ...] = field(default=(), repr=False, compare=False)

    @classmethod
    def from_patterns(
        cls, patterns: Iterable[str], *, has_ignore_file: bool = False
    ) -> "IgnoreRuleSet":
        normalized = tuple(
            pattern for pattern in (normalize_pattern(raw) for raw in patterns) if pattern
        )
        return cls(
            patterns=normalized,
            has_ignore_file=has_ignore_file,
            _matchers=tuple(compile_pattern(pattern) for pattern in normalized),
        )

    def matches(self, relative_path: str) -> bool:
        target = relative_path.replace("\\", "/")
        return any(matcher.search(target) for matcher in self._matchers)

    def __len__(self) -> int:
        return len(self.patterns)


def is_ignored(relative_path: str, rules: IgnoreRuleSet) -> bool:
    """Return True when any rule matches the path under any anchor form."""
    return rules.matches(relative_path)


def load_rules(root: Path | str) -> IgnoreRuleSet:
    """Build the rule set for a workspace root.

    Custom patterns come from ``.gitignore`` and the ``exclude_paths`` entry of
    ``.structdoc.yml``. The default patterns are always appended. Without a
    ``.gitignore`` every dot-prefixed entry is excluded as well.
    """
    root_path = Path(root)
    custom, has_ignore_file = _parse_ignore_file(root_path / IGNORE_FILENAME)
    custom.extend(_load_configured_excludes(root_path))

    patterns: List[str] = [] if has_ignore_file else [DOTFILE_PATTERN]
    patterns.extend(custom)
    patterns.extend(DEFAULT_PATTERNS)

    rules = IgnoreRuleSet.from_patterns(patterns, has_ignore_file=has_ignore_file)
    logger.debug("Loaded %d ignore patterns for %s", len(rules), root_path)
    return rules


def parse_ignore_lines(text: str) -> List[str]:
    """Return the usable patterns of an ignore file body."""
    patterns: List[str] = []
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        # Negations are recognized but not honored.
        if line.startswith("!"):
            continue
        patterns.append(line)
    return patterns


def _parse_ignore_file(path: Path) -> Tuple[List[str], bool]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return [], False
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Error reading %s: %s", path, exc)
        return [], True
    return parse_ignore_lines(text), True


def _load_configured_excludes(root: Path) -> List[str]:
    try:
        config = load_config(root / CONFIG_FILENAME)
    except ConfigError as exc:
        logger.warning("Ignoring exclude_paths from invalid configuration: %s", exc)
        return []
    return list(config.exclude_paths)


__all__ = [
    "DEFAULT_PATTERNS",
    "DOTFILE_PATTERN",
    "IGNORE_FILENAME",
    "IgnoreRuleSet",
    "compile_pattern",
    "is_ignored",
    "load_rules",
    "normalize_pattern",
    "parse_ignore_lines",
    "translate_pattern",
]
