"""Tests for structdoc.ignore."""

from __future__ import annotations

from pathlib import Path

import pytest

from structdoc.ignore import (
    DEFAULT_PATTERNS,
    IgnoreRuleSet,
    is_ignored,
    load_rules,
    normalize_pattern,
    parse_ignore_lines,
)


def _rules(*patterns: str) -> IgnoreRuleSet:
    return IgnoreRuleSet.from_patterns(patterns, has_ignore_file=True)


@pytest.mark.parametrize(
    "path",
    [
        "build",  # full path
        "build/output.txt",  # directory prefix
        "src/build",  # basename anywhere
        "src/build/output.txt",  # directory anywhere
    ],
)
def test_pattern_matches_every_anchor_form(path: str) -> None:
    assert is_ignored(path, _rules("build"))


def test_pattern_does_not_match_partial_names() -> None:
    rules = _rules("build")
    assert not is_ignored("builder", rules)
    assert not is_ignored("src/rebuild", rules)


def test_single_star_does_not_cross_separators() -> None:
    rules = _rules("src/*.log")
    assert is_ignored("src/debug.log", rules)
    assert not is_ignored("src/nested/debug.log", rules)


def test_double_star_crosses_separators() -> None:
    rules = _rules("docs/**/draft.md")
    assert is_ignored("docs/a/b/draft.md", rules)


def test_question_mark_matches_one_character() -> None:
    rules = _rules("file?.txt")
    assert is_ignored("file1.txt", rules)
    assert not is_ignored("file12.txt", rules)
    assert not is_ignored("file/.txt", rules)


def test_dots_are_literal() -> None:
    rules = _rules("*.pyc")
    assert is_ignored("module.pyc", rules)
    assert not is_ignored("modulexpyc", rules)


def test_backslash_paths_are_normalized() -> None:
    rules = _rules("dist\\")
    assert rules.patterns == ("dist",)
    assert is_ignored("pkg\\dist\\bundle.js", rules)


def test_normalize_strips_one_leading_and_trailing_slash() -> None:
    assert normalize_pattern("/build/") == "build"
    assert normalize_pattern("  logs/ ") == "logs"


def test_empty_brackets_are_matched_literally() -> None:
    rules = _rules("weird[]name")
    assert is_ignored("weird[]name", rules)
    assert not is_ignored("weirdname", rules)


def test_character_class_with_gitignore_negation() -> None:
    rules = _rules("file[!0-9].txt")
    assert is_ignored("filea.txt", rules)
    assert not is_ignored("file1.txt", rules)


def test_parse_ignore_lines_drops_comments_blanks_and_negations() -> None:
    text = "# comment\n\n*.log\n!keep.log\n  build/  \n"
    assert parse_ignore_lines(text) == ["*.log", "build/"]


def test_load_rules_without_gitignore_excludes_dotfiles(tmp_path: Path) -> None:
    rules = load_rules(tmp_path)

    assert not rules.has_ignore_file
    assert rules.patterns[0] == ".*"
    assert is_ignored(".vscode", rules)
    assert is_ignored(".github", rules)
    assert not is_ignored("src", rules)


def test_load_rules_with_gitignore_keeps_defaults(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("*.log\n!important.log\n", encoding="utf-8")

    rules = load_rules(tmp_path)

    assert rules.has_ignore_file
    assert ".*" not in rules.patterns
    assert rules.patterns[0] == "*.log"
    for pattern in DEFAULT_PATTERNS:
        assert pattern in rules.patterns
    assert is_ignored("node_modules", rules)
    assert is_ignored(".git", rules)
    assert is_ignored("__pycache__", rules)
    assert is_ignored("cache.pyc", rules)
    assert is_ignored("venv", rules)
    # Negated patterns are not honored.
    assert is_ignored("important.log", rules)
    # Dotfiles are listed once a .gitignore exists.
    assert not is_ignored(".github", rules)


def test_load_rules_treats_unreadable_gitignore_as_empty(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").mkdir()

    rules = load_rules(tmp_path)

    assert rules.has_ignore_file
    assert rules.patterns == DEFAULT_PATTERNS


def test_load_rules_includes_configured_excludes(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("", encoding="utf-8")
    (tmp_path / ".structdoc.yml").write_text(
        "exclude_paths:\n  - generated/\n  - '*.snap'\n", encoding="utf-8"
    )

    rules = load_rules(tmp_path)

    assert is_ignored("generated", rules)
    assert is_ignored("ui.snap", rules)


def test_load_rules_ignores_invalid_configuration(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("", encoding="utf-8")
    (tmp_path / ".structdoc.yml").write_text("- just\n- a list\n", encoding="utf-8")

    rules = load_rules(tmp_path)

    assert rules.patterns == DEFAULT_PATTERNS
