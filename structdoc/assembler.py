"""Assembles the workspace structure document."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List, Sequence

from .ignore import load_rules
from .logging import get_logger
from .scanner import DirectoryScanner

HEADER = "# Workspace Structure\n\nFiles listed in .gitignore will be excluded.\n\n"
PACKAGE_METADATA_FILE = "package.json"
CONFIG_FILES: tuple[str, ...] = ("requirements.txt", "pyproject.toml", "package.json")


class StructureGenerator:
    """Builds the markdown document for one workspace root.

    The generator only returns text. Resolving an output location and writing
    the result is left to the caller (see :mod:`structdoc.writer`).
    """

    def __init__(
        self,
        scanner: DirectoryScanner | None = None,
        config_files: Sequence[str] = CONFIG_FILES,
    ) -> None:
        self.scanner = scanner or DirectoryScanner()
        self.config_files = tuple(config_files)
        self.logger = get_logger("assembler")

    def generate(self, root: Path | str) -> str:
        """Return the structure document for ``root``.

        Raises ``FileNotFoundError``, ``NotADirectoryError`` or another
        ``OSError`` when the root cannot be listed; nothing is scanned then.
        """
        root_path = _validate_root(root)
        self.logger.info("Generating structure for %s", root_path)

        rules = load_rules(root_path)
        parts: List[str] = [HEADER]
        parts.append(self._project_info(root_path))
        parts.append(self._configuration_files(root_path))
        parts.append("## File Structure\n\n")
        parts.append(self.scanner.scan(root_path, rules))
        return "".join(parts)

    def _project_info(self, root: Path) -> str:
        package_json = root / PACKAGE_METADATA_FILE
        try:
            data = json.loads(package_json.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            self.logger.warning("Error reading %s: %s", PACKAGE_METADATA_FILE, exc)
            return ""
        if not isinstance(data, dict):
            self.logger.warning("%s does not contain an object; skipping project info", PACKAGE_METADATA_FILE)
            return ""

        description = data.get("description") or "No description provided"
        return (
            "## Project Info\n"
            f"- Name: {_display(data.get('name'))}\n"
            f"- Version: {_display(data.get('version'))}\n"
            f"- Description: {_display(description)}\n\n"
        )

    def _configuration_files(self, root: Path) -> str:
        parts: List[str] = ["## Configuration Files\n\n"]
        for name in self.config_files:
            try:
                content = (root / name).read_text(encoding="utf-8")
            except FileNotFoundError:
                continue
            except (OSError, UnicodeDecodeError) as exc:
                self.logger.warning("Error reading %s: %s", name, exc)
                continue
            parts.append(f"### {name}\n```\n{content}\n```\n\n")
        return "".join(parts)


def generate(root: Path | str) -> str:
    """Generate the structure document for ``root`` with default settings."""
    return StructureGenerator().generate(root)


def _validate_root(root: Path | str) -> Path:
    root_path = Path(root).expanduser()
    if not root_path.exists():
        raise FileNotFoundError(f"Workspace path not found: {root}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Workspace path is not a directory: {root}")
    # Surface permission problems before any output is assembled.
    os.listdir(root_path)
    return root_path.resolve()


def _display(value: object) -> str:
    # Missing fields render as "undefined".
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


__all__ = ["CONFIG_FILES", "StructureGenerator", "generate"]
