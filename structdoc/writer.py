"""Persist generated structure documents to the configured location."""

from __future__ import annotations

from pathlib import Path

from .assembler import StructureGenerator
from .config import StructureConfig, load_config
from .logging import get_logger

logger = get_logger("writer")


def write_structure(document: str, config: StructureConfig) -> Path:
    """Write ``document`` to the file configured for the workspace.

    Directory creation and write failures propagate to the caller.
    """
    output_file = config.output_file()
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(document, encoding="utf-8")
    logger.info("Wrote structure document to %s", output_file)
    return output_file


def generate_and_write(
    root: Path | str,
    config: StructureConfig | None = None,
    generator: StructureGenerator | None = None,
) -> Path:
    """Generate the document for ``root`` and persist it.

    The document is fully generated before anything is written, so a failed
    run leaves no partial output file behind.
    """
    root_path = Path(root).expanduser()
    generator = generator or StructureGenerator()
    document = generator.generate(root_path)
    if config is None:
        config = load_config(root_path.resolve())
    return write_structure(document, config)


__all__ = ["generate_and_write", "write_structure"]
