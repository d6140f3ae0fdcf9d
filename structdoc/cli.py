"""CLI entrypoints for structdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .assembler import StructureGenerator
from .config import ConfigError, load_config
from .logging import configure_logging
from .writer import write_structure


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structdoc",
        description="Summarise the structure of a source tree as a markdown document.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records, with timestamps, to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the structure document for a workspace.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the workspace root (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory relative to the workspace root (overrides .structdoc.yml).",
    )
    generate_parser.add_argument(
        "--file-name",
        default=None,
        help="Output file name (overrides .structdoc.yml).",
    )
    generate_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the document instead of writing it to disk.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for structdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "generate":
        _run_generate(parser, args)
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    root = Path(args.path).expanduser()
    try:
        document = StructureGenerator().generate(root)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"structdoc generate failed: {exc}\nRun with --verbose for more details.\n")

    if args.stdout:
        sys.stdout.write(document)
        return

    try:
        config = load_config(root.resolve())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    if args.output_dir is not None:
        config.output.path = args.output_dir
    if args.file_name:
        config.output.file_name = args.file_name

    try:
        output_file = write_structure(document, config)
    except OSError as exc:
        parser.exit(1, f"Failed to write structure document: {exc}\n")
    print(f"Structure written to {_relativize(output_file)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
