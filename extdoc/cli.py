"""CLI entrypoints for extdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, ExtDocConfig, load_config
from .documenter import ExtendedDocumenter
from .files import IOFailure
from .logging import configure_logging
from .sources import SourceError


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subcommands repeat the options; SUPPRESS keeps them from resetting the top-level value.
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write timestamped log records to this file.",
    )


def _add_project_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root holding .extdoc.yml (defaults to current directory).",
    )
    model_group = parser.add_mutually_exclusive_group()
    model_group.add_argument(
        "--model",
        help="YAML file describing modules, components and operations.",
    )
    model_group.add_argument(
        "--package",
        help="Importable Python package whose subpackages are the application modules.",
    )
    parser.add_argument(
        "--output-root",
        help="Build root to write into instead of probing for target/ or build/.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extdoc",
        description="Generate AsciiDoc reference documentation for a modular application.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write module, configuration and application documentation.",
    )
    _add_logging_options(generate_parser, suppress_default=True)
    _add_project_options(generate_parser)
    generate_parser.add_argument(
        "--name",
        help="Application display name used as the index heading.",
    )
    generate_parser.add_argument(
        "--move-to",
        help="Copy all artifacts into this directory after generation.",
    )

    move_parser = subparsers.add_parser(
        "move",
        help="Copy previously generated artifacts into a publishing directory.",
    )
    _add_logging_options(move_parser, suppress_default=True)
    move_parser.add_argument("destination", help="Directory receiving the artifacts.")
    _add_project_options(move_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing generate and move operations.",
    )
    _add_logging_options(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def _resolve_config(args: argparse.Namespace) -> ExtDocConfig:
    config = load_config(Path(args.path))
    if getattr(args, "model", None):
        config.model.file = Path(args.model).expanduser().resolve()
        config.model.package = None
    if getattr(args, "package", None):
        config.model.package = args.package
        config.model.file = None
    if getattr(args, "output_root", None):
        config.output.build_root = Path(args.output_root).expanduser().resolve()
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for extdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file).expanduser() if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
        return

    try:
        config = _resolve_config(args)
        documenter = ExtendedDocumenter.from_config(
            config, application_name=getattr(args, "name", None)
        )
        if args.command == "generate":
            documenter.write_documentation()
            print(f"Documentation written to {_relativize(documenter.output_directory)}")
            destination = args.move_to or config.destination
            if destination:
                copied = documenter.move_to_folder(destination)
                print(f"Copied {len(copied)} artifacts to {_relativize(Path(destination))}")
        elif args.command == "move":
            copied = documenter.move_to_folder(args.destination)
            print(f"Copied {len(copied)} artifacts to {_relativize(Path(args.destination))}")
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (ConfigError, SourceError) as exc:
        parser.exit(1, f"{exc}\n")
    except IOFailure as exc:
        parser.exit(1, f"extdoc {args.command} failed: {exc}\nRun with --verbose for more details.\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
