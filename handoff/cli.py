"""CLI entrypoints for handoff commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .errors import AllFilesUnprocessableError, InjectDocsError, WriteFailureError
from .logging import configure_logging
from .models import InjectOptions
from .orchestrator import Orchestrator
from .synthesis.styles import documented_languages


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
        "default": argparse.SUPPRESS if suppress_default else False,
    }
    parser.add_argument("-v", "--verbose", **kwargs)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handoff",
        description="Inject knowledge-driven documentation comments into source files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write debug logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inject_parser = subparsers.add_parser(
        "inject-docs",
        help="Add documentation comments derived from the project knowledge base.",
    )
    _add_verbose_option(inject_parser, suppress_default=True)
    inject_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    inject_parser.add_argument(
        "-f",
        "--files",
        help="Glob pattern of files to document (defaults to all supported source files).",
    )
    inject_parser.add_argument(
        "-l",
        "--language",
        help=(
            "Language hint recorded with the run; extraction still uses each file's "
            f"extension ({', '.join(documented_languages())})."
        ),
    )
    inject_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview documentation without modifying files.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the inject-docs HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for handoff commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=args.log_file,
    )

    if args.command == "inject-docs":
        _run_inject(parser, args)
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_inject(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    orchestrator = Orchestrator()
    options = InjectOptions(
        files=args.files,
        language=args.language,
        dry_run=bool(args.dry_run),
    )
    try:
        outcome = orchestrator.run_inject(args.path, options)
    except AllFilesUnprocessableError as exc:
        if exc.unsaved_files:
            print(orchestrator.reporter.render_unsaved_warning(exc.unsaved_files), file=sys.stderr)
        parser.exit(1, f"Failed to inject documentation: {exc}\n")
    except WriteFailureError as exc:
        if exc.written:
            print(f"Files already written: {', '.join(exc.written)}", file=sys.stderr)
        parser.exit(1, f"Failed to inject documentation: {exc}\n")
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except (InjectDocsError, ConfigError) as exc:
        parser.exit(1, f"Failed to inject documentation: {exc}\nRun with --verbose for more details.\n")

    if outcome.unsaved_files:
        print(orchestrator.reporter.render_unsaved_warning(outcome.unsaved_files), file=sys.stderr)

    if outcome.dry_run:
        print("Dry run completed - showing proposed changes\n")
        print(outcome.preview or "", end="")
    else:
        print(orchestrator.reporter.render_commit_summary(outcome.results), end="")


if __name__ == "__main__":
    main(sys.argv[1:])
