"""CLI entrypoints for stackshift commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .analysis import ProjectAnalyzer
from .archive import ArchiveError
from .config import ConfigError, load_config
from .logging import configure_logging
from .uir import ASTError, UIRGenerator, load_ast


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    kwargs["default"] = argparse.SUPPRESS if suppress_default else False
    parser.add_argument("-v", "--verbose", **kwargs)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackshift",
        description="Analyze source archives and normalize parsed files into UIR.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Report languages, framework and project type of a ZIP archive.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    analyze_parser.add_argument("archive", help="Path to the ZIP archive to analyze.")
    analyze_parser.add_argument(
        "--config",
        default=".",
        help="Path to .stackshift.yml or the directory holding it (defaults to current directory).",
    )
    analyze_parser.add_argument(
        "--include-content",
        action="store_true",
        help="Include retained file contents in the JSON output.",
    )

    uir_parser = subparsers.add_parser(
        "uir",
        help="Convert a parser-produced AST (JSON) into UIR nodes.",
    )
    _add_verbose_option(uir_parser, suppress_default=True)
    uir_parser.add_argument("ast", help="Path to the AST JSON file, or '-' for stdin.")
    uir_parser.add_argument(
        "--file",
        required=True,
        help="Archive-relative path of the source file the AST came from.",
    )
    uir_parser.add_argument(
        "--framework",
        default="React",
        help="Framework the source file was written for (defaults to React).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service (FastAPI + uvicorn).",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _read_ast_payload(location: str) -> object:
    if location == "-":
        return json.load(sys.stdin)
    return json.loads(Path(location).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for stackshift commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    if args.command == "analyze":
        try:
            config = load_config(Path(args.config))
            analysis = ProjectAnalyzer(config.analysis).analyze(Path(args.archive))
        except (ArchiveError, ConfigError) as exc:
            parser.exit(1, f"stackshift analyze failed: {exc}\n")
        payload = analysis.to_dict(include_content=bool(args.include_content))
        print(json.dumps(payload, indent=2))
    elif args.command == "uir":
        try:
            ast = load_ast(_read_ast_payload(args.ast))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ASTError) as exc:
            parser.exit(1, f"stackshift uir failed: {exc}\n")
        nodes = UIRGenerator().generate(ast, args.file, args.framework)
        print(json.dumps([node.to_dict() for node in nodes], indent=2))
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
