"""CLI entrypoints for compdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import CompDocError, ComponentNotFoundError
from .logging import SERVICE_LOGGERS, configure_logging
from .models import BatchReport
from .pipeline import Pipeline, summarize


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
        prog="compdoc",
        description="Generate Markdown documentation for single-file UI components.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--root",
        default=".",
        help="Project root containing .compdoc.yml (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    all_parser = subparsers.add_parser(
        "all",
        help="Document every component under the components directory.",
    )
    _add_verbose_option(all_parser, suppress_default=True)

    component_parser = subparsers.add_parser(
        "component",
        help="Document a single component by name.",
    )
    _add_verbose_option(component_parser, suppress_default=True)
    component_parser.add_argument("name", help="Component name, e.g. Button.")

    staged_parser = subparsers.add_parser(
        "staged",
        help="Document components staged for commit (pre-commit hook mode).",
    )
    _add_verbose_option(staged_parser, suppress_default=True)
    staged_parser.add_argument(
        "--no-stage",
        action="store_true",
        help="Do not `git add` the regenerated documents.",
    )

    watch_parser = subparsers.add_parser(
        "watch",
        help="Regenerate documentation whenever a component changes.",
    )
    _add_verbose_option(watch_parser, suppress_default=True)
    watch_parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Polling interval in seconds (defaults to watch.interval).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Expose the generation operations over HTTP.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default=None, help="Bind address (defaults to service.host).")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (defaults to service.port).")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for compdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=args.log_file,
        timestamps=args.command in {"watch", "serve"},
        extra_loggers=SERVICE_LOGGERS if args.command == "serve" else (),
    )

    try:
        config = load_config(Path(args.root))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "serve":
        from .service import run_service

        run_service(
            host=args.host or config.service.host,
            port=args.port or config.service.port,
            root=config.root,
        )
        return

    pipeline = Pipeline(config)

    if args.command == "all":
        report = _run_batch(parser, pipeline.run_all)
        _print_report(report)
    elif args.command == "component":
        try:
            report = pipeline.run_component(args.name)
        except ComponentNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        result = report.results[0]
        if result.success:
            print(f"Documentation generated: {_relativize(result.doc_path)}")
        else:
            print(f"Failed to document {args.name}: {result.error}")
        if report.index_error:
            print(f"Index build failed: {report.index_error}")
    elif args.command == "staged":
        report = _run_batch(parser, lambda: pipeline.run_staged(stage=not args.no_stage))
        _print_report(report)
    elif args.command == "watch":
        print(f"Watching {_relativize(config.components_dir)} for changes (Ctrl+C to stop)")
        try:
            pipeline.watch(interval=args.interval)
        except KeyboardInterrupt:
            print("Stopped watching")
            return
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    if args.command in {"all", "component", "staged"} and not report.success:
        parser.exit(1)


def _run_batch(parser: argparse.ArgumentParser, run) -> BatchReport:
    try:
        return run()
    except CompDocError as exc:
        parser.exit(1, f"compdoc failed: {exc}\nRun with --verbose for more details.\n")


def _print_report(report: BatchReport) -> None:
    for line in summarize(report):
        print(line)


def _relativize(path: Path | None) -> str:
    if path is None:
        return "-"
    try:
        return str(Path(path).relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
