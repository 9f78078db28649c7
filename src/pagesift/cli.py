"""CLI entry point for PageSift."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pagesift.config.settings import Settings


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = _load_settings(args.config)
    if args.log_level:
        settings.observability.log_level = args.log_level

    if args.command == "search":
        _run_search(args, settings)
    else:
        _run_server(args, settings)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagesift",
        description="PageSift — Wikipedia search results as stable, UI-friendly pages",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"PageSift {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the HTTP API server (default)")
    serve.add_argument("--host", type=str, default=None, help="Server bind address (overrides config)")
    serve.add_argument("--port", "-p", type=int, default=None, help="Server port (overrides config)")
    serve.add_argument("--workers", "-w", type=int, default=None, help="Number of worker processes")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload for development")

    search = subparsers.add_parser("search", help="Fetch one result page and print it as JSON")
    search.add_argument("query", type=str, help="Free-text search query")
    search.add_argument("--offset", type=int, default=0, help="Zero-based result offset")
    search.add_argument("--limit", "-n", type=int, default=10, help="Maximum number of results")
    search.add_argument("--no-delay", action="store_true", help="Skip the pacing delay before the request")
    search.add_argument("--no-enrich", action="store_true", help="Skip the extract lookup for descriptions")

    return parser


def _load_settings(config: str | None) -> Settings:
    if config:
        config_path = Path(config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        return Settings.from_yaml(config_path)
    return Settings()


def _run_search(args: argparse.Namespace, settings: Settings) -> None:
    from pagesift.adapters.wikipedia.adapter import WikipediaAdapter
    from pagesift.observability.logging import setup_logging

    if args.no_delay:
        settings.wikipedia.pacing_delay = 0.0
    if args.no_enrich:
        settings.wikipedia.enrich = False

    setup_logging(settings.observability, stream=sys.stderr)

    async def _search() -> str:
        async with WikipediaAdapter.from_settings(settings.wikipedia) as adapter:
            page = await adapter.fetch_page(args.query, offset=args.offset, limit=args.limit)
        return page.model_dump_json(indent=2)

    print(asyncio.run(_search()))


def _run_server(args: argparse.Namespace, settings: Settings) -> None:
    if getattr(args, "host", None):
        settings.server.host = args.host
    if getattr(args, "port", None):
        settings.server.port = args.port
    if getattr(args, "workers", None):
        settings.server.workers = args.workers
    reload = getattr(args, "reload", False)

    import uvicorn

    from pagesift.api.app import create_app

    if reload or settings.server.workers > 1:
        # Reload and multi-worker modes re-import the app, so settings come from env/config there
        uvicorn.run(
            "pagesift.api.app:create_app",
            factory=True,
            host=settings.server.host,
            port=settings.server.port,
            workers=settings.server.workers if not reload else 1,
            reload=reload,
            log_level=settings.observability.log_level,
        )
        return

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.observability.log_level,
    )


def _get_version() -> str:
    """Get the package version."""
    try:
        from pagesift import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
