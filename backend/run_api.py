#!/usr/bin/env python
"""
Run the COI Tracker API server.

Command-line flags override the COI_* settings for a single run.

Usage:
    python run_api.py
    python run_api.py --reload                 # Development mode
    python run_api.py --port 8080 --log-level debug
"""

import argparse
from typing import Any, Optional

import uvicorn
from rich.console import Console

from shared.config import Settings, get_settings

console = Console()

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the COI Tracker API with uvicorn")
    parser.add_argument("--reload", action="store_true", help="Restart on source changes")
    parser.add_argument("--host", type=str, help="Interface to bind (default: COI_HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: COI_PORT)")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Server log level (default: COI_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def server_options(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    """Merge command-line flags over settings into uvicorn.run keyword arguments."""
    return {
        "host": args.host or settings.host,
        "port": args.port or settings.port,
        "reload": args.reload or settings.reload,
        "log_level": args.log_level or settings.log_level.lower(),
    }


def main(argv: Optional[list[str]] = None) -> None:
    settings = get_settings()
    options = server_options(parse_args(argv), settings)

    console.print(
        f"[bold]{settings.app_name}[/bold] {settings.app_version} on "
        f"http://{options['host']}:{options['port']}"
        + (" [yellow](reload)[/yellow]" if options["reload"] else "")
    )
    uvicorn.run("api:app", **options)


if __name__ == "__main__":
    main()
