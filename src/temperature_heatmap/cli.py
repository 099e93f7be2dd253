"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import logging
import sys
from pathlib import Path

from temperature_heatmap import __version__
from temperature_heatmap.config import get_settings
from temperature_heatmap.flows.build import build_all

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="temperature-heatmap",
        description="Calendar heatmap of monthly temperatures with daily sparklines",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'build' command - load data and render the page
    build_parser = subparsers.add_parser("build", help="Build the heatmap page")
    build_parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Daily table path or URL (default: data_source from settings)",
    )
    build_parser.add_argument(
        "--site-dir",
        type=Path,
        default=None,
        help="Output directory (default: site_dir from settings)",
    )

    subparsers.add_parser("info", help="Show application info")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool = False) -> None:
    """Set up root logging; ``--debug`` overrides the configured level."""
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    settings = get_settings()
    site_dir = args.site_dir or Path(settings.site_dir)
    try:
        result = build_all(source=args.source, site_dir=site_dir)
    except FileNotFoundError as e:
        print(f"Error: data source not found: {e.filename}", file=sys.stderr)
        return 1
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Built {result['months']} months: {result['output']}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Data source: {settings.data_source}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'temperature-heatmap build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False))

    commands = {
        "build": cmd_build,
        "info": cmd_info,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
