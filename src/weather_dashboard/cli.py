"""
Command-line interface for the weather dashboard.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import logging
import sys
from datetime import date
from pathlib import Path

from weather_dashboard import __version__
from weather_dashboard.config import get_settings
from weather_dashboard.exceptions import WeatherDashboardError
from weather_dashboard.flows.build import build_dashboard
from weather_dashboard.flows.fetch import load_city

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-dashboard",
        description="Current weather, forecast, and air quality for a city",
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

    # 'load' command - fetch a city's data into the store
    load_parser = subparsers.add_parser("load", help="Fetch weather data for a city")
    load_parser.add_argument(
        "city",
        nargs="?",
        default=None,
        help="City name (default: last loaded city, then default_city)",
    )

    # 'build' command - render the dashboard from cached data
    build_parser = subparsers.add_parser("build", help="Build the dashboard from cached data")
    _add_build_arguments(build_parser)

    # 'refresh' command - load then build
    refresh_parser = subparsers.add_parser("refresh", help="Fetch data and build the dashboard")
    refresh_parser.add_argument("city", nargs="?", default=None, help="City name")
    _add_build_arguments(refresh_parser)

    subparsers.add_parser("info", help="Show application info")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve the dashboard locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _add_build_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--days",
        type=int,
        choices=range(1, 6),
        default=None,
        metavar="N",
        help="Upcoming days to show, 1-5 (default: forecast_days from settings)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Date to treat as today, YYYY-MM-DD (default: current UTC date)",
    )


def _report_error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def cmd_load(args: argparse.Namespace) -> int:
    """Handle the 'load' command."""
    try:
        result = load_city(city=args.city)
    except WeatherDashboardError as exc:
        return _report_error(exc.message)
    except ValueError as exc:
        return _report_error(str(exc))
    except Exception:
        logger.exception("City load failed")
        return _report_error(GENERIC_ERROR)

    if result.get("stale"):
        print(f"Discarded stale results for {result['city']}.")
        return 1
    print(f"Loaded {result['city']}.")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    try:
        result = build_dashboard(window_size=args.days, today=args.today)
    except WeatherDashboardError as exc:
        return _report_error(exc.message)
    except Exception:
        logger.exception("Dashboard build failed")
        return _report_error(GENERIC_ERROR)

    if "error" in result:
        print("No cached weather data. Run 'weather-dashboard load' first.", file=sys.stderr)
        return 1
    print(f"Dashboard written to {result['output']}")
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: load a city, then build the dashboard."""
    exit_code = cmd_load(args)
    if exit_code != 0:
        return exit_code
    return cmd_build(args)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default city: {settings.default_city}")
    print(f"Forecast days: {settings.forecast_days}")
    print(f"Icon set: {settings.icon_set}")
    print(f"API key configured: {'yes' if settings.api_key else 'no'}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built dashboard locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.data_dir) / "derived" / "site"

    if not site_dir.exists():
        print("No site directory found. Run 'weather-dashboard refresh' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving dashboard on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.debug or get_settings().debug:
        logging.basicConfig(level=logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "load": cmd_load,
        "build": cmd_build,
        "refresh": cmd_refresh,
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
