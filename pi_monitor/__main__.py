# -*- coding: utf-8 -*-
#
# pi-monitor : host telemetry over HTTP
# License : BSD-3-Clause


"""
pi-monitor
~~~~~~~~~~

host telemetry over HTTP for single-board computers and Linux hosts
"""

# stdlib imports
import argparse
import os
import platform
import sys

# third party imports
import uvicorn

# app imports
from .__version__ import __version__
from .core.config import settings


def port(port) -> int:
    """Check if the provided port is valid"""
    try:
        # make sure port is an int
        port = int(port)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{port} is not a number")

    port_ranges = [(1024, 65535)]

    for _range in port_ranges:
        if _range[0] <= port <= _range[1]:
            return port

    raise argparse.ArgumentTypeError(
        f"{port} is not valid. Pick a port between {port_ranges}."
    )


def setup_parser() -> argparse.ArgumentParser:
    """Set default values and handle arg parser"""
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="pi-monitor serves host telemetry as JSON, with a live Server-Sent Events stream.",
    )
    parser.add_argument(
        "--reload",
        dest="livereload",
        action="store_true",
        default=False,
        help="Enable live reload for development",
    )
    parser.add_argument(
        "--host",
        dest="host",
        default=settings.HOST,
        help="Address to bind the server to",
    )
    parser.add_argument(
        "--port",
        "-p",
        dest="port",
        type=port,
        default=settings.PORT,
        help="Port number to run the server on",
    )
    parser.add_argument(
        "--debug",
        "-d",
        dest="debug",
        action="store_true",
        default=False,
        help="Enable debug mode with verbose logging",
    )
    parser.add_argument(
        "--version", "-V", "-v", action="version", version=f"{__version__}"
    )
    return parser


def main() -> None:
    parser = setup_parser()
    args = parser.parse_args()

    os.environ["PI_MONITOR_DEBUG"] = str(args.debug)

    print(f"pi-monitor running on http://{args.host}:{args.port}")

    uvicorn.run(
        "pi_monitor.asgi:app",
        port=args.port,
        host=args.host,
        reload=args.livereload,
        log_config=None,
    )


def init() -> None:
    """Handle main init"""
    # hard set no support for python < v3.9
    if sys.version_info < (3, 9):
        sys.exit(
            "{0} requires Python version 3.9 or higher...\nyou are trying to run with Python version {1}...\nexiting...".format(
                os.path.basename(__file__), platform.python_version()
            )
        )

    if __name__ == "__main__":
        sys.exit(main())


init()
