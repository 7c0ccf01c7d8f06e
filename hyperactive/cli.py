"""
CLI entry point.

Usage:
    # Serve the example application on the configured host/port
    python -m hyperactive.cli serve

    # Override the bind address
    python -m hyperactive.cli serve --host 127.0.0.1 --port 9000
"""

import argparse
import logging

from hyperactive.core.config import settings
from hyperactive.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the example server under uvicorn."""
    import uvicorn

    configure_logging(level=settings.log_level)

    logger.info("Listening on http://%s:%d", args.host, args.port)
    uvicorn.run("hyperactive.main:app", host=args.host, port=args.port, reload=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hyperactive example server")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the example server")
    serve_parser.add_argument(
        "--host", default=settings.host,
        help=f"Bind address (default: {settings.host})",
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.port,
        help=f"Bind port (default: {settings.port})",
    )
    serve_parser.set_defaults(func=cmd_serve)
    return parser


def main() -> None:
    args = build_parser().parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
