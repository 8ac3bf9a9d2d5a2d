"""Command-line entry point: ``kubedeploy`` / ``python -m kubedeploy``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from kubedeploy import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubedeploy",
        description="kubedeploy - terminal console for container workloads",
    )
    parser.add_argument(
        "--api-url",
        help="Base URL of the cluster-management API (overrides settings and KUBEDEPLOY_API_URL)",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        help="Namespace prefilled in the deploy forms",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to this file (the terminal belongs to the UI)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(log_file: Path | None, level: str) -> None:
    """Send logs to ``log_file``; without one, logging is discarded."""
    if log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=str(log_file),
        force=True,
    )
    # Keep HTTP client chatter out of debug logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    from kubedeploy.app import KubeDeployApp

    KubeDeployApp(api_url=args.api_url, namespace=args.namespace).run()


if __name__ == "__main__":
    main()
