"""CLI entry point for taskflow."""

import argparse
from pathlib import Path

from pydantic import ValidationError

from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskflow",
        description="Terminal kanban board with drag-and-drop reordering",
    )
    parser.add_argument(
        "--items-per-list",
        type=int,
        default=None,
        help="Number of generated tasks in each list (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for generated tasks",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings, letting CLI flags override the environment."""
    settings_kwargs: dict = {}
    if args.items_per_list is not None:
        settings_kwargs["items_per_list"] = args.items_per_list
    if args.seed is not None:
        settings_kwargs["seed"] = args.seed
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ValidationError as e:
        raise SystemExit(f"taskflow: invalid settings\n{e}") from None

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help and --version stay fast
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
