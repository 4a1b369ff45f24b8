"""Module entry point for `python -m gridtactics`."""

from __future__ import annotations

import argparse
from pathlib import Path

from gridtactics.app import print_result, resolve_log_level, run_scenario, view_result
from gridtactics.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a grid tactics scenario.")
    parser.add_argument("map_file", type=Path, help="Map text file to simulate.")
    parser.add_argument(
        "-a",
        "--actions",
        action="append",
        default=[],
        metavar="ORDER=COMMANDS",
        help="Command queue for one player, e.g. 0=MMRS (repeatable).",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Step through the turns in the interactive viewer.",
    )
    parser.add_argument(
        "--hide-map",
        action="store_true",
        default=None,
        help="Do not draw the board for each turn.",
    )
    parser.add_argument(
        "--strict-actions",
        action="store_true",
        help="Keep unknown command letters; the run stops when one is reached.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to $GRIDTACTICS_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(resolve_log_level(args.log_level))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        result = run_scenario(
            args.map_file, args.actions, strict_actions=args.strict_actions
        )
    except (ValueError, FileNotFoundError) as exc:
        raise SystemExit(f"Invalid scenario: {exc}") from exc

    show_map = None if args.hide_map is None else not args.hide_map
    if args.view:
        view_result(result, show_map=show_map)
        return
    print_result(result, show_map=show_map)


if __name__ == "__main__":
    main()
