"""Command line entry point.

Locations can be passed as arguments; without them the tool prompts for them
one at a time until ``done`` is entered or the maximum is reached.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, Sequence, TextIO

from .config import settings
from .logging_config import setup_logging
from .services.outputs.routing_formatter import (
    route_result_to_csv,
    route_result_to_json,
    route_result_to_text,
)
from .services.routing.errors import MissingCredentialsError
from .services.routing.service import find_best_route

DONE_TOKEN = "done"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="routefinder",
        description="Find the shortest driving route through 2 to 10 locations.",
    )
    parser.add_argument(
        "locations",
        nargs="*",
        help="Locations to visit. Omit to enter them interactively.",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="Google Maps API key (defaults to ROUTEFINDER_GOOGLE_MAPS_API_KEY, then a prompt).",
    )
    parser.add_argument(
        "--mode",
        choices=["driving", "walking", "bicycling", "transit"],
        default=None,
        help="Travel mode for the distance lookup (defaults to ROUTEFINDER_TRAVEL_MODE, driving).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json", "csv"],
        default="text",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for messages on stderr (defaults to ROUTEFINDER_LOG_LEVEL, INFO).",
    )
    return parser


def prompt_locations(
    input_func: Callable[[str], str],
    stdout: TextIO,
    max_locations: int | None = None,
    min_locations: int | None = None,
) -> list[str]:
    """Collect locations interactively.

    ``done`` finishes once enough locations were entered; blank lines are
    ignored and the loop ends on its own at ``max_locations`` or end of input.
    """
    upper = max_locations if max_locations is not None else settings.max_locations
    lower = min_locations if min_locations is not None else settings.min_locations

    print(
        f"Enter between {lower} and {upper} locations (type '{DONE_TOKEN}' when finished):",
        file=stdout,
    )
    locations: list[str] = []
    while len(locations) < upper:
        try:
            entry = input_func(f"Location {len(locations) + 1}: ").strip()
        except EOFError:
            break
        if entry.lower() == DONE_TOKEN:
            if len(locations) >= lower:
                break
            print(f"Please enter at least {lower} locations.", file=stdout)
            continue
        if entry:
            locations.append(entry)
    return locations


def _resolve_api_key(args: argparse.Namespace, input_func: Callable[[str], str]) -> str:
    if args.api_key:
        return args.api_key
    if settings.google_maps_api_key:
        return settings.google_maps_api_key
    try:
        return input_func("Enter your Google Maps API key: ").strip()
    except EOFError:
        raise MissingCredentialsError("No Google Maps API key was entered.") from None


def main(
    argv: Sequence[str] | None = None,
    *,
    input_func: Callable[[str], str] = input,
    stdout: TextIO | None = None,
) -> int:
    out = stdout or sys.stdout
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or settings.log_level, stream=sys.stderr)

    try:
        api_key = _resolve_api_key(args, input_func)
        locations = list(args.locations) or prompt_locations(input_func, out)
        if not args.locations and len(locations) < settings.min_locations:
            print(
                f"You need at least {settings.min_locations} locations to calculate a route.", file=out
            )
            return 1

        result = find_best_route(locations, api_key=api_key, mode=args.mode)

        if args.output_format == "json":
            print(json.dumps(route_result_to_json(result), indent=2, ensure_ascii=False), file=out)
        elif args.output_format == "csv":
            out.write(route_result_to_csv(result))
        else:
            print("", file=out)
            print(route_result_to_text(result), file=out)
    except Exception as exc:
        logger.debug("Route lookup failed", exc_info=True)
        print(f"An error occurred: {exc}", file=out)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
