"""Demo entry point: ask for a name and greet it."""

from __future__ import annotations

import argparse
import logging
import sys

from tellmewhy.errors import PromptError
from tellmewhy.prompt import prompt
from tellmewhy.types import Config, Role, Status


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tellmewhy",
        description="Single-line interactive prompt demo",
    )
    parser.add_argument("--label", default="Enter your name: ", help="Prompt label")
    parser.add_argument("--hint", default="Firstname Lastname", help="Hint shown while empty")
    parser.add_argument("--initial", default=None, help="Pre-seeded value")
    parser.add_argument("--max-width", type=int, default=25, help="Maximum display width (default: 25)")
    parser.add_argument("--max-length", type=int, default=None, help="Maximum value length in characters")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    # Log records on the terminal would corrupt the prompt line
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level.upper()),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    config = Config(
        prompt_label=args.label,
        hint_text=args.hint,
        max_display_width=args.max_width,
        max_length=args.max_length,
    )

    try:
        name = prompt(args.initial, Role.ACTIVE, Status.NEUTRAL, config)
    except PromptError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    print(f"Hello, {name}")


if __name__ == "__main__":
    main()
