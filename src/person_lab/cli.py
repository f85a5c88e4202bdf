"""Command-line interface for person_lab.

Parses each argument as "<name>,<age>" and prints the resulting record.
With no arguments it parses the demo input "Mark,20". Inputs that start
with "-" go after "--", e.g. `person-lab -- -5,3`.
"""

from __future__ import annotations
import argparse
import logging
import sys

from .errors import PersonParseError
from .records import parse_person

DEMO_INPUT = "Mark,20"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="person-lab", description="Parse '<name>,<age>' strings into records.")
    p.add_argument("text", nargs="*", default=[DEMO_INPUT], help=f"Input string(s), default {DEMO_INPUT!r}; put inputs starting with '-' after '--'")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s", force=True)

    for text in args.text:
        try:
            person = parse_person(text)
        except PersonParseError as ex:
            sys.stderr.write(f"error: {ex.kind.value}: {ex}\n")
            return 2
        sys.stdout.write(f"{person!r}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
