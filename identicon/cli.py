"""Command line entry point: ``identicon NAME [NAME ...]``."""

import argparse
import logging
import sys
from typing import List, Optional

from identicon.pipeline import generate_identicon

log = logging.getLogger("identicon.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="identicon",
        description="Generate 250x250 PNG identicons named <NAME>.png",
    )
    p.add_argument("names", nargs="+", metavar="NAME", help="Input string(s) to hash")
    p.add_argument(
        "-o",
        "--out",
        default=None,
        help="Output directory (default: current directory)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    for name in args.names:
        try:
            path = generate_identicon(name, directory=args.out)
        except OSError as exc:
            log.error("Could not write identicon for %r: %s", name, exc)
            return 1
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
