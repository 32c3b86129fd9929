#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import List

from portal_lib import ConfigNotFoundError, ParseError, build_portal, resolve_config_path

EPILOG = """\
Examples:
  portal
  portal my_custom_config.yml
  portal -h
"""


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="portal",
        description=(
            "Generate an HTML index page of projects and links from a simple YAML configuration file."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to the YAML configuration file (default: ./portal.yml, created if missing)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")

    config_path = resolve_config_path(args.config)
    try:
        out_path = build_portal(config_path)
    except ConfigNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ParseError as e:
        print(f"Error loading or parsing YAML file: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Successfully created {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
