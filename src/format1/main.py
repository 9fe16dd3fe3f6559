"""format1-report entrypoint: parse one FORMAT-1 file and print the report."""

import argparse
import logging
import sys

from format1.config import load_config, settings
from format1.inventory.parser import Format1ParseError, parse_file, parse_inventory
from format1.report.renderer import render_report

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="format1-report",
        description="Print a people/computers report for a FORMAT-1 inventory file.",
    )
    p.add_argument("path", help="Input file path, or '-' for stdin")
    args = p.parse_args(argv)

    cfg = load_config()
    try:
        if args.path == "-":
            ctx = parse_inventory(sys.stdin, strict=cfg.strict)
        else:
            ctx = parse_file(args.path, encoding=cfg.encoding, strict=cfg.strict)
    except (OSError, UnicodeDecodeError) as ex:
        logger.error("Cannot read %s: %s", args.path, ex)
        return 1
    except Format1ParseError as ex:
        logger.error("%s: %s", args.path, ex)
        return 2

    sys.stdout.write(render_report(ctx, placeholder=cfg.no_name_placeholder))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
