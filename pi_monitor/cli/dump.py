"""
Prints one host specs or metrics record as JSON, without starting a server.

    pi-monitor-dump metrics --indent 2
"""

import argparse
import sys

from pi_monitor.services import system_service


def setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print a pi-monitor specs or metrics record as JSON"
    )
    parser.add_argument(
        "record",
        choices=["specs", "metrics"],
        nargs="?",
        default="metrics",
        help="Which record to collect (default: metrics)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print with this many spaces of indentation",
    )
    return parser


def main(argv=None) -> int:
    args = setup_parser().parse_args(argv)

    if args.record == "specs":
        record = system_service.collect_specs()
    else:
        record = system_service.collect_metrics()

    sys.stdout.write(record.model_dump_json(by_alias=True, indent=args.indent))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
