#!/usr/bin/env python3
import argparse
import sys

import detect_desktop_environment.constants as cnst
from detect_desktop_environment.common.setup_loguru import setup_bootstrap_logging
from detect_desktop_environment.common.setup_loguru import setup_loguru
from detect_desktop_environment.config import generate_default_config
from detect_desktop_environment.config import load_config
from detect_desktop_environment.enums.desktop_environment import DesktopEnvironment
from detect_desktop_environment.schemas.report import DetectionReport


def configure_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Detect the current desktop environment",
        prog=cnst.APPLICATION_NAME,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print debug logs to stderr"
    )

    # -v is also accepted after the subcommand; SUPPRESS keeps the
    # top-level value when it is given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Print debug logs to stderr",
    )

    subparsers = parser.add_subparsers(
        dest="command", title="subcommands", description="valid commands"
    )

    # detect
    detect_parser = subparsers.add_parser(
        "detect", parents=[common], help="Detect the desktop environment (default)"
    )
    detect_parser.add_argument(
        "--json", action="store_true", help="Print a JSON report"
    )

    # parse
    parse_parser = subparsers.add_parser(
        "parse", parents=[common], help="Classify an XDG_CURRENT_DESKTOP value"
    )
    parse_parser.add_argument("value", type=str, help="Colon separated desktop names")
    parse_parser.add_argument(
        "--json", action="store_true", help="Print a JSON report"
    )

    # lookup
    lookup_parser = subparsers.add_parser(
        "lookup", parents=[common], help="Classify a single desktop name"
    )
    lookup_parser.add_argument("name", type=str, help="Desktop name")
    lookup_parser.add_argument(
        "--strict",
        action="store_true",
        help="Only accept names registered at freedesktop.org",
    )

    # list
    subparsers.add_parser(
        "list", parents=[common], help="List known desktop environments"
    )

    # generate config
    subparsers.add_parser(
        "generate-config", parents=[common], help="Generate default configuration"
    )

    return parser


def print_result(de: DesktopEnvironment | None) -> int:
    if de is None:
        print("unknown")
        return 1
    print(de)
    return 0


def print_report(report: DetectionReport) -> int:
    print(report.model_dump_json(indent=2))
    return 0 if report.desktop is not None else 1


def main(argv: list[str] | None = None) -> int:
    parser = configure_argparser()
    args = parser.parse_args(argv)

    ##==> Configuration and logging
    ##########################################
    setup_bootstrap_logging()
    config = load_config(cnst.APP_CONFIG_FILE)
    setup_loguru(config, verbose=args.verbose)

    ##==> Commands
    ##########################################
    match args.command:
        case "detect" | None:
            if getattr(args, "json", False):
                return print_report(DetectionReport.collect())
            return print_result(DesktopEnvironment.detect())
        case "parse":
            de = DesktopEnvironment.from_xdg_current_desktop(args.value)
            if args.json:
                return print_report(DetectionReport.from_desktop(de, args.value))
            return print_result(de)
        case "lookup":
            if args.strict:
                return print_result(DesktopEnvironment.from_freedesktop(args.name))
            return print_result(DesktopEnvironment.from_xdg_name(args.name))
        case "list":
            for de in sorted(DesktopEnvironment):
                flags = [f for f, on in (("gtk", de.gtk()), ("qt", de.qt())) if on]
                print(f"{de}\t{','.join(flags) or '-'}")
            return 0
        case "generate-config":
            path = generate_default_config()
            print(f"Config written to {path}")
            return 0


if __name__ == "__main__":
    sys.exit(main())
