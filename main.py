#!/usr/bin/env python3
"""Access Log Stats - Entry point"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from accesslog import VERSION, SAMPLE_LOG, LogAnalyzer, print_report
from accesslog.patterns import DEFAULT_ROW_LIMIT

console = Console()


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Access Log Stats - NASA HTTP access log statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", nargs="?", help="Log file to analyze")
    parser.add_argument("--sample", action="store_true", help="Analyze the bundled sample log")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("--search", help="Only list entries whose IP or path contains this text")
    parser.add_argument("--status", type=int, help="Only list entries with this status code")
    parser.add_argument("--method", help="Only list entries with this HTTP method")
    parser.add_argument("--limit", type=positive_int, default=DEFAULT_ROW_LIMIT,
                        help=f"Maximum entries to list (default: {DEFAULT_ROW_LIMIT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"AccessLogStats v{VERSION}")
    return parser


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.logfile and not args.sample:
        parser.error("a log file is required unless --sample is given")

    setup_logging(args.verbose)

    analyzer = LogAnalyzer(row_limit=args.limit, console=None if args.json else console)
    filters = {'search': args.search, 'status': args.status, 'method': args.method}

    try:
        if args.sample:
            report = analyzer.analyze_text(SAMPLE_LOG, **filters)
        else:
            report = analyzer.analyze_file(args.logfile, **filters)

        if args.json:
            print(json.dumps(report, indent=2))
        else:
            print_report(report, console)

        if args.output:
            with open(args.output, 'w') as f:
                json.dump(report, f, indent=2)
            if not args.json:
                console.print(f"\n[green]Report saved to:[/] {args.output}")

    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
