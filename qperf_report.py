#!/usr/bin/env python3
"""
qperf report CLI

Tabulates quiz tournament results from RTF question sets and QuizMachine
CSV logs: individual statistics by question type, team scores per round,
and the final team ranking.

Usage:
    python qperf_report.py --sets sets.rtf --logs day1.csv day2.csv
    python qperf_report.py --sets sets.rtf --logs day1.csv --types AGQRV --delimiter ';'
    python qperf_report.py --sets sets.rtf --logs day1.csv --tournament "Fall Invitational" \\
        --display-rounds --output results.csv --excel results.xlsx
"""

import argparse
import sys
from pathlib import Path

from qperf import export_workbook, run_report
from qperf.config import build_options, get_log_dir
from qperf.logging_config import setup_logging
from qperf.utils import save_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Quiz tournament statistics and team rankings")
    parser.add_argument(
        "--sets", "-s",
        nargs="+",
        required=True,
        help="RTF question-set files",
    )
    parser.add_argument(
        "--logs", "-l",
        nargs="+",
        required=True,
        help="QuizMachine CSV log files",
    )
    parser.add_argument(
        "--types", "-t",
        default=None,
        help="Question types to report, e.g. AGIQRSXVM (default: all)",
    )
    parser.add_argument(
        "--delimiter", "-d",
        default=None,
        help="Output field delimiter (default: ',')",
    )
    parser.add_argument(
        "--tournament", "-n",
        default=None,
        help="Only tabulate records for this tournament name",
    )
    parser.add_argument(
        "--display-rounds", "-r",
        action="store_true",
        default=None,
        help="Include each round's team scores in the report",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--excel", "-x",
        default=None,
        help="Also write the results to an .xlsx workbook",
    )
    parser.add_argument(
        "--json", "-j",
        default=None,
        help="Also write the results as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show the per-event scoring trace",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Write a debug log under the configured log directory",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(log_dir=get_log_dir(), verbose=args.verbose, log_to_file=args.log_file)

    try:
        options = build_options(
            question_types=args.types,
            delimiter=args.delimiter,
            tournament=args.tournament,
            display_rounds=args.display_rounds,
        )
        result = run_report(args.sets, args.logs, options)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        print(f"⚠️  {warning}", file=sys.stderr)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.report, encoding="utf-8")
        print(f"Report saved to {output_path}", file=sys.stderr)
    else:
        sys.stdout.write(result.report)

    if args.excel:
        export_workbook(
            args.excel,
            result.directory,
            result.stats,
            result.standings,
            result.rounds,
            options.question_types,
            options.display_rounds,
        )
        print(f"Workbook saved to {args.excel}", file=sys.stderr)

    if args.json:
        save_json(args.json, result.to_dict())
        print(f"JSON saved to {args.json}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
