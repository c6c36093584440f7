"""
Command Line Entry Point

    practice-kit divide       Divide two numbers read from a file
    practice-kit read-file    Print a file, retrying while it is locked
    practice-kit bank-demo    Run the bank account walkthrough
"""

import argparse
from typing import List, Optional

from .config import get_config
from .console import run_bank_demo, run_divide_numbers, run_read_file
from .logging_config import setup_logging


COMMANDS = {
    "divide": run_divide_numbers,
    "read-file": run_read_file,
    "bank-demo": run_bank_demo,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="practice-kit", description="Console practice exercises")
    parser.add_argument("command", choices=sorted(COMMANDS), help="Exercise to run")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: PRACTICE_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    setup_logging(
        level=args.log_level or config.log_level,
        log_format=config.log_format,
        log_file=config.log_file,
    )

    try:
        COMMANDS[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    return 0
