#!/usr/bin/env python3
"""
Judge Sandbox CLI - Run, grade and classify code snippets
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from judge_sandbox import __version__
from judge_sandbox.application.dto import ExecuteCodeOptions
from judge_sandbox.bootstrap import SandboxServices, build_services
from judge_sandbox.cli.exercise_loader import load_exercise
from judge_sandbox.cli.formatter import ResultFormatter
from judge_sandbox.domain.languages import get_all_languages
from judge_sandbox.domain.services import LanguageDetector
from judge_sandbox.errors import SandboxError
from judge_sandbox.infrastructure.config import get_settings
from judge_sandbox.infrastructure.logging import configure_logging, get_logger


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser"""
    parser = argparse.ArgumentParser(
        prog="judge-run",
        description="Judge Sandbox CLI - Run, grade and classify code snippets"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    # Shared output options
    output_parent = argparse.ArgumentParser(add_help=False)
    output_parent.add_argument(
        "--format",
        choices=["pretty", "json", "yaml"],
        default="pretty",
        help="Output format (default: pretty)"
    )
    output_parent.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show additional details"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run", parents=[output_parent], help="Execute a source file on the judge"
    )
    run_parser.add_argument("file", type=str, help="Source file to execute")
    run_parser.add_argument(
        "--language", "-l",
        type=str,
        help="Language name or alias (detected when omitted)"
    )
    stdin_group = run_parser.add_mutually_exclusive_group()
    stdin_group.add_argument("--stdin", type=str, help="Standard input as a string")
    stdin_group.add_argument("--stdin-file", type=str, help="Read standard input from file")
    run_parser.add_argument(
        "--time-limit", "-t",
        type=float,
        help="CPU time limit in seconds (default: language default)"
    )
    run_parser.add_argument(
        "--memory-limit", "-m",
        type=int,
        help="Memory limit in MB (default: language default)"
    )

    validate_parser = subparsers.add_parser(
        "validate", parents=[output_parent], help="Grade a source file against an exercise"
    )
    validate_parser.add_argument("file", type=str, help="Source file to grade")
    validate_parser.add_argument(
        "--exercise", "-e",
        type=str,
        required=True,
        help="Exercise document (.yaml, .yml or .json)"
    )

    detect_parser = subparsers.add_parser(
        "detect", parents=[output_parent], help="Detect the language of a source file"
    )
    detect_parser.add_argument("file", type=str, help="Source file to classify")

    subparsers.add_parser(
        "languages", parents=[output_parent], help="List supported languages"
    )

    return parser


def read_text_file(file_path: str) -> str:
    """Read a UTF-8 text file, raising SandboxError when it cannot be read"""
    path = Path(file_path)
    if not path.is_file():
        raise SandboxError(f"File not found: {file_path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise SandboxError(f"Error reading file {file_path}", detail=str(e))


async def run_command(args: argparse.Namespace, services: SandboxServices) -> int:
    code = read_text_file(args.file)
    stdin = read_text_file(args.stdin_file) if args.stdin_file else args.stdin

    options = ExecuteCodeOptions(
        code=code,
        language=args.language,
        input=stdin,
        time_limit=args.time_limit,
        memory_limit=args.memory_limit,
    )
    result = await services.execution_service.execute_code(options)

    formatter = ResultFormatter(format=args.format, verbose=args.verbose)
    print(formatter.format_execution(result))
    return EXIT_OK if result.succeeded else EXIT_FAILED


async def validate_command(args: argparse.Namespace, services: SandboxServices) -> int:
    exercise = load_exercise(args.exercise)
    code = read_text_file(args.file)

    result = await services.code_validator.validate_code(code, exercise)

    formatter = ResultFormatter(format=args.format, verbose=args.verbose)
    print(formatter.format_validation(result))
    return EXIT_OK if result.is_correct else EXIT_FAILED


def detect_command(args: argparse.Namespace) -> int:
    code = read_text_file(args.file)
    result = LanguageDetector().detect_language(code)

    formatter = ResultFormatter(format=args.format, verbose=args.verbose)
    print(formatter.format_detection(result))
    return EXIT_OK


def languages_command(args: argparse.Namespace) -> int:
    formatter = ResultFormatter(format=args.format, verbose=args.verbose)
    print(formatter.format_languages(get_all_languages()))
    return EXIT_OK


async def main(argv: Optional[List[str]] = None, services: Optional[SandboxServices] = None) -> int:
    """
    Main CLI function

    Args:
        argv: Arguments to parse instead of sys.argv
        services: Pre-built services; built from settings when omitted

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level, settings.log_format)
    logger.debug("Running command", command=args.command)

    try:
        if args.command == "detect":
            return detect_command(args)
        if args.command == "languages":
            return languages_command(args)

        owns_services = services is None
        if services is None:
            services = build_services(settings)
        try:
            if args.command == "run":
                return await run_command(args, services)
            return await validate_command(args, services)
        finally:
            if owns_services:
                await services.close()

    except SandboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except ValidationError as e:
        print(f"Error: invalid arguments: {e}", file=sys.stderr)
        return EXIT_USAGE


def entry_point():
    """CLI entry point"""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    entry_point()
