"""
Command line entry point: ``lox [script]``.

With a script path the file is scanned and its tokens printed. With no
arguments an interactive prompt scans each line as it is entered.
Only the scanner exists so far, so "running" code means printing tokens.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .config import LoxConfig, EX_USAGE, EX_DATAERR, EX_NOINPUT
from .lexer import scan
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)

USAGE = "Usage: lox [script]"


class ErrorReporter:
    """
    Prints diagnostics and remembers whether any were reported.

    One instance covers one run (a file, or one line at the prompt), so
    error state never leaks from one submission into the next.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stderr
        self.had_error = False
        self.count = 0

    def __call__(self, line: int, where: str, message: str):
        print(f"[line {line}] Error{where}: {message}", file=self.stream)
        self.had_error = True
        self.count += 1

    def reset(self):
        self.had_error = False
        self.count = 0


def run(source: str, config: LoxConfig, reporter: ErrorReporter,
        filename: str = "<stdin>", out: Optional[TextIO] = None) -> bool:
    """Scan ``source`` and echo its tokens. Returns True if errors were reported."""
    out = out if out is not None else sys.stdout
    result = scan(source, filename, reporter)

    if config.echo_tokens:
        for token in result.tokens:
            print(token, file=out)

    return reporter.had_error


def run_file(path: str, config: LoxConfig,
             out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Scan a script file and return the process exit code."""
    err = err if err is not None else sys.stderr
    try:
        with open(path, 'r', encoding=config.encoding) as f:
            source = f.read()
    except OSError as e:
        print(f"lox: cannot read {path}: {e.strerror or e}", file=err)
        return EX_NOINPUT

    logger.info("Scanning %s (%d characters)", path, len(source))
    reporter = ErrorReporter(err)
    if run(source, config, reporter, path, out):
        logger.info("%s: %d lexical error(s)", path, reporter.count)
        return EX_DATAERR
    return 0


def run_prompt(config: LoxConfig, stdin: Optional[TextIO] = None,
               out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Interactive loop. Each line is scanned on its own."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    reporter = ErrorReporter(err)

    try:
        while True:
            out.write(config.prompt)
            out.flush()
            line = stdin.readline()
            if not line:
                out.write("\n")
                break
            run(line.rstrip("\n"), config, reporter, "<stdin>", out)
            reporter.reset()
    except KeyboardInterrupt:
        out.write("\n")

    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan a Lox script, or start an interactive prompt.",
    )
    parser.add_argument("script", nargs="*", help="path to a .lox script")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: $LOX_LOG_LEVEL or WARNING)")
    parser.add_argument("--no-echo", dest="echo_tokens", action="store_false", default=None,
                        help="do not print the scanned tokens")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if len(args.script) > 1:
        print(USAGE, file=sys.stderr)
        return EX_USAGE

    config = LoxConfig.from_env().with_overrides(
        log_level=args.log_level.upper() if args.log_level else None,
        echo_tokens=args.echo_tokens,
    )
    try:
        configure_logging(config.log_level)
    except ValueError as e:
        print(f"lox: {e}", file=sys.stderr)
        return EX_USAGE

    if args.script:
        return run_file(args.script[0], config)
    return run_prompt(config)


if __name__ == "__main__":
    sys.exit(main())
