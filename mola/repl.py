"""Line-oriented REPL and script runner for Mola.

The loop prints a prompt, reads one line, and writes whatever
Interpreter.rep produced for it. End of input ends the loop; an interrupt
ends it between iterations. Script mode evaluates every form of each file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from mola import __version__, config
from mola.interpreter import Interpreter

logger = logging.getLogger(__name__)


def _enable_history() -> None:
    """Turn on line editing and history when stdin is a terminal."""
    try:
        import readline
    except ImportError:
        # not available on every platform
        return
    import atexit

    history = config.get_history_file()
    if history is None:
        return
    try:
        readline.read_history_file(history)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("could not read history file %s: %s", history, e)
    atexit.register(readline.write_history_file, history)


def run(
    interp: Interpreter,
    stdin: TextIO,
    stdout: TextIO,
    prompt: Optional[str] = None,
) -> None:
    """Run the read loop until end of input.

    Raises EOFError when the input is exhausted; I/O errors from the
    streams propagate unchanged.
    """
    if prompt is None:
        prompt = config.get_prompt()
    while True:
        stdout.write(interp.rep(_read_line(stdin, stdout, prompt)))


def _read_line(stdin: TextIO, stdout: TextIO, prompt: str) -> str:
    # input() is what picks up readline editing on a terminal
    if stdin is sys.stdin and stdout is sys.stdout and stdin.isatty():
        return input(prompt) + "\n"
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError
    return line


def run_files(interp: Interpreter, paths: list[Path], stdout: TextIO) -> None:
    for path in paths:
        logger.debug("running %s", path)
        text = path.read_text(encoding="utf-8")
        for out in interp.run_source(text):
            stdout.write(out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mola",
        description="Read, evaluate and print Mola expressions.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="source files to run; with none, start an interactive REPL",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $MOLA_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = (args.log_level or config.get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    interp = Interpreter()
    try:
        if args.files:
            run_files(interp, args.files, sys.stdout)
            return 0
        if sys.stdin.isatty():
            _enable_history()
        run(interp, sys.stdin, sys.stdout)
    except EOFError:
        sys.stdout.write("\n")
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    except OSError as e:
        print(f"{e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
