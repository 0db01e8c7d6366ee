"""
Lispy interactive loop and command line entry point.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Readline support for history and line editing
try:
    import readline
    READLINE_AVAILABLE = True
except ImportError:
    READLINE_AVAILABLE = False

from lispy import __version__
from lispy import config
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter

logger = logging.getLogger(__name__)

BANNER = f"Lispy Version {__version__}\nPress Ctrl+c to Exit\n"


def _load_history(path: Optional[Path]) -> None:
    if not READLINE_AVAILABLE or path is None:
        return
    readline.set_history_length(config.get_history_length())
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("could not read history file %s: %s", path, e)


def _save_history(path: Optional[Path]) -> None:
    if not READLINE_AVAILABLE or path is None:
        return
    try:
        readline.write_history_file(path)
    except OSError as e:
        logger.warning("could not write history file %s: %s", path, e)


def repl(interp: Optional[Interpreter] = None) -> Interpreter:
    """Prompt, evaluate and print until `exit`, end of input or Ctrl+c."""
    if interp is None:
        interp = Interpreter()
    history = config.get_history_file()
    _load_history(history)
    prompt = config.get_prompt()

    print(BANNER)
    try:
        while interp.running:
            try:
                line = input(prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not line.strip():
                continue
            try:
                result = interp.eval(line)
            except LispySyntaxError as e:
                print(e)
                continue
            print(interp.render(result))
    finally:
        _save_history(history)
    return interp


def run_file(interp: Interpreter, path: Path) -> int:
    """Evaluate a script line by line, printing each result."""
    with open(path, encoding="utf-8") as f:
        lines = f.read().splitlines()
    try:
        for out in interp.run_lines(lines, filename=str(path)):
            print(out)
    except LispySyntaxError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="lispy",
        description="Lispy - a small Lisp with S-expressions and Q-expressions",
    )
    parser.add_argument("script", nargs="?", help="Lispy script to execute, one expression per line")
    parser.add_argument("-c", "--command", help="evaluate a single input and print the result")
    parser.add_argument("--version", action="version", version=f"Lispy {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    if args.command is not None:
        try:
            print(interp.eval_to_str(args.command, filename="<command>"))
        except LispySyntaxError as e:
            print(e, file=sys.stderr)
            return 1
        return 0
    if args.script:
        return run_file(interp, Path(args.script))
    repl(interp)
    return 0
