import curses
import locale
import logging
import os
import sys

import config_paths
import logging_setup
from chart_model import BARS, LINE

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from app_state import AppState, InputMode
from input_controller import InputController
from orchestrator import Orchestrator

__version__ = "0.1.0"

USAGE = (
    "termchart - chart a CSV file in the terminal\n\n"
    "Usage:\n"
    "  termchart [-l | -b] [path]\n"
    "  termchart -v\n\n"
    "  -l, --line   numeric x,y rows as a line chart (default)\n"
    "  -b, --bars   label,count rows as a bar chart\n"
)

logger = logging.getLogger(__name__)


def parse_args(args, default_variant=LINE):
    """Returns (variant, path); raises ValueError on bad arguments."""
    variant = default_variant
    path = None
    for arg in args:
        if arg in ("-l", "--line"):
            variant = LINE
        elif arg in ("-b", "--bars"):
            variant = BARS
        elif arg.startswith("-") and arg != "-":
            raise ValueError(f"Unknown option: {arg}")
        elif path is None:
            path = arg
        else:
            raise ValueError("Only one path may be given")
    return variant, path


def build_state(variant, path=None, loader=None):
    state = AppState(variant, path_buffer=path or "")
    if path:
        controller = InputController(state, loader)
        if not controller.submit():
            state.mode = InputMode.EDITING
    return state


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    cfg = config_paths.load_config()
    try:
        logging_setup.configure(cfg["LOG_FILE"], cfg["LOG_LEVEL"])
    except OSError as e:
        print(f"termchart: cannot open log file: {e}", file=sys.stderr)
        logging_setup.configure(None)

    try:
        variant, path = parse_args(args, cfg["DEFAULT_VARIANT"])
    except ValueError as e:
        print(f"termchart: {e}\n\n{USAGE}", file=sys.stderr)
        return 1

    logger.info("Starting with variant=%s path=%r", variant, path)
    state = build_state(variant, path)

    def curses_main(stdscr):
        Orchestrator(stdscr, state).run()

    locale.setlocale(locale.LC_ALL, "")
    try:
        curses.wrapper(curses_main)
    except curses.error as e:
        logger.exception("Terminal setup failed")
        print(f"termchart: terminal error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
