import argparse
import curses
import logging
import os
import signal
import sys
from importlib.metadata import PackageNotFoundError, version

from table_loader import TableLoadError, TableLoader
import config_paths

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from app_state import AppState
from orchestrator import Orchestrator

logger = logging.getLogger(__name__)

try:
    __version__ = version("tabpeek")
except PackageNotFoundError:
    __version__ = "0.0.0"

USAGE_EPILOG = """\
Move between cells with the arrow keys or hjkl. PageUp/PageDown scroll a page.
Home or gg jumps to the first row, End or G to the last; 0 and $ jump to the
first and last column. Sort by the column under the cursor with a (ascending)
or d (descending) and return to file order with o. Type / followed by a term
and Enter to search the current column; Space repeats the last search.
Quit with q or Ctrl-x.
"""


def single_char(value: str) -> str:
    if value == "\\t":
        return "\t"
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabpeek",
        description="Interactive table viewer for the command line.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", help="Path to CSV/TSV file (default: stdin)")
    parser.add_argument(
        "-d", "--delimiter", type=single_char,
        help="Field delimiter (default: tab for .tsv/.tab files, comma otherwise)",
    )
    parser.add_argument("-q", "--quote", type=single_char, default='"', help="Quote character")
    parser.add_argument(
        "-i", "--ignore-case", action="store_true", default=None,
        help="Case-insensitive search",
    )
    parser.add_argument(
        "--no-row-numbers", dest="row_numbers", action="store_false", default=None,
        help="Do not prepend the # column",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str = config_paths.LOG_LEVEL_DEFAULT):
    try:
        config_paths.ensure_config_dirs()
    except OSError:
        # nowhere to write; curses owns the terminal so stay silent
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=config_paths.LOG_PATH,
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _attach_tty():
    """Point fd 0 at the controlling terminal once the table came from a pipe."""
    fd = os.open("/dev/tty", os.O_RDONLY)
    os.dup2(fd, 0)
    os.close(fd)


def _raise_exit(signum, _frame):
    raise SystemExit(128 + signum)


def main(argv=None):
    args = build_parser().parse_args(argv)
    # logging first so config warnings land in the log file
    configure_logging()
    config = config_paths.load_config()
    logging.getLogger().setLevel(getattr(logging, config["LOG_LEVEL"], logging.WARNING))

    if args.ignore_case is not None:
        config["IGNORE_CASE"] = args.ignore_case
    if args.row_numbers is not None:
        config["ROW_NUMBERS"] = args.row_numbers

    loader = TableLoader(
        args.file,
        delimiter=args.delimiter,
        quote=args.quote,
        row_numbers=config["ROW_NUMBERS"],
    )
    try:
        table = loader.load()
    except TableLoadError as exc:
        logger.error("failed to load %s: %s", loader.source_name, exc)
        print(f"Error reading {loader.source_name}: {exc}", file=sys.stderr)
        return 1

    if loader.from_stdin and not sys.stdin.isatty():
        try:
            _attach_tty()
        except OSError as exc:
            print(f"No terminal available for input: {exc}", file=sys.stderr)
            return 1

    # SIGTERM unwinds through curses.wrapper so the terminal gets restored
    signal.signal(signal.SIGTERM, _raise_exit)

    state = AppState(table, args.file if not loader.from_stdin else None)

    def curses_main(stdscr):
        Orchestrator(stdscr, state, config).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
