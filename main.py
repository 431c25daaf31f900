import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from _version import __version__
from default_sections import DefaultSectionsInitializer
from errors import TerminalInitFailure, TerminalResetFailure
from logging_config import setup_logging
from orchestrator import Orchestrator
from terminal import TerminalSession


logger = logging.getLogger(__name__)

USAGE = (
    "navipod - terminal dashboard of sections and rows\n\n"
    "Usage:\n  navipod\n  navipod -v\n  navipod -h\n\n"
    "Keys:\n  Tab / Shift+Tab   next / previous section\n"
    "  Down, j / Up, k   next / previous row\n  q                 quit\n"
)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    cfg = config_paths.load_config()
    setup_logging(cfg)
    store = DefaultSectionsInitializer(cfg["SECTIONS"]).create()
    logger.info("starting navipod %s with sections %s", __version__, store.titles())

    try:
        with TerminalSession() as stdscr:
            Orchestrator(stdscr, store).run()
    except (TerminalInitFailure, TerminalResetFailure) as e:
        print(f"navipod: {e}", file=sys.stderr)
        return 1

    logger.info("navipod stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
