"""Entry point: run the cH probe against a saved page (default debug_turnstile.html)."""

import logging
import sys

from chl_probe import DEFAULT_PAGE, run_probe
from chl_probe.log_config import setup_logging
from chl_probe.search import PAGE_ERRORS

USAGE = "Usage: python main.py [-v] [page.html]"


def _raw_stdout() -> None:
    """Write the report as the page's own bytes, whatever the console encoding."""
    reconfigure = getattr(sys.stdout, 'reconfigure', None)
    if reconfigure is not None:
        reconfigure(encoding='utf-8', errors=PAGE_ERRORS, newline='')


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = False
    for flag in ('-v', '--verbose'):
        while flag in args:
            args.remove(flag)
            verbose = True
    if len(args) > 1 or any(a.startswith('-') for a in args):
        print(USAGE, file=sys.stderr)
        return 2
    setup_logging(verbose)
    log = logging.getLogger("chl_probe.main")
    path = args[0] if args else DEFAULT_PAGE
    _raw_stdout()
    run_probe(path)
    log.debug("Done: %s", path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
