"""Configure logging to stderr; stdout is reserved for the report."""

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure the chl_probe logger: stderr at WARNING, or DEBUG when verbose."""
    root = logging.getLogger("chl_probe")
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    eh = logging.StreamHandler(sys.stderr)
    eh.setLevel(logging.DEBUG if verbose else logging.WARNING)
    eh.setFormatter(fmt)
    root.addHandler(eh)

    root.debug("Logging started; verbose=%s", verbose)
