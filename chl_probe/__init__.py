"""Search a saved challenge page for the _cf_chl_opt.cH value."""

from chl_probe.probe import (
    DEFAULT_PAGE,
    STEPS,
    run_probe,
    run_step,
)
from chl_probe.version import __version__

__all__ = [
    'DEFAULT_PAGE',
    'STEPS',
    'run_probe',
    'run_step',
    '__version__',
]
