"""The seven cH search steps and the report that runs them in order."""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

from chl_probe.search import (
    grep_after,
    grep_only,
    head,
    head_chars,
    read_page,
    sed_range,
)

log = logging.getLogger(__name__)

DEFAULT_PAGE = 'debug_turnstile.html'

# Quoted JS string: either quote style, no quotes inside
_Q = "[\"']"
_VALUE = "[^\"']+"
_LONG_VALUE = "[^\"']{20,}"

CH_ASSIGN = rf"window\._cf_chl_opt\.cH\s*=\s*{_Q}{_VALUE}{_Q}"
CH_SHORT_ASSIGN = rf"\.cH\s*=\s*{_Q}{_LONG_VALUE}{_Q}"
CH_KEY_VALUE = rf"{_Q}cH{_Q}\s*:\s*{_Q}{_LONG_VALUE}{_Q}"
CH_MINIFIED = rf"cH:{_Q}{_LONG_VALUE}{_Q}"
ANY_OPT_ASSIGN = rf"window\._cf_chl_opt\.\w+\s*=\s*{_Q}{_VALUE}{_Q}"

OPT_INIT = 'var _cf_chl_opt'
CONTEXT_AFTER = 20
CONTEXT_LINES = 30
SCRIPT_CHARS = 2000


@dataclass(frozen=True)
class Step:
    number: int
    label: str
    run: Callable[[str], list[str] | str]


def _matches(pattern: str, limit: int | None = None) -> Callable[[str], list[str]]:
    return lambda text: head(grep_only(text, pattern), limit)


def _opt_context(text: str) -> list[str]:
    return head(grep_after(text, OPT_INIT, CONTEXT_AFTER), CONTEXT_LINES)


def _script_dump(text: str) -> str:
    return head_chars(sed_range(text, '<script', '</script>'), SCRIPT_CHARS)


STEPS: tuple[Step, ...] = (
    Step(1, 'Looking for window._cf_chl_opt.cH pattern', _matches(CH_ASSIGN)),
    Step(2, 'Looking for .cH= pattern', _matches(CH_SHORT_ASSIGN, 5)),
    Step(3, 'Looking for "cH": pattern', _matches(CH_KEY_VALUE, 5)),
    Step(4, 'Looking for cH: pattern (minified)', _matches(CH_MINIFIED, 5)),
    Step(5, 'All _cf_chl_opt property assignments', _matches(ANY_OPT_ASSIGN, 20)),
    Step(6, 'Looking for _cf_chl_opt object initialization', _opt_context),
    Step(7, f'First script tag content (first {SCRIPT_CHARS} chars)', _script_dump),
)


def run_step(step: Step, path: str, out: TextIO) -> None:
    """Write the step header, then its result. The page is re-read every step."""
    out.write(f'\n{step.number}. {step.label}:\n')
    result = step.run(read_page(path))
    if isinstance(result, str):
        # Raw dump: written verbatim, no newline added
        out.write(result)
        log.debug("Step %d: %d chars", step.number, len(result))
        return
    for line in result:
        out.write(line + '\n')
    log.debug("Step %d: %d lines", step.number, len(result))


def run_probe(path: str = DEFAULT_PAGE, out: TextIO | None = None) -> None:
    """Run every step against path, writing the report to out (stdout by default)."""
    if out is None:
        out = sys.stdout
    log.info("Probing %s", path)
    out.write(f'=== Looking for cH in {path} ===\n')
    for step in STEPS:
        run_step(step, path, out)
    out.flush()
