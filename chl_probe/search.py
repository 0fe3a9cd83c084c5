"""Line-oriented text search: grep -o, grep -A, sed range printing, head."""

import logging
import re

log = logging.getLogger(__name__)

# Separator grep prints between non-contiguous context groups
GROUP_SEPARATOR = '--'

# Undecodable bytes survive as surrogates; the report is written back with the same handler
PAGE_ERRORS = 'surrogateescape'


def read_page(path: str) -> str:
    """Read the page as text. Unreadable files yield '' (logged, not raised)."""
    try:
        with open(path, encoding='utf-8', errors=PAGE_ERRORS, newline='') as f:
            return f.read()
    except OSError as e:
        log.warning("Cannot read %s: %s", path, e)
        return ''


def split_lines(text: str, keepends: bool = False) -> list[str]:
    """Split on '\\n' only; a trailing newline does not add an empty line.
    With keepends, each line keeps its '\\n' (the last one only if the text had it).
    """
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    if keepends:
        lines = [line + '\n' for line in lines]
        if not text.endswith('\n'):
            lines[-1] = lines[-1][:-1]
    return lines


def grep_only(text: str, pattern: str) -> list[str]:
    """Non-empty matches of pattern on each line, in document order."""
    rx = re.compile(pattern, re.ASCII)
    found: list[str] = []
    for line in split_lines(text):
        for m in rx.finditer(line):
            if m.group(0):
                found.append(m.group(0))
    return found


def grep_after(text: str, literal: str, after: int) -> list[str]:
    """Lines containing literal plus `after` trailing lines each.
    Overlapping groups merge; '--' separates groups with a gap between them.
    """
    lines = split_lines(text)
    out: list[str] = []
    last = -1  # index of the last line emitted
    for i, line in enumerate(lines):
        if literal not in line:
            continue
        start = max(i, last + 1)
        if out and start > last + 1:
            out.append(GROUP_SEPARATOR)
        end = min(len(lines) - 1, i + after)
        out.extend(lines[start:end + 1])
        last = max(last, end)
    return out


def sed_range(text: str, start: str, end: str) -> list[str]:
    """Lines from one containing `start` through the next later line containing `end`.
    The end marker is only looked for after the start line; ranges repeat.
    Lines keep their line endings, so joining them reproduces the source verbatim.
    """
    out: list[str] = []
    inside = False
    for line in split_lines(text, keepends=True):
        if inside:
            out.append(line)
            if end in line:
                inside = False
        elif start in line:
            out.append(line)
            inside = True
    return out


def head(items: list[str], n: int | None) -> list[str]:
    """First n items (all when n is None)."""
    if n is None:
        return list(items)
    return items[:n]


def head_chars(lines: list[str], n: int) -> str:
    """Join lines (which carry their own endings) and keep the first n characters."""
    return ''.join(lines)[:n]
