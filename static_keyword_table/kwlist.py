# ==================================================
# static_keyword_table/kwlist.py
# ==================================================
"""
Keyword declarations of the form

    PG_KEYWORD("abort", ABORT_P, UNRESERVED_KEYWORD, BARE_LABEL)

Lines not starting with the macro are ignored.  Keywords are numbered
0..N-1 in order of appearance.
"""
from __future__ import annotations
import os
import re
from typing import Iterable, NamedTuple

from .const import DEFAULT_MACRO


class KeywordEntry(NamedTuple):
    name: str
    args: tuple[str, ...]      # remaining macro arguments, passed through


def _pattern(macro: str) -> re.Pattern:
    return re.compile(r'^%s\("(\w+)"\s*(?:,(.*))?\)' % re.escape(macro))


def parse_kwlist(lines: Iterable[str], macro: str = DEFAULT_MACRO) -> list[KeywordEntry]:
    pat = _pattern(macro)
    entries = []
    for line in lines:
        m = pat.match(line)
        if not m:
            continue
        args = tuple(a.strip() for a in (m.group(2) or "").split(",") if a.strip())
        entries.append(KeywordEntry(m.group(1), args))
    return entries


def read_kwlist(path: str | os.PathLike, macro: str = DEFAULT_MACRO) -> list[KeywordEntry]:
    with open(path, encoding="utf-8") as f:
        return parse_kwlist(f, macro)
