# ==================================================
# static_keyword_table/validate.py
# ==================================================
from __future__ import annotations
from typing import Iterable

from .errors import CaseError, CharacterError, KeywordListError, OrderingError


def _encode(key: str | bytes) -> bytes:
    return key if isinstance(key, bytes) else key.encode("utf-8")


def validate_keywords(keys: Iterable[str | bytes], case_fold: bool = True,
                      source: str | None = None) -> tuple[bytes, ...]:
    """
    Check a keyword list before any table is built and return it as bytes.

    • every keyword is non‑empty and free of NUL bytes (NUL terminates
      entries in the packed string table);
    • with `case_fold`, every keyword is ASCII and already lower‑case;
    • keywords are strictly increasing in byte order, which also rejects
      duplicates.
    """
    out = tuple(_encode(k) for k in keys)
    if not out:
        raise KeywordListError("no keywords" + (f" in {source}" if source else ""))

    for pos, kw in enumerate(out):
        name = kw.decode("utf-8", "replace")
        if not kw or b"\0" in kw:
            raise CharacterError(name, pos, source)
        if case_fold:
            if not kw.isascii():
                raise CharacterError(name, pos, source)
            if kw != kw.lower():
                raise CaseError(name, pos, source)

    for pos in range(1, len(out)):
        if out[pos - 1] >= out[pos]:
            raise OrderingError(out[pos].decode("utf-8", "replace"), pos, source)
    return out
