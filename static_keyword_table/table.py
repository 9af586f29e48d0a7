# ==================================================
# static_keyword_table/table.py
# ==================================================
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from .packer import PackedStringTable
from .perfect_hash import HashFunctionSpec, canonicalizer


@dataclass(frozen=True)
class LookupStructure:
    """Immutable keyword table: packed strings + perfect hash + metadata."""
    strings: PackedStringTable
    hash_function: HashFunctionSpec
    num_keywords: int
    max_key_length: int

    @property
    def case_fold(self) -> bool:
        return self.hash_function.case_fold

    # ------------------------------------------------------------------
    def lookup(self, word: str | bytes) -> int:
        """Ordinal of `word`, or -1 when it is not a keyword."""
        if isinstance(word, str):
            word = word.encode("utf-8")
        if len(word) > self.max_key_length:
            return -1
        slot = self.hash_function(word)
        if slot >= self.num_keywords:
            return -1
        # the hash is only perfect over the keywords; confirm the match
        if canonicalizer(self.case_fold)(word) != self.strings.key(slot):
            return -1
        return slot

    def __contains__(self, word: str | bytes) -> bool:
        return self.lookup(word) >= 0

    # ------------------------------------------------------------------
    def keyword(self, ordinal: int) -> str:
        return self.strings.key(ordinal).decode("utf-8")

    def keywords(self) -> list[str]:
        return [k.decode("utf-8") for k in self.strings]

    def __len__(self) -> int:
        return self.num_keywords

    def __iter__(self) -> Iterator[str]:
        return iter(self.keywords())
