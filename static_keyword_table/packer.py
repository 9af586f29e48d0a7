# ==================================================
# static_keyword_table/packer.py
# ==================================================
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class PackedStringTable:
    """All keywords in one NUL‑separated buffer plus per‑keyword offsets."""
    buffer: bytes
    offsets: np.ndarray        # uint32, strictly increasing
    max_key_length: int

    def __len__(self) -> int:
        return len(self.offsets)

    def key(self, i: int) -> bytes:
        start = int(self.offsets[i])
        end = int(self.offsets[i + 1]) - 1 if i + 1 < len(self.offsets) \
            else len(self.buffer) - 1
        return self.buffer[start:end]

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.buffer[:-1].split(b"\0"))


def pack_strings(keys: Sequence[bytes]) -> PackedStringTable:
    lengths = np.fromiter((len(k) for k in keys), dtype=np.uint32, count=len(keys))
    # offset of key i = sum of (len + 1) over keys before it
    offsets = np.zeros(len(keys), dtype=np.uint32)
    if len(keys) > 1:
        offsets[1:] = np.cumsum(lengths[:-1] + 1, dtype=np.uint32)
    buffer = b"\0".join(keys) + b"\0"
    max_len = int(lengths.max()) if len(keys) else 0
    return PackedStringTable(buffer, _frozen(offsets), max_len)
