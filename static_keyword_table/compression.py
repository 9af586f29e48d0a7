# ==================================================
# static_keyword_table/compression.py
# ==================================================
from __future__ import annotations

import zstandard as zstd

# -------- Delta‑encoding helpers -----------------------------------------

def delta_encode(sorted_ints: list[int]) -> bytes:
    """Unsigned LEB128 varints of successive differences."""
    out = bytearray()
    prev = 0
    for n in sorted_ints:
        delta = n - prev
        prev = n
        while True:
            byte = delta & 0x7F
            delta >>= 7
            if delta:
                out.append(byte | 0x80)
            else:
                out.append(byte)
                break
    return bytes(out)


def delta_decode(data: bytes, count: int, pos: int = 0) -> tuple[list[int], int]:
    """Read `count` values written by delta_encode; returns (values, end pos)."""
    values = []
    prev = 0
    for _ in range(count):
        delta = shift = 0
        while True:
            if pos >= len(data):
                raise ValueError("Truncated offset table")
            byte = data[pos]
            pos += 1
            delta |= (byte & 0x7F) << shift
            shift += 7
            if not byte & 0x80:
                break
        prev += delta
        values.append(prev)
    return values, pos

# -------- zstd wrappers ---------------------------------------------------

cctx = zstd.ZstdCompressor(level=3)
dctx = zstd.ZstdDecompressor()

def compress(data: bytes) -> bytes:
    return cctx.compress(data)

def decompress(data: bytes) -> bytes:
    return dctx.decompress(data)
