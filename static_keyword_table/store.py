# ==================================================
# static_keyword_table/store.py
# ==================================================
"""
Binary keyword‑table artifact.

    header   HEADER_FMT (see const.py)
    payload  string buffer | delta‑encoded offsets | g table (<u4)

With FLAG_COMPRESSED the payload is one zstd frame.
"""
from __future__ import annotations
import mmap, os, struct
from pathlib import Path

import numpy as np

from .const import *
from .compression import compress as zcompress, decompress, delta_decode, delta_encode
from .packer import PackedStringTable
from .perfect_hash import HashFunctionSpec
from .table import LookupStructure

HEADER_SIZE = struct.calcsize(HEADER_FMT)


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


# ------------------------------------------------------------------
def dumps(structure: LookupStructure, compress: bool = False) -> bytes:
    strings = structure.strings
    hf = structure.hash_function
    flags = (FLAG_CASE_FOLD if hf.case_fold else 0) | (FLAG_COMPRESSED if compress else 0)
    header = struct.pack(HEADER_FMT, MAGIC, VERSION_MINOR, flags,
                         structure.num_keywords, structure.max_key_length,
                         len(strings.buffer), hf.n_verts,
                         hf.mult1, hf.mult2, hf.seed1, hf.seed2, hf.attempt)
    payload = (strings.buffer
               + delta_encode([int(o) for o in strings.offsets])
               + np.asarray(hf.table, dtype=TABLE_DTYPE).tobytes())
    if compress:
        payload = zcompress(payload)
    return header + payload


def loads(data: bytes) -> LookupStructure:
    if len(data) < HEADER_SIZE:
        raise ValueError("Invalid keyword table file")
    (magic, _ver, flags, n_keys, max_len, string_size, n_verts,
     mult1, mult2, seed1, seed2, attempt) = struct.unpack_from(HEADER_FMT, data, 0)
    if magic != MAGIC:
        raise ValueError("Invalid keyword table file")

    payload = bytes(data[HEADER_SIZE:])
    if flags & FLAG_COMPRESSED:
        payload = decompress(payload)

    buffer = payload[:string_size]
    offsets, pos = delta_decode(payload, n_keys, string_size)
    table_bytes = payload[pos:pos + 4 * n_verts]
    if len(table_bytes) != 4 * n_verts:
        raise ValueError("Truncated keyword table file")
    table = np.frombuffer(table_bytes, dtype=TABLE_DTYPE).astype(np.uint32)

    strings = PackedStringTable(buffer, _readonly(np.asarray(offsets, dtype=np.uint32)),
                                max_len)
    hf = HashFunctionSpec(mult1, mult2, seed1, seed2, _readonly(table),
                          case_fold=bool(flags & FLAG_CASE_FOLD), attempt=attempt)
    return LookupStructure(strings, hf, n_keys, max_len)


# ------------------------------------------------------------------
def save(structure: LookupStructure, path: str | os.PathLike,
         compress: bool = False) -> Path:
    path = Path(path)
    path.write_bytes(dumps(structure, compress=compress))
    return path


def load(path: str | os.PathLike) -> LookupStructure:
    with open(path, "rb") as f, \
            mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
        return loads(mm)
