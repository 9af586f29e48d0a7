# ==================================================
# static_keyword_table/perfect_hash.py
# ==================================================
"""
Minimal perfect hash synthesis (Czech, Havas & Majewski).

Every keyword becomes an edge between two vertices of a graph with M
vertices, chosen by two independent auxiliary hashes.  When that graph is
a forest, vertex values g can be assigned so that

    (g[h1(key)] + g[h2(key)]) % M == ordinal(key)

for every keyword.  A cyclic graph is thrown away and the next attempt draws
fresh mixing constants, which are derived from (seed, attempt) only, so a
given seed always yields the same function.
"""
from __future__ import annotations
import logging
import struct
from dataclasses import dataclass
from hashlib import blake2b
from typing import Callable, Sequence

import numpy as np

from .const import HASH_MULTIPLIERS, MASK32, MAX_ATTEMPTS, VERTEX_FACTOR
from .errors import GenerationError

log = logging.getLogger(__name__)


# -------- canonicalization -------------------------------------------------

def _identity(key: bytes) -> bytes:
    return key


def canonicalizer(case_fold: bool) -> Callable[[bytes], bytes]:
    """bytes.lower only touches A‑Z, which is all the folding we promise."""
    return bytes.lower if case_fold else _identity


# -------- mixing -----------------------------------------------------------

def _fmix32(h: int) -> int:
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & MASK32
    h ^= h >> 16
    return h


def mix(key: bytes, mult: int, seed: int) -> int:
    h = seed
    for c in key:
        h = (h * mult + c) & MASK32
    return _fmix32(h)


def draw_constants(seed: int, attempt: int) -> tuple[int, int, int, int]:
    """(mult1, mult2, seed1, seed2) for one attempt; mult1 != mult2."""
    digest = blake2b(struct.pack("<QL", seed & 0xFFFFFFFFFFFFFFFF, attempt),
                     digest_size=16).digest()
    i, j, seed1, seed2 = struct.unpack("<LLLL", digest)
    mult1 = HASH_MULTIPLIERS[i % len(HASH_MULTIPLIERS)]
    others = [m for m in HASH_MULTIPLIERS if m != mult1]
    return mult1, others[j % len(others)], seed1, seed2


def vertex_count(n_keys: int, factor: float = VERTEX_FACTOR) -> int:
    return int(n_keys * factor) + 1


# -------- result -----------------------------------------------------------

@dataclass(frozen=True, eq=False)
class HashFunctionSpec:
    mult1: int
    mult2: int
    seed1: int
    seed2: int
    table: np.ndarray          # g, uint32, one entry per vertex
    case_fold: bool = True
    attempt: int = 0

    @property
    def n_verts(self) -> int:
        return len(self.table)

    def vertices(self, key: bytes) -> tuple[int, int]:
        key = canonicalizer(self.case_fold)(key)
        return (mix(key, self.mult1, self.seed1) % self.n_verts,
                mix(key, self.mult2, self.seed2) % self.n_verts)

    def __call__(self, key: bytes) -> int:
        """Candidate slot in [0, M); only meaningful for keywords."""
        a, b = self.vertices(key)
        return (int(self.table[a]) + int(self.table[b])) % self.n_verts


# -------- graph ------------------------------------------------------------

def _find(parent: list[int], v: int) -> int:
    while parent[v] != v:
        parent[v] = parent[parent[v]]
        v = parent[v]
    return v


def _is_forest(edges: Sequence[tuple[int, int]], n_verts: int) -> bool:
    parent = list(range(n_verts))
    for a, b in edges:
        ra, rb = _find(parent, a), _find(parent, b)
        if ra == rb:                     # self‑loop, parallel edge or cycle
            return False
        parent[ra] = rb
    return True


def _assign(edges: Sequence[tuple[int, int]], n_verts: int) -> list[int]:
    adjacent: list[list[tuple[int, int]]] = [[] for _ in range(n_verts)]
    for ordinal, (a, b) in enumerate(edges):
        adjacent[a].append((b, ordinal))
        adjacent[b].append((a, ordinal))

    g = [0] * n_verts
    visited = bytearray(n_verts)
    for root in range(n_verts):
        if visited[root]:
            continue
        visited[root] = 1               # g[root] stays 0
        stack = [root]
        while stack:
            v = stack.pop()
            for u, ordinal in adjacent[v]:
                if not visited[u]:
                    visited[u] = 1
                    g[u] = (ordinal - g[v]) % n_verts
                    stack.append(u)
    return g


# -------- synthesis --------------------------------------------------------

def synthesize(keys: Sequence[bytes], case_fold: bool = True, seed: int = 0,
               max_attempts: int = MAX_ATTEMPTS,
               vertex_factor: float = VERTEX_FACTOR) -> HashFunctionSpec:
    if not vertex_factor > 0 or max_attempts < 1:
        raise ValueError("vertex_factor must be positive and max_attempts at least 1")
    canon = canonicalizer(case_fold)
    folded = [canon(k) for k in keys]
    n_verts = vertex_count(len(keys), vertex_factor)

    for attempt in range(max_attempts):
        mult1, mult2, seed1, seed2 = draw_constants(seed, attempt)
        edges = [(mix(k, mult1, seed1) % n_verts, mix(k, mult2, seed2) % n_verts)
                 for k in folded]
        if not _is_forest(edges, n_verts):
            log.debug(f"attempt {attempt}: graph has a cycle, retrying")
            continue

        table = np.asarray(_assign(edges, n_verts), dtype=np.uint32)
        ends = np.asarray(edges, dtype=np.int64).reshape(-1, 2)
        sums = (table[ends[:, 0]].astype(np.int64) + table[ends[:, 1]]) % n_verts
        if not np.array_equal(sums, np.arange(len(keys))):
            raise GenerationError(attempt + 1, len(keys))
        table.flags.writeable = False

        log.info(f"perfect hash for {len(keys)} keywords found on attempt "
                 f"{attempt + 1} ({n_verts} vertices)")
        return HashFunctionSpec(mult1, mult2, seed1, seed2, table,
                                case_fold=case_fold, attempt=attempt)

    raise GenerationError(max_attempts, len(keys))
