# ==================================================
# static_keyword_table/const.py
# ==================================================
MAGIC = b"SKT1"           # 4‑byte magic + version major «1»
HEADER_FMT = "<4sHHLLLLLLLLL"  # magic, version_minor, flags, n_keys, max_len, string_size,
                          # n_verts, mult1, mult2, seed1, seed2, attempt
VERSION_MINOR = 1
FLAG_CASE_FOLD = 0x1
FLAG_COMPRESSED = 0x2
TABLE_DTYPE = "<u4"       # g table entries on disk

MASK32 = 0xFFFFFFFF

# -------- synthesizer tunables ------------------------------------------
# Vertex count is int(n_keys * VERTEX_FACTOR) + 1.  Above 2.0 a random
# two‑hash graph is acyclic with probability ~sqrt((c-2)/c) per attempt.
VERTEX_FACTOR = 2.1
MAX_ATTEMPTS = 1000
HASH_MULTIPLIERS = (17, 31, 127, 257, 8191, 65537, 131071, 524287)

# -------- emitter defaults ----------------------------------------------
DEFAULT_VARNAME = "ScanKeywords"
DEFAULT_MACRO = "PG_KEYWORD"
C_INCLUDE = "common/kwlookup.h"
C_LIST_TYPE = "ScanKeywordList"
C_MAX_OFFSET = 0xFFFF     # kw_offsets element is uint16
