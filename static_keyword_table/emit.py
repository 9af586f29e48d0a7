# ==================================================
# static_keyword_table/emit.py
# ==================================================
"""Render a LookupStructure as a self‑contained C header."""
from __future__ import annotations
from typing import Iterable

from .config import Visibility
from .const import C_INCLUDE, C_LIST_TYPE, C_MAX_OFFSET, DEFAULT_VARNAME
from .errors import KeywordListError
from .table import LookupStructure

_BANNER = """\
/*-------------------------------------------------------------------------
 *
 * {name}.h
 *    List of keywords represented as a {list_type}.
 *
 * NOTES
 *  ******************************
 *  *** DO NOT EDIT THIS FILE! ***
 *  ******************************
 *
 *  It has been GENERATED by gen-keywordlist
 *
 *-------------------------------------------------------------------------
 */

#ifndef {guard}_H
#define {guard}_H

#include "{include}"

"""

_FMIX = ("\t{v} ^= {v} >> 16;\n"
         "\t{v} *= 0x85ebca6bu;\n"
         "\t{v} ^= {v} >> 13;\n"
         "\t{v} *= 0xc2b2ae35u;\n"
         "\t{v} ^= {v} >> 16;\n")


def _ctype(max_value: int) -> str:
    return "uint16" if max_value <= 0xFFFF else "uint32"


def _c_string(kw: bytes) -> str:
    out = []
    for c in kw:
        if c in (0x22, 0x5C):                 # " and backslash
            out.append("\\" + chr(c))
        elif 0x20 <= c < 0x7F:
            out.append(chr(c))
        else:
            out.append(f"\\{c:03o}")
    return "".join(out)


def _rows(values: Iterable[int], per_row: int = 10) -> str:
    values = [str(int(v)) for v in values]
    rows = [", ".join(values[i:i + per_row]) for i in range(0, len(values), per_row)]
    return ",\n".join("\t\t" + r for r in rows)


# ----------------------------------------------------------------------
def emit_hash_function(structure: LookupStructure, funcname: str) -> str:
    hf = structure.hash_function
    nv = hf.n_verts
    fold = ("\t\tif (c >= 'A' && c <= 'Z')\n"
            "\t\t\tc += 'a' - 'A';\n") if hf.case_fold else ""
    return (
        f"int\n{funcname}(const void *key, size_t keylen)\n{{\n"
        f"\tstatic const {_ctype(nv - 1)} h[{nv}] = {{\n"
        f"{_rows(hf.table)}\n\t}};\n\n"
        f"\tconst unsigned char *k = (const unsigned char *) key;\n"
        f"\tuint32\t\ta = {hf.seed1}u;\n"
        f"\tuint32\t\tb = {hf.seed2}u;\n\n"
        f"\twhile (keylen--)\n\t{{\n"
        f"\t\tunsigned char c = *k++;\n\n"
        f"{fold}"
        f"\t\ta = a * {hf.mult1} + c;\n"
        f"\t\tb = b * {hf.mult2} + c;\n"
        f"\t}}\n"
        f"{_FMIX.format(v='a')}{_FMIX.format(v='b')}"
        f"\treturn (int) (((uint64) h[a % {nv}] + h[b % {nv}]) % {nv});\n"
        f"}}\n")


def emit_c_header(structure: LookupStructure, base_filename: str,
                  varname: str = DEFAULT_VARNAME,
                  visibility: Visibility = Visibility.INTERNAL) -> str:
    strings = structure.strings
    guard = base_filename.upper()
    funcname = f"{varname}_hash_func"
    nkw_macro = f"{varname.upper()}_NUM_KEYWORDS"

    out = [_BANNER.format(name=base_filename, guard=guard,
                          include=C_INCLUDE, list_type=C_LIST_TYPE)]

    # one string holding every keyword, NUL‑separated
    body = '\\0"\n\t"'.join(_c_string(kw) for kw in strings)
    out.append(f'static const char {varname}_kw_string[] =\n\t"{body}";\n\n')

    # ScanKeywordList.kw_offsets is a uint16 array
    last = int(strings.offsets[-1]) if len(strings) else 0
    if last > C_MAX_OFFSET:
        raise KeywordListError(
            f"keyword string table is {len(strings.buffer)} bytes; offset {last} "
            f"does not fit the uint16 offsets of {C_LIST_TYPE}")
    out.append(f"static const uint16 {varname}_kw_offsets[] = {{\n")
    out.extend(f"\t{int(off)},\n" for off in strings.offsets)
    out.append("};\n\n")

    out.append(f"#define {nkw_macro} {structure.num_keywords}\n\n")
    out.append("static " + emit_hash_function(structure, funcname) + "\n")

    if visibility is Visibility.INTERNAL:
        out.append("static ")
    out.append(f"const {C_LIST_TYPE} {varname} = {{\n"
               f"\t{varname}_kw_string,\n"
               f"\t{varname}_kw_offsets,\n"
               f"\t{funcname},\n"
               f"\t{nkw_macro},\n"
               f"\t{structure.max_key_length}\n"
               f"}};\n\n")
    out.append(f"#endif\t\t\t\t\t\t\t/* {guard}_H */\n")
    return "".join(out)
