# ==================================================
# static_keyword_table/cli.py
# ==================================================
"""
gen-keywordlist: turn a list of PG_KEYWORD(...) declarations into a keyword
lookup table.  The output name is derived from the input by inserting _d,
e.g. kwlist_d.h is produced from kwlist.h.
"""
from __future__ import annotations
import argparse, logging, re, sys
from pathlib import Path

from .config import GeneratorConfig, Visibility
from .const import DEFAULT_MACRO, DEFAULT_VARNAME
from .emit import emit_c_header
from .errors import KeywordListError
from .generator import generate
from .kwlist import read_kwlist
from .store import save

log = logging.getLogger(__name__)

SUFFIXES = {"c": ".h", "binary": ".skt"}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gen-keywordlist", description=__doc__,
                                formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("input_file", help="keyword list, must be named <something>.h")
    p.add_argument("-o", "--output", default="", help="output directory (default '.')")
    p.add_argument("-v", "--varname", default=DEFAULT_VARNAME,
                   help=f"name of the keyword list variable (default {DEFAULT_VARNAME})")
    p.add_argument("-e", "--extern", action="store_true",
                   help="make the keyword list variable globally visible")
    p.add_argument("--case-fold", action=argparse.BooleanOptionalAction, default=True,
                   help="keyword matching ignores ASCII case (default on)")
    p.add_argument("--seed", type=int, default=None,
                   help="seed for the perfect hash search (default $KWTABLE_SEED or 0)")
    p.add_argument("--format", choices=sorted(SUFFIXES), default="c")
    p.add_argument("--compress", action="store_true",
                   help="zstd‑compress the binary artifact payload")
    p.add_argument("--macro", default=DEFAULT_MACRO,
                   help=f"declaration macro to scan for (default {DEFAULT_MACRO})")
    p.add_argument("--verbose", action="store_true")
    return p


def output_path(input_file: str | Path, output_dir: str | Path, fmt: str) -> Path:
    m = re.search(r"(\w+)\.h$", str(input_file))
    if not m:
        raise ValueError("Input file must be named something.h")
    return Path(output_dir or ".") / (m.group(1) + "_d" + SUFFIXES[fmt])


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = GeneratorConfig.from_env(
            case_fold=args.case_fold, varname=args.varname, seed=args.seed,
            visibility=Visibility.EXPORTED if args.extern else Visibility.INTERNAL)
        out = output_path(args.input_file, args.output, args.format)
        entries = read_kwlist(args.input_file, args.macro)
        structure = generate((e.name for e in entries), config,
                             source=str(args.input_file))
        if args.format == "binary":
            save(structure, out, compress=args.compress)
        else:
            # render first so a rejected table never leaves a file behind
            text = emit_c_header(structure, out.name[:-len(".h")],
                                 varname=config.varname,
                                 visibility=config.visibility)
            out.write_text(text, encoding="utf-8")
    except (KeywordListError, ValueError, OSError) as e:
        print(f"gen-keywordlist: {e}", file=sys.stderr)
        return 1

    print("  ⋄ wrote", out)
    return 0
