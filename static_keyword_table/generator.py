# ==================================================
# static_keyword_table/generator.py
# ==================================================
from __future__ import annotations
from typing import Iterable

from .config import GeneratorConfig
from .packer import pack_strings
from .perfect_hash import synthesize
from .table import LookupStructure
from .validate import validate_keywords


def generate(keys: Iterable[str | bytes], config: GeneratorConfig | None = None,
             source: str | None = None) -> LookupStructure:
    """Validate → pack → synthesize.  Raises KeywordListError on bad input."""
    config = config or GeneratorConfig()
    kws = validate_keywords(keys, case_fold=config.case_fold, source=source)
    strings = pack_strings(kws)
    hash_function = synthesize(kws, case_fold=config.case_fold,
                               seed=config.seed,
                               max_attempts=config.max_attempts,
                               vertex_factor=config.vertex_factor)
    return LookupStructure(strings, hash_function, len(kws), strings.max_key_length)
