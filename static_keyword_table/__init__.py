from .config import GeneratorConfig, Visibility
from .emit import emit_c_header
from .errors import (CaseError, CharacterError, GenerationError,
                     KeywordListError, OrderingError)
from .generator import generate
from .kwlist import KeywordEntry, parse_kwlist, read_kwlist
from .packer import PackedStringTable, pack_strings
from .perfect_hash import HashFunctionSpec, synthesize
from .table import LookupStructure
from .validate import validate_keywords

__all__ = ["GeneratorConfig", "Visibility", "emit_c_header", "CaseError",
           "CharacterError", "GenerationError", "KeywordListError",
           "OrderingError", "generate", "KeywordEntry", "parse_kwlist",
           "read_kwlist", "PackedStringTable", "pack_strings",
           "HashFunctionSpec", "synthesize", "LookupStructure",
           "validate_keywords"]
