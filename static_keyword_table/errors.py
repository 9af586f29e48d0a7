# ==================================================
# static_keyword_table/errors.py
# ==================================================
from __future__ import annotations


class KeywordListError(ValueError):
    """Base class: anything that aborts generation of a keyword table."""


class _BadKeyword(KeywordListError):
    reason = "is invalid"

    def __init__(self, key: str, position: int, source: str | None = None):
        self.key = key
        self.position = position
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(
            f'The keyword "{key}" (position {position}) {self.reason}{where}')


class OrderingError(_BadKeyword):
    reason = "is out of order"


class CaseError(_BadKeyword):
    reason = "is not lower-case"


class CharacterError(_BadKeyword):
    reason = "contains characters that cannot be stored"


class GenerationError(KeywordListError):
    def __init__(self, attempts: int, n_keys: int):
        self.attempts = attempts
        self.n_keys = n_keys
        super().__init__(
            f"could not find a perfect hash for {n_keys} keywords "
            f"in {attempts} attempts")
