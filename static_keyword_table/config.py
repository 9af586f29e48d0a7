# ==================================================
# static_keyword_table/config.py
# ==================================================
from __future__ import annotations
import enum
import os
from dataclasses import dataclass

from .const import DEFAULT_VARNAME, MAX_ATTEMPTS, VERTEX_FACTOR


class Visibility(enum.Enum):
    INTERNAL = "internal"      # emitted as `static`
    EXPORTED = "exported"


@dataclass(frozen=True)
class GeneratorConfig:
    case_fold: bool = True
    varname: str = DEFAULT_VARNAME
    visibility: Visibility = Visibility.INTERNAL
    seed: int = 0
    max_attempts: int = MAX_ATTEMPTS
    vertex_factor: float = VERTEX_FACTOR

    def __post_init__(self):
        if not self.vertex_factor > 0:
            raise ValueError(f"vertex_factor must be positive, got {self.vertex_factor}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")

    @classmethod
    def from_env(cls, **overrides) -> "GeneratorConfig":
        """Defaults taken from KWTABLE_* environment variables."""
        env = dict(
            seed=int(os.getenv("KWTABLE_SEED", "0")),
            max_attempts=int(os.getenv("KWTABLE_MAX_ATTEMPTS", str(MAX_ATTEMPTS))),
            vertex_factor=float(os.getenv("KWTABLE_VERTEX_FACTOR", str(VERTEX_FACTOR))),
        )
        env.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**env)
