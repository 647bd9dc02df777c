"""
Fold execution settings.

Defaults can be overridden through the environment:

    ORIGAMI_STRATEGY         sequential | chunked | tree (default: tree)
    ORIGAMI_CHUNK_SIZE       elements per chunk for "chunked" (default: 1024)
    ORIGAMI_MAX_CONCURRENCY  cap on concurrent combines (default: unbounded)
"""

from __future__ import annotations
from dataclasses import dataclass
import os

STRATEGIES = ("sequential", "chunked", "tree")

DEFAULT_STRATEGY = "tree"
DEFAULT_CHUNK_SIZE = 1024


@dataclass(frozen=True)
class FoldOptions:
    strategy: str = DEFAULT_STRATEGY
    chunk_size: int = DEFAULT_CHUNK_SIZE
    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy {self.strategy!r}, expected one of {STRATEGIES}"
            )
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError(
                f"max_concurrency must be >= 1, got {self.max_concurrency}"
            )

    @classmethod
    def from_env(cls) -> FoldOptions:
        """Read options from ORIGAMI_* variables, falling back to defaults."""
        max_concurrency = os.getenv("ORIGAMI_MAX_CONCURRENCY")
        return cls(
            strategy=os.getenv("ORIGAMI_STRATEGY", DEFAULT_STRATEGY).strip().lower(),
            chunk_size=int(os.getenv("ORIGAMI_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))),
            max_concurrency=int(max_concurrency) if max_concurrency else None,
        )
