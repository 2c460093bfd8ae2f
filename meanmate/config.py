"""
Engine configuration.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

EXECUTORS = ("process", "thread")


@dataclass
class EngineConfig:
    """Configuration for the UCI engine and its search.

    Everything that the original engine hard-coded (search depth, how much
    of the tree is fanned out to workers) lives here so that a GUI option
    or command line flag can change it.
    """

    # Identification
    name: str = "MeanMate"
    """Engine name reported on 'id name'"""

    author: str = "MeanMate developers"
    """Author reported on 'id author'"""

    # Search
    depth: int = 3
    """Fixed search depth in plies (never adaptive). 5 is the classic setting;
    3 keeps python-chess move times in seconds rather than minutes"""

    parallel_plies: int = 1
    """Number of top tree levels expanded before handing subtrees to workers"""

    # Workers
    max_workers: Optional[int] = None
    """Worker pool size (None = number of CPUs)"""

    executor: str = "process"
    """Worker pool kind: 'process' or 'thread'"""

    # Logging
    log_file: Path = field(default_factory=lambda: Path.home() / ".meanmate" / "engine.log")
    """File the engine log is written to (stdout is reserved for UCI)"""

    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")

        if self.parallel_plies < 0:
            raise ValueError(f"parallel_plies must be non-negative, got {self.parallel_plies}")

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")

        if self.executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {EXECUTORS}, got {self.executor!r}")

        self.log_file = Path(self.log_file)

    @property
    def workers(self) -> int:
        """Effective worker pool size."""
        return self.max_workers or os.cpu_count() or 1

    def __repr__(self) -> str:
        return (
            f"EngineConfig(depth={self.depth}, parallel_plies={self.parallel_plies}, "
            f"workers={self.workers}, executor={self.executor!r})"
        )
