"""
Main entry point for running MeanMate as a UCI engine.

Usage:
    python -m meanmate.uci [--depth N] [--workers N] [--executor process|thread]
"""

import argparse
from pathlib import Path

from meanmate.config import EXECUTORS, EngineConfig
from meanmate.uci.interface import UCIEngine


def parse_args(argv=None) -> EngineConfig:
    """Build the engine configuration from command line flags."""
    parser = argparse.ArgumentParser(description="MeanMate UCI chess engine")
    defaults = EngineConfig()

    parser.add_argument("--depth", type=int, default=defaults.depth,
                        help=f"Fixed search depth in plies (default: {defaults.depth})")
    parser.add_argument("--parallel-plies", type=int, default=defaults.parallel_plies,
                        help="Tree levels expanded before fanning out to workers (default: 1)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker pool size (default: number of CPUs)")
    parser.add_argument("--executor", choices=EXECUTORS, default=defaults.executor,
                        help="Worker pool kind (default: process)")
    parser.add_argument("--log-file", type=Path, default=defaults.log_file,
                        help=f"Log file (default: {defaults.log_file})")
    parser.add_argument("--debug", action="store_true",
                        help="Log at DEBUG level")

    args = parser.parse_args(argv)

    return EngineConfig(
        depth=args.depth,
        parallel_plies=args.parallel_plies,
        max_workers=args.workers,
        executor=args.executor,
        log_file=args.log_file,
        debug=args.debug,
    )


def main(argv=None):
    engine = UCIEngine(config=parse_args(argv))
    engine.run()


if __name__ == "__main__":
    main()
