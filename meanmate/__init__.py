"""
MeanMate Chess Engine

A UCI chess engine that expands the full game tree to a fixed depth,
scores every leaf by material balance and picks the root move with the
best *average* outcome.

## Architecture

1. **evaluation**: Leaf evaluation
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: per-side material totals

2. **search**: Tree search
   - build_tree: exhaustive fixed-depth expansion, root fanned out to a worker pool
   - aggregate / aggregate_root: bottom-up mean rollup of leaf scores
   - select_move: checkmate override, then stable argmax
   - find_best_move: the whole pipeline in one call

3. **uci**: Universal Chess Interface protocol
   - Typed command parser
   - EngineState: the single current position
   - UCIEngine: synchronous command loop

## Quick Start

```python
import chess
from meanmate.search import find_best_move

result = find_best_move(chess.Board(), depth=2)
print(f"Best move: {result.move} (score: {float(result.score):.2f})")
```

### As a UCI Engine

```bash
python -m meanmate.uci --depth 3
```
"""

__version__ = "0.1.0"
__license__ = "MIT"

from meanmate.config import EngineConfig
from meanmate.errors import EngineError

__all__ = [
    'EngineConfig',
    'EngineError',
]
