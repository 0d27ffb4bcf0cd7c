"""
Result output.

- format_ranking:    human-readable "word: score" lines, best first.
- write_scores_json: full ranking as a JSON array of {"word", "score"} objects.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Optional

from .core import ScoredWord

TOP_N = 100


def format_ranking(scores: Iterable[ScoredWord], top: Optional[int] = TOP_N) -> List[str]:
    """
    One line per word, e.g. "raise: 61.0008". `top=None` lists everything.
    """
    lines: List[str] = []
    for i, s in enumerate(scores):
        if top is not None and i >= top:
            break
        lines.append(f"{s.word}: {s.score:.4f}")
    return lines


def write_scores_json(scores: Iterable[ScoredWord], path: Path | str) -> str:
    """
    Dump the ranking in order. Parent directories are created as needed.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump([s.to_dict() for s in scores], f, indent=2)
    return str(p)
