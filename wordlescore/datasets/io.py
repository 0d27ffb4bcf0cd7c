from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from wordlescore.engine import InputReadFailure
from wordlescore.engine.validation import is_valid_word

log = logging.getLogger(__name__)


def read_words(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list, one word per line.

    Lines are stripped and lowercased; blank lines are dropped. Entries that
    aren't five ASCII letters are skipped with a warning. Order and duplicates
    are kept as in the file.
    Raises InputReadFailure if the file is missing or can't be decoded.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadFailure(f"cannot read word list {p}: {e}") from e

    words: List[str] = []
    skipped = 0
    for ln in text.splitlines():
        w = ln.strip().lower()
        if not w:
            continue
        if is_valid_word(w):
            words.append(w)
        else:
            skipped += 1

    if skipped:
        log.warning("Skipped %d entr%s in %s that are not 5-letter words",
                    skipped, "y" if skipped == 1 else "ies", p)
    log.info("Read %d words from %s", len(words), p)
    return words
