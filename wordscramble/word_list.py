from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Union

from .config import Config
from .errors import ResourceMissing

logger = logging.getLogger(__name__)


def read_words(path: Union[str, Path]) -> List[str]:
    """Read a newline-separated word file: one lowercase entry per non-blank line."""
    try:
        text = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("failed to read word resource %s: %s", path, exc)
        raise ResourceMissing(path, str(exc)) from exc
    return [line.strip().lower() for line in text.splitlines() if line.strip()]


class WordListSource:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path or Config.WORD_LIST_PATH)

    def load(self) -> List[str]:
        words = read_words(self.path)
        logger.info("loaded %d root words from %s", len(words), self.path)
        return words
