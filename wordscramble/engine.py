from __future__ import annotations
import logging
import random
from collections import Counter
from typing import List, Optional, Sequence

from .config import Config
from .dictionary import SpellChecker
from .errors import EmptyWordList, GameNotStarted, WordRejected
from .schemas import Rejection, SessionState, SubmitResult, UsedWord

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3


def normalize(raw: str) -> str:
    return raw.strip().lower()


def is_possible(word: str, root_word: str) -> bool:
    """True when every letter of ``word`` fits in the letter pool of ``root_word``."""
    available = Counter(root_word)
    needed = Counter(word)
    return all(available[letter] >= count for letter, count in needed.items())


class GameEngine:
    def __init__(self, spell_checker: SpellChecker, rng: Optional[random.Random] = None,
                 locale: Optional[str] = None):
        self.spell_checker = spell_checker
        self.rng = rng or random.Random()
        self.locale = locale or Config.LOCALE
        self.root_word: Optional[str] = None
        self.used_words: List[str] = []
        self.score: int = 0

    @property
    def started(self) -> bool:
        return self.root_word is not None

    def start_game(self, word_list: Sequence[str]) -> str:
        if not word_list:
            raise EmptyWordList()
        root = self.rng.choice(list(word_list))
        self.root_word = root
        self.used_words = []
        self.score = 0
        logger.info("new game started, root word %r", root)
        return root

    def submit(self, raw: str) -> SubmitResult:
        if not self.started:
            raise GameNotStarted()
        word = normalize(raw)
        if not word:
            return SubmitResult(status='ignored', score=self.score)
        try:
            self._validate(word)
        except WordRejected as rejected:
            logger.debug("rejected %r for root %r: %s", word, self.root_word, rejected.reason.value)
            return SubmitResult(
                status='rejected',
                word=word,
                score=self.score,
                reason=rejected.reason,
                title=rejected.title,
                message=rejected.message,
            )
        self.score += len(word) + 1
        self.used_words.insert(0, word)
        return SubmitResult(status='accepted', word=word, score=self.score)

    def _validate(self, word: str) -> None:
        # Order matters: the first failing check decides the message
        root = self.root_word
        if not self.is_original(word):
            raise WordRejected(Rejection.ALREADY_USED, "Word used already", "Be more original!")
        if not self.is_possible(word):
            raise WordRejected(Rejection.NOT_COMPOSABLE, "Word not possible",
                               f"You can't spell that word from '{root}'!")
        if not self.is_real(word):
            raise WordRejected(Rejection.NOT_A_WORD, "Word not recognized",
                               "You can't just make them up, you know!")
        if len(word) < MIN_WORD_LENGTH:
            raise WordRejected(Rejection.TOO_SHORT, "Word too short",
                               f"Use words of {MIN_WORD_LENGTH} or more letters")
        if word == root:
            raise WordRejected(Rejection.SAME_AS_ROOT, "Word is the root word",
                               f"Find a new word from the letters of '{root}'")
        if word in root:
            raise WordRejected(Rejection.TRIVIAL_SUBSTRING, "Word too obvious",
                               f"You can't use a plain piece of '{root}'")

    def is_original(self, word: str) -> bool:
        return word not in self.used_words

    def is_possible(self, word: str) -> bool:
        return is_possible(word, self.root_word or '')

    def is_real(self, word: str) -> bool:
        return not self.spell_checker.is_misspelled(word, self.locale)

    def to_state(self) -> SessionState:
        if not self.started:
            raise GameNotStarted()
        return SessionState(
            rootWord=self.root_word,
            score=self.score,
            usedWords=[UsedWord(word=w, length=len(w)) for w in self.used_words],
        )
