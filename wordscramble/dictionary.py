from __future__ import annotations
from typing import Dict, Iterable, Optional, Protocol, Set

from wordfreq import available_languages, zipf_frequency

from .config import Config
from .errors import ResourceMissing


class SpellChecker(Protocol):
    def load(self, locale: str) -> None:
        ...

    def is_misspelled(self, word: str, locale: str) -> bool:
        ...


def language_code(locale: str) -> str:
    """'en_US.UTF-8' -> 'en'"""
    return locale.split('.')[0].replace('_', '-').split('-')[0].lower()


class DictionaryService:
    """Spell checker backed by wordfreq.

    A word counts as real when it is alphabetic and its Zipf frequency reaches
    ``min_zipf``. Passing ``words`` pins the dictionary for ``locale`` to that
    set instead (handy for tests and small deployments).
    """

    def __init__(self, words: Optional[Iterable[str]] = None, locale: Optional[str] = None,
                 min_zipf: Optional[float] = None):
        self.min_zipf = Config.MIN_ZIPF if min_zipf is None else min_zipf
        # Pinned word sets per language
        self._words: Dict[str, Set[str]] = {}
        if words is not None:
            lang = language_code(locale or Config.LOCALE)
            self._words[lang] = {w.strip().lower() for w in words if w.strip()}

    def load(self, locale: str) -> None:
        lang = language_code(locale)
        if lang in self._words:
            return
        if lang not in available_languages():
            raise ResourceMissing(f"wordfreq:{lang}", f"no word list for locale {locale!r}")

    def is_valid(self, word: str, locale: Optional[str] = None) -> bool:
        locale = locale or Config.LOCALE
        self.load(locale)
        word = (word or '').strip().lower()
        if not word:
            return False
        lang = language_code(locale)
        if lang in self._words:
            return word in self._words[lang]
        return word.isalpha() and zipf_frequency(word, lang) >= self.min_zipf

    def is_misspelled(self, word: str, locale: str) -> bool:
        return not self.is_valid(word, locale)


# Singleton instance
service = DictionaryService()
