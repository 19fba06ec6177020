import random

import pytest

from wordscramble.engine import GameEngine
from wordscramble.errors import ResourceMissing
from wordscramble.managers.game import GameManager


class FakeSpellChecker:
    """Flags a fixed set of words as misspelled, accepts everything else."""

    def __init__(self, rejected=(), missing_locales=()):
        self.rejected = set(rejected)
        self.missing_locales = set(missing_locales)
        self.calls = []
        self.loaded = []

    def load(self, locale):
        if locale in self.missing_locales:
            raise ResourceMissing(f"words_{locale}", 'not installed')
        self.loaded.append(locale)

    def is_misspelled(self, word, locale):
        self.calls.append((word, locale))
        return word in self.rejected


class FakeSio:
    def __init__(self):
        self.emitted = []
        self.sessions = {}
        self.rooms = {}

    async def emit(self, event, data=None, room=None, to=None):
        self.emitted.append((event, data, room or to))

    async def save_session(self, sid, session):
        self.sessions[sid] = session

    async def get_session(self, sid):
        return self.sessions.get(sid)

    async def enter_room(self, sid, room):
        self.rooms.setdefault(room, set()).add(sid)

    async def leave_room(self, sid, room):
        self.rooms.get(room, set()).discard(sid)

    def events(self, name):
        return [e for e in self.emitted if e[0] == name]


class StaticSource:
    def __init__(self, words):
        self.words = list(words)
        self.loads = 0

    def load(self):
        self.loads += 1
        return list(self.words)


@pytest.fixture()
def checker():
    return FakeSpellChecker(rejected={'nta', 'xyz'})


@pytest.fixture()
def engine(checker):
    game = GameEngine(checker, rng=random.Random(7), locale='en')
    game.start_game(['triangle'])
    return game


@pytest.fixture()
def fake_sio():
    return FakeSio()


@pytest.fixture()
def manager(fake_sio, checker):
    return GameManager(
        fake_sio,
        StaticSource(['silkworm']),
        checker,
        rng_factory=lambda: random.Random(1),
    )


@pytest.fixture()
def static_source():
    return StaticSource


@pytest.fixture()
def spell_checker_factory():
    return FakeSpellChecker
