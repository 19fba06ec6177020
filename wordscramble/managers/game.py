from __future__ import annotations
import logging
import random
import uuid
from typing import Callable, Dict, List, Optional

from ..config import Config
from ..dictionary import SpellChecker
from ..engine import GameEngine
from ..errors import GameNotFound
from ..schemas import SessionState, SubmitResult
from ..word_list import WordListSource

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, game_id: str, sio, engine: GameEngine):
        self.id = game_id
        self.sio = sio
        self.engine = engine

    def to_state(self) -> SessionState:
        return self.engine.to_state()

    def state_payload(self) -> dict:
        return {'id': self.id, **self.to_state().model_dump()}

    async def broadcast_state(self):
        await self.sio.emit('game:state', self.state_payload(), room=self.id)

    async def restart(self, word_list: List[str]):
        self.engine.start_game(word_list)
        await self.broadcast_state()

    async def submit(self, word: str) -> SubmitResult:
        result = self.engine.submit(word)
        if result.accepted:
            await self.broadcast_state()
        return result


class GameManager:
    def __init__(self, sio, source: WordListSource, spell_checker: SpellChecker,
                 rng_factory: Optional[Callable[[], random.Random]] = None,
                 locale: Optional[str] = None):
        self.sio = sio
        self.source = source
        self.spell_checker = spell_checker
        self.rng_factory = rng_factory or random.Random
        self.locale = locale or Config.LOCALE
        self.games: Dict[str, Game] = {}
        self._word_list: Optional[List[str]] = None

    @property
    def word_list(self) -> List[str]:
        # Loaded once, shared by every game
        if self._word_list is None:
            self._word_list = self.source.load()
        return self._word_list

    def create_game(self, game_id: Optional[str] = None) -> Game:
        game_id = game_id or uuid.uuid4().hex
        # Both resources must load before anything is registered
        self.spell_checker.load(self.locale)
        engine = GameEngine(self.spell_checker, rng=self.rng_factory(), locale=self.locale)
        engine.start_game(self.word_list)
        game = Game(game_id, self.sio, engine)
        self.games[game_id] = game
        logger.info("game %s created", game_id)
        return game

    def get(self, game_id: str) -> Game:
        game = self.games.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        return game

    def remove(self, game_id: str):
        if self.games.pop(game_id, None) is None:
            raise GameNotFound(game_id)
        logger.info("game %s removed", game_id)

    async def start_game(self, game_id: str) -> Game:
        game = self.get(game_id)
        self.spell_checker.load(game.engine.locale)
        await game.restart(self.word_list)
        return game

    async def submit(self, game_id: str, word: str) -> SubmitResult:
        game = self.get(game_id)
        return await game.submit(word)
