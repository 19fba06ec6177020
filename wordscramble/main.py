from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import socketio
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from .config import Config
from .dictionary import service as dict_service
from .errors import EmptyWordList, GameNotFound, ResourceMissing
from .managers.game import GameManager
from .schemas import GameCreated, SessionState, SubmitResult, WordSubmission
from .word_list import WordListSource

logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s | %(levelname)s | %(name)s | %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="Word Scramble Server", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# Realtime events share the REST app's origins; the combined ASGI app is built at the bottom
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=Config.CORS_ORIGINS)

games = GameManager(sio, WordListSource(), dict_service)


def _get_game(game_id: str):
    try:
        return games.get(game_id)
    except GameNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))


def _create_game():
    try:
        return games.create_game()
    except (ResourceMissing, EmptyWordList) as exc:
        logger.error("cannot start game: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))


# REST Endpoints
@app.get('/health')
async def health() -> Dict[str, str]:
    return { 'status': 'ok' }

@app.post('/games', status_code=201, response_model=GameCreated)
async def create_game():
    game = _create_game()
    return GameCreated(id=game.id, state=game.to_state())

@app.get('/games/{game_id}', response_model=SessionState)
async def get_game(game_id: str):
    return _get_game(game_id).to_state()

@app.post('/games/{game_id}/restart', response_model=SessionState)
async def restart_game(game_id: str):
    game = _get_game(game_id)
    try:
        await games.start_game(game.id)
    except (ResourceMissing, EmptyWordList) as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return game.to_state()

@app.post('/games/{game_id}/words', response_model=SubmitResult)
async def submit_word(game_id: str, body: WordSubmission):
    game = _get_game(game_id)
    try:
        return await games.submit(game.id, body.word)
    except ResourceMissing as exc:
        logger.error("dictionary unavailable for game %s: %s", game.id, exc)
        raise HTTPException(status_code=500, detail=str(exc))

@app.delete('/games/{game_id}', status_code=204)
async def delete_game(game_id: str):
    try:
        games.remove(game_id)
    except GameNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return Response(status_code=204)

# Dictionary validation REST endpoint
@app.get('/dict/validate')
async def validate_word(word: str, locale: Optional[str] = None):
    locale = locale or Config.LOCALE
    try:
        valid = dict_service.is_valid(word, locale)
    except ResourceMissing:
        raise HTTPException(status_code=404, detail=f"No dictionary for locale {locale!r}")
    return { 'word': word.strip().lower(), 'locale': locale, 'valid': valid }

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.save_session(sid, { 'game_id': None })
    await sio.emit('pong', to=sid)

@sio.event
async def disconnect(sid):
    # Sessions stay registered so the player can rejoin
    sess = await sio.get_session(sid) or {}
    game_id = sess.get('game_id')
    if game_id:
        await sio.leave_room(sid, game_id)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

async def _current_game_id(sid) -> Optional[str]:
    sess = await sio.get_session(sid) or {}
    return sess.get('game_id')

async def _attach(sid, game_id: str):
    sess = await sio.get_session(sid) or {}
    previous = sess.get('game_id')
    if previous and previous != game_id:
        await sio.leave_room(sid, previous)
    await sio.enter_room(sid, game_id)
    await sio.save_session(sid, { **sess, 'game_id': game_id })

@sio.on('game:create')
async def game_create(sid):
    try:
        game = games.create_game()
    except (ResourceMissing, EmptyWordList) as exc:
        logger.error("cannot start game: %s", exc)
        await sio.emit('game:error', { 'error': str(exc) }, to=sid)
        return
    await _attach(sid, game.id)
    await sio.emit('game:state', game.state_payload(), to=sid)

@sio.on('game:join')
async def game_join(sid, game_id: str):
    try:
        game = games.get(game_id)
    except GameNotFound as exc:
        await sio.emit('game:error', { 'error': str(exc) }, to=sid)
        return
    await _attach(sid, game.id)
    await sio.emit('game:state', game.state_payload(), to=sid)

@sio.on('game:restart')
async def game_restart(sid):
    game_id = await _current_game_id(sid)
    if not game_id:
        return
    try:
        await games.start_game(game_id)
    except (GameNotFound, ResourceMissing, EmptyWordList) as exc:
        await sio.emit('game:error', { 'error': str(exc) }, to=sid)

@sio.on('word:submit')
async def word_submit(sid, payload: Any):
    game_id = await _current_game_id(sid)
    if not game_id:
        return
    word = payload.get('word') if isinstance(payload, dict) else payload
    # Anything that isn't text counts as an empty submission
    if not isinstance(word, str):
        word = ''
    try:
        result = await games.submit(game_id, word)
    except (GameNotFound, ResourceMissing) as exc:
        await sio.emit('game:error', { 'error': str(exc) }, to=sid)
        return
    await sio.emit('word:result', result.model_dump(mode='json'), to=sid)

# Socket.IO wraps the FastAPI app; run with: uvicorn wordscramble.main:application --reload
application = socketio.ASGIApp(sio, other_asgi_app=app)
