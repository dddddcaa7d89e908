"""FastAPI server for the quest mini-games."""

import logging
import os
import random
import time
import uuid
from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

logger = logging.getLogger(__name__)

from games import engine, speed_verb, wordfall, enigma_scroll
from games.config import DEFAULT_SESSION_MS, MAX_DIFFICULTY, MIN_DIFFICULTY
from games.enigma_scroll import EnigmaConfig, EnigmaLexicon
from games.wordfall import WordfallConfig, WordfallLexicon

from server.file_storage import FileStorage, FileWordSource

GAMES = (speed_verb.GAME_SLUG, wordfall.GAME_SLUG, enigma_scroll.GAME_SLUG)


# Pydantic models for API
class CreateSessionRequest(BaseModel):
    game: str
    user_id: str = "default"
    difficulty: int = 1                     # Speed Verb: 1-3
    mode: str = "exact"                     # Wordfall: exact or free
    word_length: int = 5                    # Enigma Scroll: 4-6
    total_time_ms: Optional[int] = None
    seed: Optional[int] = None              # Reproducible word order
    skip_resets_streak: bool = False


class AnswerRequest(BaseModel):
    past_simple: Optional[str] = None
    past_participle: Optional[str] = None
    translation: Optional[str] = None
    text: Optional[str] = None              # Wordfall input or Enigma guess
    answer_time_ms: Optional[int] = None


class TickRequest(BaseModel):
    delta_ms: int


class DifficultyRequest(BaseModel):
    difficulty: int


class FinishResponse(BaseModel):
    summary: dict
    saved: bool
    personal_best: Optional[dict]


# Global state (in production, use proper DI)
storage: FileStorage = None
word_source: FileWordSource = None
verb_pool: list = []
wordfall_lexicon: WordfallLexicon = None
enigma_lexicon: EnigmaLexicon = None
sessions: dict[str, dict] = {}  # session_id -> {game, user_id, state}


def now_ms() -> int:
    return int(time.time() * 1000)


app = FastAPI(title="Quest API", description="Timed English mini-games API")


@app.on_event("startup")
async def startup():
    """Initialize storage and word lists on startup."""
    global storage, word_source, verb_pool, wordfall_lexicon, enigma_lexicon

    storage = FileStorage(state_dir=os.environ.get('QUEST_STATE_DIR'))
    word_source = FileWordSource(words_dir=os.environ.get('QUEST_WORDS_DIR'))

    verb_pool = speed_verb.build_pool(word_source.load_verbs())
    words = word_source.load_wordfall_words()
    wordfall_lexicon = WordfallLexicon.build(
        words['translations'], words['words_by_length'],
        words['expressions'], words['english_words'],
    )
    targets, guesses = word_source.load_enigma_words()
    enigma_lexicon = EnigmaLexicon.load(targets, guesses)
    for problem in enigma_lexicon.problems():
        logger.warning(f"Enigma word lists: {problem}")
    logger.info(f"Loaded {len(verb_pool)} verbs, results stored in {storage.state_dir}")


@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "quest", "games": list(GAMES)}


def get_session(session_id: str) -> dict:
    """Look up a live session or fail with 404."""
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def verb_snapshot(state: engine.GameState) -> dict:
    current = state.current_round
    return {
        'phase': state.phase.value,
        'difficulty': int(state.config.difficulty),
        'score': state.score,
        'time_left_ms': state.time_left_ms,
        'streak': state.streak,
        'highest_streak': state.highest_streak,
        'combo': state.combo,
        'rounds_completed': state.rounds_completed,
        'ended': state.ended,
        'verb': current.item.prompt if current else None,
        'required': list(current.required) if current else [],
    }


def wordfall_snapshot(state: wordfall.WordfallState) -> dict:
    return {
        'mode': state.mode,
        'running': state.running,
        'lives': state.lives,
        'score': state.score,
        'level': state.level,
        'streak': state.streak,
        'combo': state.combo,
        'words_completed': state.words_completed,
        'perfect_catches': state.perfect_catches,
        'used_words': list(state.used_words),
        'ended': state.ended,
        'word': state.active_word.to_dict() if state.active_word else None,
    }


def enigma_snapshot(state: enigma_scroll.EnigmaState) -> dict:
    current = state.current_round
    rows = []
    if current:
        rows = [
            {'letters': [c.letter for c in row.cells],
             'statuses': [c.status.value for c in row.cells],
             'submitted': row.submitted}
            for row in current.rows
        ]
    return {
        'phase': state.phase.value,
        'word_length': state.config.word_length,
        'max_attempts': state.config.max_attempts,
        'score': state.score,
        'time_left_ms': state.time_left_ms,
        'streak': state.streak,
        'combo': state.combo,
        'words_found': state.words_found,
        'ended': state.ended,
        'rows': rows,
        'attempts_used': current.attempt_index if current else 0,
        # The secret word is only revealed once the word is over
        'target': current.target if current and current.finished else None,
    }


SNAPSHOTS = {
    speed_verb.GAME_SLUG: verb_snapshot,
    wordfall.GAME_SLUG: wordfall_snapshot,
    enigma_scroll.GAME_SLUG: enigma_snapshot,
}


def snapshot(session_id: str, session: dict) -> dict:
    data = SNAPSHOTS[session['game']](session['state'])
    data['session_id'] = session_id
    data['game'] = session['game']
    return data


@app.post("/api/sessions")
async def create_session(request: CreateSessionRequest):
    """Create a game session and start its first round."""
    rng = random.Random(request.seed).random if request.seed is not None else random.random

    if request.game == speed_verb.GAME_SLUG:
        if not MIN_DIFFICULTY <= request.difficulty <= MAX_DIFFICULTY:
            raise HTTPException(status_code=400, detail=f"Difficulty must be {MIN_DIFFICULTY}-{MAX_DIFFICULTY}")
        state = engine.create_initial_state(verb_pool, speed_verb.make_config(
            difficulty=request.difficulty,
            total_time_ms=request.total_time_ms or DEFAULT_SESSION_MS,
            rng=rng,
            skip_resets_streak=request.skip_resets_streak,
        ))
        state = engine.start_round(state, now_ms())
    elif request.game == wordfall.GAME_SLUG:
        try:
            config = WordfallConfig(mode=request.mode, rng=rng)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        state = wordfall.start(wordfall.create_state(config, wordfall_lexicon))
        state = wordfall.spawn_word(state, now_ms())
    elif request.game == enigma_scroll.GAME_SLUG:
        try:
            config = EnigmaConfig(word_length=request.word_length, rng=rng)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        state = enigma_scroll.start_round(enigma_scroll.create_state(config, enigma_lexicon))
    else:
        raise HTTPException(status_code=400, detail=f"Unknown game: {request.game}")

    # One live session per user; an unfinished one is abandoned
    for old_id in [sid for sid, s in sessions.items() if s['user_id'] == request.user_id]:
        logger.info(f"Dropping unfinished session {old_id} for {request.user_id}")
        del sessions[old_id]

    session_id = str(uuid.uuid4())[:8]
    sessions[session_id] = {'game': request.game, 'user_id': request.user_id, 'state': state}
    logger.info(f"Session {session_id} started: {request.game} for {request.user_id}")
    return snapshot(session_id, sessions[session_id])


@app.get("/api/sessions/{session_id}")
async def get_session_state(session_id: str):
    """Get the current state of a session."""
    return snapshot(session_id, get_session(session_id))


@app.post("/api/sessions/{session_id}/answer")
async def submit(session_id: str, request: AnswerRequest):
    """Submit an answer: verb forms, a Wordfall entry or an Enigma guess."""
    session = get_session(session_id)
    state = session['state']
    game = session['game']

    if game == speed_verb.GAME_SLUG:
        current = state.current_round
        state, result = speed_verb.answer(
            state,
            past_simple=request.past_simple,
            past_participle=request.past_participle,
            translation=request.translation,
            answer_time_ms=request.answer_time_ms,
            now_ms=now_ms(),
        )
        response = {'result': asdict(result)}
        if result.applied:
            response['expected'] = current.item.to_dict()
            state = engine.start_round(state, now_ms())
    elif game == wordfall.GAME_SLUG:
        expected = state.active_word
        state, result = wordfall.process_input(state, request.text or '')
        response = {'result': asdict(result)}
        if result.success:
            response['expected'] = expected.to_dict()
            state = wordfall.spawn_word(state, now_ms())
    else:
        state, result = enigma_scroll.submit_guess(state, request.text)
        response = {'result': asdict(result)}

    session['state'] = state
    response['session'] = snapshot(session_id, session)
    return response


@app.post("/api/sessions/{session_id}/skip")
async def skip_round(session_id: str):
    """Skip the current verb and show the next one."""
    session = get_session(session_id)
    if session['game'] != speed_verb.GAME_SLUG:
        raise HTTPException(status_code=400, detail="Only Speed Verb rounds can be skipped")
    state = engine.skip(session['state'])
    session['state'] = engine.start_round(state, now_ms())
    return snapshot(session_id, session)


@app.post("/api/sessions/{session_id}/tick")
async def tick(session_id: str, request: TickRequest):
    """Advance the session clock by the elapsed time."""
    session = get_session(session_id)
    state = session['state']
    game = session['game']
    if game == speed_verb.GAME_SLUG:
        state = engine.tick(state, request.delta_ms)
    elif game == wordfall.GAME_SLUG:
        state = wordfall.advance(state, request.delta_ms)
        state = wordfall.spawn_word(state, now_ms())
    else:
        state = enigma_scroll.tick(state, request.delta_ms)
    session['state'] = state
    return snapshot(session_id, session)


@app.post("/api/sessions/{session_id}/next")
async def next_round(session_id: str):
    """Start the next round: new verb, new falling word or new secret word."""
    session = get_session(session_id)
    state = session['state']
    game = session['game']
    if game == speed_verb.GAME_SLUG:
        state = engine.start_round(state, now_ms())
    elif game == wordfall.GAME_SLUG:
        state = wordfall.spawn_word(state, now_ms())
    else:
        state = enigma_scroll.start_round(state)
    session['state'] = state
    return snapshot(session_id, session)


@app.post("/api/sessions/{session_id}/difficulty")
async def change_difficulty(session_id: str, request: DifficultyRequest):
    """Change Speed Verb difficulty; applies from the next verb on."""
    session = get_session(session_id)
    if session['game'] != speed_verb.GAME_SLUG:
        raise HTTPException(status_code=400, detail="Difficulty only applies to Speed Verb")
    if not MIN_DIFFICULTY <= request.difficulty <= MAX_DIFFICULTY:
        raise HTTPException(status_code=400, detail=f"Difficulty must be {MIN_DIFFICULTY}-{MAX_DIFFICULTY}")
    session['state'] = engine.set_difficulty(session['state'], request.difficulty)
    return snapshot(session_id, session)


@app.post("/api/sessions/{session_id}/finish", response_model=FinishResponse)
async def finish(session_id: str):
    """End a session and save its final tallies."""
    session = get_session(session_id)
    game = session['game']
    state = session['state']
    if game == speed_verb.GAME_SLUG:
        summary = speed_verb.summary(state)
    elif game == wordfall.GAME_SLUG:
        summary = wordfall.summary(state)
    else:
        summary = enigma_scroll.summary(state)

    user_id = session['user_id']
    saved = True
    try:
        storage.save_result(user_id, summary)
    except OSError as e:
        logger.error(f"Could not save result for {user_id}: {e}")
        saved = False
    sessions.pop(session_id, None)
    logger.info(f"Session {session_id} finished: {game} score {summary['score']}")

    best = storage.get_personal_best(user_id, game, summary['difficulty'])
    return {'summary': summary, 'saved': saved, 'personal_best': best}


@app.get("/api/results")
async def results(user_id: str = "default", game: Optional[str] = None):
    """List saved results for a user."""
    return {'results': storage.load_results(user_id, game)}
