"""Wordfall: type the falling word before it reaches the bottom.

Two modes:
- exact: type the shown English word followed by its French translation
- free: type any valid English word starting with the shown letter

The dictionaries live in a WordfallLexicon handed to create_state, so several
sessions can run side by side with different word lists.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Mapping

from .config import (
    WORDFALL_INITIAL_LIVES, WORDFALL_INITIAL_SPEED, WORDFALL_SPEED_PER_LEVEL,
    WORDFALL_WORDS_PER_LEVEL, WORDFALL_BOTTOM, WORDFALL_USED_WORDS_WINDOW,
    WORDFALL_LENGTH_BONUS, REASON_ENDED, REASON_NO_ROUND, REASON_PAUSED,
)
from .scoring import ScoringEngine, ScoreContext, ScoreBreakdown, WORDFALL_POLICY
from .selection import pick, random_letter
from .utils import clean_translation, floor_points
from .validation import validate_exact_word, validate_free_word

logger = logging.getLogger(__name__)

GAME_SLUG = 'wordfall'
MODES = ('exact', 'free')


@dataclass(frozen=True)
class WordfallLexicon:
    translations: Mapping[str, str]
    exact_words: tuple[str, ...]
    valid_words: frozenset

    @classmethod
    def build(cls, translations: Mapping[str, str], words_by_length: Mapping | None = None,
              expressions: Iterable[str] | None = None,
              english_words: Iterable[str] | None = None) -> 'WordfallLexicon':
        """Build the lexicon from raw word lists.

        Only words with a usable translation can be shown in exact mode.
        Free mode accepts the large English word list plus every single-word
        dictionary entry.
        """
        cleaned = {}
        for word, translation in (translations or {}).items():
            key = (word or '').strip().upper()
            if key and clean_translation(translation):
                cleaned[key] = translation

        ordered = []
        for _, words in sorted((words_by_length or {}).items(), key=lambda kv: int(kv[0])):
            ordered.extend(words or [])
        ordered.extend(expressions or [])
        ordered.extend(cleaned)

        exact_words = []
        seen = set()
        for word in ordered:
            key = (word or '').strip().upper()
            if key in cleaned and key not in seen:
                seen.add(key)
                exact_words.append(key)

        valid = {w.strip().upper() for w in (english_words or []) if w and w.strip()}
        valid.update(w for w in cleaned if w.isalpha())

        logger.info(f"Wordfall lexicon: {len(exact_words)} exact words, {len(valid)} valid words")
        return cls(translations=cleaned, exact_words=tuple(exact_words), valid_words=frozenset(valid))

    def translation_for(self, word: str) -> str:
        return clean_translation(self.translations.get(word.upper()))


@dataclass(frozen=True)
class WordfallConfig:
    mode: str = 'exact'
    initial_lives: int = WORDFALL_INITIAL_LIVES
    initial_speed: float = WORDFALL_INITIAL_SPEED
    speed_increase_per_level: float = WORDFALL_SPEED_PER_LEVEL
    words_per_level: int = WORDFALL_WORDS_PER_LEVEL
    rng: Callable[[], float] = field(default=random.random, compare=False)

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"Unknown Wordfall mode: {self.mode}")
        if self.initial_lives < 1 or self.words_per_level < 1:
            raise ValueError("initial_lives and words_per_level must be positive")


@dataclass(frozen=True)
class FallingWord:
    id: str
    text: str             # exact mode: the word to type; free mode: the letter
    display_text: str
    translation: str | None = None
    y: float = 0.0        # 0 = top, 100 = bottom
    speed: float = WORDFALL_INITIAL_SPEED

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'text': self.display_text,
            'translation': self.translation,
            'y': self.y,
            'speed': self.speed,
        }


@dataclass(frozen=True)
class WordfallState:
    config: WordfallConfig
    lexicon: WordfallLexicon = field(compare=False, repr=False)
    running: bool = False
    lives: int = WORDFALL_INITIAL_LIVES
    score: int = 0
    level: int = 1
    active_word: FallingWord | None = None
    used_words: tuple[str, ...] = ()
    words_completed: int = 0
    words_spawned: int = 0
    last_word: str | None = None
    streak: int = 0
    combo: float = 1.0
    highest_streak: int = 0
    perfect_catches: int = 0
    milestones_reached: frozenset = frozenset()
    ended: bool = False

    @property
    def mode(self) -> str:
        return self.config.mode


@dataclass(frozen=True)
class WordfallResult:
    success: bool
    points_awarded: int = 0
    reason: str | None = None
    breakdown: ScoreBreakdown | None = None
    applied: bool = True


def create_state(config: WordfallConfig, lexicon: WordfallLexicon) -> WordfallState:
    return WordfallState(config=config, lexicon=lexicon, lives=config.initial_lives)


def start(state: WordfallState) -> WordfallState:
    """Start (or, after a game over, restart) the game."""
    if state.ended:
        state = create_state(state.config, state.lexicon)
    return replace(state, running=True)


def pause(state: WordfallState) -> WordfallState:
    return replace(state, running=False)


def resume(state: WordfallState) -> WordfallState:
    if state.ended:
        return state
    return replace(state, running=True)


def current_speed(state: WordfallState) -> float:
    config = state.config
    return config.initial_speed + (state.level - 1) * config.speed_increase_per_level


def spawn_word(state: WordfallState, now_ms: int) -> WordfallState:
    """Drop a new word from the top. Only one word falls at a time."""
    if state.ended or not state.running or state.active_word is not None:
        return state

    rng = state.config.rng
    word_id = f"word-{now_ms}-{state.words_spawned + 1}"
    if state.mode == 'exact':
        text = pick(state.lexicon.exact_words, rng, state.last_word)
        if text is None:
            logger.info("Wordfall lexicon is empty, ending game")
            return replace(state, ended=True, running=False)
        falling = FallingWord(
            id=word_id, text=text, display_text=text,
            translation=state.lexicon.translation_for(text),
            speed=current_speed(state),
        )
    else:
        letter = random_letter(rng)
        falling = FallingWord(id=word_id, text=letter, display_text=letter, speed=current_speed(state))

    return replace(
        state,
        active_word=falling,
        last_word=falling.text,
        words_spawned=state.words_spawned + 1,
    )


def advance(state: WordfallState, delta_ms: int) -> WordfallState:
    """Move the falling word down. Touching the bottom counts as a miss."""
    word = state.active_word
    if state.ended or not state.running or word is None:
        return state
    y = min(WORDFALL_BOTTOM, word.y + word.speed * max(0, delta_ms) / 1000)
    state = replace(state, active_word=replace(word, y=y))
    if y >= WORDFALL_BOTTOM:
        return process_miss(state)
    return state


def process_miss(state: WordfallState) -> WordfallState:
    """The word hit the bottom: lose a life and the streak."""
    if state.ended:
        return state
    lives = state.lives - 1
    game_over = lives <= 0
    return replace(
        state,
        lives=lives,
        active_word=None,
        ended=game_over,
        running=not game_over,
        streak=0,
        combo=WORDFALL_POLICY.combo(0),
    )


def process_input(state: WordfallState, text: str) -> tuple[WordfallState, WordfallResult]:
    """Check typed input against the falling word and score it."""
    if state.ended:
        return state, WordfallResult(False, reason=REASON_ENDED, applied=False)
    if not state.running:
        return state, WordfallResult(False, reason=REASON_PAUSED, applied=False)
    word = state.active_word
    if word is None:
        return state, WordfallResult(False, reason=REASON_NO_ROUND, applied=False)

    if state.mode == 'exact':
        validation = validate_exact_word(text, word.text, word.translation or '')
    else:
        validation = validate_free_word(text, word.display_text, state.used_words,
                                        state.lexicon.valid_words)

    if not validation.valid:
        reset = replace(state, streak=0, combo=WORDFALL_POLICY.combo(0))
        return reset, WordfallResult(False, reason=validation.reason)

    used_words = state.used_words
    if state.mode == 'free':
        used_words = (used_words + (validation.normalized,))[-WORDFALL_USED_WORDS_WINDOW:]

    words_completed = state.words_completed + 1
    level = words_completed // state.config.words_per_level + 1
    length_bonus = floor_points(len(text.strip()) * WORDFALL_LENGTH_BONUS)

    breakdown = ScoringEngine(WORDFALL_POLICY).score(True, ScoreContext(
        base_key=state.mode,
        streak_before=state.streak,
        speed_value=word.y,
        extra_points=length_bonus + (level - 1),
        completed_after=words_completed,
        milestones_reached=state.milestones_reached,
    ))

    milestones = state.milestones_reached
    if breakdown.milestone is not None:
        milestones = milestones | {breakdown.milestone}

    new_state = replace(
        state,
        active_word=None,
        used_words=used_words,
        words_completed=words_completed,
        level=level,
        score=state.score + breakdown.total,
        streak=breakdown.streak_after,
        combo=breakdown.combo,
        highest_streak=max(state.highest_streak, breakdown.streak_after),
        perfect_catches=state.perfect_catches + (1 if breakdown.is_perfect else 0),
        milestones_reached=milestones,
    )
    return new_state, WordfallResult(True, points_awarded=breakdown.total, breakdown=breakdown)


def summary(state: WordfallState) -> dict:
    return {
        'game': GAME_SLUG,
        'difficulty': state.mode,
        'score': state.score,
        'highest_streak': state.highest_streak,
        'rounds_completed': state.words_completed,
        'perfect_catches': state.perfect_catches,
        'level': state.level,
    }
