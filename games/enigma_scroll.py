"""Enigma Scroll: find the secret word from letter feedback.

Each guess colours its letters: correct (right place), present (elsewhere in
the word) or absent. A word has a fixed number of attempts and its own
countdown; when the countdown runs out the session is over.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Iterable, Mapping

from .config import (
    ENIGMA_DEFAULTS, ENIGMA_WORD_TIME_MS, ENIGMA_ATTEMPT_BONUS,
    ENIGMA_TIME_BONUS_SECONDS, ENIGMA_TIME_BONUS_CAP,
    REASON_ENDED, REASON_NO_ROUND, REASON_ALREADY_ANSWERED, REASON_NO_ATTEMPTS,
)
from .engine import Phase
from .scoring import ScoringEngine, ScoreContext, ENIGMA_POLICY
from .selection import pick
from .validation import validate_guess
from . import timer
from .utils import as_text

logger = logging.getLogger(__name__)

GAME_SLUG = 'enigma-scroll'


class LetterStatus(str, Enum):
    CORRECT = 'correct'
    PRESENT = 'present'
    ABSENT = 'absent'
    EMPTY = 'empty'


@dataclass(frozen=True)
class Cell:
    letter: str = ''
    status: LetterStatus = LetterStatus.EMPTY


@dataclass(frozen=True)
class Row:
    cells: tuple[Cell, ...]
    submitted: bool = False

    @property
    def word(self) -> str:
        return ''.join(cell.letter for cell in self.cells)


def _normalize(word: str) -> str:
    return as_text(word).strip().upper()


@dataclass(frozen=True)
class EnigmaLexicon:
    target_words: Mapping[int, tuple[str, ...]]
    valid_guesses: Mapping[int, frozenset]

    @classmethod
    def load(cls, target_data: Mapping, guesses_data: Mapping | None = None,
             blocked: Iterable[str] = ()) -> 'EnigmaLexicon':
        """Build the lexicon from {length: [words]} data.

        Only lengths with a default config are kept. Blocked words are
        dropped. Target words are always accepted as guesses.
        """
        blocked = {_normalize(w) for w in blocked}

        def clean(data: Mapping | None) -> dict[int, list[str]]:
            result = {}
            for length, words in (data or {}).items():
                try:
                    length = int(length)
                except (TypeError, ValueError):
                    continue
                if length not in ENIGMA_DEFAULTS or not isinstance(words, (list, tuple)):
                    continue
                kept = []
                for word in words:
                    word = _normalize(word)
                    if len(word) == length and word.isalpha() and word not in blocked and word not in kept:
                        kept.append(word)
                result[length] = kept
            return result

        targets = clean(target_data)
        guesses = clean(guesses_data) if guesses_data is not None else {}
        valid = {}
        for length in set(targets) | set(guesses):
            valid[length] = frozenset(guesses.get(length, ())) | frozenset(targets.get(length, ()))

        logger.info(f"Enigma lexicon: {sum(len(w) for w in targets.values())} targets, "
                    f"{sum(len(w) for w in valid.values())} valid guesses")
        return cls(
            target_words={length: tuple(words) for length, words in targets.items()},
            valid_guesses=valid,
        )

    def problems(self) -> list[str]:
        """Describe missing word lists. An empty list means every length is playable."""
        errors = []
        for length in ENIGMA_DEFAULTS:
            if not self.target_words.get(length):
                errors.append(f"No target words for length {length}")
            if not self.valid_guesses.get(length):
                errors.append(f"No valid guesses for length {length}")
        return errors


@dataclass(frozen=True)
class EnigmaConfig:
    word_length: int = 5
    max_attempts: int | None = None
    base_points: int | None = None
    word_time_ms: int = ENIGMA_WORD_TIME_MS
    rng: Callable[[], float] = field(default=random.random, compare=False)

    def __post_init__(self):
        if self.word_length not in ENIGMA_DEFAULTS:
            raise ValueError(f"No default config for word length {self.word_length}")
        attempts, base = ENIGMA_DEFAULTS[self.word_length]
        if self.max_attempts is None:
            object.__setattr__(self, 'max_attempts', attempts)
        if self.base_points is None:
            object.__setattr__(self, 'base_points', base)
        if self.max_attempts < 1 or self.word_time_ms < 0:
            raise ValueError("max_attempts must be positive and word_time_ms not negative")


@dataclass(frozen=True)
class EnigmaRound:
    target: str
    rows: tuple[Row, ...]
    attempt_index: int = 0
    finished: bool = False
    won: bool = False


@dataclass(frozen=True)
class EnigmaState:
    config: EnigmaConfig
    lexicon: EnigmaLexicon = field(compare=False, repr=False)
    current_round: EnigmaRound | None = None
    time_left_ms: int = ENIGMA_WORD_TIME_MS
    score: int = 0
    streak: int = 0
    highest_streak: int = 0
    combo: float = 1.0
    words_found: int = 0
    words_played: int = 0
    last_target: str | None = None
    ended: bool = False

    @property
    def time_limit_ms(self) -> int:
        return self.config.word_time_ms

    @property
    def phase(self) -> Phase:
        if self.ended:
            return Phase.ENDED
        if self.current_round is None:
            return Phase.IDLE
        if self.current_round.finished:
            return Phase.ANSWERED
        return Phase.ROUND_ACTIVE


@dataclass(frozen=True)
class GuessResult:
    valid: bool
    won: bool = False
    round_over: bool = False
    points_awarded: int = 0
    streak_after: int = 0
    combo_after: float = 1.0
    feedback: tuple[LetterStatus, ...] = ()
    reason: str | None = None
    applied: bool = True


def calculate_feedback(guess: str, target: str) -> tuple[LetterStatus, ...]:
    """Letter feedback with duplicate accounting.

    Exact matches are marked first; a misplaced letter is only marked present
    while the target still has unmatched copies of it.
    """
    guess = _normalize(guess)
    target = _normalize(target)
    if len(guess) != len(target):
        raise ValueError("Guess and target must have the same length")

    feedback = [LetterStatus.ABSENT] * len(guess)
    remaining = Counter(target)
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            feedback[i] = LetterStatus.CORRECT
            remaining[g] -= 1
    for i, g in enumerate(guess):
        if feedback[i] is LetterStatus.ABSENT and remaining[g] > 0:
            feedback[i] = LetterStatus.PRESENT
            remaining[g] -= 1
    return tuple(feedback)


def _empty_grid(config: EnigmaConfig) -> tuple[Row, ...]:
    row = Row(cells=tuple(Cell() for _ in range(config.word_length)))
    return tuple(row for _ in range(config.max_attempts))


def create_state(config: EnigmaConfig, lexicon: EnigmaLexicon) -> EnigmaState:
    return EnigmaState(config=config, lexicon=lexicon, time_left_ms=config.word_time_ms)


def start_round(state: EnigmaState, target: str | None = None) -> EnigmaState:
    """Start a new word with a full grid and a fresh countdown.

    Without an explicit target a random one is drawn, avoiding the previous
    word. An unfinished word must be played out first.
    """
    if state.ended:
        return state
    if state.current_round is not None and not state.current_round.finished:
        return state

    length = state.config.word_length
    if target is not None:
        target = _normalize(target)
        known = set(state.lexicon.target_words.get(length, ())) | state.lexicon.valid_guesses.get(length, frozenset())
        if len(target) != length or target not in known:
            logger.warning(f"Rejected Enigma target {target!r}: not a known {length}-letter word")
            return state
    else:
        target = pick(state.lexicon.target_words.get(length, ()), state.config.rng, state.last_target)
        if target is None:
            logger.info(f"No {length}-letter target words, ending session")
            return replace(state, ended=True, current_round=None)

    new_round = EnigmaRound(target=target, rows=_empty_grid(state.config))
    state = replace(
        state,
        current_round=new_round,
        last_target=target,
        words_played=state.words_played + 1,
    )
    return timer.reset(state)


def _editable_row(state: EnigmaState) -> Row | None:
    current = state.current_round
    if state.ended or current is None or current.finished:
        return None
    if current.attempt_index >= len(current.rows):
        return None
    row = current.rows[current.attempt_index]
    return None if row.submitted else row


def _with_row(state: EnigmaState, row: Row) -> EnigmaState:
    current = state.current_round
    rows = list(current.rows)
    rows[current.attempt_index] = row
    return replace(state, current_round=replace(current, rows=tuple(rows)))


def type_letter(state: EnigmaState, letter: str) -> EnigmaState:
    """Put a letter in the first empty cell of the current row."""
    row = _editable_row(state)
    letter = _normalize(letter)
    if row is None or len(letter) != 1 or not ('A' <= letter <= 'Z'):
        return state
    cells = list(row.cells)
    for i, cell in enumerate(cells):
        if not cell.letter:
            cells[i] = Cell(letter=letter)
            return _with_row(state, replace(row, cells=tuple(cells)))
    return state


def remove_letter(state: EnigmaState) -> EnigmaState:
    """Clear the last filled cell of the current row."""
    row = _editable_row(state)
    if row is None:
        return state
    cells = list(row.cells)
    for i in range(len(cells) - 1, -1, -1):
        if cells[i].letter:
            cells[i] = Cell()
            return _with_row(state, replace(row, cells=tuple(cells)))
    return state


def current_guess(state: EnigmaState) -> str:
    row = _editable_row(state)
    return row.word if row else ''


def _rejected(state: EnigmaState, reason: str) -> GuessResult:
    return GuessResult(False, streak_after=state.streak, combo_after=state.combo,
                       reason=reason, applied=False)


def submit_guess(state: EnigmaState, guess: str | None = None) -> tuple[EnigmaState, GuessResult]:
    """Submit a guess (or the letters typed so far) for the current word.

    Invalid guesses are rejected with a reason and change nothing. Using the
    last attempt without finding the word resets the streak.
    """
    if state.ended:
        return state, _rejected(state, REASON_ENDED)
    current = state.current_round
    if current is None:
        return state, _rejected(state, REASON_NO_ROUND)
    if current.finished:
        return state, _rejected(state, REASON_ALREADY_ANSWERED)
    if current.attempt_index >= state.config.max_attempts:
        return state, _rejected(state, REASON_NO_ATTEMPTS)

    if guess is None:
        guess = current_guess(state)
    length = state.config.word_length
    validation = validate_guess(guess, length, state.lexicon.valid_guesses.get(length, frozenset()))
    if not validation.valid:
        return state, _rejected(state, validation.reason)

    word = validation.normalized
    feedback = calculate_feedback(word, current.target)
    won = word == current.target
    attempts_used = current.attempt_index + 1
    round_over = won or attempts_used >= state.config.max_attempts

    rows = list(current.rows)
    rows[current.attempt_index] = Row(
        cells=tuple(Cell(letter, status) for letter, status in zip(word, feedback)),
        submitted=True,
    )
    new_round = replace(current, rows=tuple(rows), attempt_index=attempts_used,
                        finished=round_over, won=won)

    points = 0
    streak = state.streak
    combo = state.combo
    if won:
        seconds_left = state.time_left_ms // 1000
        attempt_bonus = max(0, (state.config.max_attempts - attempts_used) * ENIGMA_ATTEMPT_BONUS)
        time_bonus = min(seconds_left // ENIGMA_TIME_BONUS_SECONDS, ENIGMA_TIME_BONUS_CAP)
        engine = ScoringEngine(replace(ENIGMA_POLICY, base_points={length: state.config.base_points}))
        breakdown = engine.score(True, ScoreContext(
            base_key=length,
            streak_before=state.streak,
            extra_points=attempt_bonus + time_bonus,
        ))
        points = breakdown.total
        streak = breakdown.streak_after
        combo = breakdown.combo
    elif round_over:
        streak = 0
        combo = ENIGMA_POLICY.combo(0)

    new_state = replace(
        state,
        current_round=new_round,
        score=state.score + points,
        streak=streak,
        combo=combo,
        highest_streak=max(state.highest_streak, streak),
        words_found=state.words_found + (1 if won else 0),
    )
    return new_state, GuessResult(
        valid=True,
        won=won,
        round_over=round_over,
        points_awarded=points,
        streak_after=streak,
        combo_after=combo,
        feedback=feedback,
    )


def tick(state: EnigmaState, delta_ms: int) -> EnigmaState:
    """Run the word countdown. It pauses between words."""
    if state.current_round is None or state.current_round.finished:
        return state
    return timer.tick(state, delta_ms)


def summary(state: EnigmaState) -> dict:
    return {
        'game': GAME_SLUG,
        'difficulty': f"{state.config.word_length}-letters",
        'score': state.score,
        'highest_streak': state.highest_streak,
        'rounds_completed': state.words_found,
        'rounds_played': state.words_played,
    }
