"""Round based game state machine.

Every transition takes a frozen GameState and returns a new one. Nothing here
raises for learner input: misuse returns the unchanged state together with a
SubmitResult whose `applied` flag is False.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Callable, Mapping, Sequence

from .config import (
    DEFAULT_SESSION_MS, REASON_NO_ROUND, REASON_ENDED, REASON_ALREADY_ANSWERED,
)
from .scoring import ScoringEngine, ScoringPolicy, ScoreContext, SPEED_VERB_POLICY
from .selection import pick, item_id
from .validation import validate_fields
from . import timer

logger = logging.getLogger(__name__)


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return self.name.lower()


class Phase(str, Enum):
    IDLE = 'idle'
    ROUND_ACTIVE = 'round_active'
    ANSWERED = 'answered'
    SKIPPED = 'skipped'
    ENDED = 'ended'


@dataclass(frozen=True)
class ChallengeItem:
    """A dictionary entry: its canonical form and accepted variants per field."""
    id: str
    answers: Mapping[str, tuple[str, ...]]
    prompt: str = ''

    def to_dict(self) -> dict:
        return {'id': self.id, 'prompt': self.prompt or self.id,
                'answers': {k: list(v) for k, v in self.answers.items()}}


@dataclass(frozen=True)
class GameConfig:
    total_time_ms: int = DEFAULT_SESSION_MS
    difficulty: Difficulty = Difficulty.EASY
    allow_immediate_repeat: bool = False
    rng: Callable[[], float] = field(default=random.random, compare=False)
    policy: ScoringPolicy = SPEED_VERB_POLICY
    # difficulty -> answer fields the player must fill in
    required_fields: Mapping[int, tuple[str, ...]] = field(default_factory=dict)
    skip_resets_streak: bool = False

    def __post_init__(self):
        if self.total_time_ms < 0:
            raise ValueError(f"total_time_ms must not be negative, got {self.total_time_ms}")
        object.__setattr__(self, 'difficulty', Difficulty(self.difficulty))

    def fields_for_difficulty(self, item: ChallengeItem) -> tuple[str, ...]:
        """Required fields for the current difficulty; all item fields if unmapped."""
        if int(self.difficulty) in self.required_fields:
            return tuple(self.required_fields[int(self.difficulty)])
        return tuple(item.answers)


@dataclass(frozen=True)
class Round:
    item: ChallengeItem
    required: tuple[str, ...]
    shown_at_ms: int
    status: Phase = Phase.ROUND_ACTIVE


@dataclass(frozen=True)
class GameState:
    config: GameConfig
    pool: tuple
    last_item_id: str | None = None
    score: int = 0
    time_left_ms: int = 0
    streak: int = 0
    highest_streak: int = 0
    combo: float = 1.0
    rounds_completed: int = 0
    rounds_played: int = 0
    ended: bool = False
    current_round: Round | None = None
    milestones_reached: frozenset = frozenset()

    @property
    def time_limit_ms(self) -> int:
        return self.config.total_time_ms

    @property
    def phase(self) -> Phase:
        if self.ended:
            return Phase.ENDED
        if self.current_round is None:
            return Phase.IDLE
        return self.current_round.status


@dataclass(frozen=True)
class SubmitResult:
    is_correct: bool
    points_awarded: int
    streak_after: int
    combo_after: float
    speed_bonus: int = 0
    time_bonus_ms: int = 0
    is_milestone: bool = False
    milestone_bonus: int = 0
    field_results: dict = field(default_factory=dict)
    applied: bool = True
    reason: str | None = None


def _null_result(state: GameState, reason: str) -> SubmitResult:
    return SubmitResult(
        is_correct=False,
        points_awarded=0,
        streak_after=state.streak,
        combo_after=state.combo,
        applied=False,
        reason=reason,
    )


def create_initial_state(pool: Sequence, config: GameConfig | None = None) -> GameState:
    """Fresh session: zero score and streak, full time, no active round."""
    config = config or GameConfig()
    return GameState(config=config, pool=tuple(pool), time_left_ms=config.total_time_ms)


def start_round(state: GameState, now_ms: int) -> GameState:
    """Install the next round, or end the session when the pool is exhausted."""
    if state.ended:
        return state
    config = state.config
    item = pick(state.pool, config.rng, state.last_item_id, config.allow_immediate_repeat)
    if item is None:
        logger.info("No challenge items left, ending session")
        return replace(state, ended=True, current_round=None)
    new_round = Round(item=item, required=config.fields_for_difficulty(item), shown_at_ms=now_ms)
    return replace(
        state,
        current_round=new_round,
        last_item_id=item_id(item),
        rounds_played=state.rounds_played + 1,
    )


def submit_answer(state: GameState, answer: Mapping[str, str | None],
                  answer_time_ms: int | None = None,
                  now_ms: int | None = None) -> tuple[GameState, SubmitResult]:
    """Validate and score an answer for the active round.

    Latency is `answer_time_ms` when given, else `now_ms` minus the time the
    round was shown. Without either no speed bonus applies. The round stays
    installed (marked answered) until the driver calls start_round again.
    """
    if state.ended:
        return state, _null_result(state, REASON_ENDED)
    current = state.current_round
    if current is None:
        return state, _null_result(state, REASON_NO_ROUND)
    if current.status != Phase.ROUND_ACTIVE:
        return state, _null_result(state, REASON_ALREADY_ANSWERED)

    correct, field_results = validate_fields(answer or {}, current.item.answers, current.required)

    latency = answer_time_ms if isinstance(answer_time_ms, (int, float)) else None
    if latency is None and isinstance(now_ms, (int, float)):
        latency = now_ms - current.shown_at_ms
    if latency is not None:
        latency = max(0, latency)

    rounds_completed = state.rounds_completed + (1 if correct else 0)
    breakdown = ScoringEngine(state.config.policy).score(correct, ScoreContext(
        base_key=int(state.config.difficulty),
        streak_before=state.streak,
        speed_value=latency,
        completed_after=rounds_completed,
        milestones_reached=state.milestones_reached,
    ))

    milestones = state.milestones_reached
    if breakdown.milestone is not None:
        milestones = milestones | {breakdown.milestone}

    new_state = replace(
        state,
        score=state.score + breakdown.total,
        streak=breakdown.streak_after,
        highest_streak=max(state.highest_streak, breakdown.streak_after),
        combo=breakdown.combo,
        rounds_completed=rounds_completed,
        milestones_reached=milestones,
        current_round=replace(current, status=Phase.ANSWERED),
    )
    new_state = timer.add_time_bonus(new_state, breakdown.time_bonus_ms)

    return new_state, SubmitResult(
        is_correct=correct,
        points_awarded=breakdown.total,
        streak_after=breakdown.streak_after,
        combo_after=breakdown.combo,
        speed_bonus=breakdown.speed_bonus,
        time_bonus_ms=breakdown.time_bonus_ms,
        is_milestone=breakdown.is_milestone,
        milestone_bonus=breakdown.milestone_bonus,
        field_results=field_results,
    )


def skip(state: GameState) -> GameState:
    """Give up on the active round. Score is untouched; the streak only
    resets when the session was configured with skip_resets_streak."""
    if state.ended or state.current_round is None:
        return state
    if state.current_round.status != Phase.ROUND_ACTIVE:
        return state
    skipped = replace(state, current_round=replace(state.current_round, status=Phase.SKIPPED))
    if state.config.skip_resets_streak:
        skipped = replace(skipped, streak=0, combo=state.config.policy.combo(0))
    return skipped


def tick(state: GameState, delta_ms: int) -> GameState:
    return timer.tick(state, delta_ms)


def set_difficulty(state: GameState, difficulty: int) -> GameState:
    """Swap in a config with a new difficulty. The active round keeps its fields.
    An unknown tier leaves the state unchanged."""
    try:
        tier = Difficulty(difficulty)
    except ValueError:
        logger.warning(f"Ignoring unknown difficulty {difficulty!r}")
        return state
    return replace(state, config=replace(state.config, difficulty=tier))


def summarize(state: GameState, game: str) -> dict:
    """Final tallies handed to reward computation and persistence."""
    return {
        'game': game,
        'difficulty': state.config.difficulty.label,
        'score': state.score,
        'highest_streak': state.highest_streak,
        'rounds_completed': state.rounds_completed,
        'rounds_played': state.rounds_played,
    }
