"""Scoring engine shared by every game.

Each game describes its tuning as a ScoringPolicy: base points, a combo table,
speed tiers, milestones and a rounding convention. ScoringEngine turns an
answer outcome plus its context into a ScoreBreakdown using that policy, so
the three games share one implementation and differ only in data.
"""

from dataclasses import dataclass
from typing import Mapping

from .config import (
    VERB_COMBO_STEP, VERB_SPEED_TIERS, MILESTONE_STREAKS,
    MILESTONE_FRACTION, MILESTONE_TIME_BONUS_MS,
    WORDFALL_BASE_POINTS, WORDFALL_POSITION_TIERS, WORDFALL_COMBO_STEPS,
    WORDFALL_MILESTONE_EVERY, WORDFALL_MILESTONE_POINTS,
    ENIGMA_DEFAULTS, ENIGMA_COMBO_STEPS,
)
from .utils import apply_rounding


@dataclass(frozen=True)
class LinearCombo:
    """combo = 1 + step * streak"""
    step: float

    def __call__(self, streak: int) -> float:
        return 1 + self.step * max(0, streak)


@dataclass(frozen=True)
class SteppedCombo:
    """Combo read from a threshold table of (minimum streak, multiplier)."""
    steps: tuple[tuple[int, float], ...]

    def __call__(self, streak: int) -> float:
        combo = 1.0
        for threshold, multiplier in sorted(self.steps):
            if streak >= threshold:
                combo = multiplier
        return combo


@dataclass(frozen=True)
class SpeedTier:
    """A speed threshold. `limit` is exclusive: latency in ms or word height."""
    limit: float
    fraction: float = 0.0       # share of the rounded points
    points: int = 0             # flat points
    time_bonus_ms: int = 0
    perfect: bool = False


@dataclass(frozen=True)
class ScoringPolicy:
    base_points: Mapping
    combo: LinearCombo | SteppedCombo
    speed_tiers: tuple[SpeedTier, ...] = ()
    speed_in_base: bool = False         # flat speed points join the pre-combo total
    milestones: tuple[int, ...] = ()    # streak values
    milestone_every: int | None = None  # or every N completed rounds
    milestone_fraction: float = 0.0
    milestone_points: float = 0.0       # scaled by the combo
    milestone_time_bonus_ms: int = 0
    rounding: str = 'nearest'


@dataclass(frozen=True)
class ScoreContext:
    base_key: object
    streak_before: int = 0
    speed_value: float | None = None        # None means no speed bonus
    extra_points: int = 0                   # game specific pre-combo points
    completed_after: int = 0                # for milestone_every policies
    milestones_reached: frozenset = frozenset()


@dataclass(frozen=True)
class ScoreBreakdown:
    points: int = 0
    speed_bonus: int = 0
    time_bonus_ms: int = 0
    milestone_bonus: int = 0
    milestone: int | None = None
    is_perfect: bool = False
    combo: float = 1.0
    streak_after: int = 0
    total: int = 0

    @property
    def is_milestone(self) -> bool:
        return self.milestone is not None


class ScoringEngine:
    """Applies a ScoringPolicy to answer outcomes."""

    def __init__(self, policy: ScoringPolicy):
        self.policy = policy

    def combo_for(self, streak: int) -> float:
        return self.policy.combo(streak)

    def _speed_tier(self, speed_value: float | None) -> SpeedTier | None:
        if speed_value is None:
            return None
        for tier in self.policy.speed_tiers:
            if speed_value < tier.limit:
                return tier
        return None

    def _milestone(self, streak_after: int, context: ScoreContext) -> int | None:
        policy = self.policy
        if policy.milestone_every:
            value = context.completed_after
            if value <= 0 or value % policy.milestone_every:
                return None
        elif streak_after in policy.milestones:
            value = streak_after
        else:
            return None
        if value in context.milestones_reached:
            return None
        return value

    def score(self, correct: bool, context: ScoreContext) -> ScoreBreakdown:
        """Score one answer. Incorrect answers earn nothing and reset the streak."""
        if not correct:
            return ScoreBreakdown(combo=self.combo_for(0), streak_after=0)

        policy = self.policy
        rnd = policy.rounding
        streak_after = context.streak_before + 1
        combo = self.combo_for(streak_after)
        base = policy.base_points[context.base_key]
        tier = self._speed_tier(context.speed_value)

        pre_combo = base + context.extra_points
        if tier and policy.speed_in_base:
            pre_combo += tier.points
        points = apply_rounding(pre_combo * combo, rnd)

        speed_bonus = 0
        time_bonus = 0
        if tier:
            time_bonus = tier.time_bonus_ms
            if policy.speed_in_base:
                speed_bonus = tier.points
            else:
                speed_bonus = apply_rounding(points * tier.fraction, rnd) + tier.points

        milestone = self._milestone(streak_after, context)
        milestone_bonus = 0
        if milestone is not None:
            milestone_bonus = apply_rounding(
                points * policy.milestone_fraction + policy.milestone_points * combo, rnd)
            time_bonus += policy.milestone_time_bonus_ms

        total = points + milestone_bonus
        if not policy.speed_in_base:
            total += speed_bonus

        return ScoreBreakdown(
            points=points,
            speed_bonus=speed_bonus,
            time_bonus_ms=time_bonus,
            milestone_bonus=milestone_bonus,
            milestone=milestone,
            is_perfect=bool(tier and tier.perfect),
            combo=combo,
            streak_after=streak_after,
            total=total,
        )


SPEED_VERB_POLICY = ScoringPolicy(
    base_points={1: 1, 2: 2, 3: 3},
    combo=LinearCombo(VERB_COMBO_STEP),
    speed_tiers=tuple(SpeedTier(limit, fraction=fraction, time_bonus_ms=bonus)
                      for limit, fraction, bonus in VERB_SPEED_TIERS),
    milestones=MILESTONE_STREAKS,
    milestone_fraction=MILESTONE_FRACTION,
    milestone_time_bonus_ms=MILESTONE_TIME_BONUS_MS,
    rounding='nearest',
)

WORDFALL_POLICY = ScoringPolicy(
    base_points=dict(WORDFALL_BASE_POINTS),
    combo=SteppedCombo(WORDFALL_COMBO_STEPS),
    speed_tiers=tuple(SpeedTier(limit, points=points, perfect=perfect)
                      for limit, points, perfect in WORDFALL_POSITION_TIERS),
    speed_in_base=True,
    milestone_every=WORDFALL_MILESTONE_EVERY,
    milestone_points=WORDFALL_MILESTONE_POINTS,
    rounding='floor',
)

ENIGMA_POLICY = ScoringPolicy(
    base_points={length: base for length, (_, base) in ENIGMA_DEFAULTS.items()},
    combo=SteppedCombo(ENIGMA_COMBO_STEPS),
    rounding='floor',
)
