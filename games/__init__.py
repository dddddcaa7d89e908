from .engine import (
    Difficulty, Phase, ChallengeItem, GameConfig, Round, GameState, SubmitResult,
    create_initial_state, start_round, submit_answer, skip, tick, set_difficulty,
)
from .interfaces import WordSource, ResultStorage
from .scoring import (
    ScoringEngine, ScoringPolicy, ScoreContext, ScoreBreakdown, LinearCombo, SteppedCombo,
    SpeedTier, SPEED_VERB_POLICY, WORDFALL_POLICY, ENIGMA_POLICY,
)
from .selection import pick
from .validation import ValidationResult, matches, validate_fields
from .config import DEFAULT_SESSION_MS, MILESTONE_STREAKS

__all__ = [
    'Difficulty', 'Phase', 'ChallengeItem', 'GameConfig', 'Round', 'GameState', 'SubmitResult',
    'create_initial_state', 'start_round', 'submit_answer', 'skip', 'tick', 'set_difficulty',
    'WordSource', 'ResultStorage',
    'ScoringEngine', 'ScoringPolicy', 'ScoreContext', 'ScoreBreakdown', 'LinearCombo',
    'SteppedCombo', 'SpeedTier', 'SPEED_VERB_POLICY', 'WORDFALL_POLICY', 'ENIGMA_POLICY',
    'pick',
    'ValidationResult', 'matches', 'validate_fields',
    'DEFAULT_SESSION_MS', 'MILESTONE_STREAKS',
]
