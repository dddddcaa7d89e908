"""Speed Verb Challenge: conjugate irregular verbs against the clock."""

import random
from dataclasses import dataclass
from typing import Callable, Iterable

from .config import DEFAULT_SESSION_MS
from .engine import (
    ChallengeItem, Difficulty, GameConfig, GameState, SubmitResult,
    create_initial_state, submit_answer, summarize,
)
from .scoring import SPEED_VERB_POLICY
from .utils import split_variants

GAME_SLUG = 'speed-verb-challenge'

PAST_SIMPLE = 'past_simple'
PAST_PARTICIPLE = 'past_participle'
TRANSLATION = 'translation'

REQUIRED_FIELDS = {
    Difficulty.EASY: (PAST_SIMPLE,),
    Difficulty.MEDIUM: (PAST_SIMPLE, PAST_PARTICIPLE),
    Difficulty.HARD: (PAST_SIMPLE, PAST_PARTICIPLE, TRANSLATION),
}


@dataclass(frozen=True)
class Verb:
    base: str
    past_simple: tuple[str, ...]
    past_participle: tuple[str, ...]
    translations: tuple[str, ...]

    def to_item(self) -> ChallengeItem:
        return ChallengeItem(
            id=self.base,
            prompt=self.base,
            answers={
                PAST_SIMPLE: self.past_simple,
                PAST_PARTICIPLE: self.past_participle,
                TRANSLATION: self.translations,
            },
        )

    @classmethod
    def from_dict(cls, data: dict) -> 'Verb':
        return cls(
            base=data['base'].strip(),
            past_simple=split_variants(data.get('past_simple')),
            past_participle=split_variants(data.get('past_participle')),
            translations=split_variants(data.get('translations')),
        )


def build_pool(verbs: Iterable[Verb | dict]) -> list[ChallengeItem]:
    """Turn verb records into challenge items, skipping verbs with no past simple."""
    pool = []
    for verb in verbs:
        if isinstance(verb, dict):
            verb = Verb.from_dict(verb)
        if verb.past_simple:
            pool.append(verb.to_item())
    return pool


def make_config(difficulty: int = Difficulty.EASY, total_time_ms: int = DEFAULT_SESSION_MS,
                rng: Callable[[], float] = random.random, allow_immediate_repeat: bool = False,
                skip_resets_streak: bool = False) -> GameConfig:
    return GameConfig(
        total_time_ms=total_time_ms,
        difficulty=Difficulty(difficulty),
        allow_immediate_repeat=allow_immediate_repeat,
        rng=rng,
        policy=SPEED_VERB_POLICY,
        required_fields=REQUIRED_FIELDS,
        skip_resets_streak=skip_resets_streak,
    )


def create_game(verbs: Iterable[Verb | dict], **config) -> GameState:
    """New Speed Verb session. Keyword arguments go to make_config."""
    return create_initial_state(build_pool(verbs), make_config(**config))


def answer(state: GameState, past_simple: str | None = None, past_participle: str | None = None,
           translation: str | None = None, answer_time_ms: int | None = None,
           now_ms: int | None = None) -> tuple[GameState, SubmitResult]:
    payload = {
        PAST_SIMPLE: past_simple,
        PAST_PARTICIPLE: past_participle,
        TRANSLATION: translation,
    }
    return submit_answer(state, payload, answer_time_ms=answer_time_ms, now_ms=now_ms)


def summary(state: GameState) -> dict:
    return summarize(state, GAME_SLUG)
