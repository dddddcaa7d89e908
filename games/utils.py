"""Utility functions for the quest mini-games."""

import math
import re

# Absorbs binary float error such as 20 * 1.15 == 22.999999999999996
_EPSILON = 1e-9


def as_text(value) -> str:
    """Learner input that is not a string counts as empty."""
    return value if isinstance(value, str) else ''


def normalize_answer(text: str | None) -> str | None:
    """Trim, case-fold and collapse internal whitespace. Non-text gives None."""
    if not isinstance(text, str):
        return None
    return re.sub(r'\s+', ' ', text.strip()).casefold()


def clean_translation(translation: str | None) -> str:
    """Reduce a dictionary translation to the form a player is expected to type.

    Parenthesised notes are removed (two passes handle one level of nesting),
    then only the first alternative before "/" and before "," is kept.
    """
    if not translation or not isinstance(translation, str):
        return ''
    cleaned = translation.strip()
    cleaned = re.sub(r'\([^()]*\)', '', cleaned)
    cleaned = re.sub(r'\([^()]*\)', '', cleaned)
    if '/' in cleaned:
        cleaned = cleaned.split('/')[0].strip()
    if ',' in cleaned:
        cleaned = cleaned.split(',')[0].strip()
    return re.sub(r'\s+', ' ', cleaned).strip()


def split_variants(value) -> tuple[str, ...]:
    """Accept a comma separated string or an iterable of strings."""
    if value is None:
        return ()
    if isinstance(value, str):
        parts = value.split(',')
    else:
        parts = list(value)
    return tuple(p.strip() for p in parts if p and p.strip())


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5 + _EPSILON)


def floor_points(value: float) -> int:
    return math.floor(value + _EPSILON)


def apply_rounding(value: float, mode: str) -> int:
    """Round points with a game's convention ('nearest' or 'floor')."""
    if mode == 'floor':
        return floor_points(value)
    return round_half_up(value)
