"""Answer validation for all games.

Validators never raise on learner input. They return a ValidationResult whose
reason is meant to be shown to the player.
"""

import re
from dataclasses import dataclass
from typing import Collection, Iterable, Mapping

from .config import (
    WORDFALL_MIN_WORD_LENGTH, WORDFALL_MAX_WORD_LENGTH,
    REASON_TOO_SHORT, REASON_TOO_LONG, REASON_NOT_ALPHABETIC,
    REASON_WRONG_LETTER, REASON_ALREADY_USED, REASON_UNKNOWN_WORD,
    REASON_MISSING_TRANSLATION, REASON_WRONG_WORD, REASON_WRONG_TRANSLATION,
    REASON_WRONG_LENGTH,
)
from .utils import as_text, normalize_answer, clean_translation

_LETTERS = re.compile(r'^[A-Z]+$')


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: str | None = None
    normalized: str | None = None


def matches(raw: str | None, variants: Iterable[str]) -> bool:
    """True when the normalized input equals any normalized accepted variant."""
    answer = normalize_answer(raw)
    if not answer:
        return False
    return any(normalize_answer(v) == answer for v in variants)


def validate_fields(answer: Mapping[str, str | None], accepted: Mapping[str, Iterable[str]],
                    required: Collection[str]) -> tuple[bool, dict[str, bool]]:
    """Check a multi-field answer.

    Each required field is matched on its own; fields outside `required` count
    as satisfied. Returns (overall, {field: ok}).
    """
    if not isinstance(answer, Mapping):
        answer = {}
    results = {}
    for field in accepted:
        if field in required:
            results[field] = matches(answer.get(field), accepted[field])
        else:
            results[field] = True
    for field in required:
        # A required field the item has no variants for can never be answered
        results.setdefault(field, False)
    return all(results.values()), results


def validate_free_word(text: str, required_letter: str, used_words: Collection[str],
                       valid_words: Collection[str]) -> ValidationResult:
    """Validate a Wordfall free-mode word."""
    normalized = as_text(text).strip().upper()
    letter = (required_letter or '').upper()

    if len(normalized) < WORDFALL_MIN_WORD_LENGTH:
        return ValidationResult(False, REASON_TOO_SHORT, normalized)
    if len(normalized) > WORDFALL_MAX_WORD_LENGTH:
        return ValidationResult(False, REASON_TOO_LONG, normalized)
    if not _LETTERS.match(normalized):
        return ValidationResult(False, REASON_NOT_ALPHABETIC, normalized)
    if not normalized.startswith(letter):
        return ValidationResult(False, REASON_WRONG_LETTER, normalized)
    if normalized in used_words:
        return ValidationResult(False, REASON_ALREADY_USED, normalized)
    if normalized not in valid_words:
        return ValidationResult(False, REASON_UNKNOWN_WORD, normalized)
    return ValidationResult(True, None, normalized)


def validate_exact_word(text: str, target: str, translation: str) -> ValidationResult:
    """Validate a Wordfall exact-mode entry: the English word then its translation.

    The English part takes as many tokens as the target has, so expressions
    such as "GIVE UP" work too. The translation is compared against its
    cleaned display form.
    """
    parts = as_text(text).split()
    target_parts = target.split()
    if len(parts) <= len(target_parts):
        return ValidationResult(False, REASON_MISSING_TRANSLATION)

    english = ' '.join(parts[:len(target_parts)]).upper()
    french = normalize_answer(' '.join(parts[len(target_parts):]))
    if english != ' '.join(target_parts).upper():
        return ValidationResult(False, REASON_WRONG_WORD, english)

    expected = clean_translation(translation)
    if french != normalize_answer(expected):
        return ValidationResult(False, f'{REASON_WRONG_TRANSLATION}, expected "{expected}"', english)
    return ValidationResult(True, None, english)


def validate_guess(text: str, word_length: int, valid_guesses: Collection[str]) -> ValidationResult:
    """Validate an Enigma Scroll guess: right length, letters only, known word."""
    normalized = as_text(text).strip().upper()
    if len(normalized) != word_length:
        return ValidationResult(False, f'{REASON_WRONG_LENGTH}, expected {word_length} letters', normalized)
    if not _LETTERS.match(normalized):
        return ValidationResult(False, REASON_NOT_ALPHABETIC, normalized)
    if normalized not in valid_guesses:
        return ValidationResult(False, REASON_UNKNOWN_WORD, normalized)
    return ValidationResult(True, None, normalized)
