"""Unit tests for the Wordfall and Enigma Scroll game logic."""

import unittest
from dataclasses import replace

from games import enigma_scroll, wordfall
from games.config import (
    REASON_ALREADY_ANSWERED, REASON_ALREADY_USED, REASON_ENDED, REASON_PAUSED,
    REASON_UNKNOWN_WORD, REASON_WRONG_WORD,
)
from games.engine import Phase
from games.enigma_scroll import EnigmaConfig, EnigmaLexicon, LetterStatus
from games.wordfall import WordfallConfig, WordfallLexicon

C = LetterStatus.CORRECT
P = LetterStatus.PRESENT
A = LetterStatus.ABSENT


def constant_rng(value: float):
    """RNG that always returns the same value."""
    return lambda: value


# ============================================================================
# Wordfall
# ============================================================================

def wordfall_lexicon() -> WordfallLexicon:
    return WordfallLexicon.build(
        {'BOOK': 'livre', 'CAT': 'chat', 'FRIEND': 'ami (masculin), amie', 'EMPTY': ''},
        words_by_length={4: ['book'], 3: ['cat']},
        expressions=['GIVE UP'],
        english_words=['cow', 'cat', 'cake', 'crab', 'corn', 'cup'],
    )


def running_wordfall(mode='exact', rng_value=0.0) -> wordfall.WordfallState:
    config = WordfallConfig(mode=mode, rng=constant_rng(rng_value))
    return wordfall.start(wordfall.create_state(config, wordfall_lexicon()))


class TestWordfallLexicon(unittest.TestCase):
    """Test lexicon construction."""

    def setUp(self):
        self.lexicon = wordfall_lexicon()

    def test_exact_words_need_translation(self):
        self.assertEqual(self.lexicon.exact_words, ('CAT', 'BOOK', 'FRIEND'))
        self.assertNotIn('EMPTY', self.lexicon.translations)

    def test_valid_words_include_dictionary(self):
        for word in ('COW', 'CAKE', 'BOOK', 'FRIEND'):
            self.assertIn(word, self.lexicon.valid_words)

    def test_translation_for(self):
        self.assertEqual(self.lexicon.translation_for('friend'), 'ami')
        self.assertEqual(self.lexicon.translation_for('unknown'), '')

    def test_bad_mode(self):
        with self.assertRaises(ValueError):
            WordfallConfig(mode='bogus')


class TestWordfallSpawning(unittest.TestCase):
    """Test spawning and falling words."""

    def setUp(self):
        self.state = running_wordfall()

    def test_spawn_exact_word(self):
        state = wordfall.spawn_word(self.state, 1000)
        word = state.active_word
        self.assertEqual(word.id, 'word-1000-1')
        self.assertEqual(word.text, 'CAT')
        self.assertEqual(word.translation, 'chat')
        self.assertEqual(word.y, 0)
        self.assertEqual(word.speed, 5)
        self.assertEqual(state.words_spawned, 1)

    def test_spawn_requires_running(self):
        idle = wordfall.create_state(WordfallConfig(), wordfall_lexicon())
        self.assertIs(wordfall.spawn_word(idle, 0), idle)

    def test_one_word_at_a_time(self):
        state = wordfall.spawn_word(self.state, 0)
        self.assertIs(wordfall.spawn_word(state, 10), state)

    def test_next_word_differs(self):
        state = wordfall.spawn_word(self.state, 0)
        state = wordfall.process_miss(state)
        state = wordfall.spawn_word(state, 10)
        self.assertEqual(state.active_word.text, 'BOOK')

    def test_empty_lexicon_ends_game(self):
        state = wordfall.start(wordfall.create_state(WordfallConfig(), WordfallLexicon.build({})))
        state = wordfall.spawn_word(state, 0)
        self.assertTrue(state.ended)
        self.assertFalse(state.running)

    def test_advance(self):
        state = wordfall.advance(wordfall.spawn_word(self.state, 0), 2000)
        self.assertEqual(state.active_word.y, 10)

    def test_reaching_bottom_costs_a_life(self):
        state = replace(wordfall.spawn_word(self.state, 0), streak=4, combo=1.0)
        state = wordfall.advance(state, 2000)
        state = wordfall.advance(state, 18000)
        self.assertEqual(state.lives, 2)
        self.assertIsNone(state.active_word)
        self.assertEqual(state.streak, 0)
        self.assertFalse(state.ended)

    def test_game_over_and_restart(self):
        state = self.state
        for i in range(3):
            state = wordfall.spawn_word(state, i)
            state = wordfall.advance(state, 25000)
        self.assertEqual(state.lives, 0)
        self.assertTrue(state.ended)
        self.assertFalse(state.running)
        after, result = wordfall.process_input(state, 'cat chat')
        self.assertIs(after, state)
        self.assertEqual(result.reason, REASON_ENDED)

        restarted = wordfall.start(state)
        self.assertEqual(restarted.lives, 3)
        self.assertEqual(restarted.score, 0)
        self.assertTrue(restarted.running)
        self.assertFalse(restarted.ended)

    def test_pause_and_resume(self):
        state = wordfall.pause(wordfall.spawn_word(self.state, 0))
        self.assertIs(wordfall.advance(state, 1000), state)
        after, result = wordfall.process_input(state, 'cat chat')
        self.assertIs(after, state)
        self.assertFalse(result.applied)
        self.assertEqual(result.reason, REASON_PAUSED)
        self.assertTrue(wordfall.resume(state).running)


class TestWordfallScoring(unittest.TestCase):
    """Test typed input in both modes."""

    def test_exact_catch(self):
        state = wordfall.advance(wordfall.spawn_word(running_wordfall(), 0), 2000)
        state, result = wordfall.process_input(state, 'cat chat')
        self.assertTrue(result.success)
        self.assertEqual(result.points_awarded, 14)
        self.assertTrue(result.breakdown.is_perfect)
        self.assertEqual(state.score, 14)
        self.assertEqual(state.perfect_catches, 1)
        self.assertEqual(state.streak, 1)
        self.assertEqual(state.words_completed, 1)
        self.assertIsNone(state.active_word)

    def test_wrong_word_resets_streak(self):
        state = replace(wordfall.spawn_word(running_wordfall(), 0), streak=3, combo=1.0)
        after, result = wordfall.process_input(state, 'dog chien')
        self.assertFalse(result.success)
        self.assertEqual(result.reason, REASON_WRONG_WORD)
        self.assertEqual(after.streak, 0)
        self.assertEqual(after.active_word, state.active_word)
        self.assertEqual(after.score, state.score)

    def test_non_text_input_is_a_wrong_entry(self):
        state = replace(wordfall.spawn_word(running_wordfall(), 0), streak=2, combo=1.0)
        after, result = wordfall.process_input(state, 42)
        self.assertFalse(result.success)
        self.assertTrue(result.applied)
        self.assertEqual(after.streak, 0)
        self.assertEqual(after.active_word, state.active_word)

        state = wordfall.spawn_word(running_wordfall('free'), 0)
        after, result = wordfall.process_input(state, None)
        self.assertFalse(result.success)
        self.assertEqual(after.lives, state.lives)

    def test_milestone_every_ten_words(self):
        state = wordfall.spawn_word(running_wordfall(), 0)
        state = replace(state, words_completed=9, streak=9,
                        active_word=replace(state.active_word, y=50))
        state, result = wordfall.process_input(state, 'cat chat')
        self.assertEqual(result.breakdown.points, 24)
        self.assertEqual(result.breakdown.milestone_bonus, 20)
        self.assertEqual(result.points_awarded, 44)
        self.assertEqual(state.level, 3)
        self.assertIn(10, state.milestones_reached)

    def test_level_raises_speed(self):
        state = replace(wordfall.spawn_word(running_wordfall(), 0), words_completed=4)
        state, _ = wordfall.process_input(state, 'cat chat')
        self.assertEqual(state.level, 2)
        state = wordfall.spawn_word(state, 100)
        self.assertEqual(state.active_word.speed, 6)

    def test_free_mode(self):
        state = wordfall.spawn_word(running_wordfall('free', 0.1), 0)
        self.assertEqual(state.active_word.text, 'C')
        self.assertIsNone(state.active_word.translation)
        state, result = wordfall.process_input(state, 'cow')
        self.assertTrue(result.success)
        self.assertEqual(result.points_awarded, 14)
        self.assertEqual(state.used_words, ('COW',))

        state = wordfall.spawn_word(replace(state, streak=2), 10)
        state, result = wordfall.process_input(state, 'Cow')
        self.assertFalse(result.success)
        self.assertEqual(result.reason, REASON_ALREADY_USED)
        self.assertEqual(state.streak, 0)

    def test_free_mode_unknown_word(self):
        state = wordfall.spawn_word(running_wordfall('free', 0.1), 0)
        _, result = wordfall.process_input(state, 'cobble')
        self.assertEqual(result.reason, REASON_UNKNOWN_WORD)

    def test_used_words_window(self):
        state = wordfall.spawn_word(running_wordfall('free', 0.1), 0)
        state = replace(state, used_words=('CAT', 'CAKE', 'CRAB', 'CORN', 'CUP'))
        state, result = wordfall.process_input(state, 'cow')
        self.assertTrue(result.success)
        self.assertEqual(state.used_words, ('CAKE', 'CRAB', 'CORN', 'CUP', 'COW'))

    def test_summary(self):
        state = wordfall.spawn_word(running_wordfall(), 0)
        state, _ = wordfall.process_input(state, 'cat chat')
        summary = wordfall.summary(state)
        self.assertEqual(summary['game'], 'wordfall')
        self.assertEqual(summary['difficulty'], 'exact')
        self.assertEqual(summary['rounds_completed'], 1)
        self.assertEqual(summary['perfect_catches'], 1)


# ============================================================================
# Enigma Scroll
# ============================================================================

GUESSES = ['crane', 'slate', 'allee', 'eerie', 'pious', 'maple', 'lemon', 'ghost', 'apple']


def enigma_lexicon() -> EnigmaLexicon:
    return EnigmaLexicon.load(
        {'5': ['crane', 'slate', 'apple'], '4': ['book'], '7': ['example']},
        {'5': GUESSES},
        blocked=['apple'],
    )


def enigma_game(**config) -> enigma_scroll.EnigmaState:
    config.setdefault('rng', constant_rng(0))
    return enigma_scroll.create_state(EnigmaConfig(**config), enigma_lexicon())


class TestFeedback(unittest.TestCase):
    """Test letter colouring."""

    def test_exact_and_absent(self):
        self.assertEqual(enigma_scroll.calculate_feedback('slate', 'crane'), (A, A, C, A, C))

    def test_duplicate_letters(self):
        self.assertEqual(enigma_scroll.calculate_feedback('ALLEE', 'APPLE'), (C, P, A, A, C))

    def test_all_correct(self):
        self.assertEqual(enigma_scroll.calculate_feedback('crane', 'CRANE'), (C,) * 5)

    def test_length_mismatch(self):
        with self.assertRaises(ValueError):
            enigma_scroll.calculate_feedback('CRAN', 'CRANE')


class TestEnigmaLexicon(unittest.TestCase):
    """Test word list loading."""

    def setUp(self):
        self.lexicon = enigma_lexicon()

    def test_targets_filtered(self):
        self.assertEqual(self.lexicon.target_words[5], ('CRANE', 'SLATE'))
        self.assertEqual(self.lexicon.target_words[4], ('BOOK',))
        self.assertNotIn(7, self.lexicon.target_words)

    def test_blocked_word_dropped_from_guesses(self):
        self.assertNotIn('APPLE', self.lexicon.valid_guesses[5])
        self.assertIn('ALLEE', self.lexicon.valid_guesses[5])

    def test_targets_are_valid_guesses(self):
        self.assertIn('BOOK', self.lexicon.valid_guesses[4])

    def test_problems(self):
        problems = self.lexicon.problems()
        self.assertIn('No target words for length 6', problems)
        self.assertIn('No valid guesses for length 6', problems)
        self.assertEqual(len(problems), 2)

    def test_config_defaults(self):
        config = EnigmaConfig(word_length=4)
        self.assertEqual(config.max_attempts, 5)
        self.assertEqual(config.base_points, 10)
        with self.assertRaises(ValueError):
            EnigmaConfig(word_length=7)


class TestEnigmaRounds(unittest.TestCase):
    """Test the guess lifecycle."""

    def setUp(self):
        self.state = enigma_scroll.start_round(enigma_game())

    def test_start_round(self):
        state = self.state
        self.assertEqual(state.current_round.target, 'CRANE')
        self.assertEqual(len(state.current_round.rows), 6)
        self.assertEqual(state.time_left_ms, 90_000)
        self.assertEqual(state.phase, Phase.ROUND_ACTIVE)
        self.assertEqual(state.words_played, 1)

    def test_start_round_keeps_unfinished_word(self):
        self.assertIs(enigma_scroll.start_round(self.state), self.state)

    def test_explicit_target(self):
        state = enigma_scroll.start_round(enigma_game(), 'slate')
        self.assertEqual(state.current_round.target, 'SLATE')

    def test_unknown_explicit_target_is_ignored(self):
        state = enigma_game()
        with self.assertLogs('games.enigma_scroll', level='WARNING'):
            self.assertIs(enigma_scroll.start_round(state, 'zzzzz'), state)

    def test_missing_word_list_ends_session(self):
        state = enigma_scroll.start_round(enigma_game(word_length=6))
        self.assertTrue(state.ended)
        self.assertEqual(state.phase, Phase.ENDED)

    def test_typing(self):
        state = self.state
        for letter in 'cr':
            state = enigma_scroll.type_letter(state, letter)
        self.assertEqual(enigma_scroll.current_guess(state), 'CR')
        state = enigma_scroll.remove_letter(state)
        self.assertEqual(enigma_scroll.current_guess(state), 'C')
        self.assertIs(enigma_scroll.type_letter(state, '1'), state)
        for letter in 'ranexy':
            state = enigma_scroll.type_letter(state, letter)
        self.assertEqual(enigma_scroll.current_guess(state), 'CRANE')

    def test_invalid_guess_changes_nothing(self):
        state, result = enigma_scroll.submit_guess(self.state, 'zzzzz')
        self.assertIs(state, self.state)
        self.assertFalse(result.valid)
        self.assertFalse(result.applied)
        self.assertEqual(result.reason, REASON_UNKNOWN_WORD)

        state, result = enigma_scroll.submit_guess(self.state, 'cranes')
        self.assertIs(state, self.state)
        self.assertTrue(result.reason.startswith('wrong length'))

    def test_non_text_guess_is_rejected(self):
        state, result = enigma_scroll.submit_guess(self.state, 42)
        self.assertIs(state, self.state)
        self.assertFalse(result.applied)
        self.assertTrue(result.reason.startswith('wrong length'))
        self.assertIs(enigma_scroll.type_letter(self.state, 5), self.state)
        self.assertIs(enigma_scroll.type_letter(self.state, None), self.state)

    def test_wrong_guess(self):
        state, result = enigma_scroll.submit_guess(self.state, 'slate')
        self.assertTrue(result.valid)
        self.assertFalse(result.won)
        self.assertFalse(result.round_over)
        self.assertEqual(result.feedback, (A, A, C, A, C))
        self.assertEqual(state.current_round.attempt_index, 1)
        self.assertTrue(state.current_round.rows[0].submitted)
        self.assertEqual(state.current_round.rows[0].word, 'SLATE')
        self.assertEqual(state.score, 0)

    def test_win_scores_attempts_and_time(self):
        state, _ = enigma_scroll.submit_guess(self.state, 'slate')
        state, result = enigma_scroll.submit_guess(state, 'crane')
        self.assertTrue(result.won)
        self.assertTrue(result.round_over)
        self.assertEqual(result.points_awarded, 38)
        self.assertEqual(state.score, 38)
        self.assertEqual(state.streak, 1)
        self.assertEqual(state.words_found, 1)
        self.assertEqual(state.phase, Phase.ANSWERED)

        again, result = enigma_scroll.submit_guess(state, 'crane')
        self.assertIs(again, state)
        self.assertEqual(result.reason, REASON_ALREADY_ANSWERED)

    def test_typed_letters_are_submitted(self):
        state = self.state
        for letter in 'CRANE':
            state = enigma_scroll.type_letter(state, letter)
        state, result = enigma_scroll.submit_guess(state)
        self.assertTrue(result.won)

    def test_combo_on_second_word(self):
        state, _ = enigma_scroll.submit_guess(self.state, 'slate')
        state, _ = enigma_scroll.submit_guess(state, 'crane')
        state = enigma_scroll.start_round(state)
        self.assertEqual(state.current_round.target, 'SLATE')
        self.assertEqual(state.time_left_ms, 90_000)
        state = enigma_scroll.tick(state, 30_000)
        state, result = enigma_scroll.submit_guess(state, 'slate')
        self.assertEqual(result.points_awarded, 38)
        self.assertEqual(result.streak_after, 2)
        self.assertEqual(result.combo_after, 1.1)
        self.assertEqual(state.score, 76)

    def test_losing_resets_streak(self):
        state = replace(self.state, streak=2, combo=1.1)
        for guess in ('allee', 'eerie', 'pious', 'maple', 'lemon'):
            state, result = enigma_scroll.submit_guess(state, guess)
            self.assertFalse(result.round_over)
            self.assertEqual(state.streak, 2)
        state, result = enigma_scroll.submit_guess(state, 'ghost')
        self.assertTrue(result.round_over)
        self.assertFalse(result.won)
        self.assertEqual(result.points_awarded, 0)
        self.assertEqual(state.streak, 0)
        self.assertEqual(state.combo, 1)
        self.assertEqual(state.current_round.attempt_index, 6)

    def test_timeout_ends_session(self):
        state = enigma_scroll.tick(self.state, 95_000)
        self.assertTrue(state.ended)
        self.assertEqual(state.time_left_ms, 0)
        self.assertIsNone(state.current_round)
        _, result = enigma_scroll.submit_guess(state, 'crane')
        self.assertEqual(result.reason, REASON_ENDED)

    def test_clock_stops_between_words(self):
        state, _ = enigma_scroll.submit_guess(self.state, 'crane')
        self.assertIs(enigma_scroll.tick(state, 5000), state)

    def test_summary(self):
        state, _ = enigma_scroll.submit_guess(self.state, 'crane')
        summary = enigma_scroll.summary(state)
        self.assertEqual(summary['game'], 'enigma-scroll')
        self.assertEqual(summary['difficulty'], '5-letters')
        self.assertEqual(summary['rounds_completed'], 1)
        self.assertEqual(summary['rounds_played'], 1)


if __name__ == '__main__':
    unittest.main()
