"""Configuration constants for the quest mini-games."""

DEFAULT_SESSION_MS = 90_000   # Speed Verb session length
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 3

# Speed Verb scoring
VERB_COMBO_STEP = 0.1                    # combo = 1 + step * streak
VERB_SPEED_TIERS = (                     # (max latency ms, bonus fraction, time bonus ms)
    (3_000, 0.5, 1_000),
    (5_000, 0.3, 0),
    (8_000, 0.15, 0),
)
MILESTONE_STREAKS = (10, 20, 30, 50, 100)
MILESTONE_FRACTION = 0.5                 # Extra share of the round's points
MILESTONE_TIME_BONUS_MS = 2_000

# Wordfall
WORDFALL_INITIAL_LIVES = 3
WORDFALL_INITIAL_SPEED = 5               # Screen percent per second
WORDFALL_SPEED_PER_LEVEL = 1
WORDFALL_WORDS_PER_LEVEL = 5
WORDFALL_BOTTOM = 100                    # y position at which a word is missed
WORDFALL_USED_WORDS_WINDOW = 5           # Free mode remembers this many words
WORDFALL_MIN_WORD_LENGTH = 2
WORDFALL_MAX_WORD_LENGTH = 20
WORDFALL_BASE_POINTS = {'exact': 5, 'free': 8}
WORDFALL_LENGTH_BONUS = 0.5              # Points per typed character
WORDFALL_POSITION_TIERS = (              # (max y, flat bonus, perfect catch)
    (20, 5, True),
    (40, 3, False),
    (60, 1, False),
)
WORDFALL_COMBO_STEPS = ((5, 1.5), (10, 2.0), (20, 2.5), (50, 3.0))
WORDFALL_MILESTONE_EVERY = 10            # Completed words between milestone bonuses
WORDFALL_MILESTONE_POINTS = 10           # Multiplied by the current combo

# Enigma Scroll
ENIGMA_WORD_LENGTHS = (4, 5, 6)
ENIGMA_DEFAULTS = {                      # word length -> (max attempts, base points)
    4: (5, 10),
    5: (6, 15),
    6: (7, 20),
}
ENIGMA_WORD_TIME_MS = 90_000             # Countdown per secret word
ENIGMA_COMBO_STEPS = ((2, 1.1), (3, 1.15))
ENIGMA_ATTEMPT_BONUS = 2                 # Points per unused attempt
ENIGMA_TIME_BONUS_SECONDS = 6            # One point per this many seconds left
ENIGMA_TIME_BONUS_CAP = 15

# Rejection reasons handed back to the UI
REASON_NO_ROUND = 'no active round'
REASON_ENDED = 'game already ended'
REASON_ALREADY_ANSWERED = 'round already answered'
REASON_TOO_SHORT = 'too short'
REASON_TOO_LONG = 'too long'
REASON_NOT_ALPHABETIC = 'letters only'
REASON_WRONG_LETTER = 'wrong first letter'
REASON_ALREADY_USED = 'already used'
REASON_UNKNOWN_WORD = 'not in dictionary'
REASON_MISSING_TRANSLATION = 'type the English word then its translation'
REASON_WRONG_WORD = 'English word does not match'
REASON_WRONG_TRANSLATION = 'translation does not match'
REASON_WRONG_LENGTH = 'wrong length'
REASON_NO_ATTEMPTS = 'no attempts remaining'
REASON_PAUSED = 'game is paused'
