"""Abstract base classes for the collaborators the engines depend on."""

from abc import ABC, abstractmethod


class WordSource(ABC):
    """Abstract base class for dictionary data feeding the engines."""

    @abstractmethod
    def load_verbs(self) -> list[dict]:
        """Load verb records. Returns list of
        {base, past_simple, past_participle, translations} dicts."""
        pass

    @abstractmethod
    def load_wordfall_words(self) -> dict:
        """Load Wordfall data. Returns {translations, words_by_length,
        expressions, english_words} (the last two may be missing)."""
        pass

    @abstractmethod
    def load_enigma_words(self) -> tuple[dict, dict | None]:
        """Load Enigma Scroll data. Returns (target_words, valid_guesses),
        both keyed by word length."""
        pass


class ResultStorage(ABC):
    """Abstract base class for persisting finished sessions."""

    @abstractmethod
    def save_result(self, user_id: str, summary: dict) -> None:
        """Save a finished session summary for a user."""
        pass

    @abstractmethod
    def load_results(self, user_id: str, game: str = None) -> list[dict]:
        """Load saved summaries for a user, optionally for one game only."""
        pass

    @abstractmethod
    def get_personal_best(self, user_id: str, game: str, difficulty: str) -> dict | None:
        """Get the highest scoring summary for a game and difficulty."""
        pass
