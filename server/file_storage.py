"""File-based storage implementation."""

import json
import logging
import os
from datetime import datetime, timezone

from games.interfaces import ResultStorage, WordSource
from games import vocabulary

logger = logging.getLogger(__name__)


class FileStorage(ResultStorage):
    """Stores finished session summaries as one JSON file per user."""

    def __init__(self, state_dir: str = None):
        # Project root is one level up from server/
        project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.state_dir = state_dir or project_root

    def _get_results_file(self, user_id: str) -> str:
        """Get results file path for a user."""
        if user_id == "default":
            return os.path.join(self.state_dir, 'quest_results.json')
        return os.path.join(self.state_dir, f'quest_results_{user_id}.json')

    def _load_all(self, user_id: str) -> list[dict]:
        results_file = self._get_results_file(user_id)
        if not os.path.exists(results_file):
            return []
        try:
            with open(results_file, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable results file {results_file}: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Ignoring results file {results_file}: expected a list")
            return []
        return [r for r in data if isinstance(r, dict)]

    def save_result(self, user_id: str, summary: dict) -> None:
        results = self._load_all(user_id)
        entry = dict(summary)
        entry.setdefault('finished_at', datetime.now(timezone.utc).isoformat())
        results.append(entry)
        os.makedirs(self.state_dir, exist_ok=True)
        with open(self._get_results_file(user_id), 'w') as f:
            json.dump(results, f, indent=2)

    def load_results(self, user_id: str, game: str = None) -> list[dict]:
        results = self._load_all(user_id)
        if game:
            results = [r for r in results if r.get('game') == game]
        return results

    def get_personal_best(self, user_id: str, game: str, difficulty: str) -> dict | None:
        candidates = [r for r in self.load_results(user_id, game)
                      if str(r.get('difficulty')) == str(difficulty)]
        if not candidates:
            return None
        return max(candidates, key=lambda r: r.get('score', 0))


class FileWordSource(WordSource):
    """Reads word lists from JSON files, falling back to the built-in lists.

    Expected files in words_dir: verbs.json (list of verb dicts),
    wordfall-words.json ({translations, wordsByLength, expressions}),
    english-words.json (list of words), enigma-targets.json and
    enigma-guesses.json ({length: [words]}).
    """

    def __init__(self, words_dir: str = None):
        self.words_dir = words_dir

    def _read(self, filename: str):
        if not self.words_dir:
            return None
        path = os.path.join(self.words_dir, filename)
        if not os.path.exists(path):
            return None
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger.info(f"Loaded word list {path}")
        return data

    def load_verbs(self) -> list[dict]:
        data = self._read('verbs.json')
        if data is None:
            return [
                {'base': v.base, 'past_simple': list(v.past_simple),
                 'past_participle': list(v.past_participle), 'translations': list(v.translations)}
                for v in vocabulary.VERBS
            ]
        return data

    def load_wordfall_words(self) -> dict:
        data = self._read('wordfall-words.json')
        if data is None:
            translations = vocabulary.verb_translations()
            translations.update(vocabulary.WORD_TRANSLATIONS)
            data = {'translations': translations, 'expressions': list(vocabulary.WORD_EXPRESSIONS)}
        return {
            'translations': data.get('translations', {}),
            'words_by_length': data.get('wordsByLength', data.get('words_by_length', {})),
            'expressions': data.get('expressions', []),
            'english_words': self._read('english-words.json') or [],
        }

    def load_enigma_words(self) -> tuple[dict, dict | None]:
        targets = self._read('enigma-targets.json')
        if targets is None:
            return vocabulary.ENIGMA_TARGET_WORDS, None
        return targets, self._read('enigma-guesses.json')
