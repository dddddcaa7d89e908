"""REST API client for the quest server."""

import requests


class QuestAPIClient:
    """Client for communicating with the quest REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        response = self.session.get(f"{self.base_url}{endpoint}", params=params or {})
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data or {})
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        return self._get("/")

    def create_session(self, game: str, **options) -> dict:
        """Start a game. Options: difficulty, mode, word_length, seed."""
        data = {'game': game, 'user_id': self.user_id}
        data.update({k: v for k, v in options.items() if v is not None})
        return self._post("/api/sessions", data)

    def get_session(self, session_id: str) -> dict:
        return self._get(f"/api/sessions/{session_id}")

    def answer_verb(self, session_id: str, past_simple: str = None, past_participle: str = None,
                    translation: str = None, answer_time_ms: int = None) -> dict:
        """Submit Speed Verb forms for the current verb."""
        return self._post(f"/api/sessions/{session_id}/answer", {
            'past_simple': past_simple,
            'past_participle': past_participle,
            'translation': translation,
            'answer_time_ms': answer_time_ms,
        })

    def submit_text(self, session_id: str, text: str) -> dict:
        """Submit a Wordfall entry or an Enigma Scroll guess."""
        return self._post(f"/api/sessions/{session_id}/answer", {'text': text})

    def skip(self, session_id: str) -> dict:
        return self._post(f"/api/sessions/{session_id}/skip")

    def tick(self, session_id: str, delta_ms: int) -> dict:
        """Report elapsed time to the session clock."""
        return self._post(f"/api/sessions/{session_id}/tick", {'delta_ms': delta_ms})

    def next_round(self, session_id: str) -> dict:
        return self._post(f"/api/sessions/{session_id}/next")

    def finish(self, session_id: str) -> dict:
        """End the session and save the result."""
        return self._post(f"/api/sessions/{session_id}/finish")

    def get_results(self, game: str = None) -> dict:
        params = {'user_id': self.user_id}
        if game:
            params['game'] = game
        return self._get("/api/results", params)
