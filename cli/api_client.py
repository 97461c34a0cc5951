"""REST API client for focal server."""

import requests


class FocalAPIClient:
    """Client for communicating with the focal REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        if params is None:
            params = {}
        params['user_id'] = self.user_id
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        if data is None:
            data = {}
        data['user_id'] = self.user_id
        response = self.session.post(f"{self.base_url}{endpoint}", json=data)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        return self._get("/api/health")

    def list_exercises(self) -> list:
        return self._get("/api/exercises")

    def list_users(self) -> list:
        return self._get("/api/users")['users']

    def get_progress(self) -> dict:
        return self._get("/api/progress")

    def start_session(self, exercise_id: str) -> dict:
        """Start typing an exercise."""
        return self._post("/api/session/start", {'exercise_id': exercise_id})

    def get_state(self) -> dict:
        return self._get("/api/session")

    def type_letter(self, letter: str) -> dict:
        return self._post("/api/session/type", {'letter': letter})

    def backspace(self) -> dict:
        return self._post("/api/session/backspace")

    def reveal_letter(self) -> dict:
        return self._post("/api/session/reveal")

    def next_word(self) -> dict:
        return self._post("/api/session/word/next")

    def previous_word(self) -> dict:
        return self._post("/api/session/word/previous")

    def next_unit(self) -> dict:
        return self._post("/api/session/unit/next")

    def previous_unit(self) -> dict:
        return self._post("/api/session/unit/previous")

    def toggle_source(self) -> dict:
        return self._post("/api/session/source")

    def reset(self) -> dict:
        return self._post("/api/session/reset")

    def finish(self) -> dict:
        """Save progress and close the session."""
        return self._post("/api/session/finish")
