"""File-based storage implementation."""

import json
import logging
import os

from core.interfaces import Storage

logger = logging.getLogger(__name__)


class FileStorage(Storage):
    """File-based storage implementation."""

    def __init__(self, state_dir: str = None):
        # Project root is one level up from server/
        project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.state_dir = state_dir or project_root
        os.makedirs(self.state_dir, exist_ok=True)

    def _get_progress_file(self, user_id: str) -> str:
        """Get progress file path for a user."""
        if user_id == "default":
            return os.path.join(self.state_dir, 'focal_progress.json')
        return os.path.join(self.state_dir, f'focal_progress_{user_id}.json')

    def _get_exercises_file(self) -> str:
        return os.path.join(self.state_dir, 'focal_exercises.json')

    def _read_json(self, path: str):
        if os.path.exists(path):
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    return json.load(f)
            except Exception as e:
                logger.warning(f"Ignoring unreadable {path}: {e}")
                return None
        return None

    def _write_json(self, path: str, data) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def list_exercises(self) -> list[dict]:
        return self._read_json(self._get_exercises_file()) or []

    def load_exercise(self, exercise_id: str) -> dict | None:
        for exercise in self.list_exercises():
            if exercise.get('id') == exercise_id:
                return exercise
        return None

    def seed_exercises(self, exercises: list[dict]) -> None:
        """Insert or replace exercises, keeping the existing order."""
        stored = self.list_exercises()
        index = {e['id']: i for i, e in enumerate(stored)}
        for exercise in exercises:
            if exercise['id'] in index:
                stored[index[exercise['id']]] = exercise
            else:
                index[exercise['id']] = len(stored)
                stored.append(exercise)
        self._write_json(self._get_exercises_file(), stored)

    def load_progress(self, user_id: str = "default") -> dict | None:
        return self._read_json(self._get_progress_file(user_id))

    def save_progress(self, progress: dict, user_id: str = "default") -> None:
        self._write_json(self._get_progress_file(user_id), progress)

    def list_users(self) -> list[str]:
        """List all user IDs with stored progress."""
        users = []
        if os.path.exists(self.state_dir):
            for filename in os.listdir(self.state_dir):
                if filename == 'focal_progress.json':
                    users.append('default')
                elif filename.startswith('focal_progress_') and filename.endswith('.json'):
                    users.append(filename[15:-5])  # Remove 'focal_progress_' and '.json'
        return users
