"""FastAPI server for focal application."""

import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

logger = logging.getLogger(__name__)

from core.config import LANGUAGE
from core.exercises import init_storage
from core.feedback import QueuedFeedback
from core.models import Exercise, Progress, calculate_score
from core.session import ExerciseSession

from server.file_storage import FileStorage
from server.scheduler import AsyncioScheduler


# Pydantic models for API
class StartRequest(BaseModel):
    exercise_id: str
    user_id: str = "default"


class UserRequest(BaseModel):
    user_id: str = "default"


class TypeRequest(BaseModel):
    letter: str
    user_id: str = "default"


class IndexRequest(BaseModel):
    index: int
    user_id: str = "default"


class ExerciseSummary(BaseModel):
    id: str
    title: str
    language: str
    unit_count: int
    completed_count: int


class SessionStateResponse(BaseModel):
    exercise_id: Optional[str]
    unit_index: int
    unit_count: int
    current_unit: Optional[dict]
    show_source_text: bool
    all_words: list[str]
    punctuation: list[bool]
    revealed_words: list[str]
    current_word_index: int
    current_word: str
    typed_letters: list[Optional[str]]
    slot_states: list[str]
    current_letter_index: int
    word_complete: bool
    progress: float
    is_complete: bool
    can_proceed: bool
    can_navigate_previous: bool
    can_navigate_next: bool
    completed_unit_ids: list[str]
    stats: dict
    feedback: list[str] = []  # cues raised since the last response


class FinishResponse(BaseModel):
    time_spent_minutes: int
    mistakes: int
    session_xp: int
    xp_awarded: int
    score: int
    is_complete: bool
    completion_count: int
    total_xp: int


class ProgressResponse(BaseModel):
    completed_units: dict
    completion_counts: dict
    total_xp: int
    total_mistakes: int
    practice_minutes: int
    sessions: int


# Global state (in production, use proper DI)
storage: FileStorage = None
scheduler = AsyncioScheduler()
user_sessions: dict[str, ExerciseSession] = {}
user_feedback: dict[str, QueuedFeedback] = {}


def log_event(event: str, user_id: str, **data) -> None:
    """Log a session event."""
    session = user_sessions.get(user_id)
    exercise_id = session.exercise.id if session and session.exercise else None
    details = ' '.join(f"{k}={v}" for k, v in data.items())
    logger.info(f"[{event}] user={user_id} exercise={exercise_id} {details}".rstrip())


app = FastAPI(title="Focal API", description="Irish letter-by-letter typing practice API")


@app.on_event("startup")
async def startup():
    """Initialize storage on startup."""
    global storage

    # FOCAL_DATA_DIR overrides where exercises and progress are kept
    storage = FileStorage(state_dir=os.environ.get('FOCAL_DATA_DIR'))
    init_storage(storage)
    logger.info(f"Using file storage at {storage.state_dir}")


@app.get("/api/health")
async def health():
    """Service liveness check."""
    return {"status": "ok", "service": "focal", "language": LANGUAGE}


def get_progress(user_id: str = "default") -> Progress:
    """Load stored progress for a user."""
    return Progress.from_dict(storage.load_progress(user_id) or {})


def get_session(user_id: str = "default") -> ExerciseSession:
    """Get the active session for a user."""
    session = user_sessions.get(user_id)
    if session is None or session.exercise is None:
        raise HTTPException(status_code=404, detail="No active session")
    return session


def state_response(user_id: str) -> SessionStateResponse:
    session = get_session(user_id)
    feedback = user_feedback[user_id].drain()
    return SessionStateResponse(**session.to_dict(), feedback=feedback)


def sync_progress(user_id: str) -> None:
    """Persist units completed so far, without closing the session."""
    session = get_session(user_id)
    progress = get_progress(user_id)
    added = progress.merge_completed(session.exercise.id, session.get_completed_unit_ids())
    if added:
        storage.save_progress(progress.to_dict(), user_id)
        log_event('progress.sync', user_id, added=added)


@app.get("/api/exercises", response_model=list[ExerciseSummary])
async def list_exercises(user_id: str = "default"):
    """List available exercises with the user's completion counts."""
    progress = get_progress(user_id)
    summaries = []
    for data in storage.list_exercises():
        exercise = Exercise.from_dict(data)
        done = set(progress.completed_for(exercise.id))
        summaries.append(ExerciseSummary(
            id=exercise.id,
            title=exercise.title,
            language=exercise.language,
            unit_count=len(exercise.units),
            completed_count=sum(1 for u in exercise.get_unit_ids() if u in done)
        ))
    return summaries


@app.get("/api/users")
async def list_users():
    """List users with stored progress."""
    return {"users": sorted(storage.list_users())}


@app.get("/api/progress", response_model=ProgressResponse)
async def read_progress(user_id: str = "default"):
    """Get stored progress for a user."""
    return ProgressResponse(**get_progress(user_id).to_dict())


@app.post("/api/session/start", response_model=SessionStateResponse)
async def start_session(request: StartRequest):
    """Start typing an exercise, resuming after the units already completed."""
    data = storage.load_exercise(request.exercise_id)
    if data is None:
        raise HTTPException(status_code=404, detail=f"Exercise not found: {request.exercise_id}")

    previous = user_sessions.pop(request.user_id, None)
    if previous is not None:
        previous.clear_lesson()

    feedback = QueuedFeedback()
    session = ExerciseSession(feedback=feedback, scheduler=scheduler)
    completed = get_progress(request.user_id).completed_for(request.exercise_id)
    session.initialize_lesson(Exercise.from_dict(data), completed)

    user_sessions[request.user_id] = session
    user_feedback[request.user_id] = feedback
    log_event('session.start', request.user_id, unit=session.current_unit_index)
    return state_response(request.user_id)


@app.get("/api/session", response_model=SessionStateResponse)
async def read_session(user_id: str = "default"):
    """Get the current session state."""
    return state_response(user_id)


@app.post("/api/session/type", response_model=SessionStateResponse)
async def type_letter(request: TypeRequest):
    """Type a single letter into the focused slot."""
    if len(request.letter) != 1:
        raise HTTPException(status_code=400, detail="Exactly one letter expected")
    get_session(request.user_id).type_letter(request.letter)
    return state_response(request.user_id)


@app.post("/api/session/backspace", response_model=SessionStateResponse)
async def backspace(request: UserRequest):
    get_session(request.user_id).backspace()
    return state_response(request.user_id)


@app.post("/api/session/reveal", response_model=SessionStateResponse)
async def reveal_letter(request: UserRequest):
    """Reveal the focused letter (reduces the XP for the word)."""
    get_session(request.user_id).reveal_letter()
    return state_response(request.user_id)


@app.post("/api/session/word/next", response_model=SessionStateResponse)
async def next_word(request: UserRequest):
    get_session(request.user_id).navigate_to_next_word()
    return state_response(request.user_id)


@app.post("/api/session/word/previous", response_model=SessionStateResponse)
async def previous_word(request: UserRequest):
    get_session(request.user_id).navigate_to_previous_word()
    return state_response(request.user_id)


@app.post("/api/session/word/goto", response_model=SessionStateResponse)
async def goto_word(request: IndexRequest):
    get_session(request.user_id).go_to_word(request.index)
    return state_response(request.user_id)


@app.post("/api/session/unit/next", response_model=SessionStateResponse)
async def next_unit(request: UserRequest):
    """Move to the next unit, saving completed units first."""
    sync_progress(request.user_id)
    get_session(request.user_id).next_unit()
    return state_response(request.user_id)


@app.post("/api/session/unit/previous", response_model=SessionStateResponse)
async def previous_unit(request: UserRequest):
    sync_progress(request.user_id)
    get_session(request.user_id).previous_unit()
    return state_response(request.user_id)


@app.post("/api/session/unit/goto", response_model=SessionStateResponse)
async def goto_unit(request: IndexRequest):
    sync_progress(request.user_id)
    get_session(request.user_id).go_to_unit(request.index)
    return state_response(request.user_id)


@app.post("/api/session/source", response_model=SessionStateResponse)
async def toggle_source(request: UserRequest):
    """Show or hide the English text of the current unit."""
    get_session(request.user_id).toggle_source_text()
    return state_response(request.user_id)


@app.post("/api/session/reset", response_model=SessionStateResponse)
async def reset_session(request: UserRequest):
    """Restart from the first unit. Completed units are kept."""
    get_session(request.user_id).reset_lesson()
    log_event('session.reset', request.user_id)
    return state_response(request.user_id)


@app.post("/api/session/finish", response_model=FinishResponse)
async def finish_session(request: UserRequest):
    """Persist progress and session stats, then close the session."""
    session = get_session(request.user_id)
    exercise = session.exercise
    stats = session.get_session_stats()
    is_complete = session.is_complete()
    score = calculate_score(len(exercise.units), stats['mistakes'])

    progress = get_progress(request.user_id)
    xp_awarded = progress.record_session(exercise, session.get_completed_unit_ids(), stats,
                                         exercise_completed=is_complete)
    storage.save_progress(progress.to_dict(), request.user_id)
    log_event('session.finish', request.user_id, xp=xp_awarded, score=score,
              mistakes=stats['mistakes'], minutes=stats['time_spent_minutes'])

    session.clear_lesson()
    user_sessions.pop(request.user_id, None)
    user_feedback.pop(request.user_id, None)

    return FinishResponse(
        **stats,
        xp_awarded=xp_awarded,
        score=score,
        is_complete=is_complete,
        completion_count=progress.completion_count(exercise.id),
        total_xp=progress.total_xp
    )
