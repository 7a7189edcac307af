"""In-memory entity store for users, catalogs, progress and history.

Every accessor returns a deep copy, so callers can only change stored state
through the ``create_*`` / ``update_*`` methods. Point lookups and updates of
unknown ids return None rather than raising.
"""

import asyncio
from collections import defaultdict
from typing import TypeVar

import structlog
from pydantic import BaseModel

from singsmart.models.base import new_id
from singsmart.models.catalog import Song, SongCreate
from singsmart.models.exercise import (
    Exercise,
    ExerciseCreate,
    ExerciseProgress,
    PracticeRoutine,
)
from singsmart.models.history import Performance, VoiceAnalysis
from singsmart.models.user import User, UserCreate
from singsmart.storage.seed import seed_exercises, seed_songs

logger = structlog.get_logger()

M = TypeVar("M", bound=BaseModel)


def _copy(entity: M | None) -> M | None:
    if entity is None:
        return None
    return entity.model_copy(deep=True)


def _merge(entity: M, fields: dict) -> M:
    """Shallow merge: supplied keys overwrite, the rest keep their value."""
    return type(entity).model_validate({**entity.model_dump(), **fields})


class MemoryStore:
    """Keyed collections for one process lifetime.

    Args:
        seed: Load the built-in exercise and song catalogs.
    """

    def __init__(self, seed: bool = True) -> None:
        self._users: dict[str, User] = {}
        self._exercises: dict[str, Exercise] = {}
        self._progress: dict[str, ExerciseProgress] = {}
        self._voice_analyses: dict[str, VoiceAnalysis] = {}
        self._songs: dict[str, Song] = {}
        self._routines: dict[str, PracticeRoutine] = {}
        self._performances: dict[str, Performance] = {}
        self._user_locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        if seed:
            self._seed()

    def _seed(self) -> None:
        for exercise in seed_exercises():
            self.create_exercise(exercise)
        for song in seed_songs():
            self.create_song(song)
        logger.debug(
            "catalog_seeded",
            exercises=len(self._exercises),
            songs=len(self._songs),
        )

    def user_lock(self, user_id: str) -> asyncio.Lock:
        """Lock serialising read-modify-write sequences for one user.

        Every method here is synchronous, so a sequence with no ``await``
        between its reads and writes is already atomic on the event loop.
        The lock matters once the store is backed by awaitable I/O; callers
        take it now so that swap needs no route changes.
        """
        return self._user_locks[user_id]

    # Users

    def get_user(self, user_id: str) -> User | None:
        return _copy(self._users.get(user_id))

    def get_active_user(self) -> User | None:
        """The first user created, used when a request names no user."""
        first = next(iter(self._users.values()), None)
        return _copy(first)

    def list_users(self) -> list[User]:
        return [_copy(u) for u in self._users.values()]

    def create_user(
        self,
        data: UserCreate,
        initial_phase: int = 1,
        initial_week: int = 1,
    ) -> User:
        user = User(
            id=new_id(),
            name=data.name,
            experience_level=data.experience_level,
            vocal_range=data.vocal_range,
            current_phase=initial_phase,
            current_week=initial_week,
            total_practice_minutes=0,
            streak=0,
        )
        self._users[user.id] = user
        return _copy(user)

    def update_user(self, user_id: str, **fields) -> User | None:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = _merge(user, fields)
        self._users[user_id] = updated
        return _copy(updated)

    def reset_user_progress(self, user_id: str) -> User | None:
        """Return the user to phase 1 / week 1 and drop their progress rows."""
        user = self._users.get(user_id)
        if user is None:
            return None
        reset = _merge(user, {
            "current_phase": 1,
            "current_week": 1,
            "total_practice_minutes": 0,
            "streak": 0,
        })
        self._users[user_id] = reset
        stale = [pid for pid, p in self._progress.items() if p.user_id == user_id]
        for pid in stale:
            del self._progress[pid]
        logger.info("progress_reset", user_id=user_id, removed=len(stale))
        return _copy(reset)

    # Exercises

    def list_exercises(self) -> list[Exercise]:
        return [_copy(e) for e in self._exercises.values()]

    def list_exercises_by_phase(self, phase: int) -> list[Exercise]:
        return [_copy(e) for e in self._exercises.values() if e.phase == phase]

    def get_exercise(self, exercise_id: str) -> Exercise | None:
        return _copy(self._exercises.get(exercise_id))

    def create_exercise(self, data: ExerciseCreate) -> Exercise:
        exercise = Exercise(id=new_id(), **data.model_dump())
        self._exercises[exercise.id] = exercise
        return _copy(exercise)

    # Exercise progress

    def list_progress(self, user_id: str) -> list[ExerciseProgress]:
        return [_copy(p) for p in self._progress.values() if p.user_id == user_id]

    def get_progress_for_exercise(
        self, user_id: str, exercise_id: str
    ) -> ExerciseProgress | None:
        match = next(
            (
                p for p in self._progress.values()
                if p.user_id == user_id and p.exercise_id == exercise_id
            ),
            None,
        )
        return _copy(match)

    def create_progress(self, user_id: str, exercise_id: str, **fields) -> ExerciseProgress:
        """Store a new progress row; omitted fields take the model defaults."""
        progress = ExerciseProgress(
            id=new_id(), user_id=user_id, exercise_id=exercise_id, **fields
        )
        self._progress[progress.id] = progress
        return _copy(progress)

    def update_progress(self, progress_id: str, **fields) -> ExerciseProgress | None:
        progress = self._progress.get(progress_id)
        if progress is None:
            return None
        updated = _merge(progress, fields)
        self._progress[progress_id] = updated
        return _copy(updated)

    # Voice analyses

    def list_voice_analyses(self, user_id: str) -> list[VoiceAnalysis]:
        return [_copy(a) for a in self._voice_analyses.values() if a.user_id == user_id]

    def create_voice_analysis(self, user_id: str, **fields) -> VoiceAnalysis:
        analysis = VoiceAnalysis(id=new_id(), user_id=user_id, **fields)
        self._voice_analyses[analysis.id] = analysis
        return _copy(analysis)

    # Songs

    def list_songs(self) -> list[Song]:
        return [_copy(s) for s in self._songs.values()]

    def list_songs_by_vocal_range(self, vocal_range: str) -> list[Song]:
        wanted = vocal_range.lower()
        return [_copy(s) for s in self._songs.values() if s.vocal_range.lower() == wanted]

    def get_song(self, song_id: str) -> Song | None:
        return _copy(self._songs.get(song_id))

    def create_song(self, data: SongCreate) -> Song:
        song = Song(id=new_id(), **data.model_dump())
        self._songs[song.id] = song
        return _copy(song)

    # Practice routines

    def get_practice_routine(self, user_id: str, week: int) -> PracticeRoutine | None:
        match = next(
            (r for r in self._routines.values() if r.user_id == user_id and r.week == week),
            None,
        )
        return _copy(match)

    def create_practice_routine(
        self,
        user_id: str,
        week: int,
        exercise_ids: list[str],
        goal_minutes: int,
        completed_minutes: int = 0,
    ) -> PracticeRoutine:
        routine = PracticeRoutine(
            id=new_id(),
            user_id=user_id,
            week=week,
            exercise_ids=list(exercise_ids),
            goal_minutes=goal_minutes,
            completed_minutes=completed_minutes,
        )
        self._routines[routine.id] = routine
        return _copy(routine)

    def update_practice_routine(self, routine_id: str, **fields) -> PracticeRoutine | None:
        routine = self._routines.get(routine_id)
        if routine is None:
            return None
        updated = _merge(routine, fields)
        self._routines[routine_id] = updated
        return _copy(updated)

    # Performances

    def list_performances(self, user_id: str) -> list[Performance]:
        return [_copy(p) for p in self._performances.values() if p.user_id == user_id]

    def create_performance(self, user_id: str, **fields) -> Performance:
        performance = Performance(id=new_id(), user_id=user_id, **fields)
        self._performances[performance.id] = performance
        return _copy(performance)
