"""Response shapes for the composite API endpoints."""

from singsmart.models.base import CamelModel
from singsmart.models.catalog import Song
from singsmart.models.exercise import Exercise, ExerciseProgress
from singsmart.models.user import User


class WeeklyStats(CamelModel):
    practice_minutes: int = 0
    exercises_completed: int = 0
    average_score: float = 0.0
    goal_minutes: int = 60


class RecentExercise(CamelModel):
    exercise: Exercise
    progress: ExerciseProgress


class Dashboard(CamelModel):
    user: User
    recent_exercises: list[RecentExercise]
    weekly_stats: WeeklyStats


class ExerciseList(CamelModel):
    exercises: list[Exercise]
    completed_ids: list[str]


class PhaseOverview(CamelModel):
    user: User
    exercises: list[Exercise]
    completed_ids: list[str]
    phase_progress: float


class SongList(CamelModel):
    songs: list[Song]
    recommended_songs: list[Song]
