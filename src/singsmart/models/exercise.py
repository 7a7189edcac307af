"""Exercise catalog, per-user progress and weekly routine models."""

from enum import StrEnum

from pydantic import Field

from singsmart.models.base import CamelModel, UtcDatetime


class Category(StrEnum):
    WARMUP = "warmup"
    TECHNIQUE = "technique"
    PERFORMANCE = "performance"


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ExerciseCreate(CamelModel):
    """Catalog entry as seeded at startup."""

    name: str
    description: str
    phase: int = Field(ge=1, le=3)
    category: Category
    difficulty: Difficulty
    duration_minutes: int = Field(gt=0)
    instructions: str


class Exercise(ExerciseCreate):
    id: str


class ExerciseProgress(CamelModel):
    """A user's latest attempt at one exercise.

    Scores stay None until the exercise has been scored.
    """

    id: str
    user_id: str
    exercise_id: str
    completed: bool = False
    pitch_score: float | None = None
    tone_score: float | None = None
    breathing_score: float | None = None
    overall_score: float | None = None
    completed_at: UtcDatetime | None = None
    feedback: str | None = None


class ProgressSubmission(CamelModel):
    """Body of POST /api/exercise-progress."""

    exercise_id: str = Field(min_length=1)
    pitch_score: float | None = Field(default=None, ge=0.0, le=100.0)
    tone_score: float | None = Field(default=None, ge=0.0, le=100.0)
    breathing_score: float | None = Field(default=None, ge=0.0, le=100.0)
    overall_score: float | None = Field(default=None, ge=0.0, le=100.0)
    feedback: str | None = None

    def score_fields(self) -> dict:
        """Scores and feedback as store field names."""
        return self.model_dump(exclude={"exercise_id"})


class PracticeRoutine(CamelModel):
    id: str
    user_id: str
    week: int = Field(ge=1)
    exercise_ids: list[str] = Field(default_factory=list)
    goal_minutes: int = Field(gt=0)
    completed_minutes: int = Field(default=0, ge=0)


class PracticeRoutineUpsert(CamelModel):
    """Body of PUT /api/practice-routine/{week}."""

    exercise_ids: list[str] = Field(default_factory=list)
    goal_minutes: int = Field(gt=0)
    completed_minutes: int | None = Field(default=None, ge=0)
