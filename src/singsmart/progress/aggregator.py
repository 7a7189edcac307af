"""Read-only views derived from a user's exercise progress."""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from singsmart.models.exercise import Exercise, ExerciseProgress
from singsmart.models.views import RecentExercise, WeeklyStats


def completed_progress(progress: Iterable[ExerciseProgress]) -> list[ExerciseProgress]:
    return [p for p in progress if p.completed]


def average_overall_score(rows: Iterable[ExerciseProgress]) -> float:
    """Mean of the non-null overall scores, 0.0 when there are none."""
    scores = [p.overall_score for p in rows if p.overall_score is not None]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def _in_window(
    row: ExerciseProgress, window: timedelta | None, now: datetime
) -> bool:
    if window is None:
        return True
    if row.completed_at is None:
        return False
    return now - window <= row.completed_at <= now


def practice_stats(
    progress: Iterable[ExerciseProgress],
    exercises: Iterable[Exercise],
    goal_minutes: int = 60,
    window: timedelta | None = None,
    now: datetime | None = None,
) -> WeeklyStats:
    """Practice minutes, completion count and average score.

    Args:
        progress: The user's progress rows.
        exercises: Exercise catalog used to resolve durations.
        goal_minutes: Weekly practice goal reported alongside the stats.
        window: Only count completions within this span before ``now``.
            None counts all-time completions.
        now: Reference time for ``window``; defaults to the current time.

    Returns:
        WeeklyStats. A row whose exercise is missing contributes 0 minutes.
    """
    now = now or datetime.now(UTC)
    durations = {e.id: e.duration_minutes for e in exercises}
    done = [p for p in completed_progress(progress) if _in_window(p, window, now)]
    return WeeklyStats(
        practice_minutes=sum(durations.get(p.exercise_id, 0) for p in done),
        exercises_completed=len(done),
        average_score=average_overall_score(done),
        goal_minutes=goal_minutes,
    )


def recent_activity(
    progress: Iterable[ExerciseProgress],
    exercises: Iterable[Exercise],
    limit: int = 5,
) -> list[RecentExercise]:
    """Latest completions paired with their exercise, newest first."""
    by_id = {e.id: e for e in exercises}
    done = sorted(
        completed_progress(progress),
        key=lambda p: p.completed_at or datetime.min.replace(tzinfo=UTC),
        reverse=True,
    )
    recent = []
    for row in done[:limit]:
        exercise = by_id.get(row.exercise_id)
        if exercise is None:
            continue
        recent.append(RecentExercise(exercise=exercise, progress=row))
    return recent


def completed_exercise_ids(
    progress: Iterable[ExerciseProgress],
    exercises: Iterable[Exercise] | None = None,
) -> list[str]:
    """Exercise ids with a completed row, optionally limited to ``exercises``."""
    done = completed_progress(progress)
    if exercises is not None:
        allowed = {e.id for e in exercises}
        done = [p for p in done if p.exercise_id in allowed]
    return [p.exercise_id for p in done]


def phase_completion(
    progress: Iterable[ExerciseProgress],
    phase_exercises: list[Exercise],
) -> float:
    """Percentage (0-100) of the phase's exercises completed."""
    if not phase_exercises:
        return 0.0
    completed = set(completed_exercise_ids(progress, phase_exercises))
    return len(completed) / len(phase_exercises) * 100
