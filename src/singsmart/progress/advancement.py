"""Phase advancement: recording completions and graduating users.

A user leaves phase N once every phase-N exercise has a completed progress
row and the mean overall score of those rows reaches the threshold. Phase 3
is terminal. Evaluation runs only when a completion creates a new progress
row; repeating an exercise updates its row without re-evaluating.
"""

from datetime import UTC, datetime

import structlog
from pydantic import BaseModel

from singsmart.models.catalog import FINAL_PHASE, WEEKS_PER_PHASE
from singsmart.models.exercise import Exercise, ExerciseProgress, ProgressSubmission
from singsmart.models.user import User
from singsmart.storage.memory import MemoryStore

logger = structlog.get_logger()


class PhaseDecision(BaseModel):
    """Outcome of one advancement evaluation."""

    advanced: bool
    from_phase: int
    new_phase: int
    new_week: int
    completed_count: int
    total_count: int
    average_score: float


class CompletionResult(BaseModel):
    progress: ExerciseProgress
    created: bool
    decision: PhaseDecision | None = None


class PhaseAdvancement:
    """Decides and applies phase transitions.

    Args:
        threshold: Minimum mean overall score (0-100) to advance.
        count_repeat_minutes: Add the exercise duration to the user's
            practice minutes on repeat completions too, not only the first.
    """

    def __init__(self, threshold: float = 70.0, count_repeat_minutes: bool = True) -> None:
        self.threshold = threshold
        self.count_repeat_minutes = count_repeat_minutes

    def evaluate(
        self,
        user: User,
        progress: list[ExerciseProgress],
        phase_exercises: list[Exercise],
    ) -> PhaseDecision:
        """Check whether ``user`` has earned the next phase.

        Args:
            user: User as currently stored.
            progress: All of the user's progress rows.
            phase_exercises: Exercises of ``user.current_phase``.

        Returns:
            PhaseDecision; ``advanced`` is False when the guard fails.
        """
        phase = user.current_phase
        phase_ids = {e.id for e in phase_exercises}
        done = [p for p in progress if p.completed and p.exercise_id in phase_ids]
        completed_ids = {p.exercise_id for p in done}
        average = (
            sum(p.overall_score or 0.0 for p in done) / len(done) if done else 0.0
        )

        advanced = (
            phase < FINAL_PHASE
            and bool(phase_ids)
            and completed_ids == phase_ids
            and average >= self.threshold
        )
        return PhaseDecision(
            advanced=advanced,
            from_phase=phase,
            new_phase=phase + 1 if advanced else phase,
            new_week=phase * WEEKS_PER_PHASE + 1 if advanced else user.current_week,
            completed_count=len(completed_ids),
            total_count=len(phase_ids),
            average_score=average,
        )

    async def record_completion(
        self,
        store: MemoryStore,
        user_id: str,
        submission: ProgressSubmission,
        now: datetime | None = None,
    ) -> CompletionResult | None:
        """Create or update the progress row for one exercise attempt.

        Practice minutes are accumulated before advancement is evaluated.
        An unknown exercise id is stored as-is and contributes no minutes.

        Returns:
            CompletionResult, or None if the user does not exist.
        """
        async with store.user_lock(user_id):
            user = store.get_user(user_id)
            if user is None:
                return None

            now = now or datetime.now(UTC)
            fields = {
                **submission.score_fields(),
                "completed": True,
                "completed_at": now,
            }
            existing = store.get_progress_for_exercise(user.id, submission.exercise_id)
            exercise = store.get_exercise(submission.exercise_id)

            if existing is not None:
                progress = store.update_progress(existing.id, **fields)
            else:
                progress = store.create_progress(user.id, submission.exercise_id, **fields)
            created = existing is None

            if exercise is None:
                logger.warning(
                    "completion_for_unknown_exercise",
                    user_id=user.id,
                    exercise_id=submission.exercise_id,
                )
            elif created or self.count_repeat_minutes:
                user = store.update_user(
                    user.id,
                    total_practice_minutes=user.total_practice_minutes
                    + exercise.duration_minutes,
                )

            logger.info(
                "exercise_completed",
                user_id=user.id,
                exercise_id=submission.exercise_id,
                created=created,
                overall_score=submission.overall_score,
            )

            if not created:
                return CompletionResult(progress=progress, created=False)

            decision = self.evaluate(
                user,
                store.list_progress(user.id),
                store.list_exercises_by_phase(user.current_phase),
            )
            if decision.advanced:
                store.update_user(
                    user.id,
                    current_phase=decision.new_phase,
                    current_week=decision.new_week,
                )
                logger.info(
                    "phase_advanced",
                    user_id=user.id,
                    from_phase=decision.from_phase,
                    to_phase=decision.new_phase,
                    average_score=round(decision.average_score, 2),
                )
            elif (
                decision.from_phase < FINAL_PHASE
                and decision.total_count
                and decision.completed_count == decision.total_count
            ):
                logger.info(
                    "phase_advancement_blocked",
                    user_id=user.id,
                    phase=decision.from_phase,
                    average_score=round(decision.average_score, 2),
                    threshold=self.threshold,
                )
            return CompletionResult(progress=progress, created=True, decision=decision)
