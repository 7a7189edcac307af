"""Tests for phase advancement and completion recording."""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from singsmart.models.exercise import ProgressSubmission
from singsmart.models.user import UserCreate
from singsmart.progress.advancement import PhaseAdvancement
from singsmart.storage.memory import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def user(store):
    return store.create_user(UserCreate(name="Ana", experience_level="beginner"))


@pytest.fixture
def engine():
    return PhaseAdvancement(threshold=70.0)


async def _complete_all(engine, store, user_id, phase, scores):
    exercises = store.list_exercises_by_phase(phase)
    assert len(exercises) == len(scores)
    for exercise, score in zip(exercises, scores):
        await engine.record_completion(
            store, user_id, ProgressSubmission(exercise_id=exercise.id, overall_score=score)
        )
    return exercises


class TestEvaluate:
    def test_terminal_phase_never_advances(self, store, engine):
        user = store.create_user(
            UserCreate(name="Pro", experience_level="advanced"), initial_phase=3, initial_week=9
        )
        exercises = store.list_exercises_by_phase(3)
        for e in exercises:
            store.create_progress(user.id, e.id, completed=True, overall_score=100.0)
        decision = engine.evaluate(user, store.list_progress(user.id), exercises)
        assert decision.advanced is False
        assert decision.new_phase == 3

    def test_empty_phase_never_advances(self, user, engine):
        decision = engine.evaluate(user, [], [])
        assert decision.advanced is False


class TestPhaseThreshold:
    async def test_all_but_one_at_100_does_not_advance(self, store, user, engine):
        exercises = store.list_exercises_by_phase(1)
        for exercise in exercises[:-1]:
            await engine.record_completion(
                store, user.id, ProgressSubmission(exercise_id=exercise.id, overall_score=100.0)
            )
        assert store.get_user(user.id).current_phase == 1

    async def test_average_exactly_70_advances(self, store, user, engine):
        await _complete_all(engine, store, user.id, 1, [60.0, 80.0, 70.0, 75.0, 65.0])
        advanced = store.get_user(user.id)
        assert advanced.current_phase == 2
        assert advanced.current_week == 5

    async def test_average_just_below_threshold_stays(self, store, user, engine):
        await _complete_all(engine, store, user.id, 1, [69.99] * 5)
        stuck = store.get_user(user.id)
        assert stuck.current_phase == 1
        assert stuck.current_week == 1

    async def test_missing_scores_count_as_zero(self, store, user, engine):
        await _complete_all(engine, store, user.id, 1, [80.0, 80.0, 80.0, 80.0, None])
        assert store.get_user(user.id).current_phase == 1

    async def test_phase_two_to_three_sets_week_nine(self, store, engine):
        user = store.create_user(
            UserCreate(name="Ben", experience_level="intermediate"),
            initial_phase=2,
            initial_week=5,
        )
        await _complete_all(engine, store, user.id, 2, [90.0] * 4)
        advanced = store.get_user(user.id)
        assert advanced.current_phase == 3
        assert advanced.current_week == 9

    async def test_phase_three_is_terminal(self, store, engine):
        user = store.create_user(
            UserCreate(name="Pro", experience_level="advanced"), initial_phase=3, initial_week=9
        )
        await _complete_all(engine, store, user.id, 3, [100.0] * 4)
        assert store.get_user(user.id).current_phase == 3

    async def test_repeat_completion_does_not_reevaluate(self, store, user, engine):
        exercises = await _complete_all(engine, store, user.id, 1, [50.0] * 5)
        assert store.get_user(user.id).current_phase == 1

        # Raising every score through repeats leaves the phase unchanged
        for exercise in exercises:
            result = await engine.record_completion(
                store, user.id, ProgressSubmission(exercise_id=exercise.id, overall_score=100.0)
            )
            assert result.created is False
            assert result.decision is None
        assert store.get_user(user.id).current_phase == 1

    async def test_custom_threshold(self, store, user):
        strict = PhaseAdvancement(threshold=90.0)
        await _complete_all(strict, store, user.id, 1, [85.0] * 5)
        assert store.get_user(user.id).current_phase == 1


class TestRecordCompletion:
    async def test_first_completion_creates_row(self, store, user, engine):
        exercise = store.list_exercises_by_phase(1)[0]
        at = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)
        result = await engine.record_completion(
            store,
            user.id,
            ProgressSubmission(exercise_id=exercise.id, pitch_score=81.0, overall_score=77.0),
            now=at,
        )
        assert result.created is True
        assert result.progress.completed is True
        assert result.progress.completed_at == at
        assert result.progress.pitch_score == 81.0
        assert result.decision is not None
        assert result.decision.completed_count == 1
        assert result.decision.total_count == 5

    async def test_repeat_overwrites_single_row(self, store, user, engine):
        exercise = store.list_exercises_by_phase(1)[0]
        first = await engine.record_completion(
            store, user.id, ProgressSubmission(exercise_id=exercise.id, overall_score=60.0)
        )
        second = await engine.record_completion(
            store,
            user.id,
            ProgressSubmission(exercise_id=exercise.id, overall_score=90.0, feedback="better"),
            now=datetime.now(UTC) + timedelta(seconds=1),
        )
        rows = store.list_progress(user.id)
        assert len(rows) == 1
        assert second.progress.id == first.progress.id
        assert rows[0].overall_score == 90.0
        assert rows[0].feedback == "better"

    async def test_minutes_added_on_every_completion_by_default(self, store, user, engine):
        exercise = store.list_exercises_by_phase(1)[0]
        submission = ProgressSubmission(exercise_id=exercise.id, overall_score=80.0)
        await engine.record_completion(store, user.id, submission)
        await engine.record_completion(store, user.id, submission)
        assert store.get_user(user.id).total_practice_minutes == 2 * exercise.duration_minutes

    async def test_minutes_added_once_when_repeats_not_counted(self, store, user):
        engine = PhaseAdvancement(count_repeat_minutes=False)
        exercise = store.list_exercises_by_phase(1)[0]
        submission = ProgressSubmission(exercise_id=exercise.id, overall_score=80.0)
        await engine.record_completion(store, user.id, submission)
        await engine.record_completion(store, user.id, submission)
        assert store.get_user(user.id).total_practice_minutes == exercise.duration_minutes

    async def test_unknown_exercise_stored_without_minutes(self, store, user, engine):
        result = await engine.record_completion(
            store, user.id, ProgressSubmission(exercise_id="ghost", overall_score=99.0)
        )
        assert result.created is True
        assert result.progress.exercise_id == "ghost"
        reloaded = store.get_user(user.id)
        assert reloaded.total_practice_minutes == 0
        assert reloaded.current_phase == 1

    async def test_unknown_user(self, store, engine):
        result = await engine.record_completion(
            store, "nope", ProgressSubmission(exercise_id="e1")
        )
        assert result is None

    async def test_concurrent_duplicates_create_one_row(self, store, user, engine):
        exercise = store.list_exercises_by_phase(1)[0]
        submission = ProgressSubmission(exercise_id=exercise.id, overall_score=80.0)
        results = await asyncio.gather(
            *(engine.record_completion(store, user.id, submission) for _ in range(3))
        )
        assert sum(r.created for r in results) == 1
        assert len(store.list_progress(user.id)) == 1
        assert store.get_user(user.id).total_practice_minutes == 3 * exercise.duration_minutes
