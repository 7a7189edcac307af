"""REST API routes for users, exercises, progress and history."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response

from singsmart.analysis.suggestions import generate_suggestions
from singsmart.api.deps import get_app_settings, get_current_user, get_optional_user, get_store
from singsmart.config import Settings
from singsmart.models.catalog import PHASES, Phase
from singsmart.models.exercise import (
    ExerciseProgress,
    PracticeRoutine,
    PracticeRoutineUpsert,
    ProgressSubmission,
)
from singsmart.models.history import (
    Performance,
    PerformanceCreate,
    VoiceAnalysis,
    VoiceAnalysisCreate,
)
from singsmart.models.user import User, UserCreate, UserUpdate
from singsmart.models.views import Dashboard, ExerciseList, PhaseOverview, SongList
from singsmart.progress import aggregator
from singsmart.progress.advancement import PhaseAdvancement
from singsmart.progress.recommendation import recommend_songs
from singsmart.storage.memory import MemoryStore

logger = structlog.get_logger()
router = APIRouter(prefix="/api")

# Fields that may be cleared with an explicit null in PATCH /api/user
_NULLABLE_USER_FIELDS = {"vocal_range"}


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/phases")
async def list_phases() -> list[Phase]:
    return PHASES.phases


@router.get("/user")
async def get_user(user: User = Depends(get_current_user)) -> User:
    return user


@router.post("/users", status_code=201)
async def create_user(
    data: UserCreate,
    store: MemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> User:
    user = store.create_user(
        data,
        initial_phase=settings.initial_phase,
        initial_week=settings.initial_week,
    )
    logger.info("user_created", user_id=user.id, phase=user.current_phase)
    return user


@router.patch("/user")
async def update_user(
    data: UserUpdate,
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> User:
    updates = {
        k: v for k, v in data.model_dump(exclude_unset=True).items()
        if v is not None or k in _NULLABLE_USER_FIELDS
    }
    new_phase = updates.get("current_phase")
    if new_phase is not None and new_phase < user.current_phase:
        raise HTTPException(
            status_code=400,
            detail="Phase cannot decrease; use /api/reset-progress to start over",
        )
    async with store.user_lock(user.id):
        updated = store.update_user(user.id, **updates)
    if updated is None:
        raise HTTPException(status_code=404, detail="User not found")
    return updated


@router.post("/reset-progress")
async def reset_progress(
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> User:
    async with store.user_lock(user.id):
        reset = store.reset_user_progress(user.id)
    if reset is None:
        raise HTTPException(status_code=404, detail="User not found")
    return reset


@router.get("/dashboard")
async def get_dashboard(
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> Dashboard:
    progress = store.list_progress(user.id)
    exercises = store.list_exercises()
    return Dashboard(
        user=user,
        recent_exercises=aggregator.recent_activity(
            progress, exercises, limit=settings.recent_activity_limit
        ),
        weekly_stats=aggregator.practice_stats(
            progress,
            exercises,
            goal_minutes=settings.weekly_goal_minutes,
            window=settings.stats_window,
        ),
    )


@router.get("/exercises")
async def list_exercises(
    user: User | None = Depends(get_optional_user),
    store: MemoryStore = Depends(get_store),
) -> ExerciseList:
    """Exercises of the user's current phase (phase 1 without a user)."""
    phase = user.current_phase if user else 1
    progress = store.list_progress(user.id) if user else []
    return ExerciseList(
        exercises=store.list_exercises_by_phase(phase),
        completed_ids=aggregator.completed_exercise_ids(progress),
    )


@router.get("/phase/{phase_id}")
async def get_phase(
    phase_id: int,
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> PhaseOverview:
    if PHASES.get(phase_id) is None:
        raise HTTPException(status_code=404, detail="Phase not found")
    exercises = store.list_exercises_by_phase(phase_id)
    progress = store.list_progress(user.id)
    return PhaseOverview(
        user=user,
        exercises=exercises,
        completed_ids=aggregator.completed_exercise_ids(progress, exercises),
        phase_progress=aggregator.phase_completion(progress, exercises),
    )


@router.post("/exercise-progress")
async def save_exercise_progress(
    submission: ProgressSubmission,
    response: Response,
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> ExerciseProgress:
    """Create or update progress for an exercise; 201 on first completion."""
    engine = PhaseAdvancement(
        threshold=settings.advancement_threshold,
        count_repeat_minutes=settings.count_repeat_minutes,
    )
    result = await engine.record_completion(store, user.id, submission)
    if result is None:
        raise HTTPException(status_code=404, detail="User not found")
    response.status_code = 201 if result.created else 200
    return result.progress


@router.get("/songs")
async def list_songs(
    user: User | None = Depends(get_optional_user),
    store: MemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> SongList:
    return SongList(
        songs=store.list_songs(),
        recommended_songs=recommend_songs(store, user, limit=settings.recommended_song_limit),
    )


@router.post("/voice-analysis", status_code=201)
async def save_voice_analysis(
    data: VoiceAnalysisCreate,
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> VoiceAnalysis:
    suggestions = data.suggestions
    if suggestions is None:
        suggestions = generate_suggestions(
            data.pitch_accuracy, data.tone_stability, data.breathing_consistency
        )
    return store.create_voice_analysis(
        user.id, **data.model_dump(exclude={"suggestions"}), suggestions=suggestions
    )


@router.get("/voice-analyses")
async def list_voice_analyses(
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> list[VoiceAnalysis]:
    return store.list_voice_analyses(user.id)


@router.post("/performances", status_code=201)
async def save_performance(
    data: PerformanceCreate,
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> Performance:
    return store.create_performance(user.id, **data.model_dump())


@router.get("/performances")
async def list_performances(
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> list[Performance]:
    return store.list_performances(user.id)


@router.get("/practice-routine/{week}")
async def get_practice_routine(
    week: int,
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> PracticeRoutine:
    routine = store.get_practice_routine(user.id, week)
    if routine is None:
        raise HTTPException(status_code=404, detail="Practice routine not found")
    return routine


@router.put("/practice-routine/{week}")
async def put_practice_routine(
    week: int,
    data: PracticeRoutineUpsert,
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store),
) -> PracticeRoutine:
    """Create the week's routine, or replace its exercises and goal."""
    if week < 1:
        raise HTTPException(status_code=400, detail="Week must be positive")
    existing = store.get_practice_routine(user.id, week)
    if existing is None:
        return store.create_practice_routine(
            user.id,
            week,
            data.exercise_ids,
            data.goal_minutes,
            completed_minutes=data.completed_minutes or 0,
        )
    updates = data.model_dump(exclude_none=True)
    return store.update_practice_routine(existing.id, **updates)
