"""Song catalog and static phase definitions."""

from pydantic import BaseModel, Field

from singsmart.models.base import CamelModel
from singsmart.models.exercise import Difficulty


class SongCreate(CamelModel):
    title: str
    artist: str
    genre: str
    difficulty: Difficulty
    vocal_range: str
    bpm: int = Field(gt=0)
    key: str


class Song(SongCreate):
    id: str


class Phase(CamelModel):
    """Description of one training phase."""

    id: int
    name: str
    description: str
    weeks: str
    features: list[str]
    unlock_criteria: str


# Phase N spans weeks 4N-3 .. 4N; advancing out of phase N lands on week 4N+1.
WEEKS_PER_PHASE = 4
FINAL_PHASE = 3


class PhaseCatalog(BaseModel):
    phases: list[Phase]

    def get(self, phase_id: int) -> Phase | None:
        return next((p for p in self.phases if p.id == phase_id), None)


PHASES = PhaseCatalog(phases=[
    Phase(
        id=1,
        name="Foundation",
        description="Build your vocal foundation with essential techniques",
        weeks="Weeks 1-4",
        features=[
            "Voice recording & analysis",
            "Pitch accuracy training",
            "Tone stability exercises",
            "Breathing techniques",
            "Weekly practice routines",
        ],
        unlock_criteria="Start your journey",
    ),
    Phase(
        id=2,
        name="Technique & Expression",
        description="Develop advanced techniques and emotional expression",
        weeks="Weeks 5-8",
        features=[
            "Song recommendations",
            "Genre-based backing tracks",
            "Adaptive difficulty",
            "Expression coaching",
            "Style development",
        ],
        unlock_criteria="Complete Phase 1 with 70% average score",
    ),
    Phase(
        id=3,
        name="Performance & Confidence",
        description="Master stage presence and build performance confidence",
        weeks="Weeks 9-12",
        features=[
            "Virtual performance simulator",
            "Audience reactions",
            "Stage effects",
            "Audio mastering",
            "Performance analysis",
        ],
        unlock_criteria="Complete Phase 2 with 70% average score",
    ),
])
