"""Append-only history records: voice analyses and performances."""

from pydantic import Field

from singsmart.models.base import CamelModel, UtcDatetime, utc_now


class VoiceAnalysisCreate(CamelModel):
    """Body of POST /api/voice-analysis.

    When ``suggestions`` is omitted they are derived from the scores.
    """

    pitch_accuracy: float = Field(ge=0.0, le=100.0)
    tone_stability: float = Field(ge=0.0, le=100.0)
    breathing_consistency: float = Field(ge=0.0, le=100.0)
    overall_rating: float = Field(ge=0.0, le=100.0)
    suggestions: list[str] | None = None


class VoiceAnalysis(CamelModel):
    id: str
    user_id: str
    pitch_accuracy: float
    tone_stability: float
    breathing_consistency: float
    overall_rating: float
    suggestions: list[str] = Field(default_factory=list)
    analyzed_at: UtcDatetime = Field(default_factory=utc_now)


class PerformanceCreate(CamelModel):
    song_id: str | None = None
    audience_reactions: list[str] | None = None
    performance_score: float | None = Field(default=None, ge=0.0, le=100.0)
    stage_effects: list[str] | None = None


class Performance(CamelModel):
    id: str
    user_id: str
    song_id: str | None = None
    audience_reactions: list[str] | None = None
    performance_score: float | None = None
    stage_effects: list[str] | None = None
    performed_at: UtcDatetime = Field(default_factory=utc_now)
