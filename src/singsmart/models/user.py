"""User profile models."""

from enum import StrEnum

from pydantic import ConfigDict, Field, field_validator

from singsmart.models.base import CamelModel


class ExperienceLevel(StrEnum):
    """Self-reported singing experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class VocalRange(StrEnum):
    """Voice types a user can pick during onboarding."""

    SOPRANO = "soprano"
    ALTO = "alto"
    TENOR = "tenor"
    BARITONE = "baritone"
    BASS = "bass"


def _lower(value):
    if isinstance(value, str):
        return value.strip().lower() or None
    return value


class User(CamelModel):
    id: str
    name: str
    experience_level: ExperienceLevel
    vocal_range: VocalRange | None = None
    current_phase: int = Field(default=1, ge=1, le=3)
    current_week: int = Field(default=1, ge=1)
    total_practice_minutes: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)


class UserCreate(CamelModel):
    """Onboarding payload for POST /api/users."""

    name: str = Field(min_length=1)
    experience_level: ExperienceLevel
    vocal_range: VocalRange | None = None

    @field_validator("experience_level", "vocal_range", mode="before")
    @classmethod
    def normalise_choice(cls, value):
        return _lower(value)


class UserUpdate(CamelModel):
    """Partial profile update for PATCH /api/user.

    Only keys present in the request body are applied. Unknown keys, such as
    ``id``, are rejected rather than dropped.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    experience_level: ExperienceLevel | None = None
    vocal_range: VocalRange | None = None
    current_phase: int | None = Field(default=None, ge=1, le=3)
    current_week: int | None = Field(default=None, ge=1)
    total_practice_minutes: int | None = Field(default=None, ge=0)
    streak: int | None = Field(default=None, ge=0)

    @field_validator("experience_level", "vocal_range", mode="before")
    @classmethod
    def normalise_choice(cls, value):
        return _lower(value)
