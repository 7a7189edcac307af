"""Application configuration using pydantic-settings."""

import functools
from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


def _find_project_root() -> Path:
    """Find project root by locating pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    return Path(__file__).resolve().parent.parent.parent


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from settings.yaml."""

    def get_field_value(self, field_name: str) -> tuple[Any, str, bool]:
        """Not used - we implement __call__ instead."""
        return None, "", False

    def __call__(self) -> dict[str, Any]:
        """Load settings from YAML file."""
        yaml_path = _find_project_root() / "config" / "settings.yaml"
        if not yaml_path.exists():
            return {}

        with open(yaml_path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        return flatten_yaml_settings(data)


def flatten_yaml_settings(data: dict) -> dict[str, Any]:
    """Flatten the nested settings.yaml layout to Settings field names."""
    flattened = {}
    if 'server' in data:
        flattened['host'] = data['server'].get('host')
        flattened['port'] = data['server'].get('port')
        flattened['allowed_origins'] = data['server'].get('allowed_origins')
    if 'onboarding' in data:
        flattened['initial_phase'] = data['onboarding'].get('initial_phase')
        flattened['initial_week'] = data['onboarding'].get('initial_week')
    if 'progress' in data:
        progress = data['progress']
        flattened['advancement_threshold'] = progress.get('advancement_threshold')
        flattened['weekly_goal_minutes'] = progress.get('weekly_goal_minutes')
        flattened['recent_activity_limit'] = progress.get('recent_activity_limit')
        flattened['stats_window_days'] = progress.get('stats_window_days')
        flattened['count_repeat_minutes'] = progress.get('count_repeat_minutes')
    if 'songs' in data:
        flattened['recommended_song_limit'] = data['songs'].get('recommended_limit')

    # Remove None values
    return {k: v for k, v in flattened.items() if v is not None}


class Settings(BaseSettings):
    """Application settings loaded from environment and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    allowed_origins: str = Field(default="http://localhost:5173,http://127.0.0.1:5173")

    # Onboarding: phase/week a freshly created user starts in
    initial_phase: int = Field(default=1, ge=1, le=3)
    initial_week: int = Field(default=1, ge=1)

    # Progress
    advancement_threshold: float = Field(default=70.0, ge=0.0, le=100.0)
    weekly_goal_minutes: int = Field(default=60, gt=0)
    recent_activity_limit: int = Field(default=5, gt=0)
    stats_window_days: int | None = Field(default=None, gt=0)
    count_repeat_minutes: bool = Field(default=True)

    # Songs
    recommended_song_limit: int = Field(default=4, gt=0)

    # Paths
    project_root: Path = Field(default_factory=_find_project_root)

    @property
    def stats_window(self) -> timedelta | None:
        """Reporting window for practice stats, None meaning all-time."""
        if self.stats_window_days is None:
            return None
        return timedelta(days=self.stats_window_days)

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customise settings sources to include YAML file.

        Priority order (highest to lowest):
        1. init_settings (arguments passed to Settings())
        2. env_settings (environment variables)
        3. dotenv_settings (.env file)
        4. YamlSettingsSource (settings.yaml)
        5. file_secret_settings
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlSettingsSource(settings_cls),
            file_secret_settings,
        )


@functools.lru_cache
def get_settings() -> Settings:
    """Get application settings singleton."""
    return Settings()
