"""
Application configuration using pydantic-settings.
Variables come from the invoking GitLab pipeline (CI_*) and CircleCI
credentials (CIRCLE_CI_*).
"""

import os
from dataclasses import dataclass

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from buildwatch.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class WatchConfig:
    """Explicit configuration handed to the build watcher."""

    token: str
    branch: str
    commit_sha: str
    project: str
    limit: int = 10
    max_iterations: int = 354
    interval: float = 10.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Required pipeline values
    circle_ci_api_token: str = Field(min_length=1)
    ci_commit_ref_name: str = Field(min_length=1)
    ci_commit_sha: str = Field(min_length=1)
    ci_project_name: str = Field(min_length=1)

    # Page size of the recent builds query
    circle_ci_api_limit: int = Field(default=10, ge=1)

    # Project API root, without the project name
    circle_ci_api_url: str = "https://circleci.hautelook.net/api/v1.1/project/gh/hautelook"
    circle_ci_timeout: float = Field(default=30.0, gt=0)

    # Total time = iterations * interval; GitLab times out pipelines after 60 mins
    watch_iterations: int = Field(default=354, ge=0)
    watch_interval_seconds: float = Field(default=10.0, ge=0)

    log_level: str = "INFO"

    @field_validator("circle_ci_api_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return str(value).strip().rstrip("/")

    @field_validator("ci_commit_sha", "ci_commit_ref_name", "ci_project_name", mode="before")
    @classmethod
    def _strip(cls, value: str) -> str:
        return str(value).strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    def to_watch_config(self) -> WatchConfig:
        """Build the watcher configuration from loaded settings."""
        return WatchConfig(
            token=self.circle_ci_api_token,
            branch=self.ci_commit_ref_name,
            commit_sha=self.ci_commit_sha,
            project=self.ci_project_name,
            limit=self.circle_ci_api_limit,
            max_iterations=self.watch_iterations,
            interval=self.watch_interval_seconds,
        )

    model_config = {
        "env_file": os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env"),
        "env_file_encoding": "utf-8",
        "env_ignore_empty": True,
        "extra": "ignore",
    }


def load_settings() -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigurationError: If a required variable is missing or invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        missing = ", ".join(
            str(err["loc"][0]).upper() for err in e.errors() if err.get("loc")
        )
        raise ConfigurationError(f"Invalid configuration: {missing or e}") from e
