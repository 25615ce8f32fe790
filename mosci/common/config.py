import logging

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    pass


class RatingScale(BaseModel):
    """Closed ordinal rating scale, e.g. the 5-point ACR scale 1..5."""

    scale_min: int = 1
    scale_max: int = 5

    @model_validator(mode="after")
    def validate_bounds(self) -> "RatingScale":
        """Validate the scale spans at least two categories."""
        if self.scale_max <= self.scale_min:
            raise ValueError("scale_max must be greater than scale_min")
        return self

    @property
    def scale_range(self) -> int:
        """Number of Bernoulli trials per rating in the binomial framing."""
        return self.scale_max - self.scale_min

    @property
    def categories(self) -> list[int]:
        return list(range(self.scale_min, self.scale_max + 1))

    @property
    def num_categories(self) -> int:
        return self.scale_range + 1

    def to_rating(self, proportion: float) -> float:
        """Map a proportion in [0, 1] back onto the rating scale."""
        return proportion * self.scale_range + self.scale_min

    def clamp(self, value: float) -> float:
        return min(float(self.scale_max), max(float(self.scale_min), value))


class EstimatorConfig(BaseModel):
    alpha: float = 0.05
    bootstrap_iterations: int = 2000
    seed: int | None = None
    max_workers: int = 1
    scale: RatingScale = Field(default_factory=RatingScale)

    @field_validator("alpha")
    @classmethod
    def validate_alpha(cls, v) -> float:
        """Validate alpha is strictly between 0 and 1."""
        if not 0 < v < 1:
            raise ValueError("alpha must be between 0 and 1 (exclusive)")
        return v

    @field_validator("bootstrap_iterations")
    @classmethod
    def validate_bootstrap_iterations(cls, v) -> int:
        """Validate there are enough bootstrap resamples for two quantiles."""
        if v < 2:
            raise ValueError("bootstrap_iterations must be at least 2")
        return v

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v) -> int:
        """Validate max_workers is positive."""
        if v <= 0:
            raise ValueError("max_workers must be greater than 0")
        return v


class Settings(BaseSettings):
    log_path: str = "data/logs/mosci.jsonl"
    config_path: str = "config.yaml"

    model_config = SettingsConfigDict(
        env_prefix="MOSCI_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("log_path", mode="before")
    @classmethod
    def validate_log_path(cls, v) -> str:
        """Fall back to the default log path for blank values."""
        default_path = "data/logs/mosci.jsonl"
        if v is None or not str(v).strip():
            logger.warning(f"Invalid log_path value: {v!r}. Using default: {default_path}")
            return default_path
        return str(v)
