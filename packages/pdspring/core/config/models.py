"""Configuration models for pdspring."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pdspring.core.spring.defaults import DEFAULT_SPRING_PARAMS
from pdspring.core.spring.models import PerceptualParams


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout when unset)")


class SpringConfig(BaseModel):
    """Default perceptual spring used when no parameters are given."""

    model_config = ConfigDict(extra="forbid")

    duration: float = Field(
        default=DEFAULT_SPRING_PARAMS["duration"], gt=0.0, description="Perceived duration (s)"
    )
    bounce: float = Field(
        default=DEFAULT_SPRING_PARAMS["bounce"], ge=-1.0, le=1.0, description="Bounce [-1,1]"
    )

    def to_params(self) -> PerceptualParams:
        return PerceptualParams(duration=self.duration, bounce=self.bounce)


class SamplingConfig(BaseModel):
    """Sampling defaults for curve output and settling estimates."""

    model_config = ConfigDict(extra="forbid")

    n_samples: int = Field(default=30, ge=2, description="Points per sampled curve")
    fps: int = Field(default=240, gt=0, description="Frame rate for settling estimates")
    settle_epsilon: float = Field(
        default=1e-3, gt=0.0, description="Distance from 1.0 that counts as settled"
    )
    max_settle_time: float = Field(
        default=10.0, gt=0.0, description="Window (s) searched for settling"
    )


class AppConfig(BaseModel):
    """Application configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    spring: SpringConfig = Field(default_factory=SpringConfig)
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    presets: dict[str, PerceptualParams] = Field(
        default_factory=dict, description="User presets; shadow built-ins of the same name"
    )
