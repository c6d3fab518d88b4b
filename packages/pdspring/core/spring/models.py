"""Spring parameter models.

This module defines the value types that flow through the spring pipeline:
- PerceptualParams: Designer-facing duration/bounce pair
- PhysicalParams: Stiffness/damping/mass derived from perceptual params
- SpringState: Physical params plus the initial velocity of the evaluator
- SpringSample: A single sampled (t, v) point of an evaluated spring
- EasingFn: Protocol for the closures returned by the factories

All models are immutable. PerceptualParams and SpringSample validate their
ranges on construction; PhysicalParams and SpringState accept any floats
since they feed the low-level entry point.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from pdspring.core.spring.enums import DampingRegime


class EasingFn(Protocol):
    """Maps elapsed or normalized time to a displacement (settles at 1.0)."""

    def __call__(self, t: float) -> float: ...


class PerceptualParams(BaseModel):
    """Perceptual spring parameters.

    Attributes:
        duration: Perceived duration in seconds (> 0).
        bounce: Overshoot amount in [-1, 1]. 0 is no bounce.

    Example:
        >>> params = PerceptualParams(duration=0.8, bounce=0.15)
        >>> params.bounce
        0.15
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    duration: float = Field(default=0.8, gt=0.0, description="Perceived duration in seconds")
    bounce: float = Field(default=0.3, ge=-1.0, le=1.0, description="Bounce amount [-1,1]")


class PhysicalParams(BaseModel):
    """Classical damped harmonic oscillator parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stiffness: float
    damping: float
    mass: float = 1.0


class SpringState(BaseModel):
    """Everything the evaluator closes over."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stiffness: float
    damping: float
    mass: float = 1.0
    initial_velocity: float = 0.0

    @classmethod
    def from_physical(cls, params: PhysicalParams, initial_velocity: float = 0.0) -> SpringState:
        """Build a state from physical params and an initial velocity."""
        return cls(
            stiffness=params.stiffness,
            damping=params.damping,
            mass=params.mass,
            initial_velocity=initial_velocity,
        )


class SpringSample(BaseModel):
    """A sampled point of a spring curve.

    Unlike normalized curve points, v is unbounded: underdamped springs
    overshoot 1.0 before settling.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, description="Sample time")
    v: float = Field(..., description="Displacement at t")


class SpringDescription(BaseModel):
    """Translated spring plus derived quantities, for display and logging."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    perceptual: PerceptualParams
    physical: PhysicalParams
    damping_ratio: float
    angular_frequency: float
    regime: DampingRegime
