"""Spring easing factories.

make_spring() is the entry point for typical use: it validates perceptual
params, translates them and returns the evaluator closure, ready to hand to
an animation engine as its easing curve. make_spring_from_physical_params()
skips translation and validation for callers that already own physical
parameters.

Example:
    >>> ease = make_spring(0.8, 0.15)
    >>> ease(0.0)
    0.0
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np

from pdspring.core.spring.defaults import DEFAULT_SPRING_PARAMS, get_preset
from pdspring.core.spring.errors import InvalidArgumentError
from pdspring.core.spring.evaluator import (
    classify_damping,
    damping_ratio,
    make_evaluator,
    make_state_evaluator,
)
from pdspring.core.spring.models import (
    EasingFn,
    PerceptualParams,
    PhysicalParams,
    SpringDescription,
    SpringState,
)
from pdspring.core.spring.translate import translate_parameters

logger = logging.getLogger(__name__)


def _validate(duration: float, bounce: float) -> None:
    if duration <= 0:
        raise InvalidArgumentError("Duration must be greater than 0")
    if bounce > 1 or bounce < -1:
        raise InvalidArgumentError("Bounce must be between -1 and 1")


def _translate_validated(duration: float, bounce: float) -> PhysicalParams:
    _validate(duration, bounce)
    physical = translate_parameters(duration, bounce)

    zeta = damping_ratio(physical.stiffness, physical.damping, physical.mass)
    logger.debug(
        "Spring duration=%s bounce=%s -> stiffness=%.4f damping=%.4f mass=%s (zeta=%.4f, %s)",
        duration,
        bounce,
        physical.stiffness,
        physical.damping,
        physical.mass,
        zeta,
        classify_damping(zeta).value,
    )
    return physical


def make_spring(
    duration: float = DEFAULT_SPRING_PARAMS["duration"],
    bounce: float = DEFAULT_SPRING_PARAMS["bounce"],
) -> EasingFn:
    """Return a spring easing function from perceptual duration and bounce.

    Args:
        duration: Perceived duration in seconds (must be > 0).
        bounce: Bounce amount in [-1, 1].

    Returns:
        Easing function mapping t to displacement, starting at 0 and
        settling at 1.

    Raises:
        InvalidArgumentError: If duration <= 0 or bounce is outside [-1, 1].
    """
    physical = _translate_validated(duration, bounce)
    return make_state_evaluator(SpringState.from_physical(physical, initial_velocity=0.0))


def make_spring_from_physical_params(
    stiffness: float,
    damping: float,
    mass: float,
    initial_velocity: float = 0.0,
) -> EasingFn:
    """Return a spring easing function from stiffness/damping/mass.

    No validation: degenerate params yield nan/inf output, not errors.
    """
    return make_evaluator(stiffness, damping, mass, initial_velocity)


def make_spring_from_params(params: PerceptualParams) -> EasingFn:
    """Return a spring easing function from a PerceptualParams model."""
    return make_spring(params.duration, params.bounce)


def make_spring_from_preset(
    name: str,
    extra_presets: Mapping[str, PerceptualParams] | None = None,
) -> EasingFn:
    """Return a spring easing function for a named preset.

    Raises:
        PresetNotFoundError: If the preset name is unknown.
    """
    return make_spring_from_params(get_preset(name, extra_presets))


def describe_spring(
    duration: float = DEFAULT_SPRING_PARAMS["duration"],
    bounce: float = DEFAULT_SPRING_PARAMS["bounce"],
) -> SpringDescription:
    """Translate perceptual params and report the derived oscillator quantities.

    Raises:
        InvalidArgumentError: If duration <= 0 or bounce is outside [-1, 1].
    """
    physical = _translate_validated(duration, bounce)
    zeta = damping_ratio(physical.stiffness, physical.damping, physical.mass)
    omega = float(np.sqrt(physical.stiffness / physical.mass))
    return SpringDescription(
        perceptual=PerceptualParams(duration=duration, bounce=bounce),
        physical=physical,
        damping_ratio=zeta,
        angular_frequency=omega,
        regime=classify_damping(zeta),
    )
