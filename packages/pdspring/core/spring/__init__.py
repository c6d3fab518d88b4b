"""Perceptual-duration spring easing.

Exports:
- make_spring: Validated duration/bounce factory
- make_spring_from_physical_params: Unvalidated stiffness/damping/mass factory
- translate_parameters: Perceptual -> physical parameter mapping
- make_evaluator: Closed-form damped oscillator evaluator
"""

from pdspring.core.spring.defaults import (
    DEFAULT_SPRING_PARAMS,
    SPRING_PRESETS,
    get_preset,
    list_presets,
)
from pdspring.core.spring.enums import DampingRegime
from pdspring.core.spring.errors import InvalidArgumentError, PresetNotFoundError
from pdspring.core.spring.evaluator import (
    classify_damping,
    critical_damping,
    damping_ratio,
    make_evaluator,
    make_state_evaluator,
)
from pdspring.core.spring.factory import (
    describe_spring,
    make_spring,
    make_spring_from_params,
    make_spring_from_physical_params,
    make_spring_from_preset,
)
from pdspring.core.spring.models import (
    EasingFn,
    PerceptualParams,
    PhysicalParams,
    SpringDescription,
    SpringSample,
    SpringState,
)
from pdspring.core.spring.sampling import (
    estimate_settling_time,
    is_overshooting,
    sample_frames,
    sample_spring,
)
from pdspring.core.spring.translate import translate_parameters

__all__ = [
    "DEFAULT_SPRING_PARAMS",
    "SPRING_PRESETS",
    "DampingRegime",
    "EasingFn",
    "InvalidArgumentError",
    "PerceptualParams",
    "PhysicalParams",
    "PresetNotFoundError",
    "SpringDescription",
    "SpringSample",
    "SpringState",
    "classify_damping",
    "critical_damping",
    "damping_ratio",
    "describe_spring",
    "estimate_settling_time",
    "get_preset",
    "is_overshooting",
    "list_presets",
    "make_evaluator",
    "make_state_evaluator",
    "make_spring",
    "make_spring_from_params",
    "make_spring_from_physical_params",
    "make_spring_from_preset",
    "sample_frames",
    "sample_spring",
    "translate_parameters",
]
